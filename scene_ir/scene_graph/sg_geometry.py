"""Mesh geometry extraction.

Vertex attributes are copied exactly as the parser packed them: no
deduplication, re-indexing or triangulation happens here. With
per-face-varying layouts the normal/UV arrays may therefore differ in
length from the position array.

Presence rules:
    positions     attribute exists and holds at least one value
    indices       only alongside positions, and only if the buffer is non-empty
    normals       independently optional
    texcoords     independently optional
    material_ids  omitted when the mesh has no materials
"""

from .sg_classes import IRMesh
from .sg_relink import relink_ids
from ..utils.buffers import copy_name, copy_vector_list, copy_index_list


def _has_values(attrib):
    return attrib is not None and bool(attrib.exists) and len(attrib.values) > 0


def extract_mesh(mesh):
    """Convert a native mesh into an IRMesh."""
    positions = None
    indices = None
    normals = None
    texcoords = None

    pos_attr = mesh.vertex_position
    if _has_values(pos_attr):
        positions = copy_vector_list(pos_attr.values, 3)
        if len(pos_attr.indices) > 0:
            indices = copy_index_list(pos_attr.indices)

    if _has_values(mesh.vertex_normal):
        normals = copy_vector_list(mesh.vertex_normal.values, 3)

    if _has_values(mesh.vertex_uv):
        texcoords = copy_vector_list(mesh.vertex_uv.values, 2)

    return IRMesh(
        id=int(mesh.typed_id),
        name=copy_name(mesh.name),
        positions=positions,
        indices=indices,
        normals=normals,
        texcoords=texcoords,
        material_ids=relink_ids(mesh.materials),
    )
