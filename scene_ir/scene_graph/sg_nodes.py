"""Node extraction.

A node record always carries its local TRS transform (rotation as an XYZW
quaternion). Hierarchy and mesh links are relinked to ids; ``parent_id``
is left unset for roots, ``children`` empty for leaves and ``mesh_id``
unset for nodes without geometry.
"""

from .sg_classes import IRNode
from .sg_relink import relink_id, relink_ids
from ..utils.buffers import copy_name, copy_vector


def extract_node(node):
    """Convert a native node into an IRNode."""
    xf = node.local_transform
    return IRNode(
        id=int(node.typed_id),
        name=copy_name(node.name),
        translation=copy_vector(xf.translation, 3),
        rotation=copy_vector(xf.rotation, 4),
        scale=copy_vector(xf.scale, 3),
        parent_id=relink_id(node.parent),
        children=relink_ids(node.children),
        mesh_id=relink_id(node.mesh),
    )
