"""JSON persistence for SceneIR.

Two shapes are supported:

wire dict (SceneIR.to_dict / scene_from_dict):
    snake_case keys, the shape handed across a process boundary.

JSON document (to_json_document):
    camelCase keys for consumers that follow glTF naming
    (parentId, meshId, materialIds, diffuseColor, specularColor,
    emissiveColor, filePath, nodeId). Absent fields are dropped.

All text output uses sorted keys so the same scene always serializes to
the same bytes.
"""

import json
import os

from ..scene_graph.sg_classes import (
    SceneIR, IRNode, IRMesh, IRMaterial, IRTexture,
    IRAnimationTrack, IRKeyframe, CHANNELS,
)


_CAMEL_KEYS = {
    'parent_id': 'parentId',
    'mesh_id': 'meshId',
    'material_ids': 'materialIds',
    'diffuse_color': 'diffuseColor',
    'specular_color': 'specularColor',
    'emissive_color': 'emissiveColor',
    'file_path': 'filePath',
    'node_id': 'nodeId',
}


def _camelize(record):
    return {_CAMEL_KEYS.get(k, k): v for k, v in record.items()}


def to_json_document(ir):
    """Return the camelCase JSON document for ``ir``."""
    wire = ir.to_dict()
    doc = {'version': wire['version']}
    for key in ('nodes', 'meshes', 'materials', 'textures'):
        doc[key] = [_camelize(rec) for rec in wire[key]]
    doc['animations'] = []
    for anim in wire['animations']:
        anim = dict(anim)
        anim['keyframes'] = [_camelize(k) for k in anim['keyframes']]
        doc['animations'].append(anim)
    return doc


def dumps(ir, indent=None, document=False):
    """Serialize ``ir`` to JSON text (wire dict, or camelCase document)."""
    data = to_json_document(ir) if document else ir.to_dict()
    return json.dumps(data, indent=indent, sort_keys=True)


def save_json(filepath, ir, indent=2, document=False):
    """Write ``ir`` to a JSON file, creating parent directories as needed."""
    parent = os.path.dirname(filepath)
    if parent and not os.path.exists(parent):
        os.makedirs(parent)
    with open(filepath, 'w', encoding='utf-8') as f:
        f.write(dumps(ir, indent=indent, document=document))


def load_json(filepath):
    """Load a JSON file and return the parsed dict."""
    with open(filepath, 'r', encoding='utf-8') as f:
        return json.load(f)


# ---------------------------------------------------------------------------
# Wire dict -> SceneIR
# ---------------------------------------------------------------------------

def _vec(value):
    return tuple(float(c) for c in value)


def _vec_tuple(values):
    if values is None:
        return None
    return tuple(_vec(v) for v in values)


def _node_from_dict(d):
    return IRNode(
        id=d['id'],
        name=d.get('name', ""),
        translation=_vec(d['translation']),
        rotation=_vec(d['rotation']),
        scale=_vec(d['scale']),
        parent_id=d.get('parent_id'),
        children=tuple(d.get('children', ())),
        mesh_id=d.get('mesh_id'),
    )


def _mesh_from_dict(d):
    positions = _vec_tuple(d.get('positions'))
    indices = None
    if positions is not None and 'indices' in d:
        indices = tuple(int(i) for i in d['indices'])
    return IRMesh(
        id=d['id'],
        name=d.get('name', ""),
        positions=positions,
        indices=indices,
        normals=_vec_tuple(d.get('normals')),
        texcoords=_vec_tuple(d.get('texcoords')),
        material_ids=tuple(d.get('material_ids', ())),
    )


def _material_from_dict(d):
    colors = {}
    for key in ('diffuse_color', 'specular_color', 'emissive_color'):
        if key in d:
            colors[key] = _vec(d[key])
    return IRMaterial(id=d['id'], name=d.get('name', ""), **colors)


def _texture_from_dict(d):
    return IRTexture(id=d['id'], name=d.get('name', ""), file_path=d.get('file_path'))


def _keyframe_from_dict(d):
    present = [c for c in CHANNELS if c in d]
    if len(present) != 1:
        raise ValueError(f"Keyframe must carry exactly one channel, got {present}")
    channel = present[0]
    return IRKeyframe(
        node_id=d['node_id'],
        time=float(d['time']),
        channel=channel,
        value=_vec(d[channel]),
    )


def _animation_from_dict(d):
    return IRAnimationTrack(
        id=d['id'],
        name=d.get('name', ""),
        keyframes=tuple(_keyframe_from_dict(k) for k in d.get('keyframes', ())),
    )


def scene_from_dict(data):
    """Rebuild a SceneIR from its wire dict."""
    return SceneIR(
        version=data['version'],
        nodes=tuple(_node_from_dict(d) for d in data.get('nodes', ())),
        meshes=tuple(_mesh_from_dict(d) for d in data.get('meshes', ())),
        materials=tuple(_material_from_dict(d) for d in data.get('materials', ())),
        textures=tuple(_texture_from_dict(d) for d in data.get('textures', ())),
        animations=tuple(_animation_from_dict(d) for d in data.get('animations', ())),
    )
