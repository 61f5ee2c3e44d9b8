"""IR record classes.

The IR is a set of flat, id-addressed tables:

    SceneIR.nodes       tuple of IRNode
    SceneIR.meshes      tuple of IRMesh
    SceneIR.materials   tuple of IRMaterial
    SceneIR.textures    tuple of IRTexture
    SceneIR.animations  tuple of IRAnimationTrack

Cross-entity relations (parent_id, children, mesh_id, material_ids,
keyframe node_id) are plain integer ids, never embedded records, so the
IR contains no reference cycles.

Records are frozen once assembled. ``to_dict()`` produces the wire shape:
an optional field is either present with its value or missing from the
dict, never present as None.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

Vec2 = Tuple[float, float]
Vec3 = Tuple[float, float, float]
Vec4 = Tuple[float, float, float, float]

CHANNEL_TRANSLATION = "translation"
CHANNEL_ROTATION = "rotation"
CHANNEL_SCALE = "scale"

# Per-node emission order of baked channels.
CHANNELS = (CHANNEL_TRANSLATION, CHANNEL_ROTATION, CHANNEL_SCALE)


def _vec_list(vectors):
    return [list(v) for v in vectors]


@dataclass(frozen=True)
class IRNode:
    id: int
    name: str
    translation: Vec3
    rotation: Vec4
    scale: Vec3
    parent_id: Optional[int] = None
    children: Tuple[int, ...] = ()
    mesh_id: Optional[int] = None

    def to_dict(self):
        d = {'id': self.id, 'name': self.name}
        if self.parent_id is not None:
            d['parent_id'] = self.parent_id
        if self.children:
            d['children'] = list(self.children)
        d['translation'] = list(self.translation)
        d['rotation'] = list(self.rotation)
        d['scale'] = list(self.scale)
        if self.mesh_id is not None:
            d['mesh_id'] = self.mesh_id
        return d


@dataclass(frozen=True)
class IRMesh:
    id: int
    name: str
    positions: Optional[Tuple[Vec3, ...]] = None
    indices: Optional[Tuple[int, ...]] = None
    normals: Optional[Tuple[Vec3, ...]] = None
    texcoords: Optional[Tuple[Vec2, ...]] = None
    material_ids: Tuple[int, ...] = ()

    @property
    def num_verts(self):
        return len(self.positions) if self.positions else 0

    def to_dict(self):
        d = {'id': self.id, 'name': self.name}
        if self.positions is not None:
            d['positions'] = _vec_list(self.positions)
            if self.indices is not None:
                d['indices'] = list(self.indices)
        if self.normals is not None:
            d['normals'] = _vec_list(self.normals)
        if self.texcoords is not None:
            d['texcoords'] = _vec_list(self.texcoords)
        if self.material_ids:
            d['material_ids'] = list(self.material_ids)
        return d


@dataclass(frozen=True)
class IRMaterial:
    id: int
    name: str
    diffuse_color: Optional[Vec3] = None
    specular_color: Optional[Vec3] = None
    emissive_color: Optional[Vec3] = None

    def to_dict(self):
        d = {'id': self.id, 'name': self.name}
        for key in ('diffuse_color', 'specular_color', 'emissive_color'):
            color = getattr(self, key)
            if color is not None:
                d[key] = list(color)
        return d


@dataclass(frozen=True)
class IRTexture:
    id: int
    name: str
    file_path: Optional[str] = None

    def to_dict(self):
        d = {'id': self.id, 'name': self.name}
        if self.file_path is not None:
            d['file_path'] = self.file_path
        return d


@dataclass(frozen=True)
class IRKeyframe:
    """One baked sample for one node and exactly one channel."""
    node_id: int
    time: float
    channel: str     # CHANNEL_TRANSLATION / CHANNEL_ROTATION / CHANNEL_SCALE
    value: Tuple[float, ...]

    def __post_init__(self):
        if self.channel not in CHANNELS:
            raise ValueError(f"Unknown keyframe channel: {self.channel!r}")

    def to_dict(self):
        return {'node_id': self.node_id, 'time': self.time, self.channel: list(self.value)}


@dataclass(frozen=True)
class IRAnimationTrack:
    id: int          # typed_id of the animation stack
    name: str
    keyframes: Tuple[IRKeyframe, ...] = ()

    def node_ids(self):
        """Node ids in first-appearance order."""
        seen = []
        for key in self.keyframes:
            if key.node_id not in seen:
                seen.append(key.node_id)
        return seen

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'keyframes': [key.to_dict() for key in self.keyframes],
        }


@dataclass(frozen=True)
class SceneIR:
    version: str
    nodes: Tuple[IRNode, ...] = ()
    meshes: Tuple[IRMesh, ...] = ()
    materials: Tuple[IRMaterial, ...] = ()
    textures: Tuple[IRTexture, ...] = ()
    animations: Tuple[IRAnimationTrack, ...] = ()

    def mesh_by_id(self, mesh_id):
        for mesh in self.meshes:
            if mesh.id == mesh_id:
                return mesh
        return None

    def to_dict(self):
        return {
            'version': self.version,
            'nodes': [n.to_dict() for n in self.nodes],
            'meshes': [m.to_dict() for m in self.meshes],
            'materials': [m.to_dict() for m in self.materials],
            'textures': [t.to_dict() for t in self.textures],
            'animations': [a.to_dict() for a in self.animations],
        }
