"""Python representations of the native scene graph handed over by an asset parser.

The attribute names mirror the object model of ufbx-style importers so any
parser binding exposing the same surface can be used directly (duck typed):

NativeScene:
    nodes        - list of NativeNode (node 0 is usually the implicit root)
    meshes       - list of NativeMesh
    materials    - list of NativeMaterial
    textures     - list of NativeTexture
    anim_stacks  - list of AnimStack
    metadata     - SceneMetadata (version is e.g. 7400 for FBX 7.4)

Every element carries a ``typed_id``: its stable index inside its own typed
collection for the lifetime of the loaded scene.

NativeNode:
    parent           - owning NativeNode or None for roots
    children         - list of NativeNode (back-references of ``parent``)
    local_transform  - Transform (translation, rotation quat XYZW, scale)
    mesh             - attached NativeMesh or None

NativeMesh:
    vertex_position  - VertexAttrib of 3-vectors (+ index buffer)
    vertex_normal    - VertexAttrib of 3-vectors
    vertex_uv        - VertexAttrib of 2-vectors
    materials        - list of NativeMaterial

NativeMaterial:
    pbr  - PbrMaps  (base_color, specular_color, emission_color)
    fbx  - FbxMaps  (diffuse_color, specular_color, emission_color)
    Each map is a MaterialMap with has_value / value_components / value_vec3.
"""


IDENTITY_TRANSLATION = (0.0, 0.0, 0.0)
IDENTITY_ROTATION = (0.0, 0.0, 0.0, 1.0)   # XYZW
IDENTITY_SCALE = (1.0, 1.0, 1.0)


class Transform:
    """Local TRS transform of a node."""

    __slots__ = ('translation', 'rotation', 'scale')

    def __init__(self, translation=IDENTITY_TRANSLATION,
                 rotation=IDENTITY_ROTATION, scale=IDENTITY_SCALE):
        self.translation = translation
        self.rotation = rotation
        self.scale = scale

    def __repr__(self):
        return f"Transform(t={self.translation}, r={self.rotation}, s={self.scale})"


class VertexAttrib:
    """A vertex attribute: packed value array plus optional index buffer."""

    __slots__ = ('exists', 'values', 'indices')

    def __init__(self, values=(), indices=(), exists=None):
        self.values = values
        self.indices = indices
        # An attribute with no values may still be flagged as existing.
        self.exists = bool(len(values)) if exists is None else exists

    def __repr__(self):
        return (
            f"VertexAttrib(exists={self.exists}, values={len(self.values)}, "
            f"indices={len(self.indices)})"
        )


class MaterialMap:
    """One material property slot (a color, factor or texture binding)."""

    __slots__ = ('has_value', 'value_components', 'value_vec3')

    def __init__(self, value_vec3=None, value_components=None, has_value=None):
        self.value_vec3 = value_vec3 if value_vec3 is not None else (0.0, 0.0, 0.0)
        if value_components is None:
            value_components = len(value_vec3) if value_vec3 is not None else 0
        self.value_components = value_components
        self.has_value = (value_vec3 is not None) if has_value is None else has_value

    def __repr__(self):
        return (
            f"MaterialMap(has_value={self.has_value}, "
            f"components={self.value_components}, value={self.value_vec3})"
        )


class PbrMaps:
    """Modern (PBR) material maps."""

    __slots__ = ('base_color', 'specular_color', 'emission_color')

    def __init__(self, base_color=None, specular_color=None, emission_color=None):
        self.base_color = base_color or MaterialMap()
        self.specular_color = specular_color or MaterialMap()
        self.emission_color = emission_color or MaterialMap()


class FbxMaps:
    """Legacy (Lambert/Phong) material maps."""

    __slots__ = ('diffuse_color', 'specular_color', 'emission_color')

    def __init__(self, diffuse_color=None, specular_color=None, emission_color=None):
        self.diffuse_color = diffuse_color or MaterialMap()
        self.specular_color = specular_color or MaterialMap()
        self.emission_color = emission_color or MaterialMap()


class NativeNode:
    """A node in the native hierarchy."""

    __slots__ = ('typed_id', 'name', 'parent', 'children', 'local_transform', 'mesh')

    def __init__(self, typed_id, name=b"", local_transform=None, mesh=None):
        self.typed_id = typed_id
        self.name = name
        self.parent = None
        self.children = []
        self.local_transform = local_transform or Transform()
        self.mesh = mesh

    def add_child(self, child):
        """Link ``child`` under this node, keeping both directions in sync."""
        if child.parent is not None:
            child.parent.children.remove(child)
        child.parent = self
        self.children.append(child)
        return child

    def __repr__(self):
        return f"NativeNode({self.typed_id}, {self.name!r}, children={len(self.children)})"


class NativeMesh:
    """Mesh geometry as exposed by the parser."""

    __slots__ = (
        'typed_id', 'name', 'vertex_position', 'vertex_normal',
        'vertex_uv', 'materials',
    )

    def __init__(self, typed_id, name=b"", vertex_position=None,
                 vertex_normal=None, vertex_uv=None, materials=None):
        self.typed_id = typed_id
        self.name = name
        self.vertex_position = vertex_position or VertexAttrib()
        self.vertex_normal = vertex_normal or VertexAttrib()
        self.vertex_uv = vertex_uv or VertexAttrib()
        self.materials = materials if materials is not None else []

    def __repr__(self):
        return f"NativeMesh({self.typed_id}, {self.name!r}, {self.vertex_position!r})"


class NativeMaterial:
    """Material with both PBR and legacy property blocks."""

    __slots__ = ('typed_id', 'name', 'pbr', 'fbx')

    def __init__(self, typed_id, name=b"", pbr=None, fbx=None):
        self.typed_id = typed_id
        self.name = name
        self.pbr = pbr or PbrMaps()
        self.fbx = fbx or FbxMaps()

    def __repr__(self):
        return f"NativeMaterial({self.typed_id}, {self.name!r})"


class NativeTexture:
    """Texture reference (file-backed or embedded)."""

    __slots__ = ('typed_id', 'name', 'filename')

    def __init__(self, typed_id, name=b"", filename=b""):
        self.typed_id = typed_id
        self.name = name
        self.filename = filename

    def __repr__(self):
        return f"NativeTexture({self.typed_id}, {self.name!r}, {self.filename!r})"


class AnimStack:
    """An animation take. ``anim`` is the opaque handle the baker consumes."""

    __slots__ = ('typed_id', 'name', 'anim')

    def __init__(self, typed_id, name=b"", anim=None):
        self.typed_id = typed_id
        self.name = name
        self.anim = anim

    def __repr__(self):
        return f"AnimStack({self.typed_id}, {self.name!r})"


class SceneMetadata:
    """Scene-wide metadata. ``version`` is the numeric file version (7400 = 7.4)."""

    __slots__ = ('version',)

    def __init__(self, version=0):
        self.version = version


class NativeScene:
    """A fully-materialized native scene."""

    __slots__ = ('nodes', 'meshes', 'materials', 'textures', 'anim_stacks', 'metadata')

    def __init__(self, nodes=None, meshes=None, materials=None, textures=None,
                 anim_stacks=None, metadata=None):
        self.nodes = nodes if nodes is not None else []
        self.meshes = meshes if meshes is not None else []
        self.materials = materials if materials is not None else []
        self.textures = textures if textures is not None else []
        self.anim_stacks = anim_stacks if anim_stacks is not None else []
        self.metadata = metadata or SceneMetadata()

    def __repr__(self):
        return (
            f"NativeScene(nodes={len(self.nodes)}, meshes={len(self.meshes)}, "
            f"materials={len(self.materials)}, textures={len(self.textures)}, "
            f"anim_stacks={len(self.anim_stacks)})"
        )


# ---------------------------------------------------------------------------
# Baked animation results
# ---------------------------------------------------------------------------

class BakedVec3:
    """A baked translation or scale sample."""

    __slots__ = ('time', 'value')

    def __init__(self, time, value):
        self.time = time
        self.value = value


class BakedQuat:
    """A baked rotation sample (quaternion XYZW)."""

    __slots__ = ('time', 'value')

    def __init__(self, time, value):
        self.time = time
        self.value = value


class BakedNode:
    """Per-node baked channels. Each key list is sorted by time."""

    __slots__ = ('typed_id', 'translation_keys', 'rotation_keys', 'scale_keys')

    def __init__(self, typed_id, translation_keys=None, rotation_keys=None, scale_keys=None):
        self.typed_id = typed_id
        self.translation_keys = translation_keys if translation_keys is not None else []
        self.rotation_keys = rotation_keys if rotation_keys is not None else []
        self.scale_keys = scale_keys if scale_keys is not None else []


class BakedAnim:
    """Result of baking one animation: a list of BakedNode."""

    __slots__ = ('nodes',)

    def __init__(self, nodes=None):
        self.nodes = nodes if nodes is not None else []
