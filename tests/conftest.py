"""Shared fixtures: an in-memory asset parser and small native scenes."""

import pytest

from scene_ir.native.native_objects import (
    NativeScene, NativeNode, NativeMesh, NativeMaterial, NativeTexture,
    AnimStack, SceneMetadata, Transform, VertexAttrib, MaterialMap,
    PbrMaps, FbxMaps, BakedAnim, BakedNode, BakedVec3, BakedQuat,
)
from scene_ir.native.native_parser import AssetParser, ParseError, BakeError


class FakeParser(AssetParser):
    """Parser stand-in that returns a prepared scene.

    An AnimStack's ``anim`` handle is either the BakedAnim to return or a
    string, in which case baking fails with that string as description.
    """

    name = "fake"

    def __init__(self, scene=None, error=None):
        self.scene = scene
        self.error = error
        self.load_calls = []
        self.bake_opts = []
        self.freed_scenes = []
        self.freed_baked = []

    def _load(self, source):
        self.load_calls.append(source)
        if self.error is not None:
            raise ParseError(self.error)
        return self.scene

    def load_file(self, path, opts):
        return self._load(path)

    def load_memory(self, data, opts):
        return self._load(data)

    def bake_anim(self, scene, anim, opts):
        self.bake_opts.append(opts)
        if isinstance(anim, str):
            raise BakeError(anim)
        return anim

    def free_scene(self, scene):
        self.freed_scenes.append(scene)

    def free_baked_anim(self, baked):
        self.freed_baked.append(baked)


def make_baked(node_id, times=(0.0, 1.0 / 30.0)):
    """A BakedAnim animating one node on all three channels."""
    return BakedAnim(nodes=[BakedNode(
        node_id,
        translation_keys=[BakedVec3(t, (t, 0.0, 0.0)) for t in times],
        rotation_keys=[BakedQuat(t, (0.0, 0.0, 0.0, 1.0)) for t in times],
        scale_keys=[BakedVec3(t, (1.0, 1.0, 1.0)) for t in times],
    )])


def make_basic_scene():
    """Root node 0 -> child node 1 carrying a 3-vertex triangle mesh."""
    mesh = NativeMesh(
        0, b"Triangle",
        vertex_position=VertexAttrib(
            values=[(0.0, 0.0, 0.0), (1.0, 0.0, 0.0), (0.0, 1.0, 0.0)],
            indices=[0, 1, 2],
        ),
    )
    root = NativeNode(0, b"RootNode")
    child = NativeNode(1, b"Child", mesh=mesh)
    root.add_child(child)
    return NativeScene(
        nodes=[root, child],
        meshes=[mesh],
        metadata=SceneMetadata(version=7400),
    )


def make_rich_scene():
    """Hierarchy of four nodes, two meshes, materials, textures and animations."""
    red = NativeMaterial(
        0, b"Red",
        pbr=PbrMaps(base_color=MaterialMap((1.0, 0.0, 0.0))),
        fbx=FbxMaps(diffuse_color=MaterialMap((0.5, 0.0, 0.0)),
                    specular_color=MaterialMap((0.2, 0.2, 0.2))),
    )
    glow = NativeMaterial(
        1, b"Glow",
        fbx=FbxMaps(emission_color=MaterialMap((0.0, 1.0, 0.0))),
    )
    quad = NativeMesh(
        0, b"Quad",
        vertex_position=VertexAttrib(
            values=[(0.0, 0.0, 0.0), (1.0, 0.0, 0.0), (1.0, 1.0, 0.0), (0.0, 1.0, 0.0)],
            indices=[0, 1, 2, 0, 2, 3],
        ),
        vertex_normal=VertexAttrib(values=[(0.0, 0.0, 1.0)] * 4),
        vertex_uv=VertexAttrib(values=[(0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0)]),
        materials=[red, glow],
    )
    cloud = NativeMesh(
        1, b"Cloud",
        vertex_position=VertexAttrib(values=[(2.0, 2.0, 2.0)]),
    )
    root = NativeNode(0, b"RootNode")
    arm = NativeNode(1, b"Arm", Transform((0.0, 1.0, 0.0), (0.0, 0.0, 0.7071, 0.7071), (2.0, 2.0, 2.0)), mesh=quad)
    hand = NativeNode(2, b"Hand", mesh=cloud)
    leg = NativeNode(3, b"Leg")
    root.add_child(arm)
    root.add_child(leg)
    arm.add_child(hand)
    return NativeScene(
        nodes=[root, arm, hand, leg],
        meshes=[quad, cloud],
        materials=[red, glow],
        textures=[
            NativeTexture(0, b"Diffuse", b"textures/diffuse.png"),
            NativeTexture(1, b"Embedded", b""),
        ],
        anim_stacks=[
            AnimStack(0, b"Wave", make_baked(1)),
            AnimStack(1, b"Walk", make_baked(3, times=(0.0, 0.5, 1.0))),
        ],
        metadata=SceneMetadata(version=7500),
    )


@pytest.fixture
def basic_scene():
    return make_basic_scene()


@pytest.fixture
def rich_scene():
    return make_rich_scene()


@pytest.fixture
def parser_for():
    """Factory: parser_for(scene) -> FakeParser returning ``scene``."""
    def _factory(scene=None, error=None):
        return FakeParser(scene, error)
    return _factory
