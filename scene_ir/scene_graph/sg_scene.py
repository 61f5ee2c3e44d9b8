"""Scene assembly: one native scene -> one SceneIR.

The assembler walks every typed collection of the native scene in index
order, runs the entity extractors, bakes animation stacks and formats the
version label. Only ids cross between collections, so each entity appears
exactly once in its own table.
"""

import logging

from .sg_classes import SceneIR
from .sg_geometry import extract_mesh
from .sg_materials import extract_material, extract_texture
from .sg_nodes import extract_node
from .sg_relink import collect_forward
from ..animation.sg_animation import bake_animations
from ..errors import ResourceFailure
from ..extract_profiles import resolve_profile

_log = logging.getLogger("scene_ir_scene")


def format_version(version):
    """Format a numeric file version as "<major>.<minor>" (7400 -> "7.4")."""
    version = int(version)
    major = version // 1000
    minor = (version % 1000) // 100
    return f"{major}.{minor}"


class SceneAssembler:
    """Builds a SceneIR from a native scene.

    Usage:
        assembler = SceneAssembler(parser, profile)
        ir = assembler.assemble(scene)
        # Stacks the resampler rejected:
        #   assembler.skipped_animations - list of BakeFailure
    """

    def __init__(self, parser, profile=None):
        self.parser = parser
        self.profile = resolve_profile(profile)
        self.skipped_animations = []

    def assemble(self, scene):
        """Extract every collection of ``scene`` into a SceneIR."""
        try:
            return self._assemble(scene)
        except MemoryError as exc:
            raise ResourceFailure("Out of memory while copying scene data into the IR") from exc

    def _assemble(self, scene):
        profile = self.profile

        nodes = collect_forward(scene.nodes, extract_node)
        meshes = collect_forward(scene.meshes, extract_mesh)
        materials = collect_forward(
            scene.materials,
            lambda mat: extract_material(mat, profile.material),
        )
        textures = collect_forward(scene.textures, extract_texture)

        animations = ()
        self.skipped_animations = []
        if profile.bake_animations:
            tracks, failures = bake_animations(self.parser, scene, profile.bake)
            animations = tuple(tracks)
            self.skipped_animations = failures

        version = format_version(scene.metadata.version)

        _log.debug(
            "Assembled scene v%s: %d nodes, %d meshes, %d materials, "
            "%d textures, %d animations (%d skipped)",
            version, len(nodes), len(meshes), len(materials), len(textures),
            len(animations), len(self.skipped_animations),
        )

        return SceneIR(
            version=version,
            nodes=nodes,
            meshes=meshes,
            materials=materials,
            textures=textures,
            animations=animations,
        )
