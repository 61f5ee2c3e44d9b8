"""Scene IR: flatten a parsed 3-D scene into a portable, id-addressed IR.

An external asset parser produces the native scene graph (nodes, meshes,
materials, textures, animation stacks). This package turns it into a
SceneIR made of flat tables linked by integer ids, resolves material
color fallbacks and bakes animation stacks into keyframe streams.

    from scene_ir import load_from_path
    ir = load_from_path("model.fbx", parser=my_parser)
    ir.to_dict()
"""

__version__ = "0.3.0"

from .errors import (
    SceneLoadError, ParseFailure, ResourceFailure, NoParserError,
    UnknownProfileError, BakeFailure,
)
from .extract_profiles import ExtractProfile, get_profile, register_profile
from .importer.import_scene import (
    load_from_path, load_from_memory, set_default_parser, get_default_parser,
)
from .scene_graph.sg_classes import SceneIR
