"""Scene load entry points.

    load_from_path(path, parser=None, profile=None, validate=False) -> SceneIR
    load_from_memory(data, parser=None, profile=None, validate=False) -> SceneIR

Both run the same pipeline: the asset parser builds the native scene, the
SceneAssembler flattens it into a SceneIR, and the native scene is released
as soon as the IR has been copied out. If the parser fails, nothing is
assembled and ParseFailure carries the parser's description verbatim.

A parser can be passed per call or installed once with set_default_parser().
"""

import logging
import os
import time

from ..errors import NoParserError, ParseFailure
from ..extract_profiles import resolve_profile
from ..native.native_parser import LoadOptions, ParseError
from ..scene_graph.sg_scene import SceneAssembler
from ..scene_graph.sg_validate import validate_scene, failed_checks

_log = logging.getLogger("scene_ir_import")

_default_parser = None


def set_default_parser(parser):
    """Install the parser used when a load call does not pass one."""
    global _default_parser
    _default_parser = parser


def get_default_parser():
    return _default_parser


def _resolve_parser(parser):
    if parser is not None:
        return parser
    if _default_parser is None:
        raise NoParserError("No asset parser given and no default parser installed")
    return _default_parser


def _load(parser, load_fn, source, profile, validate):
    parser = _resolve_parser(parser)
    profile = resolve_profile(profile)
    t_start = time.time()

    try:
        scene = load_fn(parser, LoadOptions())
    except ParseError as exc:
        _log.error("Failed to parse %s: %s", source, exc.description)
        raise ParseFailure(exc.description) from exc

    try:
        assembler = SceneAssembler(parser, profile)
        ir = assembler.assemble(scene)
    finally:
        parser.free_scene(scene)

    if validate:
        for result in failed_checks(validate_scene(ir)):
            _log.warning("Validation %s failed: %s %s",
                         result.check_id, result.message, result.details)

    t_elapsed = time.time() - t_start
    _log.info(
        "Loaded %s (v%s) in %.3fs: %d nodes, %d meshes, %d materials, "
        "%d textures, %d animations",
        source, ir.version, t_elapsed, len(ir.nodes), len(ir.meshes),
        len(ir.materials), len(ir.textures), len(ir.animations),
    )
    if assembler.skipped_animations:
        _log.warning("%d animation stack(s) could not be baked",
                     len(assembler.skipped_animations))
    return ir


def load_from_path(path, parser=None, profile=None, validate=False):
    """Load a scene file and return its SceneIR.

    Args:
        path: file path (bytes, str or os.PathLike)
        parser: AssetParser (defaults to the installed default parser)
        profile: ExtractProfile or profile id (defaults to "default")
        validate: run reference integrity checks and log failures

    Raises:
        ParseFailure: the parser rejected the file
        ResourceFailure: copying scene data into the IR ran out of memory
        NoParserError: no parser available
        UnknownProfileError: ``profile`` is an id with no registered profile
    """
    path = os.fspath(path)
    return _load(
        parser,
        lambda p, opts: p.load_file(path, opts),
        os.fsdecode(path),
        profile,
        validate,
    )


def load_from_memory(data, parser=None, profile=None, validate=False):
    """Load a scene from an in-memory byte buffer and return its SceneIR.

    Same arguments and errors as load_from_path, with ``data`` holding the
    raw file contents.
    """
    data = bytes(data)
    return _load(
        parser,
        lambda p, opts: p.load_memory(data, opts),
        f"<memory: {len(data)} bytes>",
        profile,
        validate,
    )
