"""Interface to the external asset parser.

The parser owns the byte-level grammar (FBX, OBJ, ...) and the animation
curve evaluation. This module only pins down the narrow surface the
extraction engine consumes:

    load_file(path, opts)       -> NativeScene   (raises ParseError)
    load_memory(data, opts)     -> NativeScene   (raises ParseError)
    bake_anim(scene, anim, opts) -> BakedAnim    (raises BakeError)
    free_scene(scene)            release hook, called once per loaded scene
    free_baked_anim(baked)       release hook, called once per baked stack
"""

from dataclasses import dataclass


DEFAULT_RESAMPLE_RATE = 30.0


class ParseError(ValueError):
    """The parser could not produce a scene. ``description`` is human readable."""

    def __init__(self, description):
        super().__init__(description)
        self.description = description


class BakeError(ValueError):
    """The parser could not resample one animation."""

    def __init__(self, description):
        super().__init__(description)
        self.description = description


@dataclass
class LoadOptions:
    """Options forwarded to the parser. The engine always passes defaults;
    parser bindings may subclass it to carry their own switches."""


@dataclass
class BakeOptions:
    """Options forwarded to the resampler."""

    resample_rate: float = DEFAULT_RESAMPLE_RATE


class AssetParser:
    """Base class for asset parser bindings.

    Subclasses implement ``load_file``, ``load_memory`` and ``bake_anim``.
    The release hooks default to no-ops for parsers backed by garbage
    collected objects.
    """

    name = "abstract"

    def load_file(self, path, opts):
        raise NotImplementedError(f"{type(self).__name__} cannot load files")

    def load_memory(self, data, opts):
        raise NotImplementedError(f"{type(self).__name__} cannot load from memory")

    def bake_anim(self, scene, anim, opts):
        raise NotImplementedError(f"{type(self).__name__} cannot bake animations")

    def free_scene(self, scene):
        pass

    def free_baked_anim(self, baked):
        pass
