"""Material and texture extraction.

Material colors come from two property blocks on the native material:

    pbr (modern):   base_color, specular_color, emission_color
    fbx (legacy):   diffuse_color, specular_color, emission_color

Each IR color is resolved independently through the configured chain
(PBR first, legacy second by default), so diffuse may come from the PBR
block while specular falls back to the legacy block. A color that no
source provides is left out of the record.

Textures carry a file path only when the native filename is non-empty.
"""

from .sg_attributes import resolve_vec3
from .sg_classes import IRMaterial, IRTexture
from ..extract_profiles import MaterialConfig, SOURCE_PBR, SOURCE_LEGACY
from ..utils.buffers import copy_name


# IR color key -> {source block: map attribute on that block}
COLOR_SOURCES = {
    'diffuse_color': {SOURCE_PBR: 'base_color', SOURCE_LEGACY: 'diffuse_color'},
    'specular_color': {SOURCE_PBR: 'specular_color', SOURCE_LEGACY: 'specular_color'},
    'emissive_color': {SOURCE_PBR: 'emission_color', SOURCE_LEGACY: 'emission_color'},
}


def _color_candidates(material, color_key, chain):
    sources = COLOR_SOURCES[color_key]
    candidates = []
    for block_name in chain:
        block = getattr(material, block_name, None)
        if block is None:
            continue
        candidates.append(getattr(block, sources[block_name], None))
    return candidates


def extract_material(material, config=None):
    """Convert a native material into an IRMaterial.

    Args:
        material: native material with ``pbr`` and ``fbx`` property blocks
        config: MaterialConfig (defaults to PBR-then-legacy)

    Returns:
        IRMaterial
    """
    if config is None:
        config = MaterialConfig()

    colors = {}
    for color_key in COLOR_SOURCES:
        candidates = _color_candidates(material, color_key, config.color_chain)
        colors[color_key] = resolve_vec3(candidates)

    return IRMaterial(
        id=int(material.typed_id),
        name=copy_name(material.name),
        **colors,
    )


def extract_texture(texture):
    """Convert a native texture into an IRTexture."""
    file_path = None
    if texture.filename is not None and len(texture.filename) > 0:
        file_path = copy_name(texture.filename)
    return IRTexture(
        id=int(texture.typed_id),
        name=copy_name(texture.name),
        file_path=file_path,
    )
