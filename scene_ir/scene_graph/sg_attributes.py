"""Attribute fallback resolution.

A logical property (e.g. a material's diffuse color) can be provided by
several source slots, listed by priority. Each slot exposes:

    has_value          - whether the file actually defined the slot
    value_components   - how many scalar components the value carries
    value_vec3         - the value itself

The first slot that is defined and wide enough wins. If none qualify the
property is absent: callers drop the field instead of writing a default.
"""

from ..utils.buffers import copy_vector


COLOR_COMPONENTS = 3


def resolve_attribute(candidates, min_components=COLOR_COMPONENTS):
    """Return the first qualifying candidate, or None."""
    for cand in candidates:
        if cand is None:
            continue
        if cand.has_value and cand.value_components >= min_components:
            return cand
    return None


def resolve_vec3(candidates):
    """Resolve a 3-component value (color/vector) through a fallback chain."""
    cand = resolve_attribute(candidates, COLOR_COMPONENTS)
    if cand is None:
        return None
    return copy_vector(cand.value_vec3, COLOR_COMPONENTS)
