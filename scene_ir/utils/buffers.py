"""Copy native attribute buffers into IR-owned tuples.

Native parsers hand out vertex data in several shapes:
    - sequences of tuples/lists          [(x, y, z), ...]
    - sequences of vector objects        [Vec3(x=.., y=.., z=..), ...]
    - numpy arrays, (N, C) or flat (N*C,)

Everything is funnelled through numpy so the result is always a fresh
tuple of Python floats (or ints) that never aliases parser memory.
"""

import numpy as np


_COMPONENT_NAMES = ('x', 'y', 'z', 'w')

UINT32_MAX = 0xFFFFFFFF


def _vector_components(vec, components):
    """Return the first ``components`` scalars of a tuple or x/y/z/w object."""
    if hasattr(vec, 'x'):
        return [getattr(vec, name) for name in _COMPONENT_NAMES[:components]]
    return list(vec)


def _as_rows(values, components):
    if isinstance(values, np.ndarray):
        arr = np.array(values, dtype=np.float64)
    else:
        arr = np.array(
            [_vector_components(v, components) for v in values],
            dtype=np.float64,
        )

    if arr.size == 0:
        return np.empty((0, components), dtype=np.float64)
    if arr.ndim == 1:
        if arr.size % components:
            raise ValueError(
                f"Flat buffer of {arr.size} scalars is not a multiple of {components}"
            )
        return arr.reshape(-1, components)
    if arr.ndim != 2 or arr.shape[1] != components:
        raise ValueError(
            f"Expected {components}-component vectors, got array of shape {arr.shape}"
        )
    return arr


def copy_vector(vec, components):
    """Copy a single vector into a tuple of ``components`` floats."""
    comps = _vector_components(vec, components)
    if len(comps) < components:
        raise ValueError(f"Expected {components} components, got {len(comps)}")
    return tuple(float(c) for c in comps[:components])


def copy_vector_list(values, components):
    """Copy a vector buffer into a tuple of tuples, preserving element order."""
    rows = _as_rows(values, components)
    return tuple(tuple(row) for row in rows.tolist())


def copy_index_list(values):
    """Copy an index buffer into a tuple of ints (unsigned 32-bit range)."""
    arr = np.array(values, dtype=np.int64).reshape(-1)
    if arr.size and (arr.min() < 0 or arr.max() > UINT32_MAX):
        raise ValueError("Index buffer holds values outside the u32 range")
    return tuple(arr.tolist())


def copy_name(name):
    """Copy a native name into a str.

    Bytes are decoded as UTF-8; undecodable bytes become surrogate escapes so
    ``name.encode("utf-8", "surrogateescape")`` gives back the original bytes.
    """
    if name is None:
        return ""
    if isinstance(name, (bytes, bytearray, memoryview)):
        return bytes(name).decode('utf-8', errors='surrogateescape')
    return str(name)
