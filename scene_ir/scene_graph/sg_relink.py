"""Native reference -> IR id relinking.

IR ids are exactly the ``typed_id`` values the parser assigned, so a
relation is resolved by reading the referenced entity's id and nothing
else: the referenced entity is never copied into the referencing record.
"""


def relink_id(ref):
    """Return the IR id of a native reference, or None if the reference is absent."""
    if ref is None:
        return None
    return int(ref.typed_id)


def relink_ids(refs):
    """Return the IR ids of a native reference list in forward order."""
    ids = []
    for ref in refs:
        ids.append(int(ref.typed_id))
    return tuple(ids)


def collect_forward(items, convert):
    """Convert every element of a native collection, element 0 first."""
    out = []
    for item in items:
        out.append(convert(item))
    return tuple(out)
