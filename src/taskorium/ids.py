"""Entity id generation and lookup by prefix."""

import uuid

SHORT_WIDTH = 8


def new_id() -> str:
    """Generate an opaque id for a new entity."""
    return uuid.uuid4().hex


def short_id(entity_id: str, width: int = SHORT_WIDTH) -> str:
    """Abbreviate an id for display.

    "3f2a9c0d1e..." with width=8 → "3f2a9c0d"
    """
    return entity_id[:width]


def resolve_prefix(prefix: str, ids) -> str | None:
    """Expand a user-typed prefix to the single id it matches.

    An exact match always wins. Returns None if nothing matches or the
    prefix is ambiguous.
    """
    prefix = prefix.strip().lower()
    if not prefix:
        return None
    candidates = []
    for id_ in ids:
        if id_ == prefix:
            return id_
        if id_.startswith(prefix):
            candidates.append(id_)
    if len(candidates) == 1:
        return candidates[0]
    return None
