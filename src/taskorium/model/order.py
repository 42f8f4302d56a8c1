"""Dense sibling ordering.

Every Project, Column and Card carries an integer ``order`` field giving
its position among its siblings. After each command the values for one
parent are exactly 0..N-1. Storage order in a ListNode means nothing;
positions always come from sorting by ``order``.
"""

from __future__ import annotations

from typing import Iterable


def by_order(siblings: Iterable) -> list:
    """Return siblings sorted ascending by their order field.

    Ties (which only exist mid-command) keep their incoming order.
    """
    return sorted(siblings, key=lambda node: node.order if node.order is not None else 0)


def reindex(siblings: Iterable) -> None:
    """Set each sibling's order to its 0-based position in the sequence."""
    for i, node in enumerate(siblings):
        if node.order != i:
            node.order = i


def is_dense(siblings: Iterable) -> bool:
    """True if the order values are exactly 0..N-1 with no gaps or repeats."""
    orders = sorted(node.order for node in siblings)
    return orders == list(range(len(orders)))


def drop_index(dest_index: int, count: int, source_index: int | None = None) -> int:
    """Resolve a requested drop position to an insert position.

    dest_index is a gap index counted against the sequence as it looked
    before the moving item was lifted out. count is the number of siblings
    left after removal. source_index is the item's old position when it
    stays under the same parent, None when it changes parent.

    Dropping below the item's own old slot shifts down by one so the item
    lands where it was dropped. The result is clamped into [0, count].
    """
    if source_index is not None and source_index < dest_index:
        dest_index -= 1
    return max(0, min(dest_index, count))


def place(siblings: list, item, dest_index: int) -> list:
    """Move item within (or into) an ordered sibling list.

    siblings is sorted by order and may or may not contain item. Returns a
    new list with item at its resolved position; the caller reindexes.
    """
    remaining = [node for node in siblings if node is not item]
    source_index = siblings.index(item) if len(remaining) != len(siblings) else None
    remaining.insert(drop_index(dest_index, len(remaining), source_index), item)
    return remaining
