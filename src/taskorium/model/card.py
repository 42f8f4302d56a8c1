"""Card mutation operations."""

from taskorium.ids import new_id
from taskorium.model.node import ListNode, Node
from taskorium.model.order import by_order, drop_index, reindex
from taskorium.model.subtask import create_subtask
from taskorium.model.workspace import find_card, find_column, now, require_name


def create_card(
    column: Node,
    title: str,
    body: str = "",
    subtasks: list[str] | None = None,
) -> Node:
    """Append a new card to the end of a column.

    Blank subtask titles are skipped.
    """
    require_name(title, "card title")
    card = Node(
        id=new_id(),
        title=title,
        body=body,
        created_at=now(),
        order=len(column.cards),
        column_id=column.id,
        subtasks=ListNode(),
    )
    column.cards[card.id] = card
    for subtask_title in subtasks or []:
        if subtask_title.strip():
            create_subtask(card, subtask_title)
    return card


def edit_card(
    workspace: Node,
    card_id: str,
    title: str | None = None,
    body: str | None = None,
) -> Node:
    card = find_card(workspace, card_id)
    if title is not None:
        require_name(title, "card title")
        card.title = title
    if body is not None:
        card.body = body
    return card


def delete_card(workspace: Node, card_id: str) -> Node:
    """Delete a card and its subtasks, closing the gap it leaves."""
    card = find_card(workspace, card_id)
    column = find_column(workspace, card.column_id)
    column.cards[card_id] = None
    reindex(by_order(column.cards))
    return card


def move_card(workspace: Node, card_id: str, dest_column_id: str, dest_index: int) -> Node:
    """Move a card to a drop position in a column.

    dest_index is where the card was dropped, counted against the
    destination as it looked while the card was still in place. For a
    reorder within one column, a drop below the card's own slot is shifted
    up by one so the card lands where it was dropped. Out-of-range indices
    are clamped. Both ids are resolved before anything changes.
    """
    card = find_card(workspace, card_id)
    source = find_column(workspace, card.column_id)
    dest = find_column(workspace, dest_column_id)

    siblings = by_order(source.cards)
    source_index = siblings.index(card)
    siblings.remove(card)

    if dest is source:
        siblings.insert(drop_index(dest_index, len(siblings), source_index), card)
        reindex(siblings)
        return card

    source.cards.pop(card_id)
    reindex(siblings)

    dest_siblings = by_order(dest.cards)
    dest_siblings.insert(drop_index(dest_index, len(dest_siblings)), card)
    card.column_id = dest.id
    dest.cards[card_id] = card
    reindex(dest_siblings)
    return card
