"""Column mutation operations."""

import logging

from taskorium.ids import new_id
from taskorium.model.node import ListNode, Node
from taskorium.model.order import by_order, place, reindex
from taskorium.model.workspace import find_column, find_project, now, require_name

logger = logging.getLogger(__name__)


def create_column(project: Node, name: str) -> Node:
    """Append a new, empty column to a project."""
    require_name(name, "column name")
    column = Node(
        id=new_id(),
        name=name,
        created_at=now(),
        order=len(project.columns),
        project_id=project.id,
        cards=ListNode(),
    )
    project.columns[column.id] = column
    return column


def rename_column(workspace: Node, column_id: str, name: str) -> Node:
    column = find_column(workspace, column_id)
    require_name(name, "column name")
    column.name = name
    return column


def move_column(workspace: Node, column_id: str, dest_index: int) -> None:
    """Move a column to a drop position within its project.

    dest_index counts gaps before the column was lifted; it is clamped.
    Cards stay where they are.
    """
    column = find_column(workspace, column_id)
    project = find_project(workspace, column.project_id)
    reindex(place(by_order(project.columns), column, dest_index))


def reflow_target(project: Node, column_id: str) -> Node | None:
    """Pick the column that inherits cards when column_id is deleted.

    That is the surviving column with the lowest order, or None if the
    column is the project's last.
    """
    survivors = [col for col in by_order(project.columns) if col.id != column_id]
    return survivors[0] if survivors else None


def delete_column(workspace: Node, column_id: str) -> Node | None:
    """Delete a column, moving its cards to the first surviving column.

    The cards keep their relative order and are appended after the
    target's existing cards. With no surviving column the cards are
    deleted along with the column. Returns the column that received the
    cards, if any.
    """
    column = find_column(workspace, column_id)
    project = find_project(workspace, column.project_id)
    target = reflow_target(project, column_id)

    if target is not None:
        moving = by_order(column.cards)
        start = len(target.cards)
        for offset, card in enumerate(moving):
            column.cards.pop(card.id)
            card.column_id = target.id
            card.order = start + offset
            target.cards[card.id] = card
        reindex(by_order(target.cards))
        if moving:
            logger.info("reflowed %d cards from column %s into %s", len(moving), column_id, target.id)
    elif len(column.cards):
        logger.info("deleted %d cards with last column %s", len(column.cards), column_id)

    project.columns[column_id] = None
    reindex(by_order(project.columns))
    return target
