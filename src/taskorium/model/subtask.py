"""Subtask operations.

Subtasks have no order field; they are listed in the order they were
added.
"""

from taskorium.ids import new_id
from taskorium.model.node import Node
from taskorium.model.workspace import find_card, find_subtask, now


def create_subtask(card: Node, title: str) -> Node:
    subtask = Node(
        id=new_id(),
        title=title.strip(),
        completed=False,
        created_at=now(),
        card_id=card.id,
    )
    card.subtasks[subtask.id] = subtask
    return subtask


def toggle_subtask(workspace: Node, subtask_id: str) -> Node:
    """Flip a subtask between done and not done."""
    subtask = find_subtask(workspace, subtask_id)
    subtask.completed = not subtask.completed
    return subtask


def rename_subtask(workspace: Node, subtask_id: str, title: str) -> Node:
    subtask = find_subtask(workspace, subtask_id)
    subtask.title = title.strip()
    return subtask


def delete_subtask(workspace: Node, subtask_id: str) -> Node:
    subtask = find_subtask(workspace, subtask_id)
    card = find_card(workspace, subtask.card_id)
    card.subtasks[subtask_id] = None
    return subtask


def subtask_progress(card: Node) -> tuple[int, int]:
    """Return (completed, total) subtask counts for a card."""
    total = len(card.subtasks)
    completed = sum(1 for subtask in card.subtasks if subtask.completed)
    return completed, total
