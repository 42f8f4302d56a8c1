"""Workspace root and id lookups.

The tree is owned strictly top-down::

    workspace.projects[id].columns[id].cards[id].subtasks[id]

Children point back at their parent with a plain id field
(``project_id``, ``column_id``, ``card_id``). Those fields are for
navigation only; removing a child from its parent's ListNode is what
deletes it.
"""

from __future__ import annotations

from datetime import datetime, timezone

from taskorium.model.errors import NotFound
from taskorium.model.node import ListNode, Node


def now() -> str:
    """Current UTC time as an ISO-8601 string."""
    return datetime.now(timezone.utc).isoformat()


def require_name(value: str, what: str) -> str:
    """Return value unchanged, or raise ValueError if it is blank."""
    if not value or not value.strip():
        raise ValueError(f"{what} cannot be empty")
    return value


def new_workspace() -> Node:
    """Create an empty workspace root."""
    return Node(projects=ListNode())


def find_project(workspace: Node, project_id: str) -> Node:
    project = workspace.projects[project_id]
    if project is None:
        raise NotFound("project", project_id)
    return project


def find_column(workspace: Node, column_id: str) -> Node:
    for project in workspace.projects:
        column = project.columns[column_id]
        if column is not None:
            return column
    raise NotFound("column", column_id)


def find_card(workspace: Node, card_id: str) -> Node:
    for project in workspace.projects:
        for column in project.columns:
            card = column.cards[card_id]
            if card is not None:
                return card
    raise NotFound("card", card_id)


def find_subtask(workspace: Node, subtask_id: str) -> Node:
    for project in workspace.projects:
        for column in project.columns:
            for card in column.cards:
                subtask = card.subtasks[subtask_id]
                if subtask is not None:
                    return subtask
    raise NotFound("subtask", subtask_id)


def find_card_column(workspace: Node, card_id: str) -> Node:
    """Return the column that currently owns a card."""
    card = find_card(workspace, card_id)
    return find_column(workspace, card.column_id)


def find_column_project(workspace: Node, column_id: str) -> Node:
    """Return the project that currently owns a column."""
    column = find_column(workspace, column_id)
    return find_project(workspace, column.project_id)


def iter_ids(workspace: Node, kind: str):
    """Yield every live id of one kind ("project", "column", "card", "subtask")."""
    for project in workspace.projects:
        if kind == "project":
            yield project.id
            continue
        for column in project.columns:
            if kind == "column":
                yield column.id
                continue
            for card in column.cards:
                if kind == "card":
                    yield card.id
                    continue
                yield from card.subtasks.keys()
