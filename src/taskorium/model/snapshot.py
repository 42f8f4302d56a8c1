"""Sorted read views of the workspace.

These are the only read path for display: children come back sorted by
their order field, never in storage order. Nothing here mutates.
"""

from __future__ import annotations

from taskorium.model.node import Node
from taskorium.model.order import by_order
from taskorium.model.workspace import find_card, find_column, find_project


def list_projects_sorted(workspace: Node) -> list[Node]:
    return by_order(workspace.projects)


def list_columns_sorted(workspace: Node, project_id: str) -> list[Node]:
    return by_order(find_project(workspace, project_id).columns)


def list_cards_sorted(workspace: Node, column_id: str) -> list[Node]:
    return by_order(find_column(workspace, column_id).cards)


def list_subtasks(workspace: Node, card_id: str) -> list[Node]:
    """Subtasks of a card in the order they were added."""
    return list(find_card(workspace, card_id).subtasks)


# --- Plain-dict views ---


def subtask_to_dict(subtask: Node) -> dict:
    return {
        "id": subtask.id,
        "title": subtask.title,
        "completed": bool(subtask.completed),
        "created_at": subtask.created_at,
    }


def card_to_dict(card: Node) -> dict:
    return {
        "id": card.id,
        "title": card.title,
        "body": card.body or "",
        "created_at": card.created_at,
        "order": card.order,
        "subtasks": [subtask_to_dict(s) for s in card.subtasks],
    }


def column_to_dict(column: Node) -> dict:
    return {
        "id": column.id,
        "name": column.name,
        "created_at": column.created_at,
        "order": column.order,
        "cards": [card_to_dict(c) for c in by_order(column.cards)],
    }


def project_to_dict(project: Node) -> dict:
    return {
        "id": project.id,
        "name": project.name,
        "description": project.description or "",
        "theme": project.theme,
        "created_at": project.created_at,
        "order": project.order,
        "columns": [column_to_dict(c) for c in by_order(project.columns)],
    }


def workspace_to_dict(workspace: Node) -> dict:
    """Dump the whole tree, every level sorted, as plain data."""
    return {"projects": [project_to_dict(p) for p in by_order(workspace.projects)]}
