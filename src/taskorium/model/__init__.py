"""Reactive project/column/card/subtask tree."""

from taskorium.model.card import create_card, delete_card, edit_card, move_card
from taskorium.model.column import (
    create_column,
    delete_column,
    move_column,
    reflow_target,
    rename_column,
)
from taskorium.model.errors import NotFound
from taskorium.model.loader import load_workspace
from taskorium.model.node import ListNode, Node
from taskorium.model.order import is_dense, reindex
from taskorium.model.project import (
    THEMES,
    create_project,
    delete_project,
    edit_project,
    move_project,
    rename_project,
    reorder_projects,
)
from taskorium.model.snapshot import (
    list_cards_sorted,
    list_columns_sorted,
    list_projects_sorted,
    list_subtasks,
)
from taskorium.model.subtask import (
    create_subtask,
    delete_subtask,
    rename_subtask,
    subtask_progress,
    toggle_subtask,
)
from taskorium.model.workspace import new_workspace
from taskorium.model.writer import save_workspace

__all__ = [
    "THEMES",
    "ListNode",
    "Node",
    "NotFound",
    "create_card",
    "create_column",
    "create_project",
    "create_subtask",
    "delete_card",
    "delete_column",
    "delete_project",
    "delete_subtask",
    "edit_card",
    "edit_project",
    "is_dense",
    "list_cards_sorted",
    "list_columns_sorted",
    "list_projects_sorted",
    "list_subtasks",
    "load_workspace",
    "move_card",
    "move_column",
    "move_project",
    "new_workspace",
    "reflow_target",
    "reindex",
    "rename_column",
    "rename_project",
    "rename_subtask",
    "reorder_projects",
    "save_workspace",
    "subtask_progress",
    "toggle_subtask",
]
