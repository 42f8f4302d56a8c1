"""Command/query facade over a workspace.

A Session owns one workspace tree. Callers drive it through commands
(create, edit, move, delete) and read it back through sorted queries.
Commands run one at a time. When a command changes anything the session
writes the workspace to its store and then tells its listeners, so a
listener always sees a finished command and a saved file.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Callable

from taskorium.model import card as card_ops
from taskorium.model import column as column_ops
from taskorium.model import project as project_ops
from taskorium.model import snapshot
from taskorium.model import subtask as subtask_ops
from taskorium.model.loader import load_workspace
from taskorium.model.node import Node
from taskorium.model.workspace import find_card, find_column, find_project, new_workspace
from taskorium.model.writer import save_workspace

logger = logging.getLogger(__name__)

Listener = Callable[[str, Any], None]


class Session:
    """Serialises commands against one workspace and persists after each.

    path is the YAML store; None keeps everything in memory. With
    autosave off, callers flush with save().
    """

    def __init__(self, path: str | Path | None = None, autosave: bool = True) -> None:
        self.path = Path(path) if path is not None else None
        self.autosave = autosave
        self.workspace: Node = load_workspace(self.path) if self.path else new_workspace()
        self._listeners: list[Listener] = []
        self._changes = 0
        self._running: str | None = None
        self._unwatch = self.workspace.watch("projects", self._on_change)

    def _on_change(self, node, key, old, new) -> None:
        self._changes += 1

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call listener(command, result) after every command that changed state.

        Returns an unsubscribe callable.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def save(self) -> None:
        if self.path is not None:
            save_workspace(self.workspace, self.path)

    def _run(self, command: str, fn: Callable, *args, **kwargs):
        if self._running is not None:
            raise RuntimeError(f"{command} issued while {self._running} is still running")
        self._running = command
        self._changes = 0
        try:
            result = fn(self.workspace, *args, **kwargs)
        finally:
            self._running = None
        if not self._changes:
            logger.debug("%s: no change", command)
            return result
        logger.debug("%s: %d changes", command, self._changes)
        if self.autosave:
            self.save()
        for listener in list(self._listeners):
            listener(command, result)
        return result

    # --- Commands ---

    def create_project(self, name: str, description: str = "", theme: str | None = None) -> Node:
        return self._run("create_project", project_ops.create_project, name, description, theme)

    def edit_project(
        self,
        project_id: str,
        name: str | None = None,
        description: str | None = None,
        theme: str | None = None,
    ) -> Node:
        return self._run("edit_project", project_ops.edit_project, project_id, name, description, theme)

    def rename_project(self, project_id: str, name: str) -> Node:
        return self._run("rename_project", project_ops.rename_project, project_id, name)

    def delete_project(self, project_id: str) -> Node:
        return self._run("delete_project", project_ops.delete_project, project_id)

    def move_project(self, project_id: str, dest_index: int) -> None:
        return self._run("move_project", project_ops.move_project, project_id, dest_index)

    def reorder_projects(self, project_ids: list[str]) -> None:
        return self._run("reorder_projects", project_ops.reorder_projects, project_ids)

    def create_column(self, project_id: str, name: str) -> Node:
        def create(workspace, project_id, name):
            return column_ops.create_column(find_project(workspace, project_id), name)

        return self._run("create_column", create, project_id, name)

    def rename_column(self, column_id: str, name: str) -> Node:
        return self._run("rename_column", column_ops.rename_column, column_id, name)

    def move_column(self, column_id: str, dest_index: int) -> None:
        return self._run("move_column", column_ops.move_column, column_id, dest_index)

    def delete_column(self, column_id: str) -> Node | None:
        return self._run("delete_column", column_ops.delete_column, column_id)

    def create_card(
        self,
        column_id: str,
        title: str,
        body: str = "",
        subtasks: list[str] | None = None,
    ) -> Node:
        def create(workspace, column_id, title, body, subtasks):
            return card_ops.create_card(find_column(workspace, column_id), title, body, subtasks)

        return self._run("create_card", create, column_id, title, body, subtasks)

    def edit_card(self, card_id: str, title: str | None = None, body: str | None = None) -> Node:
        return self._run("edit_card", card_ops.edit_card, card_id, title, body)

    def delete_card(self, card_id: str) -> Node:
        return self._run("delete_card", card_ops.delete_card, card_id)

    def move_card(self, card_id: str, dest_column_id: str, dest_index: int) -> Node:
        return self._run("move_card", card_ops.move_card, card_id, dest_column_id, dest_index)

    def create_subtask(self, card_id: str, title: str) -> Node:
        def create(workspace, card_id, title):
            return subtask_ops.create_subtask(find_card(workspace, card_id), title)

        return self._run("create_subtask", create, card_id, title)

    def toggle_subtask(self, subtask_id: str) -> Node:
        return self._run("toggle_subtask", subtask_ops.toggle_subtask, subtask_id)

    def rename_subtask(self, subtask_id: str, title: str) -> Node:
        return self._run("rename_subtask", subtask_ops.rename_subtask, subtask_id, title)

    def delete_subtask(self, subtask_id: str) -> Node:
        return self._run("delete_subtask", subtask_ops.delete_subtask, subtask_id)

    # --- Queries ---

    def list_projects_sorted(self) -> list[Node]:
        return snapshot.list_projects_sorted(self.workspace)

    def list_columns_sorted(self, project_id: str) -> list[Node]:
        return snapshot.list_columns_sorted(self.workspace, project_id)

    def list_cards_sorted(self, column_id: str) -> list[Node]:
        return snapshot.list_cards_sorted(self.workspace, column_id)

    def list_subtasks(self, card_id: str) -> list[Node]:
        return snapshot.list_subtasks(self.workspace, card_id)
