"""Drag gesture state machines for cards and columns.

A gesture moves idle → tracking → committing → idle. While tracking, the
pointer position is turned into a provisional DropTarget as often as the
caller likes; nothing in the workspace changes. Only drop() commits, through
the session's move command. cancel(), or a drop with nowhere to land, goes
straight back to idle and leaves the workspace untouched.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from taskorium.model.errors import NotFound
from taskorium.model.node import Node
from taskorium.model.order import by_order, drop_index
from taskorium.model.workspace import find_card, find_column
from taskorium.session import Session

IDLE = "idle"
TRACKING = "tracking"
COMMITTING = "committing"

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DropTarget:
    """Where the dragged item would land if dropped now.

    index is the drop position as the caller measured it, against the
    parent as it looks with the item still in place. position is where the
    item will end up after the move.
    """

    parent_id: str
    index: int
    position: int


class Gesture:
    """Shared gesture lifecycle. Subclasses resolve targets and commit."""

    kind = "item"

    def __init__(self, session: Session) -> None:
        self.session = session
        self.state = IDLE
        self.item_id: str | None = None
        self.target: DropTarget | None = None

    @property
    def active(self) -> bool:
        return self.state == TRACKING

    def start(self, item_id: str) -> None:
        """Pick up an item and begin tracking."""
        if self.state != IDLE:
            raise RuntimeError(f"{self.kind} drag already in progress")
        self._find(item_id)
        self.item_id = item_id
        self.target = None
        self.state = TRACKING

    def _hover(self, parent_id: str, index: int) -> DropTarget | None:
        if self.state != TRACKING:
            return None
        try:
            target = self._resolve(parent_id, index)
        except NotFound:
            # Nothing valid under the pointer: keep the last target.
            return self.target
        self.target = target
        return target

    def drop(self) -> Node | None:
        """Commit the move to the current target.

        Returns the moved item, or None if the gesture ended without a move.
        """
        if self.state != TRACKING:
            return None
        if self.target is None:
            self.cancel()
            return None
        self.state = COMMITTING
        try:
            return self._commit(self.target)
        except NotFound as e:
            logger.debug("%s drop abandoned: %s", self.kind, e)
            return None
        finally:
            self._reset()

    def cancel(self) -> None:
        """Abandon the gesture. The workspace is not touched."""
        self._reset()

    def _reset(self) -> None:
        self.state = IDLE
        self.item_id = None
        self.target = None

    def _find(self, item_id: str) -> Node:
        raise NotImplementedError

    def _resolve(self, parent_id: str, index: int) -> DropTarget:
        raise NotImplementedError

    def _commit(self, target: DropTarget) -> Node:
        raise NotImplementedError


class CardDrag(Gesture):
    """Drag a card within its column or across to another column."""

    kind = "card"

    def _find(self, item_id: str) -> Node:
        return find_card(self.session.workspace, item_id)

    def hover(self, column_id: str, index: int) -> DropTarget | None:
        """Report the pointer over column_id, in front of index."""
        return self._hover(column_id, index)

    def _resolve(self, column_id: str, index: int) -> DropTarget:
        workspace = self.session.workspace
        card = find_card(workspace, self.item_id)
        column = find_column(workspace, column_id)
        siblings = by_order(column.cards)
        if card.column_id == column.id:
            position = drop_index(index, len(siblings) - 1, siblings.index(card))
        else:
            position = drop_index(index, len(siblings))
        return DropTarget(column.id, index, position)

    def _commit(self, target: DropTarget) -> Node:
        return self.session.move_card(self.item_id, target.parent_id, target.index)


class ColumnDrag(Gesture):
    """Drag a column along its project's column list."""

    kind = "column"

    def _find(self, item_id: str) -> Node:
        return find_column(self.session.workspace, item_id)

    def hover(self, index: int) -> DropTarget | None:
        """Report the pointer in front of the column at index."""
        return self._hover("", index)

    def _resolve(self, parent_id: str, index: int) -> DropTarget:
        workspace = self.session.workspace
        column = find_column(workspace, self.item_id)
        project_id = column.project_id
        siblings = by_order(workspace.projects[project_id].columns)
        position = drop_index(index, len(siblings) - 1, siblings.index(column))
        return DropTarget(project_id, index, position)

    def _commit(self, target: DropTarget) -> Node:
        self.session.move_column(self.item_id, target.index)
        return find_column(self.session.workspace, self.item_id)
