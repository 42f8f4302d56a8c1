"""Load a workspace from a YAML file into a Node tree."""

import logging
from pathlib import Path

import yaml

from taskorium.ids import new_id
from taskorium.model.node import ListNode, Node
from taskorium.model.order import by_order, is_dense, reindex
from taskorium.model.project import DEFAULT_THEME, THEMES
from taskorium.model.workspace import new_workspace, now

logger = logging.getLogger(__name__)


def _densify(children: ListNode, what: str) -> None:
    """Repair order values that a hand-edited file left with gaps or repeats."""
    if not is_dense(children):
        logger.warning("%s had non-contiguous order values; renumbering", what)
    reindex(by_order(children))


def _flag(value) -> bool:
    """Read a yes/no field. Hand-edited files may quote it as a string."""
    if isinstance(value, str):
        return value.strip().lower() in ("true", "yes", "on", "1")
    return bool(value)


def _id(raw: dict, seen: set, what: str) -> str:
    """Take the entity's id, replacing a missing or already used one."""
    entity_id = str(raw.get("id") or "")
    if entity_id in seen:
        logger.warning("duplicate %s id %s; giving it a new id", what, entity_id)
        entity_id = ""
    entity_id = entity_id or new_id()
    seen.add(entity_id)
    return entity_id


def _order(raw: dict, position: int) -> int:
    order = raw.get("order")
    return int(order) if order is not None else position


def _load_subtask(raw: dict, card_id: str, seen: set) -> Node:
    return Node(
        id=_id(raw, seen, "subtask"),
        title=str(raw.get("title", "")),
        completed=_flag(raw.get("completed", False)),
        created_at=raw.get("created_at") or now(),
        card_id=card_id,
    )


def _load_card(raw: dict, position: int, column_id: str, seen: set) -> Node:
    card = Node(
        id=_id(raw, seen, "card"),
        title=str(raw.get("title", "")),
        body=str(raw.get("body") or ""),
        created_at=raw.get("created_at") or now(),
        order=_order(raw, position),
        column_id=column_id,
        subtasks=ListNode(),
    )
    for raw_subtask in raw.get("subtasks") or []:
        subtask = _load_subtask(raw_subtask, card.id, seen)
        card.subtasks[subtask.id] = subtask
    return card


def _load_column(raw: dict, position: int, project_id: str, seen: set) -> Node:
    column = Node(
        id=_id(raw, seen, "column"),
        name=str(raw.get("name", "")),
        created_at=raw.get("created_at") or now(),
        order=_order(raw, position),
        project_id=project_id,
        cards=ListNode(),
    )
    for i, raw_card in enumerate(raw.get("cards") or []):
        card = _load_card(raw_card, i, column.id, seen)
        column.cards[card.id] = card
    _densify(column.cards, f"column {column.id}")
    return column


def _load_project(raw: dict, position: int, seen: set) -> Node:
    theme = raw.get("theme") or DEFAULT_THEME
    if theme not in THEMES:
        logger.warning("unknown theme %r; using %s", theme, DEFAULT_THEME)
        theme = DEFAULT_THEME
    project = Node(
        id=_id(raw, seen, "project"),
        name=str(raw.get("name", "")),
        description=str(raw.get("description") or ""),
        theme=theme,
        created_at=raw.get("created_at") or now(),
        order=_order(raw, position),
        columns=ListNode(),
    )
    for i, raw_column in enumerate(raw.get("columns") or []):
        column = _load_column(raw_column, i, project.id, seen)
        project.columns[column.id] = column
    _densify(project.columns, f"project {project.id}")
    return project


def parse_workspace(text: str) -> Node:
    """Build a workspace from YAML text."""
    data = yaml.safe_load(text) or {}
    if not isinstance(data, dict):
        raise ValueError("workspace document must be a mapping")

    workspace = new_workspace()
    seen: set[str] = set()
    for i, raw_project in enumerate(data.get("projects") or []):
        project = _load_project(raw_project, i, seen)
        workspace.projects[project.id] = project
    _densify(workspace.projects, "workspace")
    return workspace


def load_workspace(path: str | Path) -> Node:
    """Load the workspace saved at path.

    A missing file gives an empty workspace. Raises ValueError if the file
    exists but cannot be parsed.
    """
    path = Path(path)
    if not path.exists():
        logger.debug("no workspace at %s; starting empty", path)
        return new_workspace()
    try:
        return parse_workspace(path.read_text(encoding="utf-8"))
    except (yaml.YAMLError, ValueError, AttributeError, TypeError) as e:
        raise ValueError(f"cannot read workspace {path}: {e}") from e
