"""Project mutation operations."""

import logging

from taskorium.ids import new_id
from taskorium.model.column import create_column
from taskorium.model.errors import NotFound
from taskorium.model.node import ListNode, Node
from taskorium.model.order import by_order, place, reindex
from taskorium.model.workspace import find_project, now, require_name

logger = logging.getLogger(__name__)

THEMES: tuple[str, ...] = (
    "mercury",
    "venus",
    "earth",
    "mars",
    "jupiter",
    "saturn",
    "uranus",
    "neptune",
)
DEFAULT_THEME = "earth"
DEFAULT_COLUMNS: tuple[str, ...] = ("To Do", "In Progress", "Done")


def parse_theme(value: str | None) -> str:
    """Normalise a theme tag, raising ValueError for unknown names."""
    if value is None:
        return DEFAULT_THEME
    theme = value.strip().lower()
    if theme not in THEMES:
        raise ValueError(f"unknown theme '{value}' (expected one of: {', '.join(THEMES)})")
    return theme


def theme_display_name(theme: str) -> str:
    return theme.capitalize()


def create_project(
    workspace: Node,
    name: str,
    description: str = "",
    theme: str | None = None,
) -> Node:
    """Create a project at the end of the project list.

    The project starts with the default columns "To Do", "In Progress"
    and "Done".
    """
    require_name(name, "project name")
    theme = parse_theme(theme)
    project = Node(
        id=new_id(),
        name=name,
        description=description,
        theme=theme,
        created_at=now(),
        order=len(workspace.projects),
        columns=ListNode(),
    )
    workspace.projects[project.id] = project
    for column_name in DEFAULT_COLUMNS:
        create_column(project, column_name)
    return project


def edit_project(
    workspace: Node,
    project_id: str,
    name: str | None = None,
    description: str | None = None,
    theme: str | None = None,
) -> Node:
    """Update any of a project's name, description and theme."""
    project = find_project(workspace, project_id)
    new_theme = parse_theme(theme) if theme is not None else None
    new_name = require_name(name, "project name") if name is not None else None
    if new_name is not None:
        project.name = new_name
    if description is not None:
        project.description = description
    if new_theme is not None:
        project.theme = new_theme
    return project


def rename_project(workspace: Node, project_id: str, name: str) -> Node:
    return edit_project(workspace, project_id, name=name)


def delete_project(workspace: Node, project_id: str) -> Node:
    """Delete a project with all of its columns, cards and subtasks."""
    project = find_project(workspace, project_id)
    columns = len(project.columns)
    cards = sum(len(col.cards) for col in project.columns)
    workspace.projects[project_id] = None
    reindex(by_order(workspace.projects))
    logger.info("deleted project %s with %d columns and %d cards", project_id, columns, cards)
    return project


def move_project(workspace: Node, project_id: str, dest_index: int) -> None:
    """Move one project to a drop position in the project list.

    dest_index counts gaps before the project was lifted; it is clamped.
    """
    project = find_project(workspace, project_id)
    reindex(place(by_order(workspace.projects), project, dest_index))


def reorder_projects(workspace: Node, project_ids: list[str]) -> None:
    """Put projects in the given order.

    Projects that are not listed follow the listed ones in their current
    relative order. Repeated ids count once.
    """
    for project_id in project_ids:
        if project_id not in workspace.projects:
            raise NotFound("project", project_id)

    listed = list(dict.fromkeys(project_ids))
    ordered = [workspace.projects[project_id] for project_id in listed]
    ordered += [p for p in by_order(workspace.projects) if p.id not in listed]
    reindex(ordered)


def project_summary(project: Node) -> tuple[int, int]:
    """Return (column_count, card_count) for a project."""
    return len(project.columns), sum(len(col.cards) for col in project.columns)
