"""Handlers for 'taskorium project' commands."""

from taskorium.cli._common import (
    error,
    find_or_die,
    gap_index,
    open_session_or_die,
    output_json,
    output_result,
    plural,
    sid,
)
from taskorium.model.project import project_summary, theme_display_name
from taskorium.model.snapshot import project_to_dict


def _summary(project) -> dict:
    columns, cards = project_summary(project)
    return {
        "id": project.id,
        "name": project.name,
        "theme": project.theme,
        "columns": columns,
        "cards": cards,
    }


def project_list(args) -> int:
    """List projects in order."""
    session = open_session_or_die(args.store, args.json)
    items = [_summary(p) for p in session.list_projects_sorted()]

    if args.json:
        output_json(items)
    else:
        for p in items:
            theme = theme_display_name(p["theme"])
            print(
                f"{p['id'][:8]}  {p['name']:<20} {theme:<8} "
                f"{plural(p['columns'], 'column')}, {plural(p['cards'], 'card')}"
            )

    return 0


def project_show(args) -> int:
    """Show a project with its columns and cards."""
    session = open_session_or_die(args.store, args.json)
    project = find_or_die(session, "project", args.id, args.json)

    if args.json:
        output_json(project_to_dict(project))
        return 0

    print(f"{project.name} ({theme_display_name(project.theme)})")
    if project.description:
        print(project.description)
    for col in session.list_columns_sorted(project.id):
        print(f"  {sid(col)}  {col.name}")
        for card in session.list_cards_sorted(col.id):
            print(f"    {sid(card)}  {card.title}")

    return 0


def project_add(args) -> int:
    """Create a project with the default columns."""
    session = open_session_or_die(args.store, args.json)
    try:
        project = session.create_project(args.name, args.description, args.theme)
    except ValueError as e:
        error(str(e), args.json)

    output_result(
        {"id": project.id, "name": project.name, "theme": project.theme},
        f'Created project "{project.name}" ({sid(project)})',
        args.json,
    )
    return 0


def project_edit(args) -> int:
    """Change a project's name, description or theme."""
    session = open_session_or_die(args.store, args.json)
    project = find_or_die(session, "project", args.id, args.json)
    try:
        session.edit_project(project.id, args.name, args.description, args.theme)
    except ValueError as e:
        error(str(e), args.json)

    output_result(
        {"id": project.id, "name": project.name, "description": project.description, "theme": project.theme},
        f'Updated project "{project.name}"',
        args.json,
    )
    return 0


def project_move(args) -> int:
    """Move a project to a new position."""
    session = open_session_or_die(args.store, args.json)
    project = find_or_die(session, "project", args.id, args.json)

    session.move_project(project.id, gap_index(session.workspace.projects, project, args.position))

    output_result(
        {"id": project.id, "name": project.name, "position": project.order + 1},
        f'Moved project "{project.name}" to position {project.order + 1}',
        args.json,
    )
    return 0


def project_reorder(args) -> int:
    """Put projects in the order given on the command line."""
    session = open_session_or_die(args.store, args.json)
    ids = [find_or_die(session, "project", prefix, args.json).id for prefix in args.ids]

    session.reorder_projects(ids)

    names = [p.name for p in session.list_projects_sorted()]
    output_result({"order": [p.id for p in session.list_projects_sorted()]}, "Order: " + ", ".join(names), args.json)
    return 0


def project_delete(args) -> int:
    """Delete a project and everything in it."""
    session = open_session_or_die(args.store, args.json)
    project = find_or_die(session, "project", args.id, args.json)
    columns, cards = project_summary(project)

    session.delete_project(project.id)

    output_result(
        {"id": project.id, "name": project.name, "columns": columns, "cards": cards},
        f'Deleted project "{project.name}" ({plural(columns, "column")}, {plural(cards, "card")})',
        args.json,
    )
    return 0
