"""Handlers for 'taskorium column' commands."""

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


def column_list(args) -> int:
    """List a project's columns in order."""
    session = open_session_or_die(args.store, args.json)
    project = find_or_die(session, "project", args.project, args.json)

    items = [
        {"id": col.id, "name": col.name, "position": col.order + 1, "cards": len(col.cards)}
        for col in session.list_columns_sorted(project.id)
    ]

    if args.json:
        output_json(items)
    else:
        for c in items:
            print(f"{c['id'][:8]}  {c['name']:<16} {plural(c['cards'], 'card')}")

    return 0


def column_add(args) -> int:
    """Append a column to a project."""
    session = open_session_or_die(args.store, args.json)
    project = find_or_die(session, "project", args.project, args.json)

    try:
        col = session.create_column(project.id, args.name)
    except ValueError as e:
        error(str(e), args.json)

    output_result(
        {"id": col.id, "name": col.name, "project": project.id, "position": col.order + 1},
        f'Created column "{col.name}" in {project.name} ({sid(col)})',
        args.json,
    )
    return 0


def column_rename(args) -> int:
    """Rename a column."""
    session = open_session_or_die(args.store, args.json)
    col = find_or_die(session, "column", args.id, args.json)

    old_name = col.name
    try:
        session.rename_column(col.id, args.new_name)
    except ValueError as e:
        error(str(e), args.json)

    output_result(
        {"id": col.id, "old_name": old_name, "new_name": col.name},
        f'Renamed column "{old_name}" to "{col.name}"',
        args.json,
    )
    return 0


def column_move(args) -> int:
    """Move a column to a new position in its project."""
    session = open_session_or_die(args.store, args.json)
    col = find_or_die(session, "column", args.id, args.json)
    project = session.workspace.projects[col.project_id]

    session.move_column(col.id, gap_index(project.columns, col, args.position))

    output_result(
        {"id": col.id, "name": col.name, "position": col.order + 1},
        f'Moved column "{col.name}" to position {col.order + 1}',
        args.json,
    )
    return 0


def column_delete(args) -> int:
    """Delete a column. Its cards move to the first remaining column."""
    session = open_session_or_die(args.store, args.json)
    col = find_or_die(session, "column", args.id, args.json)
    count = len(col.cards)

    target = session.delete_column(col.id)

    data = {"id": col.id, "name": col.name, "cards": count}
    if target is not None:
        data["moved_to"] = {"id": target.id, "name": target.name}
        text = f'Deleted column "{col.name}"; moved {plural(count, "card")} to "{target.name}"'
    else:
        text = f'Deleted column "{col.name}" and {plural(count, "card")}'
    output_result(data, text, args.json)
    return 0
