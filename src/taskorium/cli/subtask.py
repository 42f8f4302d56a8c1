"""Handlers for 'taskorium subtask' commands."""

from taskorium.cli._common import find_or_die, open_session_or_die, output_result, sid


def subtask_add(args) -> int:
    """Add a subtask to a card."""
    session = open_session_or_die(args.store, args.json)
    card = find_or_die(session, "card", args.card, args.json)

    subtask = session.create_subtask(card.id, args.title)

    output_result(
        {"id": subtask.id, "title": subtask.title, "card": card.id},
        f'Added subtask {sid(subtask)} to "{card.title}"',
        args.json,
    )
    return 0


def subtask_toggle(args) -> int:
    """Mark a subtask done, or not done."""
    session = open_session_or_die(args.store, args.json)
    subtask = find_or_die(session, "subtask", args.id, args.json)

    session.toggle_subtask(subtask.id)

    state = "done" if subtask.completed else "not done"
    output_result(
        {"id": subtask.id, "completed": subtask.completed},
        f'Subtask "{subtask.title}" is {state}',
        args.json,
    )
    return 0


def subtask_rename(args) -> int:
    session = open_session_or_die(args.store, args.json)
    subtask = find_or_die(session, "subtask", args.id, args.json)

    session.rename_subtask(subtask.id, args.title)

    output_result({"id": subtask.id, "title": subtask.title}, f'Renamed subtask to "{subtask.title}"', args.json)
    return 0


def subtask_delete(args) -> int:
    session = open_session_or_die(args.store, args.json)
    subtask = find_or_die(session, "subtask", args.id, args.json)

    session.delete_subtask(subtask.id)

    output_result({"id": subtask.id, "title": subtask.title}, f'Deleted subtask "{subtask.title}"', args.json)
    return 0
