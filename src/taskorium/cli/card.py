"""Handlers for 'taskorium card' commands."""

import sys

from taskorium.cli._common import (
    error,
    find_or_die,
    gap_index,
    open_session_or_die,
    output_json,
    output_result,
    sid,
)
from taskorium.model.snapshot import card_to_dict
from taskorium.model.subtask import subtask_progress


def card_list(args) -> int:
    """List a column's cards in order."""
    session = open_session_or_die(args.store, args.json)
    col = find_or_die(session, "column", args.column, args.json)

    items = []
    for card in session.list_cards_sorted(col.id):
        done, total = subtask_progress(card)
        items.append({"id": card.id, "title": card.title, "subtasks": {"done": done, "total": total}})

    if args.json:
        output_json(items)
    else:
        for c in items:
            progress = f"  [{c['subtasks']['done']}/{c['subtasks']['total']}]" if c["subtasks"]["total"] else ""
            print(f"{c['id'][:8]}  {c['title']}{progress}")

    return 0


def card_get(args) -> int:
    """Show a card with its subtasks."""
    session = open_session_or_die(args.store, args.json)
    card = find_or_die(session, "card", args.id, args.json)

    if args.json:
        output_json(card_to_dict(card))
        return 0

    print(card.title)
    if card.body:
        print()
        sys.stdout.write(card.body if card.body.endswith("\n") else card.body + "\n")
    subtasks = session.list_subtasks(card.id)
    if subtasks:
        print()
        for subtask in subtasks:
            mark = "x" if subtask.completed else " "
            print(f"[{mark}] {sid(subtask)}  {subtask.title}")

    return 0


def card_add(args) -> int:
    """Append a card to a column."""
    session = open_session_or_die(args.store, args.json)
    col = find_or_die(session, "column", args.column, args.json)

    try:
        card = session.create_card(col.id, args.title, args.body, args.subtask)
    except ValueError as e:
        error(str(e), args.json)

    output_result(
        {"id": card.id, "title": card.title, "column": {"id": col.id, "name": col.name}},
        f"Created card {sid(card)} in {col.name}",
        args.json,
    )
    return 0


def card_edit(args) -> int:
    """Change a card's title or body."""
    session = open_session_or_die(args.store, args.json)
    card = find_or_die(session, "card", args.id, args.json)

    try:
        session.edit_card(card.id, args.title, args.body)
    except ValueError as e:
        error(str(e), args.json)

    output_result({"id": card.id, "title": card.title}, f"Updated card {sid(card)}", args.json)
    return 0


def card_move(args) -> int:
    """Move a card to a column, optionally at a position."""
    session = open_session_or_die(args.store, args.json)
    card = find_or_die(session, "card", args.id, args.json)
    target = find_or_die(session, "column", args.column, args.json)

    if args.position is None:
        index = len(target.cards)
    else:
        index = gap_index(target.cards, card, args.position)
    session.move_card(card.id, target.id, index)

    output_result(
        {
            "id": card.id,
            "column": {"id": target.id, "name": target.name},
            "position": card.order + 1,
        },
        f"Moved card {sid(card)} to {target.name} at position {card.order + 1}",
        args.json,
    )
    return 0


def card_delete(args) -> int:
    """Delete a card and its subtasks."""
    session = open_session_or_die(args.store, args.json)
    card = find_or_die(session, "card", args.id, args.json)

    session.delete_card(card.id)

    output_result({"id": card.id, "title": card.title}, f'Deleted card "{card.title}"', args.json)
    return 0
