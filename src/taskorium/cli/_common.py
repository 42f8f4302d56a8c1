"""Shared helpers for CLI command handlers."""

import json
import logging
import sys

from taskorium.ids import resolve_prefix, short_id
from taskorium.model.node import Node
from taskorium.model.order import by_order
from taskorium.model.workspace import (
    find_card,
    find_column,
    find_project,
    find_subtask,
    iter_ids,
)
from taskorium.session import Session

_FINDERS = {
    "project": find_project,
    "column": find_column,
    "card": find_card,
    "subtask": find_subtask,
}


def setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        format="%(asctime)s %(levelname)s %(message)s",
        stream=sys.stderr,
        level=logging.INFO if verbose else logging.WARNING,
    )


def open_session_or_die(store: str, json_mode: bool) -> Session:
    """Open a session on the store file. Exit 1 with message if unreadable."""
    try:
        return Session(store)
    except ValueError as e:
        error(str(e), json_mode)


def find_or_die(session: Session, kind: str, id_prefix: str, json_mode: bool) -> Node:
    """Look up an entity by id or unambiguous id prefix. Exit 1 if not found."""
    entity_id = resolve_prefix(id_prefix, iter_ids(session.workspace, kind))
    if entity_id is None:
        error(f"{kind.capitalize()} '{id_prefix}' not found.", json_mode)
    return _FINDERS[kind](session.workspace, entity_id)


def gap_index(siblings, item: Node, position: int) -> int:
    """Turn a 1-indexed final position into a drop index for the move commands.

    siblings is the destination collection, which may or may not hold item.
    """
    index = position - 1
    ordered = by_order(siblings)
    if item in ordered and index > ordered.index(item):
        index += 1
    return index


def output_json(data: dict | list) -> None:
    """Write JSON to stdout."""
    print(json.dumps(data, indent=2))


def output_result(data: dict, text: str, json_mode: bool) -> None:
    """Output mutation result as JSON or plain text."""
    if json_mode:
        output_json(data)
    else:
        print(text)


def error(message: str, json_mode: bool) -> None:
    """Print error to stderr and exit 1."""
    if json_mode:
        print(json.dumps({"error": message}), file=sys.stderr)
    else:
        print(f"error: {message}", file=sys.stderr)
    sys.exit(1)


def plural(count: int, word: str) -> str:
    return f"{count} {word}" if count == 1 else f"{count} {word}s"


def sid(node: Node) -> str:
    return short_id(node.id)
