"""CLI argument parser and dispatch for taskorium."""

import argparse

from taskorium.cli.card import card_add, card_delete, card_edit, card_get, card_list, card_move
from taskorium.cli.column import column_add, column_delete, column_list, column_move, column_rename
from taskorium.cli.project import (
    project_add,
    project_delete,
    project_edit,
    project_list,
    project_move,
    project_reorder,
    project_show,
)
from taskorium.cli.subtask import subtask_add, subtask_delete, subtask_rename, subtask_toggle
from taskorium.model.project import THEMES

DEFAULT_STORE = "taskorium.yaml"


def _add_common_options(parser: argparse.ArgumentParser, store_default, flag_default) -> None:
    parser.add_argument("--store", default=store_default, help=f"Workspace file (default: {DEFAULT_STORE})")
    parser.add_argument("--json", action="store_true", default=flag_default, help="Machine-readable JSON output")
    parser.add_argument(
        "-v", "--verbose", action="store_true", default=flag_default, help="Log progress to stderr"
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the full CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="taskorium",
        description="Projects, columns, cards and subtasks",
    )
    _add_common_options(parser, DEFAULT_STORE, False)

    # Subcommands repeat the options with suppressed defaults, so a value
    # given before the noun is not reset by the subcommand.
    common = argparse.ArgumentParser(add_help=False)
    _add_common_options(common, argparse.SUPPRESS, argparse.SUPPRESS)

    nouns = parser.add_subparsers(dest="noun")

    # --- project ---
    project_p = nouns.add_parser("project", help="Project operations", parents=[common])
    project_verbs = project_p.add_subparsers(dest="verb")

    project_list_p = project_verbs.add_parser("list", help="List projects", parents=[common])
    project_list_p.set_defaults(func=project_list)

    project_show_p = project_verbs.add_parser("show", help="Show a project's board", parents=[common])
    project_show_p.add_argument("id", help="Project ID or prefix")
    project_show_p.set_defaults(func=project_show)

    project_add_p = project_verbs.add_parser("add", help="Create a project", parents=[common])
    project_add_p.add_argument("name", help="Project name")
    project_add_p.add_argument("--description", default="", help="Free-text description")
    project_add_p.add_argument("--theme", choices=THEMES, help="Theme (default: earth)")
    project_add_p.set_defaults(func=project_add)

    project_edit_p = project_verbs.add_parser("edit", help="Edit a project", parents=[common])
    project_edit_p.add_argument("id", help="Project ID or prefix")
    project_edit_p.add_argument("--name", help="New name")
    project_edit_p.add_argument("--description", help="New description")
    project_edit_p.add_argument("--theme", choices=THEMES, help="New theme")
    project_edit_p.set_defaults(func=project_edit)

    project_move_p = project_verbs.add_parser("move", help="Move a project", parents=[common])
    project_move_p.add_argument("id", help="Project ID or prefix")
    project_move_p.add_argument("--position", type=int, required=True, help="New position (1-indexed)")
    project_move_p.set_defaults(func=project_move)

    project_reorder_p = project_verbs.add_parser("reorder", help="Reorder projects", parents=[common])
    project_reorder_p.add_argument("ids", nargs="+", help="Project IDs in the new order")
    project_reorder_p.set_defaults(func=project_reorder)

    project_delete_p = project_verbs.add_parser("delete", help="Delete a project", parents=[common])
    project_delete_p.add_argument("id", help="Project ID or prefix")
    project_delete_p.set_defaults(func=project_delete)

    # project with no verb = list
    project_p.set_defaults(func=project_list)

    # --- column ---
    col_p = nouns.add_parser("column", help="Column operations", parents=[common])
    col_verbs = col_p.add_subparsers(dest="verb")

    col_list_p = col_verbs.add_parser("list", help="List a project's columns", parents=[common])
    col_list_p.add_argument("project", help="Project ID or prefix")
    col_list_p.set_defaults(func=column_list)

    col_add_p = col_verbs.add_parser("add", help="Create a column", parents=[common])
    col_add_p.add_argument("project", help="Project ID or prefix")
    col_add_p.add_argument("name", help="Column name")
    col_add_p.set_defaults(func=column_add)

    col_rename_p = col_verbs.add_parser("rename", help="Rename a column", parents=[common])
    col_rename_p.add_argument("id", help="Column ID or prefix")
    col_rename_p.add_argument("new_name", help="New column name")
    col_rename_p.set_defaults(func=column_rename)

    col_move_p = col_verbs.add_parser("move", help="Move a column", parents=[common])
    col_move_p.add_argument("id", help="Column ID or prefix")
    col_move_p.add_argument("--position", type=int, required=True, help="New position (1-indexed)")
    col_move_p.set_defaults(func=column_move)

    col_delete_p = col_verbs.add_parser("delete", help="Delete a column", parents=[common])
    col_delete_p.add_argument("id", help="Column ID or prefix")
    col_delete_p.set_defaults(func=column_delete)

    # --- card ---
    card_p = nouns.add_parser("card", help="Card operations", parents=[common])
    card_verbs = card_p.add_subparsers(dest="verb")

    card_list_p = card_verbs.add_parser("list", help="List a column's cards", parents=[common])
    card_list_p.add_argument("column", help="Column ID or prefix")
    card_list_p.set_defaults(func=card_list)

    card_get_p = card_verbs.add_parser("get", help="Show a card", parents=[common])
    card_get_p.add_argument("id", help="Card ID or prefix")
    card_get_p.set_defaults(func=card_get)

    card_add_p = card_verbs.add_parser("add", help="Create a card", parents=[common])
    card_add_p.add_argument("column", help="Column ID or prefix")
    card_add_p.add_argument("title", help="Card title")
    card_add_p.add_argument("--body", default="", help="Card body text")
    card_add_p.add_argument("--subtask", action="append", default=[], help="Subtask title (repeatable)")
    card_add_p.set_defaults(func=card_add)

    card_edit_p = card_verbs.add_parser("edit", help="Edit a card", parents=[common])
    card_edit_p.add_argument("id", help="Card ID or prefix")
    card_edit_p.add_argument("--title", help="New title")
    card_edit_p.add_argument("--body", help="New body text")
    card_edit_p.set_defaults(func=card_edit)

    card_move_p = card_verbs.add_parser("move", help="Move a card", parents=[common])
    card_move_p.add_argument("id", help="Card ID or prefix")
    card_move_p.add_argument("--column", dest="column", required=True, help="Target column ID or prefix")
    card_move_p.add_argument("--position", type=int, help="Position in column (1-indexed)")
    card_move_p.set_defaults(func=card_move)

    card_delete_p = card_verbs.add_parser("delete", help="Delete a card", parents=[common])
    card_delete_p.add_argument("id", help="Card ID or prefix")
    card_delete_p.set_defaults(func=card_delete)

    # --- subtask ---
    sub_p = nouns.add_parser("subtask", help="Subtask operations", parents=[common])
    sub_verbs = sub_p.add_subparsers(dest="verb")

    sub_add_p = sub_verbs.add_parser("add", help="Add a subtask", parents=[common])
    sub_add_p.add_argument("card", help="Card ID or prefix")
    sub_add_p.add_argument("title", help="Subtask title")
    sub_add_p.set_defaults(func=subtask_add)

    sub_toggle_p = sub_verbs.add_parser("toggle", help="Toggle a subtask done", parents=[common])
    sub_toggle_p.add_argument("id", help="Subtask ID or prefix")
    sub_toggle_p.set_defaults(func=subtask_toggle)

    sub_rename_p = sub_verbs.add_parser("rename", help="Rename a subtask", parents=[common])
    sub_rename_p.add_argument("id", help="Subtask ID or prefix")
    sub_rename_p.add_argument("title", help="New title")
    sub_rename_p.set_defaults(func=subtask_rename)

    sub_delete_p = sub_verbs.add_parser("delete", help="Delete a subtask", parents=[common])
    sub_delete_p.add_argument("id", help="Subtask ID or prefix")
    sub_delete_p.set_defaults(func=subtask_delete)

    return parser
