"""Tests for column mutation operations."""

import pytest

from taskorium.model.card import create_card
from taskorium.model.column import (
    create_column,
    delete_column,
    move_column,
    reflow_target,
    rename_column,
)
from taskorium.model.errors import NotFound
from taskorium.model.order import by_order
from taskorium.model.project import create_project
from taskorium.model.workspace import iter_ids


def test_create_column_appends(project, column_names):
    col = create_column(project, "Review")
    assert col.order == 3
    assert col.project_id == project.id
    assert len(col.cards) == 0
    assert column_names(project) == ["To Do", "In Progress", "Done", "Review"]


def test_rename_column(workspace, columns):
    rename_column(workspace, columns[1].id, "Doing")
    assert columns[1].name == "Doing"


def test_blank_column_name_rejected(workspace, project, columns, column_names):
    with pytest.raises(ValueError):
        create_column(project, "")
    with pytest.raises(ValueError):
        rename_column(workspace, columns[0].id, "  ")
    assert column_names(project) == ["To Do", "In Progress", "Done"]


def test_rename_unknown_column(workspace, project):
    with pytest.raises(NotFound):
        rename_column(workspace, "nope", "Doing")


def test_move_column_to_front(workspace, project, columns, column_names, dense):
    move_column(workspace, columns[2].id, 0)
    assert column_names(project) == ["Done", "To Do", "In Progress"]
    dense(workspace)


def test_move_column_to_end(workspace, project, columns, column_names):
    move_column(workspace, columns[0].id, 3)
    assert column_names(project) == ["In Progress", "Done", "To Do"]


def test_move_column_clamps(workspace, project, columns, column_names):
    move_column(workspace, columns[1].id, -1)
    assert column_names(project) == ["In Progress", "To Do", "Done"]
    move_column(workspace, columns[1].id, 40)
    assert column_names(project) == ["To Do", "Done", "In Progress"]


def test_move_column_keeps_cards(workspace, columns, card_titles):
    todo = columns[0]
    move_column(workspace, todo.id, 2)
    assert card_titles(todo) == ["X", "Y", "Z"]


def test_reflow_target_is_lowest_order_survivor(workspace, project, columns):
    todo, doing, done = columns
    assert reflow_target(project, doing.id) is todo
    assert reflow_target(project, todo.id) is doing
    move_column(workspace, done.id, 0)
    assert reflow_target(project, todo.id) is done


def test_delete_empty_column(workspace, project, columns, column_names, dense):
    target = delete_column(workspace, columns[1].id)
    assert target is columns[0]
    assert column_names(project) == ["To Do", "Done"]
    assert [c.order for c in by_order(project.columns)] == [0, 1]
    dense(workspace)


def test_delete_column_reflows_cards(workspace, card_titles, dense):
    project = create_project(workspace, "Gemini")
    todo, doing, _ = by_order(project.columns)
    create_card(todo, "R")
    create_card(doing, "P")
    create_card(doing, "Q")

    delete_column(workspace, doing.id)

    assert card_titles(todo) == ["R", "P", "Q"]
    assert [c.order for c in by_order(todo.cards)] == [0, 1, 2]
    assert all(c.column_id == todo.id for c in todo.cards)
    assert doing.id not in project.columns
    dense(workspace)


def test_delete_column_reflow_count(workspace, project, columns, card_titles):
    todo, doing, _ = columns
    create_card(doing, "P")
    create_card(doing, "Q")
    delete_column(workspace, todo.id)
    assert len(doing.cards) == 5
    assert card_titles(doing) == ["P", "Q", "X", "Y", "Z"]


def test_delete_first_column_uses_next(workspace, project, columns, column_names):
    todo, doing, _ = columns
    target = delete_column(workspace, todo.id)
    assert target is doing
    assert column_names(project) == ["In Progress", "Done"]


def test_delete_last_column_cascades(workspace, project, columns):
    todo, doing, done = columns
    delete_column(workspace, doing.id)
    delete_column(workspace, done.id)
    assert len(todo.cards) == 3

    target = delete_column(workspace, todo.id)

    assert target is None
    assert len(project.columns) == 0
    assert list(iter_ids(workspace, "card")) == []


def test_delete_unknown_column(workspace, project):
    with pytest.raises(NotFound):
        delete_column(workspace, "nope")
    assert len(project.columns) == 3
