"""Tests for card mutation operations."""

import pytest

from taskorium.model.card import create_card, delete_card, edit_card, move_card
from taskorium.model.errors import NotFound
from taskorium.model.order import by_order
from taskorium.model.snapshot import workspace_to_dict


def _card(column, title):
    return next(c for c in column.cards if c.title == title)


def test_create_card_appends(columns):
    todo, doing, _ = columns
    card = create_card(doing, "New", "Body")
    assert card.order == 0
    assert card.column_id == doing.id
    assert card.body == "Body"
    second = create_card(doing, "Newer")
    assert second.order == 1


def test_create_card_does_not_touch_siblings(columns):
    todo, _, _ = columns
    before = [(c.id, c.order) for c in todo.cards]
    create_card(todo, "W")
    assert [(c.id, c.order) for c in todo.cards][:3] == before


def test_create_card_with_subtasks(columns):
    todo, _, _ = columns
    card = create_card(todo, "Launch", subtasks=["fuel", "  ", " count down "])
    assert [s.title for s in card.subtasks] == ["fuel", "count down"]


def test_blank_card_title_rejected(workspace, columns, card_titles):
    todo, _, _ = columns
    with pytest.raises(ValueError, match="card title cannot be empty"):
        create_card(todo, " ")
    with pytest.raises(ValueError):
        edit_card(workspace, _card(todo, "X").id, title="", body="ignored")
    assert card_titles(todo) == ["X", "Y", "Z"]
    assert _card(todo, "X").body == ""


def test_edit_card(workspace, columns):
    card = _card(columns[0], "X")
    edit_card(workspace, card.id, title="X2")
    assert card.title == "X2"
    assert card.body == ""
    edit_card(workspace, card.id, body="details")
    assert card.title == "X2"
    assert card.body == "details"


def test_delete_card_closes_gap(workspace, columns, card_titles, dense):
    todo = columns[0]
    delete_card(workspace, _card(todo, "Y").id)
    assert card_titles(todo) == ["X", "Z"]
    assert [c.order for c in by_order(todo.cards)] == [0, 1]
    dense(workspace)


def test_move_within_column_up(workspace, columns, card_titles, dense):
    todo = columns[0]
    move_card(workspace, _card(todo, "Y").id, todo.id, 0)
    assert card_titles(todo) == ["Y", "X", "Z"]
    dense(workspace)


def test_move_within_column_down(workspace, columns, card_titles):
    todo = columns[0]
    # dropped in front of Z, measured with X still in place
    move_card(workspace, _card(todo, "X").id, todo.id, 2)
    assert card_titles(todo) == ["Y", "X", "Z"]


def test_move_within_column_to_end(workspace, columns, card_titles):
    todo = columns[0]
    move_card(workspace, _card(todo, "X").id, todo.id, 3)
    assert card_titles(todo) == ["Y", "Z", "X"]


@pytest.mark.parametrize("index", [1, 2])
def test_move_to_own_slot_is_noop(workspace, columns, card_titles, index):
    todo = columns[0]
    move_card(workspace, _card(todo, "Y").id, todo.id, index)
    assert card_titles(todo) == ["X", "Y", "Z"]


def test_move_across_columns(workspace, columns, card_titles, dense):
    todo, doing, _ = columns
    z = create_card(doing, "Q")
    x = _card(todo, "X")
    move_card(workspace, x.id, doing.id, 0)
    assert card_titles(todo) == ["Y", "Z"]
    assert card_titles(doing) == ["X", "Q"]
    assert x.column_id == doing.id
    assert x.id not in todo.cards
    assert z.order == 1
    dense(workspace)


def test_move_across_columns_two_by_one(workspace, columns, card_titles):
    todo, doing, _ = columns
    delete_card(workspace, _card(todo, "Z").id)
    create_card(doing, "Z")
    move_card(workspace, _card(todo, "X").id, doing.id, 0)
    assert card_titles(todo) == ["Y"]
    assert card_titles(doing) == ["X", "Z"]
    assert [c.order for c in by_order(doing.cards)] == [0, 1]


def test_move_into_empty_column(workspace, columns, card_titles):
    todo, _, done = columns
    move_card(workspace, _card(todo, "Z").id, done.id, 5)
    assert card_titles(done) == ["Z"]
    assert _card(done, "Z").order == 0


@pytest.mark.parametrize("index,expected", [(-4, ["Y", "Q"]), (99, ["Q", "Y"])])
def test_move_clamps_index(workspace, columns, card_titles, index, expected):
    todo, doing, _ = columns
    create_card(doing, "Q")
    move_card(workspace, _card(todo, "Y").id, doing.id, index)
    assert card_titles(doing) == expected


def test_move_round_trip(workspace, columns, card_titles):
    todo, doing, _ = columns
    create_card(doing, "P")
    create_card(doing, "Q")
    y = _card(todo, "Y")
    original = y.order

    move_card(workspace, y.id, doing.id, 1)
    assert card_titles(doing) == ["P", "Y", "Q"]
    move_card(workspace, y.id, todo.id, original)

    assert card_titles(todo) == ["X", "Y", "Z"]
    assert card_titles(doing) == ["P", "Q"]


def test_move_unknown_card_changes_nothing(workspace, columns):
    before = workspace_to_dict(workspace)
    with pytest.raises(NotFound) as exc:
        move_card(workspace, "nope", columns[1].id, 0)
    assert exc.value.kind == "card"
    assert workspace_to_dict(workspace) == before


def test_move_to_unknown_column_changes_nothing(workspace, columns):
    before = workspace_to_dict(workspace)
    with pytest.raises(NotFound):
        move_card(workspace, _card(columns[0], "X").id, "nope", 0)
    assert workspace_to_dict(workspace) == before


def test_move_keeps_subtasks(workspace, columns):
    todo, doing, _ = columns
    card = create_card(todo, "With subtasks", subtasks=["a", "b"])
    move_card(workspace, card.id, doing.id, 0)
    assert [s.title for s in doing.cards[card.id].subtasks] == ["a", "b"]
