"""Shared fixtures for CLI tests."""

import pytest

from taskorium.session import Session


@pytest.fixture
def initialized_store(tmp_path):
    """A store with one project (3 columns) and two cards in "To Do".

    Returns (path, ids) where ids maps names to entity ids.
    """
    path = tmp_path / "taskorium.yaml"
    session = Session(path)
    project = session.create_project("Apollo", "Moon shot", "mars")
    todo, doing, done = session.list_columns_sorted(project.id)
    first = session.create_card(todo.id, "First card", "Description one.", ["Fuel", "Count down"])
    second = session.create_card(todo.id, "Second card", "Description two.")
    ids = {
        "project": project.id,
        "todo": todo.id,
        "doing": doing.id,
        "done": done.id,
        "first": first.id,
        "second": second.id,
        "fuel": session.list_subtasks(first.id)[0].id,
    }
    return path, ids
