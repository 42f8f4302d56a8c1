"""Shared fixtures for taskorium tests."""

import pytest

from taskorium.model.card import create_card
from taskorium.model.order import by_order, is_dense
from taskorium.model.project import create_project
from taskorium.model.workspace import new_workspace


def assert_tree_dense(workspace):
    """Every sibling set in the workspace has order values 0..N-1."""
    assert is_dense(workspace.projects)
    for project in workspace.projects:
        assert is_dense(project.columns)
        for column in project.columns:
            assert column.project_id == project.id
            assert is_dense(column.cards)
            for card in column.cards:
                assert card.column_id == column.id


def titles(column):
    return [card.title for card in by_order(column.cards)]


def names(project):
    return [col.name for col in by_order(project.columns)]


@pytest.fixture
def dense():
    return assert_tree_dense


@pytest.fixture
def card_titles():
    return titles


@pytest.fixture
def column_names():
    return names


@pytest.fixture
def workspace():
    return new_workspace()


@pytest.fixture
def project(workspace):
    """A project with the default columns; "To Do" holds X, Y, Z."""
    project = create_project(workspace, "Apollo", "Moon shot", "mars")
    todo = by_order(project.columns)[0]
    for title in ("X", "Y", "Z"):
        create_card(todo, title)
    return project


@pytest.fixture
def columns(project):
    """The project's columns as (todo, doing, done)."""
    return tuple(by_order(project.columns))
