"""Shared fixtures for game tests."""

import pytest

from zuul.game.world import Actor, Item, Room


@pytest.fixture
def kitchen():
    """An empty, ordinary room."""
    return Room("a kitchen")


@pytest.fixture
def hallway():
    """A second empty room."""
    return Room("in a hallway")


@pytest.fixture
def apples():
    """A plural item without a description."""
    return Item(name="apples", count=3, weight=0.2)


@pytest.fixture
def sword():
    """A singular item with a description."""
    return Item(name="sword", count=1, weight=3.5, description="shiny")


@pytest.fixture
def goblin():
    """An actor with a description."""
    return Actor(name="Goblin", description="It looks hungry.")
