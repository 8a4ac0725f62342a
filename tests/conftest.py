"""Pytest configuration and fixtures."""


import pytest

from orchard.basket import FruitBasket
from orchard.fruits import Apple, Banana, Orange
from orchard.notices import NoticeLog


@pytest.fixture
def notices():
    """In-memory notice log shared by the fruit and basket under test."""
    return NoticeLog()


@pytest.fixture
def granny_smith(notices):
    return Apple("Granny Smith", "green", 150.0, "Washington", notices)


@pytest.fixture
def valencia(notices):
    return Orange("orange", 220.0, "Florida", True, notices)


@pytest.fixture
def banana(notices):
    return Banana(100.0, "Test", notices)


@pytest.fixture
def basket(notices):
    """Empty basket owned by Alice."""
    return FruitBasket("Alice", notices)
