"""Shared pytest fixtures for CSC tests."""

import pytest

from csc.core.expression_lang import State


@pytest.fixture
def state() -> State:
    """Return a fresh evaluation state."""
    return State()
