"""Tests for the evaluation state."""

from __future__ import annotations

import math

import pytest

from csc.core.errors import CannotChangeConstantError, VariableNotFoundError
from csc.core.expression_lang.state import CONSTANTS, State


class TestState:
    """Constants are fixed; variables are per-state."""

    def test_constants(self, state: State) -> None:
        assert dict(state.constants) == {"PI": math.pi, "TAU": math.tau, "E": math.e}

    def test_starts_without_variables(self, state: State) -> None:
        assert state.variables == {}

    def test_value_of_unbound(self, state: State) -> None:
        assert state.value_of("x") is None

    def test_assign_and_lookup(self, state: State) -> None:
        state.assign("x", 1.5)
        assert state.lookup("x") == 1.5
        assert "x" in state

    def test_lookup_unbound(self, state: State) -> None:
        with pytest.raises(VariableNotFoundError):
            state.lookup("x")

    def test_assign_constant(self, state: State) -> None:
        with pytest.raises(CannotChangeConstantError) as exc_info:
            state.assign("PI", 3.0)
        assert exc_info.value.name == "PI"
        assert "PI" not in state.variables

    def test_constants_mapping_is_read_only(self) -> None:
        with pytest.raises(TypeError):
            CONSTANTS["PI"] = 3.0  # type: ignore[index]

    def test_states_are_independent(self) -> None:
        a, b = State(), State()
        a.assign("x", 1.0)
        assert "x" not in b

    def test_repr(self, state: State) -> None:
        state.assign("x", 2.0)
        assert repr(state) == "State(variables={'x': 2.0})"
