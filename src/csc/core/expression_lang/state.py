"""
Evaluation state: named constants and mutable variables.

Constants and variables are kept in two separate mappings. Reads check
constants first; writes are rejected when the name is a constant, so a
constant name can never become a variable.

A State is not safe for concurrent mutation. Use one per session.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from types import MappingProxyType

from csc.core.errors import CannotChangeConstantError, VariableNotFoundError

logger = logging.getLogger(__name__)

CONSTANTS: Mapping[str, float] = MappingProxyType(
    {
        "PI": math.pi,
        "TAU": math.tau,
        "E": math.e,
    }
)


class State:
    """Constants and variables visible to one evaluation session."""

    def __init__(self) -> None:
        self.constants: Mapping[str, float] = CONSTANTS
        self.variables: dict[str, float] = {}

    def value_of(self, name: str) -> float | None:
        """Current value of a name, or None if it is unbound."""
        if name in self.constants:
            return self.constants[name]
        return self.variables.get(name)

    def lookup(self, name: str) -> float:
        """Current value of a name.

        Raises:
            VariableNotFoundError: If the name is neither a constant nor
                an assigned variable.
        """
        value = self.value_of(name)
        if value is None:
            raise VariableNotFoundError(name)
        return value

    def assign(self, name: str, value: float) -> None:
        """Bind a variable.

        Raises:
            CannotChangeConstantError: If the name is a constant.
        """
        if name in self.constants:
            raise CannotChangeConstantError(name)
        self.variables[name] = value
        logger.debug(f"Assigned {name} = {value!r}")

    def __contains__(self, name: object) -> bool:
        return name in self.constants or name in self.variables

    def __repr__(self) -> str:
        return f"State(variables={self.variables!r})"
