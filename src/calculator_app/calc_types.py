"""
=============================================================================
MODULE NAME: calc_types.py
=============================================================================

INPUT FILES:
- None (utility dataclasses only).

OUTPUT FILES:
- None written directly; snapshots feed the presenter and the JSON API.

NOTES:
- Defines the closed event vocabulary consumed by the calculator engine.
- Snapshots are frozen copies; the engine's live state is never handed out.
=============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union


class OperatorKind(Enum):
    """Binary operators with their display symbols."""

    ADD = "+"
    SUBTRACT = "−"
    MULTIPLY = "×"
    DIVIDE = "÷"

    @property
    def symbol(self) -> str:
        return self.value

    @classmethod
    def from_ascii(cls, text: str) -> "OperatorKind":
        """Look up an operator by its keyboard spelling (``+ - * /``)."""
        if isinstance(text, str) and text in _ASCII_OPERATORS:
            return _ASCII_OPERATORS[text]
        raise ValueError(f"Unknown operator: {text!r}")


_ASCII_OPERATORS = {
    "+": OperatorKind.ADD,
    "-": OperatorKind.SUBTRACT,
    "*": OperatorKind.MULTIPLY,
    "/": OperatorKind.DIVIDE,
}


@dataclass(frozen=True, slots=True)
class Digit:
    value: int


@dataclass(frozen=True, slots=True)
class DecimalPoint:
    pass


@dataclass(frozen=True, slots=True)
class Operator:
    kind: OperatorKind


@dataclass(frozen=True, slots=True)
class Equals:
    pass


@dataclass(frozen=True, slots=True)
class Clear:
    pass


Event = Union[Digit, DecimalPoint, Operator, Equals, Clear]


@dataclass(frozen=True, slots=True)
class CalculatorSnapshot:
    """Read-only view of the calculator after an event has been applied."""

    display: str
    history: Tuple[str, ...]
    pending_operation: Optional[OperatorKind] = None
    waiting_for_operand: bool = False
    error: Optional[str] = None


__all__ = [
    "OperatorKind",
    "Digit",
    "DecimalPoint",
    "Operator",
    "Equals",
    "Clear",
    "Event",
    "CalculatorSnapshot",
]
