"""Exception hierarchy for the calculator."""

from typing import Optional


class CalculatorError(Exception):
    """Base class for all calculator errors."""


class InvalidInputError(CalculatorError):
    """An input that can never be produced by a well-formed event feed."""


class ConfigError(CalculatorError):
    """Raised when an environment setting cannot be parsed."""


class CalculationError(CalculatorError):
    """Arithmetic failure while evaluating a pending operation."""

    message = "Calculation error"

    def __init__(self, message: Optional[str] = None) -> None:
        if message:
            self.message = message
        super().__init__(self.message)


class DivisionByZeroError(CalculationError):
    message = "Cannot divide by zero"


class NonFiniteResultError(CalculationError):
    message = "Result too large"


__all__ = [
    "CalculatorError",
    "InvalidInputError",
    "ConfigError",
    "CalculationError",
    "DivisionByZeroError",
    "NonFiniteResultError",
]
