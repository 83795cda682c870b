"""
Calculator state machine.

Accumulates digit and decimal-point input into an operand and evaluates
binary operations immediately, left to right:
- A second operator before equals folds the pending operation (chaining)
- Equals appends a record to the bounded history
- Division by zero and overflow put the machine into an error state
  that only Clear leaves
"""

import logging
import math
from typing import Optional

from .calc_types import (
    CalculatorSnapshot,
    Clear,
    DecimalPoint,
    Digit,
    Equals,
    Event,
    Operator,
    OperatorKind,
)
from .config import DEFAULT_HISTORY_LIMIT, DEFAULT_PRECISION
from .errors import (
    CalculationError,
    DivisionByZeroError,
    InvalidInputError,
    NonFiniteResultError,
)
from .history import CalculationHistory

logger = logging.getLogger(__name__)

# Integral floats at or above this magnitude render in exponent form
_MAX_PLAIN_INTEGER = 1e21


def parse_number(text: str) -> float:
    """Parse display text into a float."""
    try:
        return float(text)
    except ValueError:
        raise InvalidInputError(f"Display is not a number: {text!r}") from None


def format_number(value: float, precision: int = DEFAULT_PRECISION) -> str:
    """
    Format a number for display and history records.

    Args:
        value: Finite number to format
        precision: Maximum significant digits for non-integral values

    Returns:
        ``"8"`` for integral values, otherwise the ``g`` rendering (``"0.3"``)
    """
    if value == 0:
        # collapse -0.0
        return "0"
    if float(value).is_integer() and abs(value) < _MAX_PLAIN_INTEGER:
        return str(int(value))
    return f"{value:.{precision}g}"


def evaluate(a: float, b: float, op: OperatorKind) -> float:
    """
    Perform a single arithmetic operation.

    Args:
        a: First operand
        b: Second operand
        op: Operation to perform

    Returns:
        Result of the operation

    Raises:
        DivisionByZeroError: If dividing by zero
        NonFiniteResultError: If the result overflows to infinity or NaN
    """
    operations = {
        OperatorKind.ADD: lambda x, y: x + y,
        OperatorKind.SUBTRACT: lambda x, y: x - y,
        OperatorKind.MULTIPLY: lambda x, y: x * y,
        OperatorKind.DIVIDE: lambda x, y: x / y,
    }

    try:
        result = operations[op](a, b)
    except ZeroDivisionError:
        raise DivisionByZeroError() from None
    except OverflowError:
        raise NonFiniteResultError() from None

    if not math.isfinite(result):
        raise NonFiniteResultError()
    return result


class Calculator:
    """Calculator managing operand entry, pending operations and history."""

    def __init__(
        self,
        history_limit: int = DEFAULT_HISTORY_LIMIT,
        precision: int = DEFAULT_PRECISION,
    ):
        self.precision = precision
        self.history = CalculationHistory(history_limit)
        self.clear()

    def clear(self):
        """Reset operand entry to the initial state; history is kept."""
        self.display = "0"
        self.previous_value: Optional[float] = None
        self.pending_operation: Optional[OperatorKind] = None
        self.waiting_for_operand = False
        self.error: Optional[str] = None

    def apply_digit(self, digit: int):
        """
        Add a digit to the current operand.

        Args:
            digit: Integer 0-9
        """
        if isinstance(digit, bool) or not isinstance(digit, int) or not 0 <= digit <= 9:
            raise InvalidInputError(f"Digit must be an integer 0-9, got {digit!r}")
        if self.error:
            return

        if self.waiting_for_operand:
            self.display = str(digit)
            self.waiting_for_operand = False
        elif self.display == "0":
            self.display = str(digit)
        else:
            self.display += str(digit)

    def apply_decimal_point(self):
        """Add a decimal point; a second one on the same operand is ignored."""
        if self.error:
            return

        if self.waiting_for_operand:
            self.display = "0."
            self.waiting_for_operand = False
        elif "." not in self.display:
            self.display += "."

    def apply_operator(self, op: OperatorKind):
        """
        Set the pending operation, folding any operation already pending.

        Args:
            op: Operator to apply to the next operand
        """
        if self.error:
            return

        input_value = parse_number(self.display)

        if self.previous_value is not None and self.pending_operation is not None:
            try:
                result = evaluate(self.previous_value, input_value, self.pending_operation)
            except CalculationError as e:
                self._fail(e)
                return
            self.display = self._format(result)
            self.previous_value = result
            logger.debug("Chained %s -> %s", self.pending_operation.name, self.display)
        elif self.previous_value is None or not self.waiting_for_operand:
            self.previous_value = input_value
        # otherwise nothing was typed since Equals: keep the unrounded result

        self.pending_operation = op
        self.waiting_for_operand = True

    def apply_equals(self):
        """Evaluate the pending operation and record it in history."""
        if self.error:
            return
        if self.previous_value is None or self.pending_operation is None:
            return

        input_value = parse_number(self.display)
        try:
            result = evaluate(self.previous_value, input_value, self.pending_operation)
        except CalculationError as e:
            self._fail(e)
            return

        record = (
            f"{self._format(self.previous_value)} {self.pending_operation.symbol} "
            f"{self._format(input_value)} = {self._format(result)}"
        )
        self.history.append(record)
        logger.debug("Evaluated %s", record)

        self.display = self._format(result)
        self.previous_value = result
        self.pending_operation = None
        self.waiting_for_operand = True

    def dispatch(self, event: Event) -> CalculatorSnapshot:
        """Apply one normalized input event and return the resulting snapshot."""
        if isinstance(event, Digit):
            self.apply_digit(event.value)
        elif isinstance(event, DecimalPoint):
            self.apply_decimal_point()
        elif isinstance(event, Operator):
            self.apply_operator(event.kind)
        elif isinstance(event, Equals):
            self.apply_equals()
        elif isinstance(event, Clear):
            self.clear()
        else:
            raise InvalidInputError(f"Unknown event: {event!r}")
        return self.snapshot()

    def snapshot(self) -> CalculatorSnapshot:
        return CalculatorSnapshot(
            display=self.display,
            history=self.history.entries(),
            pending_operation=self.pending_operation,
            waiting_for_operand=self.waiting_for_operand,
            error=self.error,
        )

    def _fail(self, error: CalculationError):
        logger.warning(
            "Evaluation failed for %s %s %s: %s",
            self.previous_value,
            self.pending_operation.symbol if self.pending_operation else "?",
            self.display,
            error.message,
        )
        self.error = error.message
        self.previous_value = None
        self.pending_operation = None
        self.waiting_for_operand = True

    def _format(self, value: float) -> str:
        return format_number(value, self.precision)
