"""Map raw keyboard or button keys onto calculator events."""

from typing import Dict, Iterable, Iterator, Optional

from .calc_types import Clear, DecimalPoint, Digit, Equals, Event, Operator, OperatorKind

KEY_MAP: Dict[str, Event] = {
    ".": DecimalPoint(),
    "+": Operator(OperatorKind.ADD),
    "-": Operator(OperatorKind.SUBTRACT),
    "*": Operator(OperatorKind.MULTIPLY),
    "/": Operator(OperatorKind.DIVIDE),
    # button labels from the on-screen keypad
    "−": Operator(OperatorKind.SUBTRACT),
    "×": Operator(OperatorKind.MULTIPLY),
    "÷": Operator(OperatorKind.DIVIDE),
    "=": Equals(),
    "Enter": Equals(),
    "Escape": Clear(),
}
KEY_MAP.update({str(n): Digit(n) for n in range(10)})


def normalize_key(key: str) -> Optional[Event]:
    """Return the event for ``key``, or None when the key is not recognized."""
    return KEY_MAP.get(key)


def normalize_keys(keys: Iterable[str]) -> Iterator[Event]:
    for key in keys:
        event = normalize_key(key)
        if event is not None:
            yield event
