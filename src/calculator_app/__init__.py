"""
Interactive arithmetic calculator.

Provides the input-accumulation state machine plus keyboard normalization,
a text/JSON presenter, a click CLI and a Flask JSON API.
"""

from .calc_types import (
    CalculatorSnapshot,
    Clear,
    DecimalPoint,
    Digit,
    Equals,
    Operator,
    OperatorKind,
)
from .engine import Calculator, evaluate, format_number, parse_number
from .keys import normalize_key, normalize_keys

__version__ = "0.1.0"

__all__ = [
    "Calculator",
    "CalculatorSnapshot",
    "Clear",
    "DecimalPoint",
    "Digit",
    "Equals",
    "Operator",
    "OperatorKind",
    "evaluate",
    "format_number",
    "parse_number",
    "normalize_key",
    "normalize_keys",
]
