from calculator_app import Calculator, OperatorKind, normalize_key, normalize_keys
from calculator_app.calc_types import Clear, DecimalPoint, Digit, Equals, Operator


def test_normalize_key_mapping():
    assert normalize_key("7") == Digit(7)
    assert normalize_key("0") == Digit(0)
    assert normalize_key(".") == DecimalPoint()
    assert normalize_key("+") == Operator(OperatorKind.ADD)
    assert normalize_key("-") == Operator(OperatorKind.SUBTRACT)
    assert normalize_key("*") == Operator(OperatorKind.MULTIPLY)
    assert normalize_key("/") == Operator(OperatorKind.DIVIDE)
    assert normalize_key("×") == Operator(OperatorKind.MULTIPLY)
    assert normalize_key("Enter") == Equals()
    assert normalize_key("=") == Equals()
    assert normalize_key("Escape") == Clear()


def test_unknown_keys_are_ignored():
    assert normalize_key("a") is None
    assert normalize_key("Shift") is None
    events = list(normalize_keys(["9", "Shift", "*", "x", "9", "Enter"]))
    assert events == [Digit(9), Operator(OperatorKind.MULTIPLY), Digit(9), Equals()]


def test_keyboard_session_end_to_end():
    calc = Calculator()
    for event in normalize_keys("12.5*2="):
        calc.dispatch(event)
    assert calc.display == "25"
    assert calc.history.entries() == ("12.5 × 2 = 25",)

    calc.dispatch(normalize_key("Escape"))
    assert calc.display == "0"
    assert len(calc.history) == 1
