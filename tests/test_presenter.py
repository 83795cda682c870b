from calculator_app.calc_types import CalculatorSnapshot, OperatorKind
from calculator_app.presenter import ordered_history, render_text, to_dict


SNAPSHOT = CalculatorSnapshot(
    display="6",
    history=("5 + 3 = 8", "8 − 2 = 6"),
    pending_operation=OperatorKind.MULTIPLY,
)


def test_history_newest_first_by_default():
    assert ordered_history(SNAPSHOT) == ["8 − 2 = 6", "5 + 3 = 8"]
    assert ordered_history(SNAPSHOT, newest_first=False) == ["5 + 3 = 8", "8 − 2 = 6"]


def test_to_dict():
    assert to_dict(SNAPSHOT) == {
        "display": "6",
        "history": ["8 − 2 = 6", "5 + 3 = 8"],
        "pending": "×",
        "error": None,
    }


def test_render_text():
    assert render_text(SNAPSHOT) == "6"
    assert render_text(SNAPSHOT, show_history=True) == "6\nHistory:\n  8 − 2 = 6\n  5 + 3 = 8"

    failed = CalculatorSnapshot(display="0", history=(), error="Cannot divide by zero")
    assert render_text(failed, show_history=True) == "Error: Cannot divide by zero"
