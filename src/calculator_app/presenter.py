"""Read-only renderings of a calculator snapshot."""

from typing import Dict, List

from .calc_types import CalculatorSnapshot


def ordered_history(snapshot: CalculatorSnapshot, newest_first: bool = True) -> List[str]:
    entries = list(snapshot.history)
    if newest_first:
        entries.reverse()
    return entries


def to_dict(snapshot: CalculatorSnapshot, newest_first: bool = True) -> Dict:
    """Serialize a snapshot into the JSON shape shared by the API and CLI."""
    return {
        "display": snapshot.display,
        "history": ordered_history(snapshot, newest_first),
        "pending": snapshot.pending_operation.symbol if snapshot.pending_operation else None,
        "error": snapshot.error,
    }


def render_text(snapshot: CalculatorSnapshot, show_history: bool = False, newest_first: bool = True) -> str:
    """
    Render a snapshot as plain text for the terminal.

    The first line is the display (or ``Error: <message>``); history entries
    follow, one per line, when ``show_history`` is set.
    """
    lines = [f"Error: {snapshot.error}" if snapshot.error else snapshot.display]
    if show_history and snapshot.history:
        lines.append("History:")
        lines.extend(f"  {entry}" for entry in ordered_history(snapshot, newest_first))
    return "\n".join(lines)
