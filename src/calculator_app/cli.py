import json
from typing import Iterable, List, Optional, Tuple

import click

from .calc_types import CalculatorSnapshot, Event
from .config import configure_logging, load_config
from .engine import Calculator
from .errors import ConfigError
from .keys import normalize_key
from .presenter import render_text, to_dict

KEY_ALIASES = {"enter": "Enter", "escape": "Escape", "esc": "Escape", "clear": "Escape"}
QUIT_WORDS = {"quit", "exit"}


def parse_keys(tokens: Iterable[str]) -> List[Event]:
    events: List[Event] = []
    for token in tokens:
        key = KEY_ALIASES.get(token.lower(), token)
        event = normalize_key(key)
        if event is None:
            raise click.BadParameter(f"Unrecognized key: {token!r}", param_hint="KEYS")
        events.append(event)
    return events


def split_tokens(text: str) -> List[str]:
    """Split a line into keys; unspaced runs like ``9*9=`` become single keys."""
    tokens: List[str] = []
    for word in text.split():
        if word.lower() in KEY_ALIASES or word.lower() in QUIT_WORDS or word in ("Enter", "Escape"):
            tokens.append(word)
        else:
            tokens.extend(word)
    return tokens


def run_keys(calculator: Calculator, tokens: Iterable[str]) -> CalculatorSnapshot:
    snapshot = calculator.snapshot()
    for event in parse_keys(tokens):
        snapshot = calculator.dispatch(event)
    return snapshot


def emit(snapshot: CalculatorSnapshot, as_json: bool, show_history: bool) -> None:
    if as_json:
        click.echo(json.dumps(to_dict(snapshot), ensure_ascii=False))
    else:
        click.echo(render_text(snapshot, show_history=show_history))


def interactive_loop(calculator: Calculator, as_json: bool, show_history: bool) -> None:
    stdin = click.get_text_stream("stdin")
    for line in stdin:
        tokens = split_tokens(line)
        quit_requested = any(t.lower() in QUIT_WORDS for t in tokens)
        tokens = [t for t in tokens if t.lower() not in QUIT_WORDS]
        try:
            snapshot = run_keys(calculator, tokens)
        except click.BadParameter as e:
            click.echo(f"Error: {e.format_message()}", err=True)
        else:
            emit(snapshot, as_json, show_history)
        if quit_requested:
            break


@click.command()
@click.argument("keys", nargs=-1)
@click.option("--interactive", "-i", is_flag=True, default=False, help="Read keys line by line from stdin")
@click.option("--history", "show_history", is_flag=True, default=False, help="Print history (newest first)")
@click.option("--json", "as_json", is_flag=True, default=False, help="Emit the snapshot as JSON")
@click.option("--log-level", default=None, help="Logging level (default: $CALCULATOR_LOG_LEVEL or WARNING)")
def main(
    keys: Tuple[str, ...],
    interactive: bool,
    show_history: bool,
    as_json: bool,
    log_level: Optional[str],
) -> None:
    """Feed KEYS (e.g. 9 '*' 9 =) to the calculator and print the display."""
    try:
        config = load_config()
        configure_logging(log_level or config.log_level)
    except ConfigError as e:
        raise click.ClickException(str(e)) from e

    calculator = Calculator(history_limit=config.history_limit, precision=config.precision)
    snapshot = run_keys(calculator, split_tokens(" ".join(keys)))

    if interactive:
        if keys:
            emit(snapshot, as_json, show_history)
        interactive_loop(calculator, as_json, show_history)
    else:
        emit(snapshot, as_json, show_history)


if __name__ == "__main__":  # pragma: no cover
    main()
