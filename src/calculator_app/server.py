"""
Flask server for the calculator.

Exposes one session calculator over a small JSON API. Every response carries
the snapshot rendered by the presenter:

    {"display": "81", "history": ["9 × 9 = 81"], "pending": null, "error": null}
"""

import logging
import threading
from typing import Optional

import click
from flask import Flask, jsonify, request

from .calc_types import Clear, DecimalPoint, Digit, Equals, Operator, OperatorKind
from .config import CalculatorConfig, configure_logging, load_config
from .engine import Calculator
from .errors import ConfigError
from .keys import normalize_key
from .presenter import to_dict

logger = logging.getLogger(__name__)


class CalculatorSession:
    """A calculator shared by request threads; events are applied one at a time."""

    def __init__(self, config: CalculatorConfig):
        self.calculator = Calculator(
            history_limit=config.history_limit, precision=config.precision
        )
        self.lock = threading.Lock()

    def apply(self, event):
        with self.lock:
            return self.calculator.dispatch(event)

    def snapshot(self):
        with self.lock:
            return self.calculator.snapshot()


def create_app(config: Optional[CalculatorConfig] = None) -> Flask:
    """Create the Flask app with a fresh calculator session."""
    config = config or load_config()
    app = Flask(__name__)
    session = CalculatorSession(config)

    @app.route("/api/state", methods=["GET"])
    def get_state():
        """Return the current calculator snapshot."""
        return jsonify(to_dict(session.snapshot()))

    @app.route("/api/key", methods=["POST"])
    def press_key():
        """
        Apply a raw key press.

        Expected JSON payload:
            {"key": "9"}  // '0'-'9', '.', '+', '-', '*', '/', '=', 'Enter', 'Escape'
        """
        data = request.get_json(silent=True)

        if not data:
            return jsonify({"error": "No data provided"}), 400
        if not isinstance(data, dict):
            return jsonify({"error": "Expected a JSON object"}), 400

        key = data.get("key")
        event = normalize_key(key) if isinstance(key, str) else None
        if event is None:
            return jsonify({"error": f"Unrecognized key: {key}"}), 400

        return jsonify(to_dict(session.apply(event)))

    @app.route("/api/calculate", methods=["POST"])
    def calculate():
        """
        Handle calculator actions.

        Expected JSON payload:
            {
                "action": "digit|dot|op|equals|clear",
                "value": "..."  // digit character or one of + - * /
            }
        """
        data = request.get_json(silent=True)

        if not data:
            return jsonify({"error": "No data provided"}), 400
        if not isinstance(data, dict):
            return jsonify({"error": "Expected a JSON object"}), 400

        action = data.get("action", "")
        value = data.get("value")

        if action == "digit":
            if not (isinstance(value, str) and len(value) == 1 and value in "0123456789"):
                return jsonify({"error": f"Invalid digit: {value}"}), 400
            event = Digit(int(value))
        elif action == "dot":
            event = DecimalPoint()
        elif action == "op":
            try:
                event = Operator(OperatorKind.from_ascii(value))
            except ValueError:
                return jsonify({"error": f"Invalid operator: {value}"}), 400
        elif action == "equals":
            event = Equals()
        elif action == "clear":
            event = Clear()
        else:
            return jsonify({"error": f"Unknown action: {action}"}), 400

        return jsonify(to_dict(session.apply(event)))

    @app.route("/api/reset", methods=["POST"])
    def reset():
        """Clear the current entry; history is kept."""
        return jsonify(to_dict(session.apply(Clear())))

    return app


@click.command()
@click.option("--host", default=None, help="Host to bind to (default: $CALCULATOR_HOST or 0.0.0.0)")
@click.option("--port", type=int, default=None, help="Port to bind to (default: $CALCULATOR_PORT or 5000)")
@click.option("--log-level", default=None, help="Logging level (default: $CALCULATOR_LOG_LEVEL or WARNING)")
def main(host: Optional[str], port: Optional[int], log_level: Optional[str]) -> None:
    """Run the calculator web server."""
    try:
        config = load_config()
        configure_logging(log_level or config.log_level)
    except ConfigError as e:
        raise click.ClickException(str(e)) from e

    host = host or config.host
    port = port or config.port
    logger.info("Starting calculator server on %s:%s", host, port)
    click.echo(f"Access at: http://{host}:{port}")

    create_app(config).run(host=host, port=port, debug=False)


if __name__ == "__main__":  # pragma: no cover
    main()
