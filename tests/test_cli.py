import json

from click.testing import CliRunner

from calculator_app.cli import main, split_tokens


def test_keys_as_arguments():
    result = CliRunner().invoke(main, ["9", "*", "9", "="])
    assert result.exit_code == 0
    assert result.output == "81\n"


def test_unspaced_keys_and_history():
    result = CliRunner().invoke(main, ["5+3-2=", "--history"])
    assert result.exit_code == 0
    assert result.output == "6\nHistory:\n  8 − 2 = 6\n"


def test_json_output():
    result = CliRunner().invoke(main, ["--json", "7", "/", "2", "Enter"])
    assert result.exit_code == 0
    assert json.loads(result.output) == {
        "display": "3.5",
        "history": ["7 ÷ 2 = 3.5"],
        "pending": None,
        "error": None,
    }


def test_unknown_key_is_usage_error():
    result = CliRunner().invoke(main, ["9", "%"])
    assert result.exit_code == 2
    assert "Unrecognized key" in result.output


def test_history_limit_from_environment():
    result = CliRunner().invoke(
        main,
        ["1+1=", "2+2=", "3+3=", "--history"],
        env={"CALCULATOR_HISTORY_LIMIT": "2"},
    )
    assert result.exit_code == 0
    assert result.output == "6\nHistory:\n  3 + 3 = 6\n  2 + 2 = 4\n"


def test_interactive_session():
    result = CliRunner().invoke(main, ["--interactive"], input="5 + 3\n- 2 =\nx\nclear\nquit\n")
    assert result.exit_code == 0
    lines = result.output.splitlines()
    assert lines[:2] == ["3", "6"]
    assert "Unrecognized key" in result.output
    assert lines[-2:] == ["0", "0"]


def test_interactive_quit_after_unknown_key():
    result = CliRunner().invoke(main, ["--interactive"], input="9 x quit\n7\n")
    assert result.exit_code == 0
    assert "Unrecognized key" in result.output
    assert "7" not in result.output.splitlines()


def test_split_tokens():
    assert split_tokens("12*3 Enter") == ["1", "2", "*", "3", "Enter"]
    assert split_tokens("escape quit") == ["escape", "quit"]
