"""
Тесты CLI калькулятора.
"""

import os

from click.testing import CliRunner

from interfaces.__main__ import load_env_files
from interfaces.cli import cli

BASE_ARGS = ["--log-level", "ERROR", "--no-colors"]


def run(*args, **kwargs):
    return CliRunner().invoke(cli, [*BASE_ARGS, *args], **kwargs)


def test_eval_prints_result():
    result = run("eval", "2+3*4")
    assert result.exit_code == 0
    assert result.output.strip() == "14"


def test_eval_rounds_floating_point_noise():
    result = run("eval", "0.1+0.2")
    assert result.output.strip() == "0.3"


def test_eval_error_exit_code():
    result = run("eval", "1/0")
    assert result.exit_code == 1
    assert "Error" in result.output


def test_press_plain_output():
    result = run("press", "--plain", "5+3=")
    assert result.exit_code == 0
    lines = result.output.splitlines()
    assert lines[-2:] == ["5 + 3 =", "8"]


def test_press_shows_zero_placeholder():
    result = run("press", "--plain", "9<toggle-sign>")
    assert result.output.splitlines()[-2:] == ["0", "-9"]


def test_press_panel_output():
    result = run("press", "12/4=")
    assert result.exit_code == 0
    assert "12 / 4 =" in result.output
    assert "3" in result.output


def test_interactive_session():
    result = run("interactive", input="5+3=\nh\nq\n")
    assert result.exit_code == 0
    assert "5 + 3 =" in result.output
    assert "История вычислений" in result.output


def test_interactive_end_of_input():
    result = run("interactive", input="7*6=\n")
    assert result.exit_code == 0
    assert "42" in result.output
    assert "Сессия прервана" in result.output


def test_invalid_log_level():
    result = CliRunner().invoke(cli, ["--log-level", "LOUD", "eval", "1"])
    assert result.exit_code != 0


def test_log_level_from_environment():
    result = CliRunner().invoke(
        cli, ["eval", "6/3"], env={"CALCULATOR_LOG_LEVEL": "ERROR", "CALCULATOR_NO_COLORS": "1"}
    )
    assert result.exit_code == 0
    assert result.output.strip() == "2"


def test_load_env_files(tmp_path, monkeypatch):
    monkeypatch.delenv("CALCULATOR_TEST_VALUE", raising=False)
    (tmp_path / ".env").write_text("CALCULATOR_TEST_VALUE=42\n", encoding="utf-8")

    assert load_env_files(tmp_path) is True

    assert os.environ["CALCULATOR_TEST_VALUE"] == "42"
    monkeypatch.delenv("CALCULATOR_TEST_VALUE")


def test_load_env_files_missing(tmp_path):
    assert load_env_files(tmp_path) is False
