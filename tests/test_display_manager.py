"""
Тесты слоя отображения.
"""

import pytest
from rich.console import Console

from core.history import CalculationHistory
from core.types import RenderPayload
from interfaces.cli_components.display_manager import (
    DisplayManager,
    current_value_style,
    font_size_for,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("0", None),
        ("123456789012", None),
        ("1234567890123", pytest.approx(34.4)),
        ("123456789012345", pytest.approx(31.2)),
        ("1" * 30, 18),
    ],
)
def test_font_size_for(text, expected):
    assert font_size_for(text) == expected


def test_current_value_style():
    assert current_value_style("Error") == "bold red"
    assert current_value_style("42") == "bold white"
    assert current_value_style("1" * 14) == "white"
    assert current_value_style("1" * 30) == "dim white"


def make_manager() -> DisplayManager:
    return DisplayManager(Console(record=True, width=60, force_terminal=False))


def test_show_display_uses_zero_placeholder():
    manager = make_manager()
    manager.show_display(RenderPayload(previous_text="", current_text="7"))

    lines = [line.strip(" │╭╮╰╯─") for line in manager.console.export_text().splitlines()]
    assert "0" in lines
    assert "7" in lines


def test_show_display_previous_line():
    manager = make_manager()
    manager.show_display(RenderPayload(previous_text="5 + 3 =", current_text="8"))

    output = manager.console.export_text()
    assert "5 + 3 =" in output
    assert output.index("5 + 3 =") < output.rindex("8")


def test_display_history():
    manager = make_manager()
    history = CalculationHistory()
    history.add_entry("5 + 3", 8.0, "8")
    history.add_entry("9 / 4", 2.25, "2.25")

    manager.display_history(history)

    output = manager.console.export_text()
    assert "5 + 3" in output
    assert "2.25" in output


def test_display_empty_history():
    manager = make_manager()
    manager.display_history(CalculationHistory())
    assert "История пуста" in manager.console.export_text()
