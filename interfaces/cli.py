"""Command Line Interface for the calculator."""

import click
from rich.console import Console

from core.engine import CalculatorEngine
from core.exceptions import EvaluationError
from core.history import CalculationHistory
from core.parsers import calculate
from core.types import ERROR_DISPLAY
from utils.logging_utils import get_logger, setup_logging
from utils.math_utils import format_number

from .cli_components.display_manager import DisplayManager
from .cli_components.input_handler import InputHandler, events_from_keys

console = Console()
logger = get_logger(__name__)

QUIT_COMMANDS = {"q", "quit", "exit"}
HISTORY_COMMANDS = {"h", "history"}


@click.group()
@click.option(
    "--log-level",
    envvar="CALCULATOR_LOG_LEVEL",
    default="WARNING",
    show_default=True,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging level",
)
@click.option(
    "--no-colors",
    envvar="CALCULATOR_NO_COLORS",
    is_flag=True,
    help="Disable colored log output",
)
def cli(log_level: str, no_colors: bool) -> None:
    """Calculator - четырёхфункциональный калькулятор в терминале."""
    setup_logging(level=log_level, use_colors=not no_colors)


@cli.command("eval")
@click.argument("expression")
def eval_command(expression: str) -> None:
    """Evaluate an arithmetic expression and print the result."""
    try:
        result = calculate(expression)
    except EvaluationError as e:
        logger.info("Выражение не вычислено: %s", e)
        console.print(ERROR_DISPLAY)
        raise SystemExit(1)
    console.print(format_number(result))


@cli.command()
@click.argument("keys")
@click.option("--plain", is_flag=True, help="Print the two display lines without a panel")
def press(keys: str, plain: bool) -> None:
    """Feed a key sequence such as '12+3=' or '9<toggle-sign>' to the calculator."""
    engine = CalculatorEngine()
    payload = engine.render()
    for event in events_from_keys(keys):
        payload = engine.dispatch(event)

    if plain:
        console.print(payload.previous_text or "0", markup=False, highlight=False)
        console.print(payload.current_text, markup=False, highlight=False)
    else:
        DisplayManager(console).show_display(payload)


@cli.command()
@click.option("--history-limit", type=int, default=100, show_default=True, help="Entries kept in the history tape")
def interactive(history_limit: int) -> None:
    """Start an interactive calculator session."""
    history = CalculationHistory(limit=history_limit)
    engine = CalculatorEngine(history=history)
    display_manager = DisplayManager(console)
    input_handler = InputHandler(console)

    display_manager.show_welcome()
    display_manager.show_display(engine.render())

    while True:
        line = input_handler.read_keys()
        if line is None:
            console.print("\n[yellow]Сессия прервана пользователем[/yellow]")
            break

        command = line.strip().lower()
        if command in QUIT_COMMANDS:
            break
        if command in HISTORY_COMMANDS:
            display_manager.display_history(history)
            continue

        events = input_handler.get_events(line)
        if not events:
            display_manager.show_info("Нет назначенных клавиш во вводе")
            continue

        payload = engine.render()
        for event in events:
            payload = engine.dispatch(event)
        display_manager.show_display(payload)


if __name__ == "__main__":
    cli()
