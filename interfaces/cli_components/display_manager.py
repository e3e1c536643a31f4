"""
Модуль для отображения калькулятора в CLI интерфейсе.
Содержит дисплей калькулятора и таблицу истории вычислений.
"""

from typing import Optional

from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.history import CalculationHistory
from core.types import ERROR_DISPLAY, RenderPayload

BASE_FONT_SIZE = 36
MIN_FONT_SIZE = 18
FONT_SHRINK_THRESHOLD = 12
FONT_SHRINK_STEP = 1.6


def font_size_for(text: str) -> Optional[float]:
    """
    Возвращает размер шрифта для длинного значения.

    Для значений до 12 символов возвращает None (размер по умолчанию),
    дальше шрифт уменьшается на 1.6 за каждый символ, но не меньше 18.
    """
    length = len(text)
    if length <= FONT_SHRINK_THRESHOLD:
        return None
    return max(BASE_FONT_SIZE - (length - FONT_SHRINK_THRESHOLD) * FONT_SHRINK_STEP, MIN_FONT_SIZE)


def current_value_style(text: str) -> str:
    """Выбирает стиль текущего значения по подсказке размера шрифта."""
    if text == ERROR_DISPLAY:
        return "bold red"
    size = font_size_for(text)
    if size is None:
        return "bold white"
    if size > MIN_FONT_SIZE:
        return "white"
    return "dim white"


class DisplayManager:
    """
    Менеджер отображения для CLI.
    Выводит дисплей калькулятора и историю вычислений.
    """

    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console or Console()

    def build_display(self, payload: RenderPayload) -> Panel:
        """Собирает панель дисплея: строка выражения над текущим значением."""
        previous = Text(payload.previous_text or "0", style="cyan", justify="right")
        current = Text(
            payload.current_text,
            style=current_value_style(payload.current_text),
            justify="right",
        )
        return Panel(Group(previous, current), border_style="blue", width=40)

    def show_display(self, payload: RenderPayload) -> None:
        self.console.print(self.build_display(payload))

    def display_history(self, history: Optional[CalculationHistory]) -> None:
        """Отображает ленту вычислений."""
        if history is None or history.is_empty():
            self.console.print("[yellow]История пуста[/yellow]")
            return

        summary = history.get_full_history_summary()
        table = Table(title="История вычислений")
        table.add_column("№", justify="right", style="cyan")
        table.add_column("Выражение", style="green")
        table.add_column("Результат", style="magenta", justify="right")

        for entry in summary["entries"]:
            table.add_row(
                str(entry["entry_number"] + 1),
                entry["expression"],
                entry["display"],
            )

        self.console.print(table)

    def show_welcome(self) -> None:
        """Show welcome message."""
        self.console.print(
            Panel.fit(
                "[bold blue]Калькулятор[/bold blue]\n"
                "Вводите клавиши: 0-9 . + - * / % = и <Backspace>, <Escape>, <toggle-sign>\n"
                "h - история, q - выход",
                border_style="blue",
            )
        )

    def show_info(self, message: str) -> None:
        """Show info message."""
        self.console.print(f"[cyan]{message}[/cyan]")
