"""
Пакет cli_components содержит специализированные компоненты для CLI интерфейса.
Каждый компонент отвечает за свою область:
- InputHandler: раскладка клавиш и кнопок, чтение ввода
- DisplayManager: дисплей калькулятора и история вычислений
"""

from .display_manager import DisplayManager, font_size_for
from .input_handler import (
    InputHandler,
    event_for_button,
    event_for_key,
    events_from_keys,
    parse_key_sequence,
)

__all__ = [
    "InputHandler",
    "DisplayManager",
    "font_size_for",
    "event_for_key",
    "event_for_button",
    "events_from_keys",
    "parse_key_sequence",
]
