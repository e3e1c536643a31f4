import logging
import re
from typing import Dict, List, Optional

from rich.console import Console

from core.types import InputEvent, InputEventType

logger = logging.getLogger(__name__)

# Клавиатура: клавиши отображаются в события один к одному
KEY_BINDINGS: Dict[str, InputEvent] = {
    **{d: InputEvent.digit(d) for d in "0123456789."},
    **{op: InputEvent.operator(op) for op in "+-*/"},
    "Enter": InputEvent(InputEventType.EQUALS),
    "=": InputEvent(InputEventType.EQUALS),
    "Backspace": InputEvent(InputEventType.BACKSPACE),
    "Escape": InputEvent(InputEventType.CLEAR),
    "%": InputEvent(InputEventType.PERCENT),
}

# Кнопки: значения атрибута action на клавишах калькулятора
BUTTON_ACTIONS: Dict[str, InputEventType] = {
    "equals": InputEventType.EQUALS,
    "back": InputEventType.BACKSPACE,
    "percent": InputEventType.PERCENT,
    "toggle-sign": InputEventType.TOGGLE_SIGN,
    "clear": InputEventType.CLEAR,
}

KEY_SEQUENCE_RE = re.compile(r"<([^<>]+)>|(\S)")


def event_for_key(key: str) -> Optional[InputEvent]:
    """Возвращает событие для клавиши или None, если клавиша не назначена."""
    event = KEY_BINDINGS.get(key)
    if event is None:
        for name, bound in KEY_BINDINGS.items():
            if len(name) > 1 and name.lower() == key.lower():
                return bound
    return event


def event_for_button(
    num: Optional[str] = None,
    op: Optional[str] = None,
    action: Optional[str] = None,
) -> Optional[InputEvent]:
    """
    Возвращает событие для нажатой кнопки.

    Args:
        num: Цифра или точка на кнопке
        op: Оператор на кнопке
        action: Действие кнопки (equals, back, percent, toggle-sign, clear)
    """
    if num is not None:
        return InputEvent.digit(num)
    if op is not None:
        return InputEvent.operator(op)
    if action:
        event_type = BUTTON_ACTIONS.get(action.lower())
        if event_type is not None:
            return InputEvent(event_type)
    return None


def parse_key_sequence(text: str) -> List[str]:
    """
    Разбивает строку на клавиши.

    Одиночные символы - отдельные клавиши, <Name> - именованная клавиша
    или действие кнопки. Пробелы игнорируются.

    >>> parse_key_sequence("12+<Backspace>3=")
    ['1', '2', '+', 'Backspace', '3', '=']
    """
    return [named or char for named, char in KEY_SEQUENCE_RE.findall(text)]


def events_from_keys(text: str) -> List[InputEvent]:
    """Преобразует строку клавиш в события, пропуская неназначенные."""
    events = []
    for key in parse_key_sequence(text):
        event = event_for_key(key) or event_for_button(action=key)
        if event is None:
            logger.debug("Клавиша %r не назначена, пропускаем", key)
            continue
        events.append(event)
    return events


class InputHandler:
    """
    Компонент для обработки пользовательского ввода.
    Читает строки клавиш из терминала и превращает их в события.
    """

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def read_keys(self, prompt: str = "> ") -> Optional[str]:
        """
        Читает строку клавиш.

        Returns:
            Введённая строка или None при Ctrl+C / конце ввода
        """
        try:
            return self.console.input(prompt)
        except (KeyboardInterrupt, EOFError):
            return None

    def get_events(self, line: str) -> List[InputEvent]:
        return events_from_keys(line)
