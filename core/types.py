"""
Типы данных калькулятора.
Содержит все основные dataclass'ы и enums, используемые в системе.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

ERROR_DISPLAY = "Error"
INITIAL_DISPLAY = "0"


class InputEventType(Enum):
    """Типы событий, которые слой ввода передаёт движку."""

    DIGIT = "digit"
    OPERATOR = "operator"
    EQUALS = "equals"
    BACKSPACE = "backspace"
    PERCENT = "percent"
    TOGGLE_SIGN = "toggle_sign"
    CLEAR = "clear"


@dataclass(frozen=True)
class InputEvent:
    """Одно дискретное событие ввода."""

    type: InputEventType
    value: Optional[str] = None  # Цифра для DIGIT, оператор для OPERATOR

    @classmethod
    def digit(cls, d: str) -> "InputEvent":
        return cls(InputEventType.DIGIT, d)

    @classmethod
    def operator(cls, op: str) -> "InputEvent":
        return cls(InputEventType.OPERATOR, op)


@dataclass(frozen=True)
class EngineState:
    """
    Состояние калькулятора.

    current всегда содержит числовой литерал или "Error", previous хранит
    накопленное выражение, которое показывается над текущим значением.
    """

    current: str = INITIAL_DISPLAY
    previous: str = ""
    last_result: Optional[float] = None
    just_evaluated: bool = False  # Последним действием было "="
    awaiting_operand: bool = False  # После оператора ещё не введено число

    @property
    def is_error(self) -> bool:
        return self.current == ERROR_DISPLAY


@dataclass(frozen=True)
class RenderPayload:
    """Данные для слоя отображения после каждой операции."""

    previous_text: str
    current_text: str

    @classmethod
    def from_state(cls, state: EngineState) -> "RenderPayload":
        return cls(previous_text=state.previous, current_text=state.current)


@dataclass(frozen=True)
class EvaluationResult:
    """Результат вычисления: либо число, либо описание ошибки."""

    value: Optional[float] = None
    error: Optional[str] = None

    @property
    def is_success(self) -> bool:
        return self.error is None and self.value is not None

    @classmethod
    def success(cls, value: float) -> "EvaluationResult":
        return cls(value=value)

    @classmethod
    def failure(cls, error: str) -> "EvaluationResult":
        return cls(error=error)
