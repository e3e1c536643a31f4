"""
Движок калькулятора.

Каждая операция принимает EngineState (и значение ввода) и возвращает новое
состояние вместе с RenderPayload для слоя отображения. CalculatorEngine
владеет единственным состоянием и применяет к нему эти операции.
"""

import logging
import re
from dataclasses import replace
from typing import Callable, Dict, Optional, Tuple

from utils.math_utils import format_number, is_numeric_literal

from .exceptions import InputError
from .history import CalculationHistory
from .parsers import UNICODE_OPERATORS, evaluate_expression
from .types import (
    ERROR_DISPLAY,
    INITIAL_DISPLAY,
    EngineState,
    InputEvent,
    InputEventType,
    RenderPayload,
)

logger = logging.getLogger(__name__)

DIGIT_KEYS = frozenset("0123456789.")
OPERATORS = frozenset("+-*/")
PENDING_OPERATOR_RE = re.compile(r"[+\-*/]$")
EQUALS_SUFFIX = " ="

Transition = Tuple[EngineState, RenderPayload]


def _transition(state: EngineState) -> Transition:
    return state, RenderPayload.from_state(state)


def _pending_expression(previous: str) -> str:
    """Возвращает незавершённую часть выражения; строка "... =" уже вычислена."""
    if previous.endswith(EQUALS_SUFFIX):
        return ""
    return previous


def initial_state() -> EngineState:
    """Возвращает состояние при запуске калькулятора."""
    return EngineState()


def input_digit(state: EngineState, d: str) -> Transition:
    """
    Добавляет цифру или десятичную точку к текущему числу.

    После "=" (или после ошибки) начинается новое число. Ведущий ноль
    заменяется, вторая точка игнорируется.
    """
    if d not in DIGIT_KEYS:
        raise InputError(f"Недопустимая цифра: {d!r}")

    if state.just_evaluated or state.is_error:
        current = "0." if d == "." else d
        return _transition(
            replace(state, current=current, just_evaluated=False, awaiting_operand=False)
        )

    if state.current in ("0", "-0") and d != ".":
        current = state.current[:-1] + d
    elif d == "." and "." in state.current:
        return _transition(state)
    else:
        current = state.current + d

    return _transition(replace(state, current=current, awaiting_operand=False))


def input_operator(state: EngineState, op: str) -> Transition:
    """
    Переносит текущее число в строку выражения вместе с оператором.

    Если оператор уже ожидает операнд, он заменяется новым: побеждает
    последний нажатый оператор.
    """
    op = UNICODE_OPERATORS.get(op, op)
    if op not in OPERATORS:
        raise InputError(f"Недопустимый оператор: {op!r}")

    if state.is_error:
        return _transition(state)

    current = state.current
    previous = _pending_expression(state.previous)
    awaiting_operand = state.awaiting_operand
    if state.just_evaluated:
        # Продолжаем от результата
        if state.last_result is not None:
            current = format_number(state.last_result)
        awaiting_operand = False

    if awaiting_operand and PENDING_OPERATOR_RE.search(previous):
        previous = previous[:-1] + op
    else:
        previous = (previous + " " if previous else "") + current + " " + op

    return _transition(
        replace(
            state,
            current=INITIAL_DISPLAY,
            previous=previous,
            just_evaluated=False,
            awaiting_operand=True,
        )
    )


def equals(state: EngineState) -> Transition:
    """
    Вычисляет накопленное выражение.

    Повторное "=" вычисляет только текущее значение, поэтому результат
    на дисплее не меняется.
    """
    pending = _pending_expression(state.previous)
    if state.just_evaluated or not pending:
        expr = state.current
    else:
        expr = pending + " " + state.current
    expr = expr.strip()

    result = evaluate_expression(expr)
    if not result.is_success:
        return _transition(
            replace(
                state,
                current=ERROR_DISPLAY,
                previous="",
                just_evaluated=False,
                awaiting_operand=False,
            )
        )

    return _transition(
        replace(
            state,
            current=format_number(result.value),
            previous=expr + EQUALS_SUFFIX,
            last_result=result.value,
            just_evaluated=True,
            awaiting_operand=False,
        )
    )


def backspace(state: EngineState) -> Transition:
    """Удаляет последний символ текущего числа. Результат "=" не редактируется."""
    if state.just_evaluated or state.is_error:
        return _transition(
            replace(state, current=INITIAL_DISPLAY, just_evaluated=False)
        )

    current = state.current[:-1] if len(state.current) > 1 else ""
    awaiting_operand = state.awaiting_operand
    if current in ("", "-"):
        current = INITIAL_DISPLAY
        # Операнд стёрт целиком: оператор снова можно заменить
        if PENDING_OPERATOR_RE.search(_pending_expression(state.previous)):
            awaiting_operand = True
    return _transition(
        replace(state, current=current, awaiting_operand=awaiting_operand)
    )


def percent(state: EngineState) -> Transition:
    """Делит текущее значение на 100."""
    result = evaluate_expression(state.current)
    if not result.is_success:
        return _transition(
            replace(state, current=ERROR_DISPLAY, just_evaluated=False)
        )

    value = result.value / 100
    last_result = value if state.just_evaluated else state.last_result
    return _transition(
        replace(
            state,
            current=format_number(value),
            last_result=last_result,
            awaiting_operand=False,
        )
    )


def toggle_sign(state: EngineState) -> Transition:
    """Меняет знак текущего числа."""
    if state.current in (INITIAL_DISPLAY, ERROR_DISPLAY):
        return _transition(state)

    if state.current.startswith("-"):
        current = state.current[1:]
    else:
        current = "-" + state.current

    last_result = state.last_result
    if state.just_evaluated and last_result is not None:
        last_result = -last_result
    return _transition(
        replace(state, current=current, last_result=last_result, awaiting_operand=False)
    )


def clear(state: EngineState) -> Transition:
    """Сбрасывает калькулятор в начальное состояние."""
    return _transition(initial_state())


class CalculatorEngine:
    """
    Калькулятор с единственным состоянием.
    Слой ввода вызывает операции (или dispatch), слой отображения получает
    RenderPayload после каждой из них.
    """

    def __init__(
        self,
        state: Optional[EngineState] = None,
        history: Optional[CalculationHistory] = None,
    ) -> None:
        state = state or initial_state()
        if not (state.is_error or is_numeric_literal(state.current)):
            raise InputError(f"Недопустимое значение дисплея: {state.current!r}")
        self._state = state
        self.history = history

        self._handlers: Dict[InputEventType, Callable[[Optional[str]], RenderPayload]] = {
            InputEventType.DIGIT: lambda value: self.input_digit(value or ""),
            InputEventType.OPERATOR: lambda value: self.input_operator(value or ""),
            InputEventType.EQUALS: lambda _: self.equals(),
            InputEventType.BACKSPACE: lambda _: self.backspace(),
            InputEventType.PERCENT: lambda _: self.percent(),
            InputEventType.TOGGLE_SIGN: lambda _: self.toggle_sign(),
            InputEventType.CLEAR: lambda _: self.clear(),
        }

    @property
    def state(self) -> EngineState:
        return self._state

    def render(self) -> RenderPayload:
        """Возвращает данные для отображения текущего состояния."""
        return RenderPayload.from_state(self._state)

    def _apply(self, name: str, transition: Transition) -> RenderPayload:
        self._state, payload = transition
        logger.debug(
            "%s -> previous=%r current=%r",
            name,
            payload.previous_text,
            payload.current_text,
        )
        return payload

    def input_digit(self, d: str) -> RenderPayload:
        return self._apply(f"digit {d}", input_digit(self._state, d))

    def input_operator(self, op: str) -> RenderPayload:
        return self._apply(f"operator {op}", input_operator(self._state, op))

    def equals(self) -> RenderPayload:
        repeated = self._state.just_evaluated
        payload = self._apply("equals", equals(self._state))
        if self.history is not None and self._state.just_evaluated and not repeated:
            self.history.add_entry(
                expression=self._state.previous[: -len(EQUALS_SUFFIX)],
                result=self._state.last_result,
                display=self._state.current,
            )
        return payload

    def backspace(self) -> RenderPayload:
        return self._apply("backspace", backspace(self._state))

    def percent(self) -> RenderPayload:
        return self._apply("percent", percent(self._state))

    def toggle_sign(self) -> RenderPayload:
        return self._apply("toggle_sign", toggle_sign(self._state))

    def clear(self) -> RenderPayload:
        return self._apply("clear", clear(self._state))

    def dispatch(self, event: InputEvent) -> RenderPayload:
        """
        Применяет событие слоя ввода.

        Args:
            event: Событие ввода

        Returns:
            Данные для отображения нового состояния
        """
        handler = self._handlers.get(event.type)
        if handler is None:
            raise InputError(f"Неизвестный тип события: {event.type!r}")
        return handler(event.value)
