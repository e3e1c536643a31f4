"""
Ядро калькулятора - состояние, операции ввода и вычисление выражений.
"""

# Основные классы
from .engine import CalculatorEngine, initial_state

# Импортируем исключения
from .exceptions import (
    CalculatorError,
    EvaluationError,
    ExpressionParseError,
    ExpressionValidationError,
    InputError,
    NonFiniteResultError,
)
from .history import CalculationHistory, HistoryEntry
from .parsers import calculate, evaluate_expression

# Импортируем основные типы данных
from .types import (
    ERROR_DISPLAY,
    EngineState,
    EvaluationResult,
    InputEvent,
    InputEventType,
    RenderPayload,
)

__all__ = [
    # Типы данных
    "ERROR_DISPLAY",
    "EngineState",
    "EvaluationResult",
    "InputEvent",
    "InputEventType",
    "RenderPayload",
    # Исключения
    "CalculatorError",
    "EvaluationError",
    "ExpressionValidationError",
    "ExpressionParseError",
    "NonFiniteResultError",
    "InputError",
    # Основные классы
    "CalculatorEngine",
    "CalculationHistory",
    "HistoryEntry",
    "initial_state",
    "calculate",
    "evaluate_expression",
]
