"""
Пользовательские исключения калькулятора.
Определяет иерархию исключений для различных типов ошибок.
"""


class CalculatorError(Exception):
    """Базовое исключение для всех ошибок калькулятора."""
    pass


class EvaluationError(CalculatorError):
    """Не удалось вычислить выражение."""

    def __init__(self, message: str, expression: str = "") -> None:
        super().__init__(message)
        self.expression = expression


class ExpressionValidationError(EvaluationError):
    """Выражение содержит недопустимые символы."""
    pass


class ExpressionParseError(EvaluationError):
    """Синтаксическая ошибка в выражении."""
    pass


class NonFiniteResultError(EvaluationError):
    """Результат не является конечным числом (деление на ноль, переполнение)."""
    pass


class InputError(CalculatorError, ValueError):
    """Событие ввода вне допустимого набора."""
    pass
