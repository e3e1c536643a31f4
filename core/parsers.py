"""
Модуль для разбора и вычисления арифметических выражений.
Содержит проверку допустимых символов, нормализацию и рекурсивный спуск
для + - * / и скобок без использования eval.
"""

import logging
import math
import re
from typing import List, Tuple

from utils.math_utils import round_result

from .exceptions import (
    EvaluationError,
    ExpressionParseError,
    ExpressionValidationError,
    NonFiniteResultError,
)
from .types import EvaluationResult

logger = logging.getLogger(__name__)

ALLOWED_EXPRESSION_RE = re.compile(r"^[0-9+\-*/().% \t\r\n]*$")
TOKEN_RE = re.compile(r"\s*(?:([0-9]+\.?[0-9]*|\.[0-9]+)|(.))")

UNICODE_OPERATORS = {
    "×": "*",
    "÷": "/",
    "−": "-",
}

Token = Tuple[str, str]  # (kind, text), kind: "num" | "op" | "end"


def normalize_expression(expr: str) -> str:
    """Заменяет юникодные операторы на ASCII."""
    for glyph, ascii_op in UNICODE_OPERATORS.items():
        expr = expr.replace(glyph, ascii_op)
    return expr


def sanitize_expression(expr: str) -> str:
    """
    Проверяет выражение на допустимые символы и раскрывает проценты.

    Каждый % текстово заменяется на /100, поэтому "100+10%" означает
    100 + 10/100, а не 110.

    Raises:
        ExpressionValidationError: если встретился недопустимый символ
    """
    normalized = normalize_expression(expr)
    if not ALLOWED_EXPRESSION_RE.match(normalized):
        raise ExpressionValidationError(
            f"Недопустимые символы в выражении: {expr!r}", expression=expr
        )
    return normalized.replace("%", "/100")


def tokenize(expr: str) -> List[Token]:
    """Разбивает выражение на числа и операторы."""
    tokens: List[Token] = []
    for number, symbol in TOKEN_RE.findall(expr):
        if number:
            tokens.append(("num", number))
        elif symbol.strip():
            tokens.append(("op", symbol))
    tokens.append(("end", ""))
    return tokens


class ExpressionParser:
    """
    Рекурсивный спуск по грамматике:

        expr    := term (('+' | '-') term)*
        term    := unary (('*' | '/') unary)*
        unary   := ('+' | '-') unary | primary
        primary := NUMBER | '(' expr ')'
    """

    def __init__(self, expression: str) -> None:
        self.expression = expression
        self.tokens = tokenize(expression)
        self.position = 0

    def parse(self) -> float:
        if self._peek() == ("end", ""):
            raise ExpressionParseError("Пустое выражение", expression=self.expression)
        value = self._expr()
        kind, text = self._peek()
        if kind != "end":
            raise ExpressionParseError(
                f"Неожиданный токен {text!r}", expression=self.expression
            )
        return value

    def _peek(self) -> Token:
        return self.tokens[self.position]

    def _advance(self) -> Token:
        token = self.tokens[self.position]
        self.position += 1
        return token

    def _expr(self) -> float:
        value = self._term()
        while self._peek() in (("op", "+"), ("op", "-")):
            _, op = self._advance()
            right = self._term()
            value = value + right if op == "+" else value - right
        return value

    def _term(self) -> float:
        value = self._unary()
        while self._peek() in (("op", "*"), ("op", "/")):
            _, op = self._advance()
            right = self._unary()
            if op == "*":
                value = value * right
            elif right == 0:
                raise NonFiniteResultError(
                    "Деление на ноль", expression=self.expression
                )
            else:
                value = value / right
        return value

    def _unary(self) -> float:
        if self._peek() in (("op", "+"), ("op", "-")):
            _, op = self._advance()
            value = self._unary()
            return -value if op == "-" else value
        return self._primary()

    def _primary(self) -> float:
        kind, text = self._advance()
        if kind == "num":
            return float(text)
        if (kind, text) == ("op", "("):
            value = self._expr()
            if self._advance() != ("op", ")"):
                raise ExpressionParseError(
                    "Не закрыта скобка", expression=self.expression
                )
            return value
        raise ExpressionParseError(
            f"Ожидалось число, получено {text or 'конец выражения'!r}",
            expression=self.expression,
        )


def calculate(expr: str) -> float:
    """
    Вычисляет выражение.

    Args:
        expr: Выражение из цифр, + - * / ( ) . % и пробелов

    Returns:
        Результат, округлённый до 12 знаков после запятой

    Raises:
        EvaluationError: при недопустимых символах, синтаксической ошибке
            или бесконечном результате
    """
    safe = sanitize_expression(expr)
    try:
        value = ExpressionParser(safe).parse()
    except OverflowError as e:
        raise NonFiniteResultError(
            f"Переполнение: {e}", expression=expr
        ) from e
    except RecursionError as e:
        raise ExpressionParseError(
            "Слишком глубокая вложенность скобок", expression=expr
        ) from e

    if not math.isfinite(value):
        raise NonFiniteResultError(
            f"Результат не является конечным числом: {value}", expression=expr
        )
    return round_result(value)


def evaluate_expression(expr: str) -> EvaluationResult:
    """
    Безопасно вычисляет выражение, не выбрасывая исключений.

    Returns:
        EvaluationResult с числом или с описанием ошибки
    """
    try:
        result = EvaluationResult.success(calculate(expr))
        logger.debug("Выражение %r вычислено: %s", expr, result.value)
        return result
    except EvaluationError as e:
        logger.warning("Не удалось вычислить %r: %s", expr, e)
        return EvaluationResult.failure(str(e))
