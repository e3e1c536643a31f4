"""
Математические утилиты для округления и форматирования результатов.
"""

import math
import re
import sys
from decimal import Decimal

NUMERIC_LITERAL_RE = re.compile(r"-?(?:[0-9]+\.?[0-9]*|\.[0-9]+)")

RESULT_SCALE = 1e12
# Начиная с этой величины у float нет 12 знаков после запятой
ROUNDING_LIMIT = 1e15
PLAIN_INTEGER_LIMIT = 1e21


def round_result(value: float) -> float:
    """
    Округляет результат до 12 знаков после запятой (half-up).

    Убирает шум плавающей точки: 0.1 + 0.2 даёт 0.3.

    Args:
        value: Конечное число

    Returns:
        Округлённое число
    """
    if abs(value) >= ROUNDING_LIMIT:
        return value
    return math.floor((value + sys.float_info.epsilon) * RESULT_SCALE + 0.5) / RESULT_SCALE


def format_number(value: float) -> str:
    """
    Преобразует число в строку для дисплея.

    Целые значения выводятся без дробной части, экспоненциальная запись
    разворачивается, чтобы строка оставалась числовым литералом.

    Args:
        value: Конечное число

    Returns:
        Строковое представление
    """
    if not math.isfinite(value):
        raise ValueError(f"Нельзя отформатировать {value!r}")

    if value == 0:
        return "0"

    if float(value).is_integer() and abs(value) < PLAIN_INTEGER_LIMIT:
        return str(int(value))

    text = repr(float(value))
    if "e" in text:
        text = format(Decimal(text), "f")
    return text


def is_numeric_literal(text: str) -> bool:
    """Проверяет, что строка является числовым литералом дисплея."""
    return NUMERIC_LITERAL_RE.fullmatch(text) is not None
