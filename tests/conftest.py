"""
Конфигурация pytest для тестов калькулятора.
"""

import sys
from pathlib import Path

import pytest

# Добавляем корневую директорию в sys.path для импорта модулей
sys.path.insert(0, str(Path(__file__).parent.parent))

from core.engine import CalculatorEngine  # noqa: E402
from core.history import CalculationHistory  # noqa: E402


@pytest.fixture
def history():
    return CalculationHistory()


@pytest.fixture
def engine(history):
    return CalculatorEngine(history=history)
