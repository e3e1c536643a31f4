"""
Интерфейсы для взаимодействия с пользователем.
Содержит CLI: слой ввода (клавиши) и слой отображения (дисплей).
"""

from .cli import cli

__all__: list[str] = ["cli"]
