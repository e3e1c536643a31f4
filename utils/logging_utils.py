"""
Утилиты для настройки логирования.
Содержит функции для настройки цветного логирования и форматирования.
"""

import logging

import coloredlogs

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s"


def setup_logging(level: str = "INFO", use_colors: bool = True) -> None:
    """
    Настраивает логирование для приложения.

    Args:
        level: Уровень логирования (DEBUG, INFO, WARNING, ERROR)
        use_colors: Использовать цветное логирование
    """
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Неизвестный уровень логирования: {level}")

    if use_colors:
        coloredlogs.install(level=numeric_level, fmt=LOG_FORMAT)
    else:
        logging.basicConfig(format=LOG_FORMAT, level=numeric_level)
        logging.getLogger().setLevel(numeric_level)


def get_logger(name: str) -> logging.Logger:
    """
    Создает логгер с заданным именем.

    Args:
        name: Имя логгера

    Returns:
        Настроенный логгер
    """
    return logging.getLogger(name)
