import sys
from pathlib import Path

from dotenv import load_dotenv

# Добавляем корневую директорию в PYTHONPATH
root_dir = Path(__file__).parent.parent
sys.path.append(str(root_dir))


def load_env_files(base_dir: Path = root_dir) -> bool:
    """Загружает переменные окружения из .env файлов."""
    # Пытаемся загрузить локальные .env файлы в порядке приоритета
    env_files = [
        ".env.local",  # Локальные переопределения, не в git
        ".env",        # Основной .env файл, не в git
        ".env.example" # Пример настроек, в git
    ]

    for env_file in env_files:
        env_path = base_dir / env_file
        if env_path.exists():
            load_dotenv(env_path)
            return True

    return False


def main() -> None:
    """Точка входа для запуска калькулятора."""
    load_env_files()

    from interfaces.cli import cli
    cli()


if __name__ == "__main__":
    main()
