from dataclasses import dataclass
from typing import List, Optional, Dict, Any
from datetime import datetime
import uuid


@dataclass
class HistoryEntry:
    """
    Одно завершённое вычисление.
    """
    id: str
    entry_number: int
    expression: str
    result: float
    display: str
    timestamp: datetime


class CalculationHistory:
    """
    Лента вычислений калькулятора.
    Хранится только в памяти, старые записи вытесняются при превышении лимита.
    """

    def __init__(self, limit: Optional[int] = None):
        self.limit = limit
        self.entries: List[HistoryEntry] = []
        self.next_entry_number = 0

    def add_entry(self, expression: str, result: float, display: str) -> str:
        """
        Добавляет вычисление в ленту.

        Args:
            expression: Вычисленное выражение без знака "="
            result: Числовой результат
            display: Результат в том виде, в каком он показан на дисплее

        Returns:
            ID созданной записи
        """
        entry_id = str(uuid.uuid4())
        entry = HistoryEntry(
            id=entry_id,
            entry_number=self.next_entry_number,
            expression=expression,
            result=result,
            display=display,
            timestamp=datetime.now(),
        )

        self.entries.append(entry)
        self.next_entry_number += 1

        if self.limit is not None and len(self.entries) > self.limit:
            del self.entries[: len(self.entries) - self.limit]

        return entry_id

    def get_last_entry(self) -> Optional[HistoryEntry]:
        """Возвращает последнее вычисление."""
        return self.entries[-1] if self.entries else None

    def get_entry_by_id(self, entry_id: str) -> Optional[HistoryEntry]:
        for entry in self.entries:
            if entry.id == entry_id:
                return entry
        return None

    def get_all_entries(self) -> List[HistoryEntry]:
        """Возвращает все записи в хронологическом порядке."""
        return self.entries.copy()

    def get_entries_count(self) -> int:
        return len(self.entries)

    def is_empty(self) -> bool:
        return len(self.entries) == 0

    def clear(self) -> None:
        """Очищает ленту, нумерация продолжается."""
        self.entries = []

    def get_entry_summary(self, entry: HistoryEntry) -> Dict[str, Any]:
        """
        Возвращает краткую сводку записи для отображения в интерфейсе.
        """
        return {
            "entry_number": entry.entry_number,
            "expression": entry.expression,
            "display": entry.display,
            "timestamp": entry.timestamp.isoformat(),
        }

    def get_full_history_summary(self) -> Dict[str, Any]:
        return {
            "total_entries": len(self.entries),
            "entries": [self.get_entry_summary(entry) for entry in self.entries],
        }
