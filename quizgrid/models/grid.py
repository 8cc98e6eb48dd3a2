from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, List, Sequence


def column_index(column: str) -> int:
    """
    Буква колонки -> 0-based индекс: 'A' -> 0, 'Z' -> 25, 'AA' -> 26.
    """
    result = 0
    for char in column.strip().upper():
        if not "A" <= char <= "Z":
            raise ValueError(f"Некорректная буква колонки: {column!r}")
        result = result * 26 + (ord(char) - ord("A") + 1)
    if result == 0:
        raise ValueError("Пустое имя колонки")
    return result - 1


def _cell_str(value: Any) -> str:
    """
    Приводит значение ячейки к строке.
    None и NaN (пустые ячейки из pandas) -> "".
    """
    if value is None:
        return ""
    if isinstance(value, float) and math.isnan(value):
        return ""
    return str(value)


@dataclass(frozen=True)
class CellGrid:
    """
    Только-читаемая сетка ячеек листа.
    Строки 1-based (как в Excel), колонки — буквами.
    Обращение за пределы сетки возвращает пустую строку.
    """

    rows: Sequence[Sequence[Any]]

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Any]]) -> "CellGrid":
        normalized: List[List[str]] = [[_cell_str(v) for v in row] for row in rows]
        return cls(rows=normalized)

    @property
    def row_count(self) -> int:
        return len(self.rows)

    def cell(self, row: int, column: str) -> str:
        if row < 1 or row > len(self.rows):
            return ""
        values = self.rows[row - 1]
        idx = column_index(column)
        if idx >= len(values):
            return ""
        return _cell_str(values[idx])
