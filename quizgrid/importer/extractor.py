from __future__ import annotations

import logging
from typing import Dict, Iterator, List, Tuple

from quizgrid.importer.layout import BLOCK_ROWS, QUESTION_LAYOUT, CellRef
from quizgrid.models.grid import CellGrid
from quizgrid.models.raw_record import RawRecord
from quizgrid.utils.parsing import parse_correct_indicator
from quizgrid.utils.text import join_cells

log = logging.getLogger(__name__)


class GridExtractor:
    """
    Нарезает сетку листа на блоки по BLOCK_ROWS строк и собирает из каждого
    блока RawRecord по таблице QUESTION_LAYOUT.
    Пустые и отсутствующие ячейки читаются как "", исключений нет.
    """

    def __init__(
        self,
        first_row: int = 2,
        max_row: int = 1454,
        layout: Dict[str, Tuple[CellRef, ...]] = QUESTION_LAYOUT,
    ) -> None:
        if first_row < 1:
            raise ValueError(f"first_row должен быть >= 1, получено {first_row}")
        self.first_row = first_row
        self.max_row = max_row
        self.layout = layout

    def block_starts(self, grid: CellGrid) -> Iterator[int]:
        """
        2, 6, 10, ... — пока не упрёмся в max_row или в последнюю строку сетки.
        """
        last = min(self.max_row, grid.row_count)
        return iter(range(self.first_row, last + 1, BLOCK_ROWS))

    def _values(self, grid: CellGrid, start: int, field: str) -> List[str]:
        return [grid.cell(start + ref.row_offset, ref.column) for ref in self.layout[field]]

    def read_block(self, grid: CellGrid, start: int) -> RawRecord:
        indicator_cell = self._values(grid, start, "correct_indicator")[0]
        return RawRecord(
            name=self._values(grid, start, "name")[0],
            question_text=join_cells(*self._values(grid, start, "question_text")),
            answers=self._values(grid, start, "answers"),
            correct_indicator=parse_correct_indicator(indicator_cell),
            general_feedback=join_cells(*self._values(grid, start, "general_feedback")),
            category=self._values(grid, start, "category")[0].strip(),
        )

    def extract(self, grid: CellGrid) -> List[RawRecord]:
        records = [self.read_block(grid, start) for start in self.block_starts(grid)]
        log.debug(
            "Извлечено %d блок(ов) из сетки: строк=%d, first_row=%d, max_row=%d",
            len(records),
            grid.row_count,
            self.first_row,
            self.max_row,
        )
        return records
