# quizgrid/datasources/xlsx_file.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import pandas as pd

from quizgrid.datasources.base import GridDataSource
from quizgrid.models.grid import CellGrid

log = logging.getLogger(__name__)


@dataclass
class XlsxGridSource(GridDataSource):
    path: Path
    sheet_name: Optional[str] = None   # None — первый лист книги

    def fetch_grid(self) -> CellGrid:
        """
        Читает лист .xlsx как есть: header=None, чтобы строка 1 листа
        оказалась строкой 1 сетки. Строки вида "NA", "None", "null" остаются текстом:
        разбор NA-маркеров pandas отключён, пустыми считаются только пустые ячейки.
        """
        df = pd.read_excel(
            self.path,
            sheet_name=self.sheet_name if self.sheet_name is not None else 0,
            header=None,
            dtype=object,
            keep_default_na=False,
            na_values=[],
            engine="openpyxl",
        )
        log.info("Файл %s: прочитано %d строк(и), %d колонок", self.path, *df.shape)
        return CellGrid.from_rows(df.values.tolist())
