# quizgrid/datasources/google_sheets.py
from __future__ import annotations

import logging
from dataclasses import dataclass

import gspread

from quizgrid.datasources.base import GridDataSource
from quizgrid.models.grid import CellGrid

log = logging.getLogger(__name__)


@dataclass
class GoogleSheetsGridSource(GridDataSource):
    spreadsheet_id: str
    worksheet_name: str
    service_account_json: str

    def fetch_grid(self) -> CellGrid:
        """
        Читает лист целиком, без заголовков: get_all_values() отдаёт
        список строк со строковыми значениями, хвостовые пустые строки обрезаны.
        Ошибки доступа (нет листа, нет прав) пробрасываются вызывающему.
        """
        gc = gspread.service_account(filename=self.service_account_json)
        sh = gc.open_by_key(self.spreadsheet_id)
        ws = sh.worksheet(self.worksheet_name)

        values = ws.get_all_values()
        log.info("Google Sheets '%s': прочитано %d строк(и)", self.worksheet_name, len(values))
        return CellGrid.from_rows(values)
