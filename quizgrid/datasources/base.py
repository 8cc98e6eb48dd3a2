from __future__ import annotations
from quizgrid.models.grid import CellGrid

class GridDataSource:
    """
    Абстрактный источник сетки ячеек листа.
    """
    def fetch_grid(self) -> CellGrid:
        raise NotImplementedError
