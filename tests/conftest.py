"""
Общие фикстуры: сборка строк листа по шаблону (колонки A..J, блок из 4 строк).
"""

import pytest
from typing import List, Optional, Sequence

from quizgrid.models.grid import CellGrid

HEADER_ROW = [
    "name", "category", "", "", "question", "answers", "right", "feedback", "question2", "feedback2",
]


def block_rows(
    name: str = "Q1",
    category: str = "Algebra",
    text: str = "What comes next?",
    answers: Sequence[object] = ("7", "10", "14", "15"),
    indicator: object = 4,
    text2: str = "",
    feedback: str = "",
    feedback2: str = "",
) -> List[List[object]]:
    """Четыре строки одного вопроса в раскладке A..J."""
    rows: List[List[object]] = []
    for offset, answer in enumerate(answers):
        row: List[object] = [""] * 10
        row[5] = answer                   # F
        if offset == 0:
            row[0] = name                 # A
            row[1] = category             # B
            row[4] = text                 # E
            row[6] = indicator            # G
            row[7] = feedback             # H
            row[8] = text2                # I
            row[9] = feedback2            # J
        rows.append(row)
    return rows


def make_grid(*blocks: List[List[object]], header: Optional[List[object]] = None) -> CellGrid:
    rows: List[List[object]] = [list(header or HEADER_ROW)]
    for block in blocks:
        rows.extend(block)
    return CellGrid.from_rows(rows)


@pytest.fixture
def two_block_grid() -> CellGrid:
    return make_grid(
        block_rows(name="Q1", category="Algebra", indicator=4),
        block_rows(
            name="Q2",
            category=" Geometry ",
            text="Angles in a triangle?",
            answers=("90", "180", "270", "360"),
            indicator=2,
        ),
    )


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Логи и .env не должны зависеть от рабочего каталога."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("LOG_DIR", str(tmp_path / "logs"))
    yield
