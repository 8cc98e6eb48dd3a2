from __future__ import annotations

from typing import Dict, NamedTuple, Tuple


class CellRef(NamedTuple):
    row_offset: int    # смещение от первой строки блока
    column: str


# Шаблон листа: один вопрос = блок из 4 строк.
# Поля из нескольких ячеек склеиваются через <br/> в порядке перечисления.
BLOCK_ROWS = 4
ANSWERS_PER_QUESTION = 4

QUESTION_LAYOUT: Dict[str, Tuple[CellRef, ...]] = {
    "name": (CellRef(0, "A"),),
    "category": (CellRef(0, "B"),),
    "question_text": (CellRef(0, "E"), CellRef(0, "I")),
    "answers": tuple(CellRef(offset, "F") for offset in range(ANSWERS_PER_QUESTION)),
    "correct_indicator": (CellRef(0, "G"),),
    "general_feedback": (CellRef(0, "H"), CellRef(0, "J")),
}
