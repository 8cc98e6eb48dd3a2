from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


@dataclass(slots=True)
class RawRecord:
    """
    Представляет один блок из 4 строк листа (один вопрос) в «сыром» виде.
    Значения ячеек уже приведены к строкам, HTML-сущности не раскодированы.
    """

    name: str                                 # A (первая строка блока)
    question_text: str                        # E + "<br/>" + I
    answers: List[str]                        # F по 4 строкам блока
    correct_indicator: int                    # G: 1..4 — номер верного ответа, иначе 0
    general_feedback: str                     # H + "<br/>" + J
    category: str                             # B, trim-нутая
    feedback: List[str] = field(default_factory=lambda: [""] * 4)  # зарезервировано
