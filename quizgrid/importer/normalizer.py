from __future__ import annotations

import logging
from typing import Iterable, List, Tuple, Union

from quizgrid.importer.layout import ANSWERS_PER_QUESTION
from quizgrid.models.question import CanonicalQuestion, CategoryMarker, RichText
from quizgrid.models.raw_record import RawRecord
from quizgrid.utils.text import category_path, decode_entities, text_field_value

log = logging.getLogger(__name__)

ImportedRecord = Union[CategoryMarker, CanonicalQuestion]


def build_fractions(correct_indicator: int) -> List[float]:
    """
    3 -> [0.0, 0.0, 1.0, 0.0]; вне 1..4 -> все нули.
    """
    return [1.0 if correct_indicator == k + 1 else 0.0 for k in range(ANSWERS_PER_QUESTION)]


class RecordNormalizer:
    """
    Превращает RawRecord в пару (маркер категории, вопрос).
    Валидации нет: что дал шаблон листа, то и уходит в банк вопросов.
    """

    def __init__(self, category_root: str = "top") -> None:
        self.category_root = category_root

    def normalize(self, raw: RawRecord) -> Tuple[CategoryMarker, CanonicalQuestion]:
        path = category_path(self.category_root, raw.category)

        if not 1 <= raw.correct_indicator <= ANSWERS_PER_QUESTION:
            log.warning(
                "Вопрос %r: номер правильного ответа %r вне 1..%d — правильного ответа нет",
                raw.name,
                raw.correct_indicator,
                ANSWERS_PER_QUESTION,
            )

        question = CanonicalQuestion(
            name=raw.name,
            question_text=decode_entities(raw.question_text),
            answers=[RichText(text_field_value(a)) for a in raw.answers],
            fractions=build_fractions(raw.correct_indicator),
            feedback=[RichText(text_field_value(f)) for f in raw.feedback],
            general_feedback=decode_entities(raw.general_feedback),
            category_path=path,
        )
        return CategoryMarker(category_path=path), question

    def normalize_all(self, records: Iterable[RawRecord]) -> List[ImportedRecord]:
        """
        [маркер, вопрос, маркер, вопрос, ...] — порядок входа сохраняется.
        """
        out: List[ImportedRecord] = []
        for raw in records:
            marker, question = self.normalize(raw)
            out.append(marker)
            out.append(question)
        return out
