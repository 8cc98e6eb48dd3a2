from __future__ import annotations

import logging
from typing import List

from quizgrid.models.enums import QuestionType
from quizgrid.models.exportable import ExportableQuestion
from quizgrid.utils.parsing import format_number
from quizgrid.utils.text import quote

log = logging.getLogger(__name__)

HEADER = (
    "questionname,questiontext,A,B,C,D,Answer 1,Answer 2,"
    "answernumbering, correctfeedback, partiallycorrectfeedback, incorrectfeedback, defaultmark"
)

ANSWER_LETTERS = "ABCD"
FULL_FRACTION = 1.0
PARTIAL_FRACTION = 0.5

# Колонки 'Answer 1' и 'Answer 2'
ANSWER_COLUMNS = 2

# Пустое значение для незаполненной колонки 'Answer 2'
BLANK_COLUMN = " "


class QuestionSerializer:
    """
    Построчная выгрузка вопросов с 4 вариантами ответа.

    Один экземпляр = один прогон выгрузки: флаг header_emitted
    живёт в экземпляре и не сбрасывается до конца прогона.
    """

    def __init__(self, legacy_multiselect: bool = True) -> None:
        self.header_emitted = False
        self.legacy_multiselect = legacy_multiselect

    def serialize_header_once(self) -> str:
        if self.header_emitted:
            return ""
        self.header_emitted = True
        return HEADER

    def right_answer_field(self, question: ExportableQuestion) -> str:
        """
        Колонки 'Answer 1'/'Answer 2' по долям ответов.

        single: ответ с долей 1.0 -> 'D, ,'; если таких несколько — берётся последний.
        не single: ответы с долей 0.5 копятся буквами.
        В режиме legacy_multiselect=False выводится ровно две колонки:
        недостающая заполняется пробелом, буквы сверх двух отбрасываются.
        """
        right = ""
        partial: List[str] = []
        for letter, answer in zip(ANSWER_LETTERS, question.answers):
            if question.single and answer.fraction == FULL_FRACTION:
                right = f"{letter},{BLANK_COLUMN},"
            elif not question.single and answer.fraction == PARTIAL_FRACTION:
                partial.append(letter)

        if question.single or not partial:
            return right
        if self.legacy_multiselect:
            # запятая после каждой буквы, как в исходном формате
            return "".join(f"{letter}," for letter in partial)
        if len(partial) > ANSWER_COLUMNS:
            log.warning(
                "Вопрос %r: частично верных ответов %d, в колонки Answer 1/2 попадут только %s",
                question.name,
                len(partial),
                ",".join(partial[:ANSWER_COLUMNS]),
            )
            partial = partial[:ANSWER_COLUMNS]
        while len(partial) < ANSWER_COLUMNS:
            partial.append(BLANK_COLUMN)
        return ",".join(partial) + ","

    def serialize_row(self, question: ExportableQuestion) -> str:
        if question.type != QuestionType.MULTICHOICE.value:
            log.debug("Вопрос %r пропущен: тип %r не выгружается", question.name, question.type)
            return ""
        if len(question.answers) != len(ANSWER_LETTERS):
            log.debug(
                "Вопрос %r пропущен: ответов %d, нужно %d",
                question.name,
                len(question.answers),
                len(ANSWER_LETTERS),
            )
            return ""

        parts = [quote(question.name), quote(question.text)]
        parts.extend(quote(answer.text) for answer in question.answers)
        parts.append(self.right_answer_field(question))
        parts.append(quote(question.answer_numbering))
        parts.append(quote(question.correct_feedback))
        parts.append(quote(question.partially_correct_feedback))
        parts.append(quote(question.incorrect_feedback))
        parts.append(quote(format_number(question.default_mark)))
        return "".join(parts)
