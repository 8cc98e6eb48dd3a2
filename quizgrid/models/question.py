from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from quizgrid.models.enums import AnswerNumbering, QuestionType, TextFormat


@dataclass(slots=True)
class RichText:
    """Текстовое поле с форматом и вложениями, как его ждёт банк вопросов."""

    text: str
    format: TextFormat = TextFormat.HTML
    files: List[str] = field(default_factory=list)


@dataclass(slots=True)
class CategoryMarker:
    """
    Служебная запись перед вопросом: задаёт путь категории,
    в которую банк вопросов положит следующий за ней вопрос.
    """

    category_path: str
    type: QuestionType = QuestionType.CATEGORY


@dataclass(slots=True)
class CanonicalQuestion:
    """
    Нормализованный вопрос с одним правильным ответом.
    answers / fractions / feedback — параллельные списки по 4 элемента.
    """

    name: str
    question_text: str
    answers: List[RichText]
    fractions: List[float]
    feedback: List[RichText]
    general_feedback: str
    category_path: str
    type: QuestionType = QuestionType.MULTICHOICE
    answer_numbering: AnswerNumbering = AnswerNumbering.NUMBERS
    single: bool = True
    question_text_format: TextFormat = TextFormat.HTML
    general_feedback_format: TextFormat = TextFormat.HTML

    # значения по умолчанию банка вопросов
    default_mark: float = 1.0
    penalty: float = 0.3333333
    shuffle_answers: bool = True
    correct_feedback: RichText = field(default_factory=lambda: RichText(""))
    partially_correct_feedback: RichText = field(default_factory=lambda: RichText(""))
    incorrect_feedback: RichText = field(default_factory=lambda: RichText(""))
