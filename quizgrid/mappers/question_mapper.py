from __future__ import annotations

from dataclasses import asdict
from enum import Enum
from typing import Any, Dict, List, Union

from quizgrid.models.exportable import ExportAnswer, ExportableQuestion
from quizgrid.models.question import CanonicalQuestion, CategoryMarker


def to_exportable(question: CanonicalQuestion) -> ExportableQuestion:
    """
    Импортированный вопрос -> вход сериализатора строк.
    Позволяет перегнать лист в текстовый формат без банка вопросов.
    """
    return ExportableQuestion(
        type=question.type.value,
        name=question.name,
        text=question.question_text,
        answers=[
            ExportAnswer(text=answer.text, fraction=fraction)
            for answer, fraction in zip(question.answers, question.fractions)
        ],
        single=question.single,
        answer_numbering=question.answer_numbering.value,
        correct_feedback=question.correct_feedback.text,
        partially_correct_feedback=question.partially_correct_feedback.text,
        incorrect_feedback=question.incorrect_feedback.text,
        default_mark=question.default_mark,
    )


def record_to_dict(record: Union[CategoryMarker, CanonicalQuestion]) -> Dict[str, Any]:
    """
    JSON-совместимый dict; Enum-значения разворачиваются в их value.
    """
    return _plain(asdict(record))


def _plain(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, dict):
        return {k: _plain(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_plain(v) for v in value]
    return value


def load_exportable(items: List[Dict[str, Any]]) -> List[ExportableQuestion]:
    """
    Список dict'ов (из JSON) -> ExportableQuestion; ошибки pydantic пробрасываются.
    """
    return [ExportableQuestion.model_validate(item) for item in items]
