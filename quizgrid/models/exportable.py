from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class ExportAnswer(BaseModel):
    text: str = ""
    fraction: float = 0.0


class ExportableQuestion(BaseModel):
    """
    Вопрос, полученный из внешнего хранилища, в том виде,
    который нужен сериализатору строк. Тип не ограничивается multichoice:
    остальные типы просто пропускаются при выгрузке.
    """

    model_config = ConfigDict(extra="ignore")

    type: str
    name: str = ""
    text: str = ""
    answers: List[ExportAnswer] = Field(default_factory=list)
    single: bool = True
    answer_numbering: str = "123"
    correct_feedback: str = ""
    partially_correct_feedback: str = ""
    incorrect_feedback: str = ""
    default_mark: float = 1.0
