# quizgrid/services/export_service.py

from __future__ import annotations

import logging
from typing import Callable, Iterable

from quizgrid.exporter.serializer import QuestionSerializer
from quizgrid.models.exportable import ExportableQuestion

log = logging.getLogger(__name__)

EXPORT_FILE_EXTENSION = ".xlsx"


class ExportService:
    """
    Выгрузка списка вопросов в текст: строка заголовка + по строке на вопрос.
    На каждый прогон создаётся свой QuestionSerializer, так что заголовок
    выводится ровно один раз за вызов render().
    """

    def __init__(
        self,
        serializer_factory: Callable[[], QuestionSerializer] = QuestionSerializer,
    ) -> None:
        self.serializer_factory = serializer_factory

    @staticmethod
    def default_filename(stem: str) -> str:
        return f"{stem}{EXPORT_FILE_EXTENSION}"

    def render(self, questions: Iterable[ExportableQuestion]) -> str:
        serializer = self.serializer_factory()
        lines = [serializer.serialize_header_once()]
        skipped = 0
        for question in questions:
            row = serializer.serialize_row(question)
            if not row:
                skipped += 1
                continue
            lines.append(row)

        log.info("Выгружено вопросов: %d, пропущено: %d", len(lines) - 1, skipped)
        return "\n".join(lines)
