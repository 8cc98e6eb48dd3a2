# quizgrid/services/import_service.py

from __future__ import annotations

import logging
from typing import List

from quizgrid.datasources.base import GridDataSource
from quizgrid.importer.extractor import GridExtractor
from quizgrid.importer.normalizer import ImportedRecord, RecordNormalizer
from quizgrid.models.question import CanonicalQuestion

log = logging.getLogger(__name__)


class ImportService:
    """
    Сервис импорта вопросов из листа.

    Основной сценарий:
      - получает сетку ячеек из источника (xlsx / Google Sheets),
      - режет её на блоки по 4 строки (GridExtractor),
      - нормализует каждый блок в пару «маркер категории + вопрос».

    Сохранение результата в банк вопросов — забота вызывающего.
    """

    def __init__(
        self,
        source: GridDataSource,
        extractor: GridExtractor,
        normalizer: RecordNormalizer,
    ) -> None:
        self.source = source
        self.extractor = extractor
        self.normalizer = normalizer

    def run(self) -> List[ImportedRecord]:
        log.info("Начинаем импорт вопросов из %s", type(self.source).__name__)

        # 1. Сетка; ошибки чтения файла/листа пробрасываем как есть
        grid = self.source.fetch_grid()

        # 2. Блоки -> сырые записи
        raw_records = self.extractor.extract(grid)

        # 3. Сырые записи -> маркеры категорий и вопросы
        records = self.normalizer.normalize_all(raw_records)

        questions = [r for r in records if isinstance(r, CanonicalQuestion)]
        no_answer = sum(1 for q in questions if 1.0 not in q.fractions)
        log.info(
            "Импорт завершён: вопросов=%d, без правильного ответа=%d",
            len(questions),
            no_answer,
        )
        return records
