# quizgrid/cli.py
import json
from pathlib import Path
from typing import List, Optional

import typer
import logging
from pydantic import ValidationError

from quizgrid.config import Settings
from quizgrid.logging_config import setup_logging
from quizgrid.datasources.base import GridDataSource
from quizgrid.datasources.google_sheets import GoogleSheetsGridSource
from quizgrid.datasources.xlsx_file import XlsxGridSource
from quizgrid.exporter.serializer import QuestionSerializer
from quizgrid.importer.extractor import GridExtractor
from quizgrid.importer.normalizer import ImportedRecord, RecordNormalizer
from quizgrid.mappers.question_mapper import load_exportable, record_to_dict, to_exportable
from quizgrid.models.exportable import ExportableQuestion
from quizgrid.models.question import CanonicalQuestion
from quizgrid.services.export_service import ExportService
from quizgrid.services.import_service import ImportService

log = logging.getLogger(__name__)
app = typer.Typer(add_completion=False)


def _run_import(settings: Settings, source: GridDataSource) -> List[ImportedRecord]:
    service = ImportService(
        source=source,
        extractor=GridExtractor(
            first_row=settings.grid_first_row,
            max_row=settings.grid_max_row,
        ),
        normalizer=RecordNormalizer(category_root=settings.category_root),
    )
    try:
        return service.run()
    except Exception as e:
        # лист не читается — дальше делать нечего
        log.exception("Не удалось прочитать источник %s", type(source).__name__)
        typer.echo(f"❌ Не удалось прочитать лист: {e}", err=True)
        raise typer.Exit(code=1)


def _export_service(settings: Settings) -> ExportService:
    return ExportService(
        serializer_factory=lambda: QuestionSerializer(
            legacy_multiselect=settings.export_legacy_multiselect,
        )
    )


def _emit(content: str, output: Optional[Path]) -> None:
    if output is None:
        typer.echo(content)
        return
    output.write_text(content, encoding="utf-8")
    typer.echo(f"Записано: {output}", err=True)


def _dump_records(records: List[ImportedRecord]) -> str:
    return json.dumps([record_to_dict(r) for r in records], ensure_ascii=False, indent=2)


@app.command()
def import_xlsx(
    path: Path = typer.Argument(..., help="Файл .xlsx с листом вопросов"),
    output: Optional[Path] = typer.Option(None, help="Куда записать JSON (по умолчанию stdout)"),
):
    """
    Прочитать вопросы из .xlsx и выдать JSON: маркеры категорий и вопросы.
    """
    settings = Settings()
    setup_logging(settings, console=output is not None)
    log.info("Запуск команды import_xlsx: %s", path)

    records = _run_import(settings, XlsxGridSource(path=path, sheet_name=settings.xlsx_sheet_name))
    _emit(_dump_records(records), output)
    log.info("Команда import_xlsx завершена")


@app.command()
def import_gsheets(
    output: Optional[Path] = typer.Option(None, help="Куда записать JSON (по умолчанию stdout)"),
):
    """
    Прочитать вопросы из Google Sheets (настройки gsheets_* в .env).
    """
    settings = Settings()
    setup_logging(settings, console=output is not None)
    log.info("Запуск команды import_gsheets")

    if not settings.gsheets_spreadsheet_id:
        typer.echo("❌ gsheets_spreadsheet_id не задан в настройках (.env).", err=True)
        raise typer.Exit(code=1)

    src = GoogleSheetsGridSource(
        spreadsheet_id=settings.gsheets_spreadsheet_id,
        worksheet_name=settings.gsheets_worksheet_name,
        service_account_json=settings.gsheets_service_account_json or "",
    )
    records = _run_import(settings, src)
    _emit(_dump_records(records), output)
    log.info("Команда import_gsheets завершена")


@app.command()
def export(
    input_json: Path = typer.Argument(..., help="JSON-список вопросов"),
    output: Optional[Path] = typer.Option(None, help="Куда записать результат (по умолчанию stdout)"),
):
    """
    Выгрузить вопросы из JSON в построчный формат с заголовком.
    Выгружаются только multichoice с 4 вариантами ответа.
    """
    settings = Settings()
    setup_logging(settings, console=output is not None)
    log.info("Запуск команды export: %s", input_json)

    try:
        items = json.loads(input_json.read_text(encoding="utf-8"))
        if not isinstance(items, list):
            raise ValueError("ожидается JSON-список вопросов")
        questions = load_exportable(items)
    except (OSError, ValueError, ValidationError) as e:
        log.exception("Не удалось загрузить вопросы из %s", input_json)
        typer.echo(f"❌ Некорректный входной файл: {e}", err=True)
        raise typer.Exit(code=1)

    _emit(_export_service(settings).render(questions), output)
    log.info("Команда export завершена")


@app.command()
def convert(
    path: Path = typer.Argument(..., help="Файл .xlsx с листом вопросов"),
    output: Optional[Path] = typer.Option(None, help="Куда записать результат (по умолчанию stdout)"),
):
    """
    .xlsx -> построчный формат, без промежуточного банка вопросов.
    """
    settings = Settings()
    setup_logging(settings, console=output is not None)
    log.info("Запуск команды convert: %s", path)

    records = _run_import(settings, XlsxGridSource(path=path, sheet_name=settings.xlsx_sheet_name))
    questions: List[ExportableQuestion] = [
        to_exportable(r) for r in records if isinstance(r, CanonicalQuestion)
    ]
    _emit(_export_service(settings).render(questions), output)
    log.info("Команда convert завершена")


def main():
    app()


if __name__ == "__main__":
    main()
