# quizgrid/config.py
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    """
    Конфиг приложения. В pydantic v2 настройки для .env задаются через model_config,
    а BaseSettings — из пакета pydantic-settings.
    """

    # --------- Google Sheets ----------
    gsheets_spreadsheet_id: str | None = None
    gsheets_worksheet_name: str = "Вопросы"
    gsheets_service_account_json: str | None = Field(
        default=None,
        description="Путь к credentials JSON (если используем gspread)",
    )

    # --------- XLSX ----------
    xlsx_sheet_name: str | None = Field(
        default=None,
        description="Имя листа в книге; пусто — первый лист",
    )

    # --------- Grid layout ----------
    grid_first_row: int = Field(
        default=2,
        description="Строка, с которой начинается первый блок вопроса (1-based)",
    )
    grid_max_row: int = Field(
        default=1454,
        description="Верхняя граница строк, которые просматривает экстрактор",
    )

    # --------- Import behavior ----------
    category_root: str = "top"

    # --------- Export behavior ----------
    export_legacy_multiselect: bool = Field(
        default=True,
        description=(
            "Буквы частично верных ответов пишутся как 'A,B,' (исторический формат). "
            "False — выравнивание по колонкам 'Answer 1'/'Answer 2'."
        ),
    )

    # --------- Logging ----------
    log_dir: str = "logs"
    log_level: str = "INFO"
    log_file: str = "quizgrid.log"
    log_max_bytes: int = 5 * 1024 * 1024  # 5 MB
    log_backup_count: int = 3

    # pydantic v2 style config:
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # лишние переменные окружения игнорируем
    )
