from __future__ import annotations

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    # OCR provider: tesseract | mock
    ocr_provider: str = "tesseract"
    # Tesseract language codes, in priority order (OCR_LANGUAGES='["eng","ara"]')
    ocr_languages: list[str] = ["eng", "ara"]

    tesseract_cmd: str = "tesseract"
    tesseract_config: str = ""
    check_tesseract_on_startup: bool = True

    @field_validator("ocr_languages")
    @classmethod
    def _strip_languages(cls, value: list[str]) -> list[str]:
        return [code.strip() for code in value if code.strip()]


settings = Settings()
