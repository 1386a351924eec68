from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
        populate_by_name=True,
    )

    app_env: str = "dev"
    log_level: str = "INFO"

    host: str = "127.0.0.1"
    port: int = 8000

    pipeline_mode: str = "combined"
    max_chars_per_file: int = 15000

    pdf_engine: str = "pymupdf"
    pdf_max_pages: int = 50
    pdf_raster_dpi: int = 200

    ocr_language: str = "eng"
    tesseract_cmd: str = ""

    generation_provider: str = "anthropic"
    generation_api_key: str = Field(
        default="",
        validation_alias=AliasChoices("generation_api_key", "claude_api_key"),
    )
    generation_model_name: str = "claude-sonnet-4-20250514"
    generation_base_url: str = ""
    generation_max_tokens: int = 2000
    generation_timeout_seconds: float | None = None
    anthropic_version: str = "2023-06-01"
