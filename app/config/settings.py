from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    http_timeout_seconds: float = 30.0

    document_understanding_engine: str = "pdfplumber"
    document_understanding_timeout_seconds: float = 60.0
    office_reader_timeout_seconds: float = 60.0

    generative_provider: str = "openai"
    generative_api_key: str = ""
    generative_model_name: str = "gpt-4o-mini"
    generative_base_url: str = ""
    generative_timeout_seconds: int = 30
    generative_temperature: float = 0.2

    enrichment_max_chars: int = 8000
