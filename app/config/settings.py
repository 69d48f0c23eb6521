from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    host: str = "0.0.0.0"
    port: int = 8000
    cors_origins: list[str] = ["http://localhost:3000", "http://127.0.0.1:3000"]

    default_user_id: str = "anonymous_user"
    cost_per_call: float = 0.01

    pdf_engine: str = "pdfplumber"

    llm_provider: str = "gemini"
    llm_api_key: str = ""
    llm_model_name: str = "gemini-1.5-flash"
    llm_base_url: str = ""
    llm_timeout_seconds: int = 60
    llm_temperature: float = 0.0
