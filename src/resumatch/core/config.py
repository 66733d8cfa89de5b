from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "ResuMatch AI"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    # Request limits
    max_request_size_mb: int = 10

    # Client uploads
    allowed_extensions: set[str] = {".pdf", ".docx", ".txt"}

    # AI / Gemini
    gemini_api_key: str = ""
    gemini_model: str = "gemini-3-flash-preview"
    gemini_temperature: float | None = None

    # UI client
    backend_url: str = "http://localhost:3000"
    backend_timeout: float | None = None

    # Server
    host: str = "0.0.0.0"
    port: int = 3000

    @property
    def llm_configured(self) -> bool:
        return bool(self.gemini_api_key)


@lru_cache
def get_settings() -> Settings:
    return Settings()
