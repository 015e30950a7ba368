"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(
        env_prefix="BANK_TELLER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Service
    service_name: str = "bank-teller"

    # Logging (stderr by default so records never interleave with prompts)
    log_level: str = "WARNING"
    log_file: str | None = None

    # Observability
    metrics_port: int | None = None


settings = Settings()
