"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    pathedit_env: str = "development"
    pathedit_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Editor defaults
    number_precision: int = 6
    default_template: str = "quadratic-1"
    default_append_kind: str = "Q"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
