from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="KITCHEN_", extra="ignore")

    app_name: str = "Kitchen Converter"
    debug: bool = False
    log_level: str = "INFO"
    cors_origins: list[str] = ["http://localhost:3000", "http://localhost:5173"]
    default_locale: str = "en_US"
    result_placeholder: str = "—"  # shown instead of a result when there is none
    max_input_length: int = 64  # characters


settings = Settings()
