from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="WRITINGS_", extra="ignore")

    html_dir: Path = Path("html")
    log_level: str = "INFO"


settings = Settings()
