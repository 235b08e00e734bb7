from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="WRITINGS_", extra="ignore")

    html_dir: Path = Path("html")
    user_agent: str = "writings-update/0.1 (bahai.org library snapshot)"
    request_timeout_s: float = 30.0
    max_bytes: int = 20_000_000


settings = Settings()
