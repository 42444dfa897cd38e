from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_name: str = "Book Word Count"
    app_version: str = "1.0.0"
    default_top_n: int = 10
    executor: str = "sequential"  # sequential | threaded
    max_workers: int = 4
    chunk_size: int = 2000
    counts_path: str = "WordCounts.json"
    load_on_startup: bool = False
    max_upload_size_mb: int = 50
    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_prefix="BWC_", extra="ignore")


settings = Settings()
