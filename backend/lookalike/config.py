"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    lookalike_env: str = "development"
    lookalike_log_level: str = "debug"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Matching
    match_threshold: int = 60
    quality_excellent: int = 85
    quality_good: int = 70
    quality_fair: int = 50
    fuzzy_matching: bool = False

    # Rendering
    render_cache_size: int = 256

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
