"""Entrypoint settings loaded from environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class RetryConfig:
    attempts: int
    period_seconds: float


@dataclass(frozen=True)
class DatabaseConfig:
    url: str


@dataclass(frozen=True)
class Settings:
    app_env: str
    log_level: str
    retry: RetryConfig
    database: DatabaseConfig


def _retry() -> RetryConfig:
    return RetryConfig(
        attempts=int(os.getenv("RETRY_ATTEMPTS", "3")),
        period_seconds=float(os.getenv("RETRY_PERIOD_SECONDS", "5")),
    )


def get_settings() -> Settings:
    return Settings(
        app_env=os.getenv("APP_ENV", "local"),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        retry=_retry(),
        database=DatabaseConfig(url=os.getenv("DATABASE_URL", "sqlite:///retryloop.db")),
    )


settings = get_settings()
