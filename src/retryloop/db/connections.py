"""Create SQLAlchemy engines and check that a database answers."""

from __future__ import annotations

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine

from retryloop.config.settings import DatabaseConfig


def create_engine_from_settings(db_config: DatabaseConfig) -> Engine:
    return create_engine(db_config.url, pool_pre_ping=True)


def ping(engine: Engine) -> Exception | None:
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        return None
    except Exception as exc:  # intentionally broad for infra checks
        return exc
