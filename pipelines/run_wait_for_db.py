"""Pipeline utility: wait until the configured database is reachable."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
import sys

# Allow running directly from repo root without package installation.
sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src"))

from retryloop.config.settings import DatabaseConfig, settings  # noqa: E402
from retryloop.db.connections import create_engine_from_settings, ping  # noqa: E402
from retryloop.handlers import log_failure  # noqa: E402
from retryloop.retry import retry  # noqa: E402

logger = logging.getLogger("run_wait_for_db")


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Block until the database answers SELECT 1.")
    parser.add_argument("--url", default=settings.database.url, help="SQLAlchemy URL (default: DATABASE_URL).")
    parser.add_argument("--attempts", type=int, default=settings.retry.attempts, help="Total checks.")
    parser.add_argument("--period", type=float, default=settings.retry.period_seconds, help="Seconds between checks.")
    return parser.parse_args(argv)


def wait_for_db(db_config: DatabaseConfig, attempts: int, period: float) -> bool:
    engine = create_engine_from_settings(db_config)
    reachable = False

    def _check() -> Exception | None:
        nonlocal reachable
        err = ping(engine)
        reachable = err is None
        return err

    try:
        retry(_check, attempts, log_failure(logger), period)
    finally:
        engine.dispose()
    return reachable


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(level=settings.log_level)

    ok = wait_for_db(DatabaseConfig(url=args.url), args.attempts, args.period)
    status = "PASS" if ok else "FAIL"
    print(f"[{status}] {args.url}")
    return 0 if ok else 1


if __name__ == "__main__":
    raise SystemExit(main())
