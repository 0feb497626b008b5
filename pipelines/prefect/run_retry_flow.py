"""Prefect flow that runs a shell command with a fixed retry period."""

from __future__ import annotations

import argparse
from pathlib import Path
import sys

from prefect import flow, get_run_logger, task

REPO_ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(REPO_ROOT / "src"))
sys.path.insert(0, str(REPO_ROOT))

from pipelines.run_with_retry import run_command  # noqa: E402
from retryloop.config.settings import settings  # noqa: E402
from retryloop.handlers import log_failure  # noqa: E402
from retryloop.retry import retry  # noqa: E402


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run a command with retries via Prefect.")
    parser.add_argument("--attempts", type=int, default=settings.retry.attempts, help="Total runs.")
    parser.add_argument("--period", type=float, default=settings.retry.period_seconds, help="Seconds between runs.")
    parser.add_argument("command", nargs=argparse.REMAINDER, help="Command to run, after `--`.")
    args = parser.parse_args()
    if args.command and args.command[0] == "--":
        args.command = args.command[1:]
    if not args.command:
        parser.error("a command is required")
    return args


@task(name="run-command-with-retry")
def run_command_with_retry(command: list[str], attempts: int, period: float) -> None:
    logger = get_run_logger()
    succeeded = False

    def _attempt() -> object | None:
        nonlocal succeeded
        err = run_command(command)
        succeeded = err is None
        return err

    retry(_attempt, attempts, log_failure(logger), period)
    if not succeeded:
        raise RuntimeError(f"{' '.join(command)} failed after {attempts} attempts")
    logger.info("Command succeeded: %s", " ".join(command))


@flow(name="retryloop-command", log_prints=True)
def retry_command_flow(command: list[str], attempts: int = 3, period: float = 5.0) -> None:
    run_command_with_retry(command, attempts, period)


if __name__ == "__main__":
    args = _parse_args()
    retry_command_flow(command=args.command, attempts=args.attempts, period=args.period)
