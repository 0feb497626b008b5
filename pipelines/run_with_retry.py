"""Pipeline entrypoint: run a shell command, retrying it until it exits 0."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
import subprocess
import sys

# Allow running directly from repo root without package installation.
sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src"))

from retryloop.config.settings import settings  # noqa: E402
from retryloop.handlers import unwrap  # noqa: E402
from retryloop.retry import retry  # noqa: E402


class CommandFailed(Exception):
    def __init__(self, command: list[str], returncode: int) -> None:
        super().__init__(f"{' '.join(command)} exited with code {returncode}")
        self.command = command
        self.returncode = returncode


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run a command, retrying on non-zero exit.")
    parser.add_argument(
        "--attempts",
        type=int,
        default=settings.retry.attempts,
        help="Total number of runs; negative retries forever (default: RETRY_ATTEMPTS or 3).",
    )
    parser.add_argument(
        "--period",
        type=float,
        default=settings.retry.period_seconds,
        help="Seconds to wait between failed runs (default: RETRY_PERIOD_SECONDS or 5).",
    )
    parser.add_argument("command", nargs=argparse.REMAINDER, help="Command to run, after `--`.")
    args = parser.parse_args(argv)
    if args.command and args.command[0] == "--":
        args.command = args.command[1:]
    if not args.command:
        parser.error("a command is required")
    return args


def run_command(command: list[str]) -> CommandFailed | None:
    print(f"[RUN] {' '.join(command)}", flush=True)
    result = subprocess.run(command, check=False)
    if result.returncode != 0:
        return CommandFailed(command, result.returncode)
    return None


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(level=settings.log_level)

    succeeded = False
    failures = 0

    def _attempt() -> CommandFailed | None:
        nonlocal succeeded
        err = run_command(args.command)
        succeeded = err is None
        return err

    def _on_error(err: object) -> None:
        nonlocal failures
        failures += 1
        print(f"[FAIL] attempt {failures}: {unwrap(err)}", flush=True)

    retry(_attempt, args.attempts, _on_error, args.period)

    if succeeded:
        print("run_with_retry completed", f"failures={failures}")
        return 0
    print("run_with_retry gave up", f"attempts={failures}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
