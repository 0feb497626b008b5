from __future__ import annotations

from pathlib import Path
import sys
import unittest

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "src"))

from retryloop.errors import RECOVERED_MESSAGE, Recovered
from retryloop.retry import try_call


class TestTryCall(unittest.TestCase):
    def test_success_returns_none(self) -> None:
        calls: list[str] = []
        self.assertIsNone(try_call(lambda: calls.append("done")))
        self.assertEqual(calls, ["done"])

    def test_returned_failure_is_passed_through_unchanged(self) -> None:
        failure = ValueError("FAILED")
        err = try_call(lambda: failure)
        self.assertIs(err, failure)
        self.assertEqual(str(err), "FAILED")

    def test_non_exception_failure_value_is_passed_through(self) -> None:
        self.assertEqual(try_call(lambda: "bad"), "bad")

    def test_raised_exception_is_captured(self) -> None:
        fault = RuntimeError("X")

        def boom() -> None:
            raise fault

        err = try_call(boom)
        self.assertIsInstance(err, Recovered)
        self.assertIs(err.caused_by(), fault)
        self.assertIs(err.payload, fault)
        self.assertIs(err.__cause__, fault)

    def test_recovered_message_is_fixed(self) -> None:
        def boom() -> None:
            raise KeyError("specific detail")

        err = try_call(boom)
        self.assertEqual(str(err), RECOVERED_MESSAGE)
        self.assertNotIn("specific detail", str(err))

    def test_recovered_accepts_any_payload(self) -> None:
        err = Recovered({"code": 7})
        self.assertEqual(err.caused_by(), {"code": 7})
        self.assertIsNone(err.__cause__)

    def test_keyboard_interrupt_is_not_captured(self) -> None:
        def interrupt() -> None:
            raise KeyboardInterrupt

        with self.assertRaises(KeyboardInterrupt):
            try_call(interrupt)


if __name__ == "__main__":
    unittest.main()
