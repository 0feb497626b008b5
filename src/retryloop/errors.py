"""Failure value produced when a retried function raises instead of returning."""

from __future__ import annotations

RECOVERED_MESSAGE = "RECOVERED, UNKNOWN ERROR; CALL caused_by() FOR THE ORIGINAL FAULT"


class Recovered(Exception):
    """Wraps whatever a function raised so it can be handled as a plain failure.

    The message never varies; inspect ``caused_by()`` for the original.
    """

    def __init__(self, payload: object) -> None:
        super().__init__(RECOVERED_MESSAGE)
        self.payload = payload
        if isinstance(payload, BaseException):
            self.__cause__ = payload

    def __str__(self) -> str:
        return RECOVERED_MESSAGE

    def caused_by(self) -> object:
        return self.payload
