"""Immutable HTTP response.

Status code and reason phrase on top of ``Message``.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from http import HTTPStatus
from typing import Self

from missive.config import DEFAULTS
from missive.errors import InvalidStatusCode
from missive.http.message import Message


def _check_status(status: object) -> None:
    if isinstance(status, bool) or not isinstance(status, int) or not 100 <= status <= 599:
        msg = f"Status code must be an integer between 100 and 599, got {status!r}"
        raise InvalidStatusCode(msg)


@dataclass(frozen=True, slots=True)
class Response(Message):
    """An HTTP response built through immutable transformations.

    Construct with a status, then chain ``.with_*()`` calls::

        resp = Response(201).with_header("Location", "/users/42")
    """

    status: int = 200
    reason: str = ""

    def __post_init__(self) -> None:
        if self.body is None:
            object.__setattr__(self, "body", DEFAULTS.body)
        Message.__post_init__(self)
        _check_status(self.status)

    def get_status_code(self) -> int:
        return self.status

    def with_status(self, status: int, reason: str = "") -> Self:
        """Return a response with a different status and reason phrase.

        An empty *reason* falls back to the standard phrase for *status*.
        """
        _check_status(status)
        if status == self.status and reason == self.reason:
            return self
        return replace(self, status=status, reason=reason)

    def get_reason_phrase(self) -> str:
        """The explicit reason, else the registered phrase, else ``""``."""
        if self.reason:
            return self.reason
        try:
            return HTTPStatus(self.status).phrase
        except ValueError:
            return ""
