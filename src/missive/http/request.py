"""Immutable HTTP request.

Request line data (method and request target) on top of ``Message``.
Parsing the target into a URI is left to the caller.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Self

from missive.config import DEFAULTS
from missive.errors import InvalidMethod, InvalidRequestTarget
from missive.http.message import Message
from missive.http.validation import is_valid_name


def _check_method(method: object) -> None:
    # Methods share the header-name token grammar
    if not is_valid_name(method):
        msg = f"HTTP method must be an RFC 7230 token, got {method!r}"
        raise InvalidMethod(msg)


def _check_target(target: object) -> None:
    if not isinstance(target, str) or not target or any(ch.isspace() for ch in target):
        msg = f"Request target must be a non-empty string without whitespace, got {target!r}"
        raise InvalidRequestTarget(msg)


@dataclass(frozen=True, slots=True)
class Request(Message):
    """An HTTP request built through immutable transformations.

    Without an explicit ``body`` a fresh in-memory stream is opened::

        req = Request("POST", "/users", headers={"Content-Type": "application/json"})
        req.get_body().write('{"name": "alice"}')
    """

    method: str = "GET"
    target: str = "/"

    def __post_init__(self) -> None:
        if self.body is None:
            object.__setattr__(self, "body", DEFAULTS.body)
        Message.__post_init__(self)
        _check_method(self.method)
        _check_target(self.target)

    def with_method(self, method: str) -> Self:
        """Return a request with a different method, or ``self`` if unchanged.

        Case is preserved: ``"get"`` and ``"GET"`` are different methods.
        """
        if method == self.method:
            return self
        _check_method(method)
        return replace(self, method=method)

    def get_request_target(self) -> str:
        return self.target

    def with_request_target(self, target: str) -> Self:
        """Return a request with a different target, or ``self`` if unchanged."""
        if target == self.target:
            return self
        _check_target(target)
        return replace(self, target=target)
