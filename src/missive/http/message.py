"""Immutable HTTP message: protocol version, headers, body reference.

Each transformation returns a new Message. Nothing returned to a caller is
ever mutated afterwards, so a message can be shared across threads and
derived from freely::

    msg = Message(headers={"Accept": ["text/html", "application/json"]})
    msg.get_header_line("accept")  # "text/html, application/json"
    json_only = msg.with_header("Accept", "application/json")
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Self

from missive.config import DEFAULTS
from missive.errors import InvalidHeaderName, MissingBodyError
from missive.http.headers import HeaderMap
from missive.http.stream import Stream, coerce_stream


@dataclass(frozen=True, slots=True, kw_only=True)
class Message:
    """Protocol version, headers and body shared by requests and responses.

    ``headers`` may be given as a plain mapping of name to value(s); every
    entry is validated and normalized on construction, and one bad entry
    aborts the whole construction. ``body`` may be given as anything
    ``coerce_stream`` accepts.
    """

    protocol_version: str = DEFAULTS.protocol_version
    headers: HeaderMap = field(default_factory=HeaderMap)
    body: Stream | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.headers, HeaderMap):
            object.__setattr__(self, "headers", HeaderMap(self.headers))
        if self.body is not None and not isinstance(self.body, Stream):
            object.__setattr__(self, "body", coerce_stream(self.body, DEFAULTS.body_mode))

    # -- Protocol version --

    def get_protocol_version(self) -> str:
        return self.protocol_version

    def with_protocol_version(self, version: str) -> Self:
        """Return a message with a different protocol version, or ``self`` if unchanged."""
        if version == self.protocol_version:
            return self
        return replace(self, protocol_version=version)

    # -- Headers --

    def get_headers(self) -> dict[str, list[str]]:
        """All headers as ``{original-case name: [values]}``. A fresh copy each call."""
        return self.headers.to_dict()

    def has_header(self, name: str) -> bool:
        return name in self.headers

    def get_header(self, name: str) -> list[str]:
        """Values for *name* (any casing), or ``[]`` if absent."""
        return self.headers.get_list(name)

    def get_header_line(self, name: str) -> str:
        """Values for *name* joined with ``", "``, or ``""`` if absent."""
        return ", ".join(self.get_header(name))

    def with_header(self, name: str, value: Any) -> Self:
        """Return a message with *name* replaced by *value*.

        Drops any header of the same identity regardless of its casing and
        records the new one under *name* as given. Always a new instance.
        """
        return replace(self, headers=self.headers.set(name, value))

    def with_added_header(self, name: str, value: Any) -> Self:
        """Return a message with *value* appended to *name*'s existing values."""
        if not isinstance(name, str) or not name:
            msg = "Header name must be an RFC 7230 compatible string."
            raise InvalidHeaderName(msg)
        return replace(self, headers=self.headers.add(name, value))

    def without_header(self, name: str) -> Self:
        """Return a message without *name*, or ``self`` if it is absent."""
        headers = self.headers.remove(name)
        if headers is self.headers:
            return self
        return replace(self, headers=headers)

    # -- Body --

    def get_body(self) -> Stream:
        """The body stream.

        Raises:
            MissingBodyError: If no body was ever assigned. This means the
                code that built the message is broken.
        """
        if self.body is None:
            msg = "Message body was never set"
            raise MissingBodyError(msg)
        return self.body

    def with_body(self, body: Stream) -> Self:
        """Return a message with a different body, or ``self`` if it is the same object.

        Raises:
            InvalidStreamArgument: If *body* is not something
                ``coerce_stream`` accepts, ``None`` included.
        """
        if body is self.body:
            return self
        return replace(self, body=coerce_stream(body, DEFAULTS.body_mode))
