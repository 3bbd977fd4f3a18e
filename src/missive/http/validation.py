"""RFC 7230 header name and value validation.

Two independent checks: ``assert_valid_name`` for field names and
``normalize_value`` for field values. Both are pure and stateless; every
construction and mutation site calls both.

Grammar (RFC 7230 §3.2.6)::

    token          = 1*tchar
    tchar          = "!" / "#" / "$" / "%" / "&" / "'" / "*"
                   / "+" / "-" / "." / "^" / "_" / "`" / "|" / "~"
                   / DIGIT / ALPHA
    field-value    = *( SP / HTAB / VCHAR / obs-text )
    obs-text       = %x80-FF
"""

import logging
import re
from typing import Any

from missive.errors import EmptyHeaderValue, InvalidHeaderName, InvalidHeaderValue

logger = logging.getLogger("missive.http")

TCHAR = r"[!#$%&'*+\-.^_`|~0-9A-Za-z]"
TOKEN = re.compile(TCHAR + "+")
FIELD_VALUE = re.compile(r"[ \t\x21-\x7e\x80-\xff]*")

# Horizontal whitespace only; other whitespace classes are never trimmed.
_OWS = " \t"


def is_valid_name(name: object) -> bool:
    """True if *name* is a string matching the ``token`` grammar."""
    return isinstance(name, str) and TOKEN.fullmatch(name) is not None


def is_valid_value(value: object) -> bool:
    """True if *value* is a number or a string matching ``field-value``.

    ``bool`` is not a number here, even though it subclasses ``int``.
    """
    if isinstance(value, bool):
        return False
    if isinstance(value, int | float):
        return True
    return isinstance(value, str) and FIELD_VALUE.fullmatch(value) is not None


def assert_valid_name(name: object) -> None:
    """Raise ``InvalidHeaderName`` unless *name* is an RFC 7230 token."""
    if not is_valid_name(name):
        logger.debug("Rejected header name %r", name)
        msg = f"Header name must be an RFC 7230 token, got {name!r}"
        raise InvalidHeaderName(msg)


def normalize_value(values: Any) -> list[str]:
    """Validate header value(s) and return them as trimmed strings.

    A scalar is wrapped into a one-element list; a list or tuple is taken
    as-is. Order is preserved. Leading and trailing spaces and tabs are
    stripped from each element; interior whitespace is left alone.

    Raises:
        EmptyHeaderValue: If *values* is an empty sequence.
        InvalidHeaderValue: If any element is not a number or a string
            matching the ``field-value`` grammar.
    """
    if not isinstance(values, list | tuple):
        values = [values]
    if not values:
        logger.debug("Rejected empty header value sequence")
        msg = "Header value must be a string or a non-empty sequence of strings"
        raise EmptyHeaderValue(msg)

    normalized: list[str] = []
    for value in values:
        if not is_valid_value(value):
            logger.debug("Rejected header value %r", value)
            msg = f"Header values must be RFC 7230 compatible strings, got {value!r}"
            raise InvalidHeaderValue(msg)
        normalized.append(str(value).strip(_OWS))
    return normalized
