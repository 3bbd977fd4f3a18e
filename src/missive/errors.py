"""Missive exception hierarchy.

Every error is an argument or contract error raised at the offending call.
The standard-library base in each class lets callers catch by kind
(``ValueError``, ``TypeError``) without importing missive.
"""


class MissiveError(Exception):
    """Base for all missive-specific errors."""


class InvalidHeaderName(MissiveError, ValueError):  # noqa: N818 — mirrors the RFC term
    """Header name is not an RFC 7230 ``token``."""


class InvalidHeaderValue(MissiveError, ValueError):  # noqa: N818
    """Header value is not a string or number, or fails the ``field-value`` grammar."""


class EmptyHeaderValue(MissiveError, ValueError):  # noqa: N818
    """Header was given an empty sequence of values."""


class InvalidStreamArgument(MissiveError, TypeError):  # noqa: N818
    """Body is neither a Stream, a resource identifier, nor an open file object."""


class MissingBodyError(MissiveError, RuntimeError):
    """A message body was read before one was ever assigned.

    This is a bug in the code that constructed the message, not bad input.
    """


class StreamError(MissiveError, OSError):
    """Operation on a stream whose underlying handle is gone or unsuitable."""


class InvalidStatusCode(MissiveError, ValueError):  # noqa: N818
    """Response status outside ``100..599``."""


class InvalidMethod(MissiveError, ValueError):  # noqa: N818
    """Request method is not an RFC 7230 ``token``."""


class InvalidRequestTarget(MissiveError, ValueError):  # noqa: N818
    """Request target is empty or contains whitespace."""
