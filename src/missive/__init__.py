"""Missive — immutable HTTP messages.

Headers are validated against RFC 7230 on the way in, looked up
case-insensitively, and emitted in the casing the caller last used.
Every ``with_*()`` call returns a new message; nothing is mutated.

Basic usage::

    from missive import Response

    resp = Response(200, headers={"Content-Type": "text/plain"})
    resp = resp.with_added_header("Cache-Control", ["no-cache", "no-store"])
    resp.get_header_line("cache-control")  # "no-cache, no-store"
    resp.get_body().write("Hello, World!")
"""

__version__ = "0.1.0-dev"
__all__ = [
    "DEFAULTS",
    "EmptyHeaderValue",
    "HeaderMap",
    "InvalidHeaderName",
    "InvalidHeaderValue",
    "InvalidMethod",
    "InvalidRequestTarget",
    "InvalidStatusCode",
    "InvalidStreamArgument",
    "Message",
    "MessageDefaults",
    "MissingBodyError",
    "MissiveError",
    "Request",
    "Response",
    "Stream",
    "StreamError",
]

# Public name -> module that defines it
_LAZY_IMPORTS: dict[str, str] = {
    "DEFAULTS": "missive.config",
    "MessageDefaults": "missive.config",
    "EmptyHeaderValue": "missive.errors",
    "InvalidHeaderName": "missive.errors",
    "InvalidHeaderValue": "missive.errors",
    "InvalidMethod": "missive.errors",
    "InvalidRequestTarget": "missive.errors",
    "InvalidStatusCode": "missive.errors",
    "InvalidStreamArgument": "missive.errors",
    "MissingBodyError": "missive.errors",
    "MissiveError": "missive.errors",
    "StreamError": "missive.errors",
    "HeaderMap": "missive.http.headers",
    "Message": "missive.http.message",
    "Request": "missive.http.request",
    "Response": "missive.http.response",
    "Stream": "missive.http.stream",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import missive`` fast while providing a clean top-level API.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    import importlib

    return getattr(importlib.import_module(module_name), name)
