"""Body streams.

A ``Stream`` wraps a binary file object: an in-memory buffer, a spooled
temporary file, or a file on disk. Messages hold a reference to one and
never call into it; the read/write API is for the code that produces or
consumes the body.

Blocking reads can be handed to a worker thread with ``aread`` and
``achunks``, which go through ``anyio.to_thread``.
"""

from __future__ import annotations

import io
import logging
import tempfile
from collections.abc import AsyncIterator, Callable
from typing import IO, Any

import anyio

from missive.config import DEFAULTS
from missive.errors import InvalidStreamArgument, StreamError

logger = logging.getLogger("missive.stream")

# Spooled temp files roll over to disk past this size
_TEMP_MAX_MEMORY = 2 * 1024 * 1024

# Resource identifiers that do not name a file
_MEMORY = "memory"
_TEMP = "temp"


def _run_sync(func: Callable[..., Any], *args: Any) -> Any:
    """Run a blocking stream call in an anyio worker thread.

    ``anyio.to_thread`` is not re-exported by ``anyio`` for type checkers,
    so the attribute access is confined here.
    """
    return anyio.to_thread.run_sync(func, *args)  # type: ignore[union-attr]


class Stream:
    """A readable and/or writable byte stream backing a message body.

    Construct from an open binary handle, or via ``Stream.open()``::

        body = Stream.open("memory")
        body.write("hello")
        body.rewind()
        body.read()  # b"hello"
    """

    __slots__ = ("_handle",)

    def __init__(self, handle: IO[bytes]) -> None:
        self._handle: IO[bytes] | None = handle

    @classmethod
    def open(cls, identifier: str, mode: str = DEFAULTS.body_mode) -> Stream:
        """Open a stream from a resource identifier.

        ``"memory"`` is an in-memory buffer, ``"temp"`` a spooled temporary
        file; anything else is a filesystem path opened with *mode* (forced
        to binary).

        Raises:
            StreamError: If the path cannot be opened.
        """
        if identifier == _MEMORY:
            handle: IO[bytes] = io.BytesIO()
        elif identifier == _TEMP:
            handle = tempfile.SpooledTemporaryFile(max_size=_TEMP_MAX_MEMORY, mode="w+b")  # noqa: SIM115
        else:
            if "b" not in mode:
                mode += "b"
            try:
                handle = open(identifier, mode)  # noqa: SIM115, PTH123
            except OSError as exc:
                msg = f"Cannot open stream {identifier!r} with mode {mode!r}: {exc}"
                raise StreamError(msg) from exc
        logger.debug("Opened stream %r", identifier)
        return cls(handle)

    def __repr__(self) -> str:
        state = "detached" if self._handle is None else repr(self._handle)
        return f"Stream({state})"

    def _require(self) -> IO[bytes]:
        if self._handle is None:
            msg = "Stream is detached"
            raise StreamError(msg)
        if self._handle.closed:
            msg = "Stream is closed"
            raise StreamError(msg)
        return self._handle

    # -- Capabilities --

    @property
    def readable(self) -> bool:
        return self._handle is not None and not self._handle.closed and self._handle.readable()

    @property
    def writable(self) -> bool:
        return self._handle is not None and not self._handle.closed and self._handle.writable()

    @property
    def seekable(self) -> bool:
        return self._handle is not None and not self._handle.closed and self._handle.seekable()

    @property
    def size(self) -> int | None:
        """Total size in bytes, or ``None`` if it cannot be determined."""
        if not self.seekable:
            return None
        handle = self._require()
        position = handle.tell()
        try:
            return handle.seek(0, io.SEEK_END)
        finally:
            handle.seek(position)

    # -- Position --

    def tell(self) -> int:
        return self._require().tell()

    def seek(self, offset: int, whence: int = io.SEEK_SET) -> int:
        if not self.seekable:
            msg = "Stream is not seekable"
            raise StreamError(msg)
        return self._require().seek(offset, whence)

    def rewind(self) -> None:
        self.seek(0)

    def eof(self) -> bool:
        """True if the position is at (or past) the end of the stream."""
        size = self.size
        return size is not None and self.tell() >= size

    # -- I/O --

    def read(self, size: int = -1) -> bytes:
        if not self.readable:
            msg = "Stream is not readable"
            raise StreamError(msg)
        return self._require().read(size)

    def write(self, data: str | bytes) -> int:
        """Write *data* at the current position. Strings are UTF-8 encoded."""
        if not self.writable:
            msg = "Stream is not writable"
            raise StreamError(msg)
        if isinstance(data, str):
            data = data.encode("utf-8")
        return self._require().write(data)

    def get_contents(self) -> bytes:
        """Read the rest of the stream from the current position."""
        return self.read()

    def read_all(self) -> bytes:
        """Rewind, then read the whole stream."""
        self.rewind()
        return self.read()

    # -- Async reads --

    async def aread(self, size: int = -1) -> bytes:
        """``read`` in a worker thread."""
        return await _run_sync(self.read, size)

    async def achunks(self, chunk_size: int | None = None) -> AsyncIterator[bytes]:
        """Yield the rest of the stream in chunks, reading in a worker thread."""
        size = chunk_size or DEFAULTS.chunk_size
        while True:
            chunk = await self.aread(size)
            if not chunk:
                break
            yield chunk

    # -- Lifecycle --

    def detach(self) -> IO[bytes] | None:
        """Separate the underlying handle from this stream and return it.

        The stream is unusable afterwards.
        """
        handle, self._handle = self._handle, None
        return handle

    def close(self) -> None:
        handle = self.detach()
        if handle is not None:
            handle.close()
            logger.debug("Closed stream %r", handle)


def coerce_stream(value: object, mode: str = DEFAULTS.body_mode) -> Stream:
    """Turn caller-supplied body input into a ``Stream``.

    Accepts a ``Stream`` (returned as-is), a resource identifier string
    (see ``Stream.open``), or an open binary file object.

    Raises:
        InvalidStreamArgument: For anything else.
    """
    if isinstance(value, Stream):
        return value
    if isinstance(value, str):
        return Stream.open(value, mode)
    if isinstance(value, io.IOBase) and not isinstance(value, io.TextIOBase):
        return Stream(value)  # type: ignore[arg-type]
    msg = (
        "Stream must be a string resource identifier, an open binary file "
        f"object, or a Stream instance, got {type(value).__name__}"
    )
    raise InvalidStreamArgument(msg)
