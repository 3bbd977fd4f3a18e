"""Message defaults.

MessageDefaults is a frozen dataclass — immutable after creation, read by
the concrete message types when the caller leaves a field unset.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class MessageDefaults:
    """Defaults applied when building a Request or Response.

    Override what you need and pass the instance around explicitly::

        defaults = MessageDefaults(protocol_version="2")
    """

    # Protocol
    protocol_version: str = "1.1"

    # Body
    body: str = "memory"  # Resource identifier opened by Stream.open()
    body_mode: str = "wb+"

    # Async reads
    chunk_size: int = 64 * 1024  # 64 KB


DEFAULTS = MessageDefaults()
