"""
Message-derived timestamps.

The stored timestamp is the current Unix time plus an offset of at most
one hour computed from the message text. The offset is a position-weighted
sum of the message's UTF-16 code units (what a browser sees through
``String.charCodeAt``), reduced modulo MAX_OFFSET.

Collisions between distinct messages are expected, and the same message
yields a different timestamp at a different time.
"""

from __future__ import annotations

import time
from typing import Optional

MAX_OFFSET = 3600


def utf16_code_units(message: str) -> list[int]:
    raw = message.encode("utf-16-le", "surrogatepass")
    return [int.from_bytes(raw[i:i + 2], "little") for i in range(0, len(raw), 2)]


def compute_offset(message: str) -> int:
    """Return ``sum(c_i * (i + 1)) % MAX_OFFSET`` over the code units of ``message``."""
    total = 0
    for position, code in enumerate(utf16_code_units(message)):
        total += code * (position + 1)
    return total % MAX_OFFSET


def unix_now() -> int:
    return int(time.time())


def compute_timestamp(message: str, now: Optional[int] = None) -> int:
    """
    Compute the timestamp stored alongside ``message``.

    Args:
        message: Message text (may be empty)
        now: Base Unix time in seconds (default: current time)

    Returns:
        ``now + compute_offset(message)``
    """
    base = unix_now() if now is None else now
    return base + compute_offset(message)
