"""Fallback codes for records whose human-assigned code was left blank."""

from __future__ import annotations

import time
from typing import Callable

ITEM_CODE_PREFIX = "ITEM_"
ORDER_CODE_PREFIX = "ORD_"


def _epoch_millis() -> int:
    return int(time.time() * 1000)


def generate_code(prefix: str, clock: Callable[[], int] = _epoch_millis) -> str:
    """Return ``prefix`` followed by the current epoch milliseconds.

    Two calls within the same millisecond return the same code; these are
    display conveniences, not keys.
    """
    return f"{prefix}{clock()}"


def resolve_code(
    raw: str | None,
    prefix: str,
    clock: Callable[[], int] = _epoch_millis,
) -> str:
    """Return the user's code stripped, or a generated one if it is blank."""
    if raw is not None and raw.strip():
        return raw.strip()
    return generate_code(prefix, clock)
