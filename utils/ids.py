"""Identifier helpers for candidate records and shareable application ids."""

from __future__ import annotations

import re
import secrets
import time
import uuid
from threading import Lock

import config

_BASE36_ALPHABET = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"
_RANDOM_SEGMENT_LENGTH = 8

APPLICATION_ID_RE = re.compile(r"^[A-Z0-9]+-[0-9A-Z]{8}-[0-9A-Z]+$")

_CLOCK_LOCK = Lock()
_last_timestamp_ms = 0


def to_base36(value: int) -> str:
    """Encode a non-negative integer as an uppercase base-36 string."""

    if value < 0:
        raise ValueError("value must be >= 0")
    if value == 0:
        return "0"
    digits: list[str] = []
    while value:
        value, remainder = divmod(value, 36)
        digits.append(_BASE36_ALPHABET[remainder])
    return "".join(reversed(digits))


def _now_ms() -> int:
    return time.time_ns() // 1_000_000


def _next_timestamp_ms() -> int:
    """Return the current epoch milliseconds, never lower than a previous call."""

    global _last_timestamp_ms
    with _CLOCK_LOCK:
        now = _now_ms()
        _last_timestamp_ms = max(now, _last_timestamp_ms)
        return _last_timestamp_ms


def generate_application_id(prefix: str | None = None) -> str:
    """Return a human-shareable application id such as ``HLA-K3Z9Q0AB-LZ1X2Y3Q``.

    The random segment keeps ids distinct for calls within the same
    millisecond; the timestamp segment orders them across calls.
    """

    tag = prefix or config.APPLICATION_ID_PREFIX
    random_segment = "".join(secrets.choice(_BASE36_ALPHABET) for _ in range(_RANDOM_SEGMENT_LENGTH))
    return f"{tag}-{random_segment}-{to_base36(_next_timestamp_ms())}"


def generate_record_id() -> str:
    """Return an opaque identifier for a candidate record."""

    return uuid.uuid4().hex


def is_application_id(value: str) -> bool:
    return bool(APPLICATION_ID_RE.match(value or ""))


__all__ = [
    "APPLICATION_ID_RE",
    "generate_application_id",
    "generate_record_id",
    "is_application_id",
    "to_base36",
]
