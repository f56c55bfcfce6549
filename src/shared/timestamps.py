"""Timestamp decoding at the store boundary.

Stored documents carry timestamps in several shapes: native datetimes,
ISO-8601 strings, epoch seconds, or ``{"seconds": ..., "nanoseconds": ...}``
mappings written by hosted document stores. ``decode_timestamp`` is the one
place that turns any of them into an aware ``datetime``.
"""

from datetime import UTC, date, datetime


def decode_timestamp(value):
    """Return ``value`` as a timezone-aware datetime, or None when absent."""
    if value is None or value == "":
        return None

    if isinstance(value, datetime):
        return value if value.tzinfo else value.replace(tzinfo=UTC)

    if isinstance(value, date):
        return datetime(value.year, value.month, value.day, tzinfo=UTC)

    if isinstance(value, bool):
        raise ValueError(f"Cannot decode timestamp from {value!r}")

    if isinstance(value, int | float):
        return datetime.fromtimestamp(value, tz=UTC)

    if isinstance(value, dict):
        if "seconds" not in value:
            raise ValueError(f"Cannot decode timestamp from {value!r}")
        seconds = value["seconds"] + value.get("nanoseconds", 0) / 1_000_000_000
        return datetime.fromtimestamp(seconds, tz=UTC)

    if isinstance(value, str):
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
        return parsed if parsed.tzinfo else parsed.replace(tzinfo=UTC)

    raise ValueError(f"Cannot decode timestamp from {value!r}")


def encode_timestamp(value):
    """ISO-8601 representation of any value ``decode_timestamp`` accepts."""
    decoded = decode_timestamp(value)
    return decoded.isoformat() if decoded else None
