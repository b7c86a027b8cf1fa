"""Epoch conversions for contribution timestamps."""

from __future__ import annotations

import datetime as dt


def to_epoch_seconds(value: dt.datetime | int) -> int:
    """Return whole epoch seconds for a GitHub timestamp.

    GitHub reports ``created_at`` as an ISO 8601 string in most payloads and
    as an integer in a few legacy ones. Naive datetimes are taken to be UTC.
    """
    if isinstance(value, int):
        return value
    if value.tzinfo is None:
        value = value.replace(tzinfo=dt.UTC)
    return int(value.timestamp())
