"""Coptic date conversion utilities.

This module provides functions for converting Coptic dates to and from
other representations:
    - JSON serialization and deserialization
    - Epoch-day and datetime.date conversions

Examples:
    >>> from coptic import CopticDate
    >>> from coptic.convert import to_json, from_json

    >>> d = CopticDate(1686, 4, 23)
    >>> from_json(to_json(d)) == d
    True

    >>> from coptic.convert import to_epoch_day, from_epoch_day
    >>> from_epoch_day(to_epoch_day(d)) == d
    True
"""

from __future__ import annotations

from coptic.convert.epoch import (
    from_epoch_day,
    from_iso_date,
    to_epoch_day,
    to_iso_date,
)
from coptic.convert.json import from_json, to_json

__all__ = [
    # JSON
    "to_json",
    "from_json",
    # Epoch
    "to_epoch_day",
    "from_epoch_day",
    "to_iso_date",
    "from_iso_date",
]
