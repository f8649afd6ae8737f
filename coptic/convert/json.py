"""JSON serialization and deserialization for Coptic dates.

This module provides functions for converting CopticDate to and from
JSON-serializable dictionaries.

Functions:
    to_json: Convert a CopticDate to a JSON-serializable dict.
    from_json: Create a CopticDate from a JSON dict.

A date is stored as its three integer components with a type tag:

    {"_type": "CopticDate", "year": 1686, "month": 4, "day": 23}

Loading re-runs full validation. Data written before month 13 was
validated may carry a day past the end of that month; such a day is
repaired to the month's last day instead of being rejected.

Examples:
    >>> from coptic import CopticDate
    >>> from coptic.convert import to_json, from_json

    >>> data = to_json(CopticDate(1686, 4, 23))
    >>> data['_type']
    'CopticDate'

    >>> from_json(data) == CopticDate(1686, 4, 23)
    True
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from coptic.errors import ParseError

if TYPE_CHECKING:
    from coptic.core.date import CopticDate

_TYPE_TAG = "CopticDate"
_COMPONENTS = ("year", "month", "day")


def to_json(value: "CopticDate") -> dict[str, Any]:
    """Convert a CopticDate to a JSON-serializable dictionary.

    Args:
        value: The CopticDate to convert.

    Returns:
        A dictionary with `_type`, `year`, `month` and `day` fields.

    Raises:
        TypeError: If value is not a CopticDate.

    Examples:
        >>> from coptic import CopticDate
        >>> to_json(CopticDate(0, 13, 5))
        {'_type': 'CopticDate', 'year': 0, 'month': 13, 'day': 5}
    """
    from coptic.core.date import CopticDate

    if not isinstance(value, CopticDate):
        raise TypeError(f"expected CopticDate, got {type(value).__name__}")

    year, month, day = value.to_tuple()
    return {"_type": _TYPE_TAG, "year": year, "month": month, "day": day}


def from_json(data: dict[str, Any]) -> "CopticDate":
    """Create a CopticDate from a JSON dictionary.

    Args:
        data: A dictionary with `_type`, `year`, `month` and `day` fields.

    Returns:
        The CopticDate described by the dictionary.

    Raises:
        ParseError: If the data is missing fields or has the wrong types.
        ValidationError: If the components do not form a valid date.

    Examples:
        >>> from_json({'_type': 'CopticDate', 'year': 1686, 'month': 4, 'day': 23})
        CopticDate(1686, 4, 23)

        >>> from_json({'_type': 'CopticDate', 'year': 1740, 'month': 13, 'day': 6})
        CopticDate(1740, 13, 5)
    """
    from coptic.core.date import CopticDate

    if not isinstance(data, dict):
        raise ParseError(f"expected dict, got {type(data).__name__}")

    type_name = data.get("_type")
    if type_name is None:
        raise ParseError("missing '_type' field")
    if type_name != _TYPE_TAG:
        raise ParseError(f"expected _type {_TYPE_TAG!r}, got {type_name!r}")

    components = []
    for name in _COMPONENTS:
        if name not in data:
            raise ParseError(f"missing {name!r} field for {_TYPE_TAG}")
        component = data[name]
        if not isinstance(component, int) or isinstance(component, bool):
            raise ParseError(
                f"{name!r} must be an integer, got {type(component).__name__}"
            )
        components.append(component)

    year, month, day = components
    return CopticDate.from_stored(year, month, day)


__all__ = [
    "to_json",
    "from_json",
]
