"""Era enumeration for the Coptic calendar.

This module provides the CopticEra enum for distinguishing between
dates before and since the Era of the Martyrs (Anno Martyrum).
"""

from __future__ import annotations

from enum import Enum

from coptic.errors import ValidationError


class CopticEra(Enum):
    """Coptic era designation.

    The Coptic calendar counts years from 284 CE, the accession of
    Diocletian (Anno Martyrum, AM). Proleptic year 0 and earlier years
    fall in the era BEFORE_AM, where proleptic year 0 is year-of-era 1.

    Examples:
        >>> CopticEra.AM.value
        1
        >>> CopticEra.of(0)
        <CopticEra.BEFORE_AM: 0>
        >>> CopticEra.BEFORE_AM.is_before_am
        True
    """

    BEFORE_AM = 0  # Before the Era of the Martyrs
    AM = 1  # Anno Martyrum

    @classmethod
    def of(cls, value: int) -> CopticEra:
        """Return the era for its numeric value.

        Args:
            value: 0 for BEFORE_AM, 1 for AM.

        Returns:
            The matching era.

        Raises:
            ValidationError: If value is not 0 or 1.
        """
        try:
            return cls(value)
        except ValueError:
            raise ValidationError(f"era must be 0 or 1, got {value}") from None

    @property
    def is_before_am(self) -> bool:
        """Return True if this era is before the Era of the Martyrs."""
        return self is CopticEra.BEFORE_AM

    def to_proleptic_year(self, year_of_era: int) -> int:
        """Convert a year-of-era in this era to a proleptic year.

        Examples:
            >>> CopticEra.AM.to_proleptic_year(1686)
            1686
            >>> CopticEra.BEFORE_AM.to_proleptic_year(1)
            0
        """
        return year_of_era if self is CopticEra.AM else 1 - year_of_era


__all__ = ["CopticEra"]
