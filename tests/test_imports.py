"""Tests for Coptic package imports.

These tests verify that the package structure is correct and all
modules are importable.
"""

from __future__ import annotations


def test_import_coptic() -> None:
    """Import coptic package succeeds."""
    import coptic

    assert hasattr(coptic, "__version__")
    assert coptic.__version__ == "0.1.0"


def test_import_core_module() -> None:
    """Import coptic.core submodule succeeds."""
    from coptic import core

    assert hasattr(core, "__all__")


def test_import_units_module() -> None:
    """Import coptic.units submodule succeeds."""
    from coptic import units

    assert hasattr(units, "__all__")


def test_import_convert_module() -> None:
    """Import coptic.convert submodule succeeds."""
    from coptic import convert

    assert hasattr(convert, "__all__")


def test_import_internal_module() -> None:
    """Import coptic._internal submodule succeeds."""
    from coptic import _internal

    assert hasattr(_internal, "__all__")


def test_public_names_resolve() -> None:
    """Every name in coptic.__all__ is an attribute of the package."""
    import coptic

    for name in coptic.__all__:
        assert hasattr(coptic, name), name


def test_import_errors() -> None:
    """Import coptic.errors succeeds with all exception classes."""
    from coptic.errors import (
        CalendarMismatchError,
        CopticError,
        OverflowError,
        ParseError,
        UnsupportedFieldError,
        UnsupportedUnitError,
        ValidationError,
    )

    # Verify inheritance hierarchy
    assert issubclass(ValidationError, CopticError)
    assert issubclass(UnsupportedFieldError, CopticError)
    assert issubclass(UnsupportedUnitError, CopticError)
    assert issubclass(CalendarMismatchError, CopticError)
    assert issubclass(OverflowError, CopticError)
    assert issubclass(ParseError, CopticError)
    assert issubclass(CopticError, Exception)


def test_import_constants() -> None:
    """Import coptic._internal.constants succeeds."""
    from coptic._internal.constants import (
        DAYS_PER_CYCLE,
        EPOCH_DAY_DIFFERENCE,
        MAX_YEAR,
        MIN_YEAR,
        MONTHS_PER_YEAR,
    )

    assert EPOCH_DAY_DIFFERENCE == 615558
    assert DAYS_PER_CYCLE == 4 * 365 + 1
    assert MONTHS_PER_YEAR == 13
    assert MIN_YEAR == -999_999_999
    assert MAX_YEAR == 999_999_999
