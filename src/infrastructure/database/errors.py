"""Helpers for interpreting database errors."""

from sqlalchemy.exc import IntegrityError


def is_unique_violation(exc: IntegrityError) -> bool:
    """True when the error is a unique-constraint violation.

    Other integrity failures (NOT NULL, FK) are bugs and must not be
    reported as duplicates.
    """
    orig = str(exc.orig).lower() if exc.orig else ""
    return "unique" in orig or "duplicate" in orig
