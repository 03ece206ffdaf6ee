"""
rolegate.db.integrity

Classification of constraint violations reported by the storage driver.

Responsibilities:
- Tell unique-key violations apart from foreign-key violations.
- Work across drivers: SQLSTATE where exposed (asyncpg, psycopg), message text for SQLite.
"""

from __future__ import annotations

import enum

from sqlalchemy.exc import IntegrityError

UNIQUE_VIOLATION = "23505"
FOREIGN_KEY_VIOLATION = "23503"


class ConstraintViolation(enum.Enum):
    unique = "unique"
    foreign_key = "foreign_key"
    other = "other"


def _sqlstate(exc: IntegrityError) -> str | None:
    orig = exc.orig
    # Adapted asyncpg errors keep the driver error on __cause__.
    for candidate in (orig, getattr(orig, "__cause__", None)):
        if candidate is None:
            continue
        for attr in ("sqlstate", "pgcode"):
            code = getattr(candidate, attr, None)
            if isinstance(code, str) and code:
                return code
    return None


def classify(exc: IntegrityError) -> ConstraintViolation:
    code = _sqlstate(exc)
    if code == UNIQUE_VIOLATION:
        return ConstraintViolation.unique
    if code == FOREIGN_KEY_VIOLATION:
        return ConstraintViolation.foreign_key
    if code is not None:
        return ConstraintViolation.other

    text = str(exc.orig).upper()
    if "UNIQUE CONSTRAINT FAILED" in text or "DUPLICATE KEY" in text:
        return ConstraintViolation.unique
    if "FOREIGN KEY CONSTRAINT FAILED" in text:
        return ConstraintViolation.foreign_key
    return ConstraintViolation.other
