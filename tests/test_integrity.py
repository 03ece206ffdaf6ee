"""
tests.test_integrity

Classification of driver integrity errors.
"""

from __future__ import annotations

import pytest
from sqlalchemy.exc import IntegrityError

from rolegate.db.integrity import ConstraintViolation, classify


class _PgError(Exception):
    def __init__(self, message: str, *, sqlstate: str | None = None, pgcode: str | None = None):
        super().__init__(message)
        self.sqlstate = sqlstate
        self.pgcode = pgcode


def _wrap(orig: Exception) -> IntegrityError:
    return IntegrityError("INSERT ...", {}, orig)


@pytest.mark.parametrize(
    ("orig", "expected"),
    [
        (_PgError("dup", sqlstate="23505"), ConstraintViolation.unique),
        (_PgError("fk", pgcode="23503"), ConstraintViolation.foreign_key),
        (_PgError("not null", sqlstate="23502"), ConstraintViolation.other),
        (Exception("UNIQUE constraint failed: cargo.nome"), ConstraintViolation.unique),
        (Exception("FOREIGN KEY constraint failed"), ConstraintViolation.foreign_key),
        (Exception("NOT NULL constraint failed: cargo.nome"), ConstraintViolation.other),
    ],
)
def test_classify(orig: Exception, expected: ConstraintViolation) -> None:
    assert classify(_wrap(orig)) is expected


def test_classify_reads_sqlstate_from_chained_driver_error() -> None:
    adapted = Exception("adapted")
    adapted.__cause__ = _PgError("fk", sqlstate="23503")
    assert classify(_wrap(adapted)) is ConstraintViolation.foreign_key
