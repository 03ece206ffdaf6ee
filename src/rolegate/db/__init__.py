"""
rolegate.db

Persistence package (SQLAlchemy async).

Responsibilities:
- Provide ORM models, engine/session setup, row mappers and repositories.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Nothing outside this package sees ORM objects; repositories return domain types.
