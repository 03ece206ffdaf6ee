"""
rolegate.db.repositories

Repository package.

Responsibilities:
- Group storage adapters that implement the domain ports.
"""

# Package marker; repositories are imported directly from submodules.


# --- Module Notes -----------------------------------------------------------
# Each repository call opens and commits its own session: one round trip per
# operation, no shared session between callers.
