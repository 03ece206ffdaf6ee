"""
rolegate.domain

Domain package.

Responsibilities:
- Value types (User, Role, Location).
- Authorization rules (admin derivation and guard).
- Contracts the adapters implement.
"""

# Package marker; import from submodules.
