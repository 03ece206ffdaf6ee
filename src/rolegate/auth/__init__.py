"""
rolegate.auth

Authentication/authorization adapters.

Responsibilities:
- Identity gateway HTTP client and access-token validation.
- Authorization resolver (identity id -> User with derived admin flag).
- Authentication service (login/register/session/logout).
"""

# Package marker.
