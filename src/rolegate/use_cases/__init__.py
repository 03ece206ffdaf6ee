"""
rolegate.use_cases

Application operations exposed to the presentation layer.

Responsibilities:
- One class per operation with an async `execute`.
- Authorization and required-field checks in front of the adapters.
"""

# Package marker; use cases are imported directly from submodules.


# --- Module Notes -----------------------------------------------------------
# Use cases are single-shot: no retries, no caching of the caller's User.
