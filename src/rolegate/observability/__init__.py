"""
rolegate.observability

Observability package.

Responsibilities:
- Structured logging configuration.
- Operation-scoped context propagation for consistent log enrichment.
"""

# Package marker.
