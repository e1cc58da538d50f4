"""
maintainerd_onboard.observability

Observability package.

Responsibilities:
- Structured logging configuration.
- Request and pass context propagation for consistent log enrichment.
"""

# Package marker.
