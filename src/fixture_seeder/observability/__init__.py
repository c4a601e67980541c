"""
fixture_seeder.observability

Observability package.

Responsibilities:
- Structured logging configuration.
"""

# Package marker.
