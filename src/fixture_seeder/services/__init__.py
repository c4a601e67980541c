"""
fixture_seeder.services

Service layer.

Responsibilities:
- Host the seeding operations that sit between the entrypoint and the store.
"""

# Package marker.
