"""
fixture_seeder

Top-level package for the MongoDB fixture seeder.

Responsibilities:
- Expose package version metadata.
"""

__all__ = ["__version__"]

__version__ = "0.1.0"


# --- Module Notes -----------------------------------------------------------
# Keep this file minimal to avoid import-time side effects (pymongo is heavy).
