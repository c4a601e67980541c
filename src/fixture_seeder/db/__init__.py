"""
fixture_seeder.db

Database collaborator package (pymongo).

Responsibilities:
- Define the store contract the seeder depends on.
- Provide the MongoDB implementation and client construction helpers.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# The seeder service depends on `db.store.PrincipalStore` only; swapping the backend
# (or a test double) never touches service code.
