"""
fixture_seeder.db.store

Collaborator contract consumed by the seeder service.

Responsibilities:
- Describe the minimal command/query surface needed to seed principals.
"""

from __future__ import annotations

from typing import Any, Protocol

from fixture_seeder.models import RoleGrant


class PrincipalStore(Protocol):
    """
    Implementations raise only `fixture_seeder.errors` exceptions.
    """

    def count_principals(self, *, name: str) -> int: ...

    def create_principal(
        self, *, name: str, credential: str, roles: frozenset[RoleGrant]
    ) -> None: ...

    def get_replication_status(self) -> dict[str, Any]: ...

    def ping(self) -> None: ...


# --- Module Notes -----------------------------------------------------------
# Structural typing: tests pass an in-memory double without subclassing.
