"""
fixture_seeder.models

Principal domain models.

Responsibilities:
- Define `RoleGrant` (role name scoped to a database) with set semantics.
- Define `PrincipalSpec`, the desired state of one database principal.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class RoleGrant:
    role: str
    db: str

    def to_document(self) -> dict[str, Any]:
        # Shape expected by the `createUser` command.
        return {"role": self.role, "db": self.db}


@dataclass(frozen=True, slots=True)
class PrincipalSpec:
    """
    A principal to ensure: created on first run, never updated afterwards.
    """

    name: str
    credential: str = field(repr=False)
    roles: frozenset[RoleGrant]

    def __post_init__(self) -> None:
        # Accept any iterable of grants but store set semantics; materialize
        # before validating so an exhausted iterator is seen as empty.
        object.__setattr__(self, "roles", frozenset(self.roles))
        if not self.name:
            raise ValueError("principal name must be non-empty")
        if not self.credential:
            raise ValueError(f"credential for principal {self.name!r} must be non-empty")
        if not self.roles:
            raise ValueError(f"principal {self.name!r} needs at least one role grant")

    def role_documents(self) -> list[dict[str, Any]]:
        # Sorted so repeated runs issue byte-identical commands.
        return [g.to_document() for g in sorted(self.roles, key=lambda g: (g.db, g.role))]


# --- Module Notes -----------------------------------------------------------
# Name uniqueness is enforced by the database, not by these models.
