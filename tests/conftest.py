"""
tests.conftest

Shared fixtures.

Responsibilities:
- Provide an in-memory `PrincipalStore` double that records call order.
"""

from __future__ import annotations

from typing import Any

import pytest

from fixture_seeder.errors import PrincipalAlreadyExists
from fixture_seeder.models import PrincipalSpec, RoleGrant
from fixture_seeder.settings import Settings


class InMemoryPrincipalStore:
    def __init__(self) -> None:
        self.principals: dict[str, PrincipalSpec] = {}
        self.calls: list[tuple[str, str | None]] = []
        self.create_errors: dict[str, Exception] = {}
        self.status: dict[str, Any] = {"set": "rs0", "ok": 1.0, "members": []}
        self.status_error: Exception | None = None
        self.ping_error: Exception | None = None

    def add(self, name: str, credential: str, roles: set[tuple[str, str]]) -> None:
        self.principals[name] = PrincipalSpec(
            name=name,
            credential=credential,
            roles=frozenset(RoleGrant(role=r, db=d) for r, d in roles),
        )

    def created(self) -> list[str]:
        return [name for op, name in self.calls if op == "create_principal"]

    def count_principals(self, *, name: str) -> int:
        self.calls.append(("count_principals", name))
        return 1 if name in self.principals else 0

    def create_principal(
        self, *, name: str, credential: str, roles: frozenset[RoleGrant]
    ) -> None:
        self.calls.append(("create_principal", name))
        if name in self.create_errors:
            raise self.create_errors[name]
        # The database, not the seeder, enforces uniqueness.
        if name in self.principals:
            raise PrincipalAlreadyExists(name)
        self.principals[name] = PrincipalSpec(name=name, credential=credential, roles=roles)

    def get_replication_status(self) -> dict[str, Any]:
        self.calls.append(("get_replication_status", None))
        if self.status_error is not None:
            raise self.status_error
        return self.status

    def ping(self) -> None:
        self.calls.append(("ping", None))
        if self.ping_error is not None:
            raise self.ping_error


@pytest.fixture
def store() -> InMemoryPrincipalStore:
    return InMemoryPrincipalStore()


@pytest.fixture
def settings() -> Settings:
    return Settings(env="test")
