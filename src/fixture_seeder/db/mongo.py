"""
fixture_seeder.db.mongo

MongoDB implementation of `PrincipalStore`.

Responsibilities:
- Count and create users in the authentication database.
- Query replica-set status and liveness via admin commands.
- Translate pymongo exceptions into the seeder error taxonomy.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from pymongo import MongoClient
from pymongo.errors import ConnectionFailure, OperationFailure, PyMongoError

from fixture_seeder.errors import (
    CollaboratorUnavailable,
    PermissionDenied,
    PrincipalAlreadyExists,
)
from fixture_seeder.models import PrincipalSpec, RoleGrant

# Server error codes (src/mongo/base/error_codes.yml).
UNAUTHORIZED = 13
AUTHENTICATION_FAILED = 18
DUPLICATE_KEY = 11000
USER_ALREADY_EXISTS = 51003

_PERMISSION_CODES = frozenset({UNAUTHORIZED, AUTHENTICATION_FAILED})
_DUPLICATE_CODES = frozenset({DUPLICATE_KEY, USER_ALREADY_EXISTS})


@contextmanager
def _translate_errors(operation: str, *, principal: str | None = None) -> Iterator[None]:
    try:
        yield
    except ConnectionFailure as e:
        raise CollaboratorUnavailable(f"{operation}: {e}", operation=operation) from e
    except OperationFailure as e:
        if e.code in _PERMISSION_CODES:
            raise PermissionDenied(f"{operation}: {e}", operation=operation) from e
        if principal is not None and e.code in _DUPLICATE_CODES:
            raise PrincipalAlreadyExists(principal) from e
        raise CollaboratorUnavailable(f"{operation}: {e}", operation=operation) from e
    except PyMongoError as e:
        raise CollaboratorUnavailable(f"{operation}: {e}", operation=operation) from e


class MongoPrincipalStore:
    def __init__(self, client: MongoClient, *, auth_database: str = "admin") -> None:
        self._client = client
        self._auth_database = auth_database
        self._db = client[auth_database]

    def count_principals(self, *, name: str) -> int:
        # Users of every database live in admin.system.users, keyed by (user, db).
        with _translate_errors("count_principals"):
            return self._client.admin["system.users"].count_documents(
                {"user": name, "db": self._auth_database}
            )

    def create_principal(
        self, *, name: str, credential: str, roles: frozenset[RoleGrant]
    ) -> None:
        spec = PrincipalSpec(name=name, credential=credential, roles=roles)
        with _translate_errors("create_principal", principal=name):
            self._db.command(
                "createUser", spec.name, pwd=spec.credential, roles=spec.role_documents()
            )

    def get_replication_status(self) -> dict[str, Any]:
        with _translate_errors("get_replication_status"):
            return dict(self._client.admin.command("replSetGetStatus"))

    def ping(self) -> None:
        with _translate_errors("ping"):
            self._client.admin.command("ping")


# --- Module Notes -----------------------------------------------------------
# `replSetGetStatus` on a standalone server fails with NoReplicationEnabled (76);
# that surfaces as CollaboratorUnavailable like any other failed query.
