"""
fixture_seeder.services.seeder_service

Idempotent principal seeding.

Responsibilities:
- Ensure a principal exists (create if absent, never update if present).
- Seed the configured principals in a fixed order, failing fast.
- Surface replica-set status for the harness to log or assert on.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from fixture_seeder.db.store import PrincipalStore
from fixture_seeder.errors import PrincipalAlreadyExists
from fixture_seeder.models import PrincipalSpec, RoleGrant
from fixture_seeder.observability.logging import get_logger
from fixture_seeder.settings import Settings, default_principals

log = get_logger(__name__)


def ensure_principal(
    store: PrincipalStore,
    *,
    name: str,
    credential: str,
    roles: Iterable[RoleGrant],
) -> None:
    spec = PrincipalSpec(name=name, credential=credential, roles=frozenset(roles))

    if store.count_principals(name=spec.name) > 0:
        # Existing principals keep their credential and roles untouched.
        log.info("principal_exists", principal=spec.name)
        return

    try:
        store.create_principal(name=spec.name, credential=spec.credential, roles=spec.roles)
    except PrincipalAlreadyExists:
        # Another seeder created it between our count and create.
        log.info("principal_create_raced", principal=spec.name)
        return

    log.info(
        "principal_created",
        principal=spec.name,
        roles=[f"{g.role}@{g.db}" for g in sorted(spec.roles, key=lambda g: (g.db, g.role))],
    )


def seed_all(store: PrincipalStore, principals: Iterable[PrincipalSpec]) -> None:
    """
    Ensure each principal in order. The first failure propagates and the remaining
    principals are not attempted; nothing already created is rolled back.
    """

    seeded = []
    for spec in principals:
        ensure_principal(store, name=spec.name, credential=spec.credential, roles=spec.roles)
        seeded.append(spec.name)
    log.info("seed_complete", principals=seeded)


def report_status(store: PrincipalStore) -> dict[str, Any]:
    status = store.get_replication_status()
    log.info("replication_status", replica_set=status.get("set"), ok=status.get("ok"))
    return status


def bootstrap(store: PrincipalStore, settings: Settings) -> dict[str, Any]:
    # Build the plan first so a bad configuration fails before touching the database.
    principals = default_principals(settings)
    store.ping()
    seed_all(store, principals)
    return report_status(store)


# --- Module Notes -----------------------------------------------------------
# Every operation takes the store explicitly; there is no module-level connection.
