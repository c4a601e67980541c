"""
fixture_seeder.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide strongly-typed, env-driven settings for the seeder.
- Hide credentials and the connection URI from repr/logging.
- Build the ordered default principal plan from configuration.
- Offer a cached settings instance for the entrypoint.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from fixture_seeder.models import PrincipalSpec, RoleGrant


class Settings(BaseSettings):
    """
    Env-driven configuration. Defaults match the integration-test fixtures so a
    bare `python -m fixture_seeder` against a local replica set just works.
    """

    model_config = SettingsConfigDict(env_prefix="SEEDER_", case_sensitive=False)

    env: Literal["dev", "test", "prod"] = "dev"
    service_name: str = "mongo-fixture-seeder"
    log_level: str = "INFO"
    log_json: bool = True

    # Connection (the URI may embed credentials, so keep it out of repr).
    mongo_uri: str = Field(
        default="mongodb://localhost:27017/?directConnection=true", repr=False
    )
    server_selection_timeout_ms: int = 5000
    auth_database: str = "admin"

    # Principals. Role lists are JSON in the environment, e.g.
    # SEEDER_SUPERUSER_ROLES='[["root", "admin"]]'.
    superuser_name: str = "superuser"
    superuser_password: str = Field(default="superpw", repr=False)
    superuser_roles: list[tuple[str, str]] = [("root", "admin")]

    flink_user_name: str = "flinkuser"
    flink_user_password: str = Field(default="flinkpw", repr=False)
    flink_user_roles: list[tuple[str, str]] = [
        ("read", "admin"),
        ("readAnyDatabase", "admin"),
    ]


def default_principals(settings: Settings) -> tuple[PrincipalSpec, ...]:
    # Order is part of the contract: superuser first, then the flink user.
    return (
        PrincipalSpec(
            name=settings.superuser_name,
            credential=settings.superuser_password,
            roles=frozenset(RoleGrant(role=r, db=d) for r, d in settings.superuser_roles),
        ),
        PrincipalSpec(
            name=settings.flink_user_name,
            credential=settings.flink_user_password,
            roles=frozenset(RoleGrant(role=r, db=d) for r, d in settings.flink_user_roles),
        ),
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


# --- Module Notes -----------------------------------------------------------
# Credentials are literal configuration values; distributing them securely is the
# harness's job (env injection, CI secrets), not this package's.
