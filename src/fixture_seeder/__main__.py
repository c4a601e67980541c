"""
fixture_seeder.__main__

Entrypoint for running the seeder via `python -m fixture_seeder`.

Responsibilities:
- Load settings and configure logging.
- Create the MongoDB client and run the bootstrap sequence.
- Map failures to a non-zero exit code for the harness.
"""

from __future__ import annotations

import sys

import structlog

from fixture_seeder.db.client import create_client
from fixture_seeder.db.mongo import MongoPrincipalStore
from fixture_seeder.errors import SeederError
from fixture_seeder.observability.logging import configure_logging, get_logger
from fixture_seeder.services.seeder_service import bootstrap
from fixture_seeder.settings import Settings, get_settings

log = get_logger(__name__)


def run(settings: Settings) -> int:
    configure_logging(
        service_name=settings.service_name, level=settings.log_level, json=settings.log_json
    )
    structlog.contextvars.bind_contextvars(env=settings.env)

    client = create_client(settings)
    try:
        store = MongoPrincipalStore(client, auth_database=settings.auth_database)
        bootstrap(store, settings)
    except SeederError as e:
        # The harness must treat the whole fixture environment as unusable.
        log.error("bootstrap_failed", operation=e.operation, error=str(e))
        return 1
    except ValueError as e:
        # Invalid principal configuration (e.g. an empty role list).
        log.error("bootstrap_failed", operation="configure", error=str(e))
        return 1
    finally:
        client.close()
        structlog.contextvars.clear_contextvars()

    log.info("bootstrap_complete")
    return 0


def main() -> None:
    sys.exit(run(get_settings()))


if __name__ == "__main__":
    main()


# --- Module Notes -----------------------------------------------------------
# Configuration is environment-only (`SEEDER_*`); the harness reads the exit code
# and the `bootstrap_failed` event rather than parsing a traceback.
