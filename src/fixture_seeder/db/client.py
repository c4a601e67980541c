"""
fixture_seeder.db.client

MongoClient construction helpers.

Responsibilities:
- Create the pymongo client from settings.
- Build connection strings that authenticate as a seeded principal.
"""

from __future__ import annotations

from urllib.parse import parse_qsl, quote_plus, urlencode, urlsplit, urlunsplit

from pymongo import MongoClient

from fixture_seeder.settings import Settings


def create_client(settings: Settings) -> MongoClient:
    # MongoClient connects lazily; the first command surfaces reachability errors.
    return MongoClient(
        settings.mongo_uri,
        serverSelectionTimeoutMS=settings.server_selection_timeout_ms,
    )


def credentialed_uri(
    uri: str,
    *,
    username: str,
    password: str,
    auth_source: str = "admin",
) -> str:
    """
    Return `uri` rewritten to authenticate as `username`.

    Credentials already present in `uri` are replaced; other query options are kept.
    """

    parts = urlsplit(uri)
    hosts = parts.netloc.rsplit("@", 1)[-1]
    netloc = f"{quote_plus(username)}:{quote_plus(password)}@{hosts}"

    query = [(k, v) for k, v in parse_qsl(parts.query, keep_blank_values=True) if k != "authSource"]
    query.append(("authSource", auth_source))

    # The URI format requires "/" between the host list and the options.
    return urlunsplit((parts.scheme, netloc, parts.path or "/", urlencode(query), parts.fragment))


# --- Module Notes -----------------------------------------------------------
# Test harnesses use `credentialed_uri` to open a second client as `flinkuser`
# once seeding has completed.
