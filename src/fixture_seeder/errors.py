"""
fixture_seeder.errors

Error taxonomy surfaced by the seeder and its database collaborator.

Responsibilities:
- Distinguish "database unreachable / query failed" from "not allowed".
- Carry the collaborator operation that failed for log enrichment.
"""

from __future__ import annotations


class SeederError(Exception):
    """
    Base class for every failure the seeder surfaces to its caller.
    """

    def __init__(self, message: str, *, operation: str) -> None:
        super().__init__(message)
        self.operation = operation


class CollaboratorUnavailable(SeederError):
    pass


class PermissionDenied(SeederError):
    pass


class PrincipalAlreadyExists(SeederError):
    """
    Raised by a store when a create lost the race against another seeder.
    `ensure_principal` treats this as success; nothing else should catch it.
    """

    def __init__(self, name: str) -> None:
        super().__init__(f"principal {name!r} already exists", operation="create_principal")
        self.name = name


# --- Module Notes -----------------------------------------------------------
# No retries anywhere in this package: callers own retry policy, if any.
