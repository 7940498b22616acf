# blog_api/core/policy.py
"""
Authorization policy: the owner-or-admin rule.

Pure decisions, no I/O. Applied after a resource has been loaded and before
the store mutates it; the same rule is restated as an ORM filter so that the
mutation itself only touches rows the requester may change.
"""
from dataclasses import dataclass
from uuid import UUID

from blog_api.core.errors import ForbiddenError

ADMIN_ROLE = "admin"
USER_ROLE = "user"
ROLES = (USER_ROLE, ADMIN_ROLE)


@dataclass(frozen=True)
class Identity:
    """Authenticated caller, built from verified token claims."""
    user_id: str
    email: str
    role: str = USER_ROLE

    @property
    def is_admin(self) -> bool:
        return self.role == ADMIN_ROLE


def can_mutate(resource_author_id: str | UUID, requester_id: str | UUID, requester_role: str) -> bool:
    return str(resource_author_id) == str(requester_id) or requester_role == ADMIN_ROLE


def ensure_can_mutate(resource_author_id: str | UUID, identity: Identity, message: str | None = None) -> None:
    if not can_mutate(resource_author_id, identity.user_id, identity.role):
        raise ForbiddenError(message)


def owner_filter(identity: Identity) -> dict:
    """ORM filter kwargs limiting a mutation to rows the identity may change."""
    if identity.is_admin:
        return {}
    return {"author_id": identity.user_id}
