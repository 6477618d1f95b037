# File: wedding_planner/core/tenancy.py
"""
Tenant scoping for wedding profile resources.

Every event, guest, task, budget item and vendor belongs to exactly one
wedding profile. A request may name a profile explicitly (path, query string
or JSON body) or implicitly (the owner of the row it fetches). Either way the
profile must be the caller's own.

The checks here are pure: they take an already resolved Principal and return
the profile id to scope storage with, or raise. They never touch the database.
"""
from dataclasses import dataclass
from typing import Any, Mapping, Optional
import logging

from wedding_planner.core.exceptions import AccessDenied, NoTenant

logger = logging.getLogger(__name__)

TENANT_PARAM = "weddingProfileId"
TENANT_FIELD = "wedding_profile_id"


@dataclass(frozen=True)
class Principal:
    """The authenticated caller, resolved once per request"""
    id: int
    username: str
    name: str
    role: str
    wedding_profile_id: Optional[int] = None

    @classmethod
    def from_user(cls, user: Any) -> "Principal":
        return cls(
            id=user.id,
            username=user.username,
            name=user.name,
            role=user.role,
            wedding_profile_id=user.wedding_profile_id,
        )


def _as_tenant_id(value: Any, principal: Principal) -> int:
    # Anything that cannot be a profile id cannot be the caller's profile id
    if isinstance(value, bool):
        raise AccessDenied(principal.id, None)
    try:
        return int(value)
    except (TypeError, ValueError):
        raise AccessDenied(principal.id, None)


def body_tenant_id(body: Any) -> Optional[Any]:
    """Profile id named in a JSON body, camelCase first"""
    if not isinstance(body, Mapping):
        return None
    if body.get(TENANT_PARAM) is not None:
        return body[TENANT_PARAM]
    return body.get(TENANT_FIELD)


def authorize(
    principal: Principal,
    path_id: Optional[Any] = None,
    query_id: Optional[Any] = None,
    body_id: Optional[Any] = None,
) -> int:
    """
    Scoping check for a tenant resource request.

    Raises NoTenant when the principal has not finished onboarding, whatever
    was requested. Otherwise every supplied profile id is compared with the
    principal's in path > query > body order and the first mismatch raises
    AccessDenied. Returns the principal's profile id.
    """
    tenant_id = principal.wedding_profile_id
    if tenant_id is None:
        logger.info(f"User {principal.id} has no wedding profile yet")
        raise NoTenant(principal.id)

    for source, candidate in (("path", path_id), ("query", query_id), ("body", body_id)):
        if candidate is None:
            continue
        requested = _as_tenant_id(candidate, principal)
        if requested != tenant_id:
            logger.warning(
                f"Access denied: user {principal.id} (profile {tenant_id}) "
                f"requested profile {requested} via {source}"
            )
            raise AccessDenied(principal.id, requested)

    return tenant_id


def authorize_owner(principal: Principal, owner_id: Optional[int]) -> int:
    """Implied-tenant check for a row already fetched by primary key"""
    tenant_id = authorize(principal)
    if owner_id != tenant_id:
        logger.warning(
            f"Access denied: user {principal.id} (profile {tenant_id}) "
            f"touched a row owned by profile {owner_id}"
        )
        raise AccessDenied(principal.id, owner_id)
    return tenant_id


@dataclass(frozen=True)
class TenantScope:
    """A principal that passed the scoping check, and the profile it may use"""
    principal: Principal
    wedding_profile_id: int

    def owns(self, row: Any) -> Any:
        authorize_owner(self.principal, getattr(row, TENANT_FIELD, None))
        return row
