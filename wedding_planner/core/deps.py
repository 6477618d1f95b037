from typing import Optional
import logging

from fastapi import Depends, Query, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session

from wedding_planner import crud
from wedding_planner.core.config import settings
from wedding_planner.core.exceptions import NotAuthenticated
from wedding_planner.core.security import decode_token
from wedding_planner.core.tenancy import (
    Principal, TenantScope, TENANT_FIELD, TENANT_PARAM, authorize, body_tenant_id
)
from wedding_planner.db.database import get_db

logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)

BODY_METHODS = ("POST", "PUT", "PATCH")


def get_session_token(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> Optional[str]:
    """Bearer header wins over the session cookie"""
    if credentials and credentials.credentials:
        return credentials.credentials
    return request.cookies.get(settings.SESSION_COOKIE_NAME)


def get_current_principal(
    db: Session = Depends(get_db),
    token: Optional[str] = Depends(get_session_token),
) -> Principal:
    if not token:
        raise NotAuthenticated()

    payload = decode_token(token)
    if payload is None or payload.get("sub") is None:
        raise NotAuthenticated("Invalid session")

    try:
        user_id = int(payload["sub"])
    except (TypeError, ValueError):
        raise NotAuthenticated("Invalid session")

    user = crud.user.get(db, id=user_id)
    if user is None:
        raise NotAuthenticated("Invalid session")

    return Principal.from_user(user)


async def get_tenant_scope(
    request: Request,
    principal: Principal = Depends(get_current_principal),
    requested_profile_id: Optional[str] = Query(
        None, alias=TENANT_PARAM, description="Must match the caller's own wedding profile"
    ),
) -> TenantScope:
    """
    Scoping gate for every tenant resource route, reads and writes alike.
    Runs after the principal is resolved and before any storage call.
    """
    body = None
    if request.method in BODY_METHODS:
        try:
            body = await request.json()
        except ValueError:
            # Not JSON; schema validation reports it
            body = None

    tenant_id = authorize(
        principal,
        path_id=request.path_params.get(TENANT_FIELD),
        query_id=requested_profile_id,
        body_id=body_tenant_id(body),
    )
    return TenantScope(principal=principal, wedding_profile_id=tenant_id)
