from typing import Any
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from wedding_planner import crud, schemas
from wedding_planner.core import deps
from wedding_planner.core.exceptions import NoTenant
from wedding_planner.core.tenancy import Principal, TenantScope
from wedding_planner.db.database import get_db
import logging

logger = logging.getLogger(__name__)
router = APIRouter()


def _load_profile(db: Session, scope: TenantScope):
    profile = crud.wedding_profile.get(db, id=scope.wedding_profile_id)
    if not profile:
        # The principal points at a profile that no longer exists
        raise NoTenant(scope.principal.id)
    return profile


@router.get("", response_model=schemas.WeddingProfile)
def get_my_wedding_profile(
    db: Session = Depends(get_db),
    scope: TenantScope = Depends(deps.get_tenant_scope),
) -> Any:
    """The caller's own wedding profile"""
    return _load_profile(db, scope)


@router.post("", response_model=schemas.WeddingProfile, status_code=status.HTTP_201_CREATED)
def create_wedding_profile(
    *,
    db: Session = Depends(get_db),
    profile_in: schemas.WeddingProfileCreate,
    principal: Principal = Depends(deps.get_current_principal),
) -> Any:
    """Onboarding: create the profile and make it the caller's tenant"""
    if principal.wedding_profile_id is not None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Wedding profile already exists"
        )

    owner = crud.user.get(db, id=principal.id)
    profile = crud.wedding_profile.create_for_user(db, obj_in=profile_in, owner=owner)
    logger.info(f"Created wedding profile {profile.id} for user {principal.id}")
    return profile


@router.get("/{wedding_profile_id}", response_model=schemas.WeddingProfile)
def get_wedding_profile(
    wedding_profile_id: int,
    db: Session = Depends(get_db),
    scope: TenantScope = Depends(deps.get_tenant_scope),
) -> Any:
    return _load_profile(db, scope)


@router.put("/{wedding_profile_id}", response_model=schemas.WeddingProfile)
def update_wedding_profile(
    *,
    wedding_profile_id: int,
    db: Session = Depends(get_db),
    profile_in: schemas.WeddingProfileUpdate,
    scope: TenantScope = Depends(deps.get_tenant_scope),
) -> Any:
    profile = _load_profile(db, scope)
    update_data = profile_in.model_dump(mode="json", exclude_unset=True)
    start = update_data.get("wedding_start_date") or profile.wedding_start_date
    end = update_data.get("wedding_end_date") or profile.wedding_end_date
    if end < start:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="weddingEndDate must not be before weddingStartDate"
        )
    return crud.wedding_profile.update(db, db_obj=profile, obj_in=update_data)
