from typing import Any, List
from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session
from wedding_planner import crud, schemas
from wedding_planner.core import deps
from wedding_planner.core.tenancy import TenantScope
from wedding_planner.db.database import get_db

router = APIRouter()


def _get_owned_event(db: Session, event_id: int, scope: TenantScope):
    event = crud.event.get(db, id=event_id)
    if not event:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Event not found"
        )
    return scope.owns(event)


@router.get("", response_model=List[schemas.Event])
def get_events(
    db: Session = Depends(get_db),
    scope: TenantScope = Depends(deps.get_tenant_scope),
) -> Any:
    """All events of the caller's wedding"""
    return crud.event.get_by_wedding_profile(db, wedding_profile_id=scope.wedding_profile_id)


@router.post("", response_model=schemas.Event, status_code=status.HTTP_201_CREATED)
def create_event(
    *,
    db: Session = Depends(get_db),
    event_in: schemas.EventCreate,
    scope: TenantScope = Depends(deps.get_tenant_scope),
) -> Any:
    return crud.event.create_with_wedding_profile(
        db, obj_in=event_in, wedding_profile_id=scope.wedding_profile_id
    )


@router.get("/{event_id}", response_model=schemas.Event)
def get_event(
    event_id: int,
    db: Session = Depends(get_db),
    scope: TenantScope = Depends(deps.get_tenant_scope),
) -> Any:
    return _get_owned_event(db, event_id, scope)


@router.put("/{event_id}", response_model=schemas.Event)
def update_event(
    *,
    event_id: int,
    db: Session = Depends(get_db),
    event_in: schemas.EventUpdate,
    scope: TenantScope = Depends(deps.get_tenant_scope),
) -> Any:
    event = _get_owned_event(db, event_id, scope)
    return crud.event.update(db, db_obj=event, obj_in=event_in)


@router.delete("/{event_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_event(
    event_id: int,
    db: Session = Depends(get_db),
    scope: TenantScope = Depends(deps.get_tenant_scope),
) -> Response:
    _get_owned_event(db, event_id, scope)
    crud.event.remove(db, id=event_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
