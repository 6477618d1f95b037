from typing import Any, List
from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from pydantic import ValidationError
from sqlalchemy.orm import Session
from wedding_planner import crud, schemas
from wedding_planner.core import deps
from wedding_planner.core.exceptions import StorageError
from wedding_planner.core.tenancy import TenantScope
from wedding_planner.db.database import get_db
from wedding_planner.services.guest_import import parse_guest_list
from wedding_planner.services.guest_listing import ALL, derive_guest_list
import logging

logger = logging.getLogger(__name__)
router = APIRouter()


def _get_owned_guest(db: Session, guest_id: int, scope: TenantScope):
    guest = crud.guest.get(db, id=guest_id)
    if not guest:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Guest not found"
        )
    return scope.owns(guest)


@router.get("", response_model=List[schemas.Guest])
def get_guests(
    db: Session = Depends(get_db),
    scope: TenantScope = Depends(deps.get_tenant_scope),
) -> Any:
    return crud.guest.get_by_wedding_profile(db, wedding_profile_id=scope.wedding_profile_id)


@router.get("/view", response_model=schemas.GuestListView)
def get_guest_list_view(
    search_text: str = Query("", alias="searchText"),
    side_filter: str = Query(ALL, alias="sideFilter"),
    rsvp_filter: str = Query(ALL, alias="rsvpFilter"),
    sort_field: str = Query("name", alias="sortField", pattern="^(name|side|rsvp)$"),
    sort_direction: str = Query("asc", alias="sortDirection", pattern="^(asc|desc)$"),
    db: Session = Depends(get_db),
    scope: TenantScope = Depends(deps.get_tenant_scope),
) -> Any:
    """Searched, filtered and sorted guest list with side and RSVP counts"""
    guests = crud.guest.get_by_wedding_profile(db, wedding_profile_id=scope.wedding_profile_id)
    result = derive_guest_list(
        guests,
        search_text=search_text,
        side_filter=side_filter,
        rsvp_filter=rsvp_filter,
        sort_field=sort_field,
        sort_direction=sort_direction,
    )
    return schemas.GuestListView.model_validate(result)


@router.post("", response_model=schemas.Guest, status_code=status.HTTP_201_CREATED)
def create_guest(
    *,
    db: Session = Depends(get_db),
    guest_in: schemas.GuestCreate,
    scope: TenantScope = Depends(deps.get_tenant_scope),
) -> Any:
    return crud.guest.create_with_wedding_profile(
        db, obj_in=guest_in, wedding_profile_id=scope.wedding_profile_id
    )


@router.post("/bulk", response_model=schemas.GuestBulkResult, status_code=status.HTTP_201_CREATED)
def bulk_add_guests(
    *,
    db: Session = Depends(get_db),
    bulk_in: schemas.GuestBulkAdd,
    scope: TenantScope = Depends(deps.get_tenant_scope),
) -> Any:
    """
    Add a pasted guest list, one `name,email,phone` per line.

    Guests are created one at a time. A bad line is reported and skipped;
    guests created before it stay created.
    """
    side = bulk_in.side.capitalize()
    created, failed = [], []

    for index, entry in enumerate(parse_guest_list(bulk_in.guest_list)):
        try:
            guest_in = schemas.GuestCreate(
                name=entry["name"],
                email=entry["email"],
                phone=entry["phone"],
                side=side,
                rsvp_status=bulk_in.rsvp_status,
            )
            created.append(crud.guest.create_with_wedding_profile(
                db, obj_in=guest_in, wedding_profile_id=scope.wedding_profile_id
            ))
        except ValidationError as e:
            failed.append(schemas.BulkFailure(
                index=index, value=entry["name"] or "", error=e.errors()[0]["msg"]
            ))
        except StorageError as e:
            failed.append(schemas.BulkFailure(index=index, value=entry["name"] or "", error=str(e)))

    logger.info(
        f"Bulk guest add for profile {scope.wedding_profile_id}: "
        f"{len(created)} created, {len(failed)} failed"
    )
    return {"created": created, "failed": failed}


@router.get("/{guest_id}", response_model=schemas.Guest)
def get_guest(
    guest_id: int,
    db: Session = Depends(get_db),
    scope: TenantScope = Depends(deps.get_tenant_scope),
) -> Any:
    return _get_owned_guest(db, guest_id, scope)


@router.put("/{guest_id}", response_model=schemas.Guest)
def update_guest(
    *,
    guest_id: int,
    db: Session = Depends(get_db),
    guest_in: schemas.GuestUpdate,
    scope: TenantScope = Depends(deps.get_tenant_scope),
) -> Any:
    guest = _get_owned_guest(db, guest_id, scope)
    return crud.guest.update(db, db_obj=guest, obj_in=guest_in)


@router.delete("/{guest_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_guest(
    guest_id: int,
    db: Session = Depends(get_db),
    scope: TenantScope = Depends(deps.get_tenant_scope),
) -> Response:
    _get_owned_guest(db, guest_id, scope)
    crud.guest.remove(db, id=guest_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
