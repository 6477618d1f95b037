from typing import Any, List
from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session
from wedding_planner import crud, schemas
from wedding_planner.core import deps
from wedding_planner.core.tenancy import TenantScope
from wedding_planner.db.database import get_db

router = APIRouter()


def _get_owned_vendor(db: Session, vendor_id: int, scope: TenantScope):
    vendor = crud.vendor.get(db, id=vendor_id)
    if not vendor:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Vendor not found"
        )
    return scope.owns(vendor)


@router.get("", response_model=List[schemas.Vendor])
def get_vendors(
    db: Session = Depends(get_db),
    scope: TenantScope = Depends(deps.get_tenant_scope),
) -> Any:
    return crud.vendor.get_by_wedding_profile(db, wedding_profile_id=scope.wedding_profile_id)


@router.post("", response_model=schemas.Vendor, status_code=status.HTTP_201_CREATED)
def create_vendor(
    *,
    db: Session = Depends(get_db),
    vendor_in: schemas.VendorCreate,
    scope: TenantScope = Depends(deps.get_tenant_scope),
) -> Any:
    return crud.vendor.create_with_wedding_profile(
        db, obj_in=vendor_in, wedding_profile_id=scope.wedding_profile_id
    )


@router.get("/{vendor_id}", response_model=schemas.Vendor)
def get_vendor(
    vendor_id: int,
    db: Session = Depends(get_db),
    scope: TenantScope = Depends(deps.get_tenant_scope),
) -> Any:
    return _get_owned_vendor(db, vendor_id, scope)


@router.put("/{vendor_id}", response_model=schemas.Vendor)
def update_vendor(
    *,
    vendor_id: int,
    db: Session = Depends(get_db),
    vendor_in: schemas.VendorUpdate,
    scope: TenantScope = Depends(deps.get_tenant_scope),
) -> Any:
    vendor = _get_owned_vendor(db, vendor_id, scope)
    return crud.vendor.update(db, db_obj=vendor, obj_in=vendor_in)


@router.delete("/{vendor_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_vendor(
    vendor_id: int,
    db: Session = Depends(get_db),
    scope: TenantScope = Depends(deps.get_tenant_scope),
) -> Response:
    _get_owned_vendor(db, vendor_id, scope)
    crud.vendor.remove(db, id=vendor_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
