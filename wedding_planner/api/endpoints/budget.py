from typing import Any, List
from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session
from wedding_planner import crud, schemas
from wedding_planner.core import deps
from wedding_planner.core.tenancy import TenantScope
from wedding_planner.db.database import get_db
from wedding_planner.services.budget_summary import summarize_budget

router = APIRouter()


def _get_owned_item(db: Session, item_id: int, scope: TenantScope):
    item = crud.budget_item.get(db, id=item_id)
    if not item:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Budget item not found"
        )
    return scope.owns(item)


@router.get("", response_model=List[schemas.BudgetItem])
def get_budget_items(
    db: Session = Depends(get_db),
    scope: TenantScope = Depends(deps.get_tenant_scope),
) -> Any:
    return crud.budget_item.get_by_wedding_profile(db, wedding_profile_id=scope.wedding_profile_id)


@router.get("/summary", response_model=schemas.BudgetSummary)
def get_budget_summary(
    db: Session = Depends(get_db),
    scope: TenantScope = Depends(deps.get_tenant_scope),
) -> Any:
    """Estimated, actual and paid totals across all budget items"""
    items = crud.budget_item.get_by_wedding_profile(db, wedding_profile_id=scope.wedding_profile_id)
    return summarize_budget(items)


@router.post("", response_model=schemas.BudgetItem, status_code=status.HTTP_201_CREATED)
def create_budget_item(
    *,
    db: Session = Depends(get_db),
    item_in: schemas.BudgetItemCreate,
    scope: TenantScope = Depends(deps.get_tenant_scope),
) -> Any:
    return crud.budget_item.create_with_wedding_profile(
        db, obj_in=item_in, wedding_profile_id=scope.wedding_profile_id
    )


@router.get("/{item_id}", response_model=schemas.BudgetItem)
def get_budget_item(
    item_id: int,
    db: Session = Depends(get_db),
    scope: TenantScope = Depends(deps.get_tenant_scope),
) -> Any:
    return _get_owned_item(db, item_id, scope)


@router.put("/{item_id}", response_model=schemas.BudgetItem)
def update_budget_item(
    *,
    item_id: int,
    db: Session = Depends(get_db),
    item_in: schemas.BudgetItemUpdate,
    scope: TenantScope = Depends(deps.get_tenant_scope),
) -> Any:
    item = _get_owned_item(db, item_id, scope)
    return crud.budget_item.update(db, db_obj=item, obj_in=item_in)


@router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_budget_item(
    item_id: int,
    db: Session = Depends(get_db),
    scope: TenantScope = Depends(deps.get_tenant_scope),
) -> Response:
    _get_owned_item(db, item_id, scope)
    crud.budget_item.remove(db, id=item_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
