from typing import Any, List
from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.orm import Session
from wedding_planner import crud, schemas
from wedding_planner.core import deps
from wedding_planner.core.exceptions import StorageError
from wedding_planner.core.tenancy import TenantScope, authorize
from wedding_planner.db.database import get_db
from wedding_planner.services.task_board import ALL, derive_kanban
import logging

logger = logging.getLogger(__name__)
router = APIRouter()


def _get_owned_task(db: Session, task_id: int, scope: TenantScope):
    task = crud.task.get(db, id=task_id)
    if not task:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Task not found"
        )
    return scope.owns(task)


@router.get("", response_model=List[schemas.Task])
def get_tasks(
    db: Session = Depends(get_db),
    scope: TenantScope = Depends(deps.get_tenant_scope),
) -> Any:
    return crud.task.get_by_wedding_profile(db, wedding_profile_id=scope.wedding_profile_id)


@router.get("/board", response_model=schemas.KanbanBoard)
def get_task_board(
    category_filter: str = Query(ALL, alias="categoryFilter"),
    assignee_filter: str = Query(ALL, alias="assigneeFilter"),
    db: Session = Depends(get_db),
    scope: TenantScope = Depends(deps.get_tenant_scope),
) -> Any:
    """Kanban columns (todo, inprogress, done) with counts and completion rate"""
    tasks = crud.task.get_by_wedding_profile(db, wedding_profile_id=scope.wedding_profile_id)
    board = derive_kanban(tasks, category_filter=category_filter, assignee_filter=assignee_filter)
    return schemas.KanbanBoard.model_validate(board)


@router.post("", response_model=schemas.Task, status_code=status.HTTP_201_CREATED)
def create_task(
    *,
    db: Session = Depends(get_db),
    task_in: schemas.TaskCreate,
    scope: TenantScope = Depends(deps.get_tenant_scope),
) -> Any:
    return crud.task.create_with_wedding_profile(
        db, obj_in=task_in, wedding_profile_id=scope.wedding_profile_id
    )


@router.post("/bulk", response_model=schemas.TaskBulkResult, status_code=status.HTTP_201_CREATED)
def bulk_add_tasks(
    *,
    db: Session = Depends(get_db),
    bulk_in: schemas.TaskBulkAdd,
    scope: TenantScope = Depends(deps.get_tenant_scope),
) -> Any:
    """
    Create several tasks in order. A task that fails to save is reported and
    skipped; tasks created before it stay created.
    """
    # Every item names its own profile, so every item goes through the gate first
    for task_in in bulk_in.tasks:
        authorize(scope.principal, body_id=task_in.wedding_profile_id)

    created, failed = [], []
    for index, task_in in enumerate(bulk_in.tasks):
        try:
            created.append(crud.task.create_with_wedding_profile(
                db, obj_in=task_in, wedding_profile_id=scope.wedding_profile_id
            ))
        except StorageError as e:
            failed.append(schemas.BulkFailure(index=index, value=task_in.title, error=str(e)))

    logger.info(
        f"Bulk task add for profile {scope.wedding_profile_id}: "
        f"{len(created)} created, {len(failed)} failed"
    )
    return {"created": created, "failed": failed}


@router.get("/{task_id}", response_model=schemas.Task)
def get_task(
    task_id: int,
    db: Session = Depends(get_db),
    scope: TenantScope = Depends(deps.get_tenant_scope),
) -> Any:
    return _get_owned_task(db, task_id, scope)


@router.put("/{task_id}", response_model=schemas.Task)
def update_task(
    *,
    task_id: int,
    db: Session = Depends(get_db),
    task_in: schemas.TaskUpdate,
    scope: TenantScope = Depends(deps.get_tenant_scope),
) -> Any:
    task = _get_owned_task(db, task_id, scope)
    return crud.task.update(db, db_obj=task, obj_in=task_in)


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_task(
    task_id: int,
    db: Session = Depends(get_db),
    scope: TenantScope = Depends(deps.get_tenant_scope),
) -> Response:
    _get_owned_task(db, task_id, scope)
    crud.task.remove(db, id=task_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
