from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session
from wedding_planner import crud
from wedding_planner.core import deps
from wedding_planner.core.tenancy import TenantScope
from wedding_planner.db.database import get_db
from wedding_planner.services.export_service import guests_to_csv, tasks_to_csv

router = APIRouter()


def _csv_response(content: str, filename: str) -> Response:
    return Response(
        content=content,
        media_type="text/csv",
        headers={"Content-Disposition": f"attachment; filename={filename}"},
    )


@router.get("/guests")
def export_guests(
    db: Session = Depends(get_db),
    scope: TenantScope = Depends(deps.get_tenant_scope),
) -> Response:
    guests = crud.guest.get_by_wedding_profile(db, wedding_profile_id=scope.wedding_profile_id)
    return _csv_response(guests_to_csv(guests), "guests.csv")


@router.get("/tasks")
def export_tasks(
    db: Session = Depends(get_db),
    scope: TenantScope = Depends(deps.get_tenant_scope),
) -> Response:
    tasks = crud.task.get_by_wedding_profile(db, wedding_profile_id=scope.wedding_profile_id)
    return _csv_response(tasks_to_csv(tasks), "tasks.csv")
