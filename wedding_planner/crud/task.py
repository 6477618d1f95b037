from wedding_planner.crud.base import CRUDTenantBase
from wedding_planner.models.task import Task
from wedding_planner.schemas.task import TaskCreate, TaskUpdate


class CRUDTask(CRUDTenantBase[Task, TaskCreate, TaskUpdate]):
    pass


task = CRUDTask(Task)
