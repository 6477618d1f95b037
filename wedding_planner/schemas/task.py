from typing import List, Optional
from datetime import datetime
from pydantic import Field, field_validator
from wedding_planner.models.task import TaskStatus
from wedding_planner.schemas.base import CamelModel, normalize_choice, blank_to_none
from wedding_planner.schemas.guest import BulkFailure


class TaskBase(CamelModel):
    title: str = Field(..., min_length=1)
    description: Optional[str] = None
    category: str = Field(..., min_length=1)
    status: TaskStatus = TaskStatus.TODO
    assigned_to: str = Field(..., min_length=1)
    due_date: Optional[str] = None

    @field_validator("due_date", mode="before")
    @classmethod
    def blank_due(cls, v):
        return blank_to_none(v)

    @field_validator("status", mode="before")
    @classmethod
    def default_status(cls, v):
        if v is None:
            return TaskStatus.TODO
        return normalize_choice(v)


class TaskCreate(TaskBase):
    wedding_profile_id: Optional[int] = None


class TaskUpdate(CamelModel):
    title: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    category: Optional[str] = None
    status: Optional[TaskStatus] = None
    assigned_to: Optional[str] = None
    due_date: Optional[str] = None
    wedding_profile_id: Optional[int] = None

    @field_validator("status", mode="before")
    @classmethod
    def normalize_status(cls, v):
        return normalize_choice(v)


class Task(CamelModel):
    id: int
    wedding_profile_id: int
    title: str
    description: Optional[str] = None
    category: str
    status: str
    assigned_to: str
    due_date: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class TaskBulkAdd(CamelModel):
    tasks: List[TaskCreate] = Field(..., min_length=1)
    wedding_profile_id: Optional[int] = None


class TaskBulkResult(CamelModel):
    created: List[Task]
    failed: List[BulkFailure]
