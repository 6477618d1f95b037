from sqlalchemy import Column, String, Text
from wedding_planner.models.base import TenantBaseModel
import enum


class TaskStatus(str, enum.Enum):
    TODO = "todo"
    IN_PROGRESS = "inprogress"
    DONE = "done"


class Task(TenantBaseModel):
    __tablename__ = "tasks"

    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    category = Column(String(50), nullable=False)
    status = Column(String(20), nullable=False, default=TaskStatus.TODO.value)
    assigned_to = Column(String(50), nullable=False)
    due_date = Column(String(20), nullable=True)
