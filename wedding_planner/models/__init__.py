from .base import BaseModel, TenantBaseModel
from .wedding_profile import WeddingProfile
from .user import User, UserRole
from .event import Event
from .guest import Guest, RSVPStatus
from .task import Task, TaskStatus
from .budget_item import BudgetItem, BudgetStatus
from .vendor import Vendor, VendorStatus

__all__ = [
    "BaseModel", "TenantBaseModel", "WeddingProfile", "User", "UserRole",
    "Event", "Guest", "RSVPStatus", "Task", "TaskStatus",
    "BudgetItem", "BudgetStatus", "Vendor", "VendorStatus",
]
