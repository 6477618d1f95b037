from .user import User
from .auth import Token, LoginRequest, RegisterRequest
from .wedding_profile import WeddingProfile, WeddingProfileCreate, WeddingProfileUpdate
from .event import Event, EventCreate, EventUpdate
from .guest import (
    Guest, GuestCreate, GuestUpdate, GuestBulkAdd, GuestBulkResult, BulkFailure
)
from .task import Task, TaskCreate, TaskUpdate, TaskBulkAdd, TaskBulkResult
from .budget_item import BudgetItem, BudgetItemCreate, BudgetItemUpdate, BudgetSummary
from .vendor import Vendor, VendorCreate, VendorUpdate
from .listing import GuestListView, KanbanBoard

__all__ = [
    "User", "Token", "LoginRequest", "RegisterRequest",
    "WeddingProfile", "WeddingProfileCreate", "WeddingProfileUpdate",
    "Event", "EventCreate", "EventUpdate",
    "Guest", "GuestCreate", "GuestUpdate", "GuestBulkAdd", "GuestBulkResult", "BulkFailure",
    "Task", "TaskCreate", "TaskUpdate", "TaskBulkAdd", "TaskBulkResult",
    "BudgetItem", "BudgetItemCreate", "BudgetItemUpdate", "BudgetSummary",
    "Vendor", "VendorCreate", "VendorUpdate",
    "GuestListView", "KanbanBoard",
]
