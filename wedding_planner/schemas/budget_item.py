from typing import Dict, Optional
from datetime import datetime
from pydantic import Field, field_validator
from wedding_planner.models.budget_item import BudgetStatus
from wedding_planner.schemas.base import CamelModel, normalize_choice


class BudgetItemBase(CamelModel):
    category: str = Field(..., min_length=1)
    vendor: str = Field(..., min_length=1)
    description: Optional[str] = None
    estimated_amount: int = Field(..., ge=0)
    actual_amount: Optional[int] = Field(0, ge=0)
    paid_amount: Optional[int] = Field(0, ge=0)
    status: BudgetStatus = BudgetStatus.PENDING

    @field_validator("status", mode="before")
    @classmethod
    def default_status(cls, v):
        if v is None:
            return BudgetStatus.PENDING
        return normalize_choice(v)


class BudgetItemCreate(BudgetItemBase):
    wedding_profile_id: Optional[int] = None


class BudgetItemUpdate(CamelModel):
    category: Optional[str] = None
    vendor: Optional[str] = None
    description: Optional[str] = None
    estimated_amount: Optional[int] = Field(None, ge=0)
    actual_amount: Optional[int] = Field(None, ge=0)
    paid_amount: Optional[int] = Field(None, ge=0)
    status: Optional[BudgetStatus] = None
    wedding_profile_id: Optional[int] = None

    @field_validator("status", mode="before")
    @classmethod
    def normalize_status(cls, v):
        return normalize_choice(v)


class BudgetItem(CamelModel):
    id: int
    wedding_profile_id: int
    category: str
    vendor: str
    description: Optional[str] = None
    estimated_amount: int
    actual_amount: Optional[int] = 0
    paid_amount: Optional[int] = 0
    status: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class BudgetSummary(CamelModel):
    total_estimated: int
    total_actual: int
    total_paid: int
    remaining: int
    item_count: int
    status_counts: Dict[str, int]
