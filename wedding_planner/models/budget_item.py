from sqlalchemy import Column, String, Integer, Text
from wedding_planner.models.base import TenantBaseModel
import enum


class BudgetStatus(str, enum.Enum):
    PENDING = "pending"
    PAID = "paid"
    PARTIAL = "partial"
    CANCELLED = "cancelled"


class BudgetItem(TenantBaseModel):
    __tablename__ = "budget_items"

    category = Column(String(50), nullable=False)
    vendor = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    estimated_amount = Column(Integer, nullable=False)
    actual_amount = Column(Integer, default=0)
    paid_amount = Column(Integer, default=0)
    status = Column(String(20), nullable=False, default=BudgetStatus.PENDING.value)
