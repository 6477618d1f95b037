from sqlalchemy import Column, String, Text
from wedding_planner.models.base import TenantBaseModel
import enum


class VendorStatus(str, enum.Enum):
    ACTIVE = "active"
    CONTACTED = "contacted"
    BOOKED = "booked"
    INACTIVE = "inactive"


class Vendor(TenantBaseModel):
    __tablename__ = "vendors"

    name = Column(String(255), nullable=False)
    category = Column(String(50), nullable=False)
    contact = Column(String(255), nullable=True)
    email = Column(String(255), nullable=True)
    phone = Column(String(50), nullable=True)
    address = Column(Text, nullable=True)
    website = Column(String(500), nullable=True)
    contract_url = Column(String(500), nullable=True)  # reference only, files live elsewhere
    notes = Column(Text, nullable=True)
    status = Column(String(20), nullable=False, default=VendorStatus.ACTIVE.value)
