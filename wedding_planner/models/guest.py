from sqlalchemy import Column, String
from wedding_planner.models.base import TenantBaseModel
import enum


class RSVPStatus(str, enum.Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    DECLINED = "declined"


class Guest(TenantBaseModel):
    __tablename__ = "guests"

    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=True)
    phone = Column(String(50), nullable=True)
    side = Column(String(100), nullable=False)  # free-text group, usually a family name
    rsvp_status = Column(String(20), nullable=False, default=RSVPStatus.PENDING.value)
