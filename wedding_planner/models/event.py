from sqlalchemy import Column, String, Integer, Text
from wedding_planner.models.base import TenantBaseModel


class Event(TenantBaseModel):
    __tablename__ = "events"

    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    date = Column(String(20), nullable=False)
    time = Column(String(20), nullable=False)
    location = Column(String(255), nullable=False)
    guest_count = Column(Integer, default=0)
    icon = Column(String(50), nullable=False)
    color = Column(String(50), nullable=False)
    progress = Column(Integer, default=0)  # percent, 0-100
