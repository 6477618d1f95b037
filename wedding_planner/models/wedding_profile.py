from sqlalchemy import Column, String, Integer, Boolean, JSON
from wedding_planner.models.base import BaseModel


class WeddingProfile(BaseModel):
    __tablename__ = "wedding_profiles"

    bride_name = Column(String(255), nullable=False)
    groom_name = Column(String(255), nullable=False)
    wedding_start_date = Column(String(20), nullable=False)
    wedding_end_date = Column(String(20), nullable=False)
    venue = Column(String(255), nullable=False)
    city = Column(String(100), nullable=False)
    state = Column(String(100), nullable=False)
    guest_count = Column(Integer, nullable=False)
    budget = Column(Integer, nullable=False)
    functions = Column(JSON, nullable=False, default=list)  # e.g. ["haldi", "sangeet", "wedding"]
    theme = Column(String(100), nullable=True)
    is_complete = Column(Boolean, default=False)
