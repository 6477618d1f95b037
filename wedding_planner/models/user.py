from sqlalchemy import Column, String, Integer, ForeignKey
from wedding_planner.models.base import BaseModel
import enum


class UserRole(str, enum.Enum):
    BRIDE = "bride"
    GROOM = "groom"
    PLANNER = "planner"
    PARENTS = "parents"
    FAMILY = "family"


class User(BaseModel):
    __tablename__ = "users"

    username = Column(String(100), unique=True, index=True, nullable=False)
    hashed_password = Column(String(255), nullable=False)
    name = Column(String(255), nullable=False)
    role = Column(String(50), nullable=False, default=UserRole.BRIDE.value)
    # Stays NULL until onboarding creates a wedding profile
    wedding_profile_id = Column(Integer, ForeignKey("wedding_profiles.id"), nullable=True, index=True)
