from sqlalchemy import Column, Integer, DateTime, ForeignKey
from sqlalchemy.orm import declared_attr
from sqlalchemy.sql import func
from wedding_planner.db.database import Base


class BaseModel(Base):
    __abstract__ = True

    id = Column(Integer, primary_key=True, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())


class TenantBaseModel(BaseModel):
    """Rows owned by a single wedding profile"""
    __abstract__ = True

    @declared_attr
    def wedding_profile_id(cls):
        return Column(Integer, ForeignKey("wedding_profiles.id"), nullable=False, index=True)
