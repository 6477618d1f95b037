from typing import Optional
from datetime import datetime
from pydantic import Field
from wedding_planner.schemas.base import CamelModel


class EventBase(CamelModel):
    name: str = Field(..., min_length=1)
    description: Optional[str] = None
    date: str = Field(..., min_length=1)
    time: str = Field(..., min_length=1)
    location: str = Field(..., min_length=1)
    guest_count: int = Field(0, ge=0)
    icon: str
    color: str
    progress: int = Field(0, ge=0, le=100)


class EventCreate(EventBase):
    wedding_profile_id: Optional[int] = None


class EventUpdate(CamelModel):
    name: Optional[str] = None
    description: Optional[str] = None
    date: Optional[str] = None
    time: Optional[str] = None
    location: Optional[str] = None
    guest_count: Optional[int] = Field(None, ge=0)
    icon: Optional[str] = None
    color: Optional[str] = None
    progress: Optional[int] = Field(None, ge=0, le=100)
    wedding_profile_id: Optional[int] = None


class Event(EventBase):
    id: int
    wedding_profile_id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
