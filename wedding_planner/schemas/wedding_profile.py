from typing import List, Optional
from datetime import date, datetime
from pydantic import Field, model_validator
from wedding_planner.schemas.base import CamelModel


class WeddingProfileBase(CamelModel):
    bride_name: str = Field(..., min_length=1)
    groom_name: str = Field(..., min_length=1)
    wedding_start_date: date
    wedding_end_date: date
    venue: str = Field(..., min_length=1)
    city: str = Field(..., min_length=1)
    state: str = Field(..., min_length=1)
    guest_count: int = Field(..., ge=1)
    budget: int = Field(..., ge=1)
    functions: List[str] = Field(..., min_length=1)
    theme: Optional[str] = None
    is_complete: bool = False

    @model_validator(mode="after")
    def check_dates(self):
        if self.wedding_end_date < self.wedding_start_date:
            raise ValueError("weddingEndDate must not be before weddingStartDate")
        return self


class WeddingProfileCreate(WeddingProfileBase):
    pass


class WeddingProfileUpdate(CamelModel):
    bride_name: Optional[str] = None
    groom_name: Optional[str] = None
    wedding_start_date: Optional[date] = None
    wedding_end_date: Optional[date] = None
    venue: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    guest_count: Optional[int] = Field(None, ge=1)
    budget: Optional[int] = Field(None, ge=1)
    functions: Optional[List[str]] = None
    theme: Optional[str] = None
    is_complete: Optional[bool] = None


class WeddingProfile(CamelModel):
    id: int
    bride_name: str
    groom_name: str
    wedding_start_date: str
    wedding_end_date: str
    venue: str
    city: str
    state: str
    guest_count: int
    budget: int
    functions: List[str]
    theme: Optional[str] = None
    is_complete: bool = False
    created_at: Optional[datetime] = None
