from typing import List, Optional
from datetime import datetime
from pydantic import EmailStr, Field, field_validator
from wedding_planner.models.guest import RSVPStatus
from wedding_planner.schemas.base import CamelModel, normalize_choice, blank_to_none


class GuestBase(CamelModel):
    name: str = Field(..., min_length=1)
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    side: str = Field(..., min_length=1)
    rsvp_status: RSVPStatus = RSVPStatus.PENDING

    @field_validator("email", "phone", mode="before")
    @classmethod
    def blank_optional(cls, v):
        return blank_to_none(v)

    @field_validator("rsvp_status", mode="before")
    @classmethod
    def default_rsvp(cls, v):
        # An explicit null means the same as leaving it out
        if v is None:
            return RSVPStatus.PENDING
        return normalize_choice(v)


class GuestCreate(GuestBase):
    wedding_profile_id: Optional[int] = None


class GuestUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1)
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    side: Optional[str] = Field(None, min_length=1)
    rsvp_status: Optional[RSVPStatus] = None
    wedding_profile_id: Optional[int] = None

    @field_validator("email", "phone", mode="before")
    @classmethod
    def blank_optional(cls, v):
        return blank_to_none(v)

    @field_validator("rsvp_status", mode="before")
    @classmethod
    def normalize_rsvp(cls, v):
        return normalize_choice(v)


class Guest(CamelModel):
    id: int
    wedding_profile_id: int
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    side: str
    rsvp_status: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class GuestBulkAdd(CamelModel):
    """Pasted guest list, one `name,email,phone` per line"""
    guest_list: str = Field(..., min_length=1)
    side: str = Field(..., min_length=1)
    rsvp_status: RSVPStatus = RSVPStatus.PENDING
    wedding_profile_id: Optional[int] = None

    @field_validator("side", mode="before")
    @classmethod
    def strip_side(cls, v):
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator("rsvp_status", mode="before")
    @classmethod
    def normalize_rsvp(cls, v):
        return normalize_choice(v)


class BulkFailure(CamelModel):
    index: int
    value: str
    error: str


class GuestBulkResult(CamelModel):
    created: List[Guest]
    failed: List[BulkFailure]
