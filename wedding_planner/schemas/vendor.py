from typing import Optional
from datetime import datetime
from pydantic import EmailStr, Field, field_validator
from wedding_planner.models.vendor import VendorStatus
from wedding_planner.schemas.base import CamelModel, normalize_choice, blank_to_none


class VendorBase(CamelModel):
    name: str = Field(..., min_length=1)
    category: str = Field(..., min_length=1)
    contact: Optional[str] = None
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    website: Optional[str] = None
    contract_url: Optional[str] = None
    notes: Optional[str] = None
    status: VendorStatus = VendorStatus.ACTIVE

    @field_validator("email", mode="before")
    @classmethod
    def blank_optional(cls, v):
        return blank_to_none(v)

    @field_validator("status", mode="before")
    @classmethod
    def default_status(cls, v):
        if v is None:
            return VendorStatus.ACTIVE
        return normalize_choice(v)


class VendorCreate(VendorBase):
    wedding_profile_id: Optional[int] = None


class VendorUpdate(CamelModel):
    name: Optional[str] = None
    category: Optional[str] = None
    contact: Optional[str] = None
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    website: Optional[str] = None
    contract_url: Optional[str] = None
    notes: Optional[str] = None
    status: Optional[VendorStatus] = None
    wedding_profile_id: Optional[int] = None

    @field_validator("email", mode="before")
    @classmethod
    def blank_optional(cls, v):
        return blank_to_none(v)

    @field_validator("status", mode="before")
    @classmethod
    def normalize_status(cls, v):
        return normalize_choice(v)


class Vendor(CamelModel):
    id: int
    wedding_profile_id: int
    name: str
    category: str
    contact: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    website: Optional[str] = None
    contract_url: Optional[str] = None
    notes: Optional[str] = None
    status: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
