from typing import Optional
from pydantic import Field, field_validator
from wedding_planner.models.user import UserRole
from wedding_planner.schemas.base import CamelModel, normalize_choice
from wedding_planner.schemas.user import User


class LoginRequest(CamelModel):
    username: str
    password: str


class RegisterRequest(CamelModel):
    username: str = Field(..., min_length=3, max_length=100)
    password: str = Field(..., min_length=6)
    name: str = Field(..., min_length=1)
    role: UserRole = UserRole.BRIDE

    @field_validator("role", mode="before")
    @classmethod
    def normalize_role(cls, v):
        return normalize_choice(v)


class Token(CamelModel):
    access_token: str
    token_type: str = "bearer"
    user: Optional[User] = None
