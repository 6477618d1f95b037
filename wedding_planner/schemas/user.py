from typing import Optional
from wedding_planner.schemas.base import CamelModel


class User(CamelModel):
    id: int
    username: str
    name: str
    role: str
    wedding_profile_id: Optional[int] = None
