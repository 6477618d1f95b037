from typing import Dict, List
from wedding_planner.schemas.base import CamelModel
from wedding_planner.schemas.guest import Guest
from wedding_planner.schemas.task import Task


class GuestListView(CamelModel):
    guests: List[Guest]
    total: int
    matched: int
    side_counts: Dict[str, int]
    rsvp_counts: Dict[str, int]


class KanbanBoard(CamelModel):
    columns: Dict[str, List[Task]]
    counts: Dict[str, int]
    total: int
    completion_rate: int
