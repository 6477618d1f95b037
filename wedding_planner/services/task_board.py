"""Kanban derivation for the task board"""
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

from wedding_planner.models.task import TaskStatus
from wedding_planner.services.records import field_value

ALL = "all"
COLUMNS = [status.value for status in TaskStatus]  # todo, inprogress, done


@dataclass
class KanbanResult:
    columns: Dict[str, List[Any]]
    counts: Dict[str, int]
    total: int
    completion_rate: int = 0


def completion_rate(done_count: int, total_count: int) -> int:
    if total_count <= 0:
        return 0
    # halves round up: 1 of 8 -> 13
    return int(done_count * 100 / total_count + 0.5)


def _matches(task: Any, attr: str, wanted: Optional[str]) -> bool:
    if not wanted or wanted == ALL:
        return True
    return field_value(task, attr) == wanted


def filter_tasks(
    tasks: Sequence[Any], category_filter: Optional[str] = ALL, assignee_filter: Optional[str] = ALL
) -> List[Any]:
    return [
        task for task in tasks
        if _matches(task, "category", category_filter)
        and _matches(task, "assigned_to", assignee_filter)
    ]


def column_for(task: Any) -> str:
    status = field_value(task, "status")
    if status in COLUMNS:
        return status
    return TaskStatus.TODO.value


def partition_tasks(tasks: Sequence[Any]) -> Dict[str, List[Any]]:
    columns: Dict[str, List[Any]] = {column: [] for column in COLUMNS}
    for task in tasks:
        columns[column_for(task)].append(task)
    return columns


def derive_kanban(
    tasks: Sequence[Any], category_filter: Optional[str] = ALL, assignee_filter: Optional[str] = ALL
) -> KanbanResult:
    visible = filter_tasks(tasks, category_filter, assignee_filter)
    columns = partition_tasks(visible)
    counts = {column: len(items) for column, items in columns.items()}
    return KanbanResult(
        columns=columns,
        counts=counts,
        total=len(visible),
        completion_rate=completion_rate(counts[TaskStatus.DONE.value], len(visible)),
    )
