"""CSV exports of the guest list and task board"""
import csv
import io
from typing import Any, Iterable, List, Sequence

from wedding_planner.services.guest_listing import rsvp_of
from wedding_planner.services.records import field_value

GUEST_HEADERS = ["Name", "Email", "Phone", "Side", "RSVP Status"]
TASK_HEADERS = ["Title", "Description", "Category", "Status", "Assigned To", "Due Date"]


def _cell(record: Any, name: str) -> str:
    value = field_value(record, name)
    return "" if value is None else str(value)


def _to_csv(headers: Sequence[str], rows: Iterable[List[str]]) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")
    # Header row stays bare, data cells are always quoted
    buffer.write(",".join(headers) + "\n")
    writer.writerows(rows)
    return buffer.getvalue()


def guests_to_csv(guests: Sequence[Any]) -> str:
    return _to_csv(
        GUEST_HEADERS,
        (
            [
                _cell(guest, "name"),
                _cell(guest, "email"),
                _cell(guest, "phone"),
                _cell(guest, "side"),
                rsvp_of(guest),
            ]
            for guest in guests
        ),
    )


def tasks_to_csv(tasks: Sequence[Any]) -> str:
    return _to_csv(
        TASK_HEADERS,
        (
            [
                _cell(task, "title"),
                _cell(task, "description"),
                _cell(task, "category"),
                _cell(task, "status"),
                _cell(task, "assigned_to"),
                _cell(task, "due_date"),
            ]
            for task in tasks
        ),
    )
