"""
Guest list derivation: search, filter, sort and count a wedding's guests.

Pure functions over whatever records the caller already holds. Records may be
ORM rows, pydantic schemas or plain dicts with camelCase or snake_case keys.
Nothing here raises on missing optional fields; a guest without an RSVP is
treated as pending.
"""
from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

from wedding_planner.models.guest import RSVPStatus
from wedding_planner.services.records import field_value

ALL = "all"
SORT_FIELDS = {"name": "name", "side": "side", "rsvp": "rsvp_status"}
SORT_DIRECTIONS = ("asc", "desc")
DEFAULT_RSVP = RSVPStatus.PENDING.value


@dataclass
class GuestListResult:
    guests: List[Any]
    total: int
    matched: int
    side_counts: Dict[str, int] = field(default_factory=dict)
    rsvp_counts: Dict[str, int] = field(default_factory=dict)


def _text(record: Any, name: str) -> str:
    value = field_value(record, name)
    return "" if value is None else str(value)


def rsvp_of(guest: Any) -> str:
    status = field_value(guest, "rsvp_status")
    if status is None or not str(status).strip():
        return DEFAULT_RSVP
    return str(status)


def matches_search(guest: Any, search_text: Optional[str]) -> bool:
    if not search_text:
        return True
    needle = search_text.lower()
    return any(needle in _text(guest, name).lower() for name in ("name", "email", "phone"))


def matches_side(guest: Any, side_filter: Optional[str]) -> bool:
    if not side_filter or side_filter.lower() == ALL:
        return True
    return _text(guest, "side").lower() == side_filter.lower()


def matches_rsvp(guest: Any, rsvp_filter: Optional[str]) -> bool:
    if not rsvp_filter or rsvp_filter.lower() == ALL:
        return True
    return rsvp_of(guest).lower() == rsvp_filter.lower()


def filter_guests(
    guests: Sequence[Any],
    search_text: Optional[str] = "",
    side_filter: Optional[str] = ALL,
    rsvp_filter: Optional[str] = ALL,
) -> List[Any]:
    return [
        guest for guest in guests
        if matches_search(guest, search_text)
        and matches_side(guest, side_filter)
        and matches_rsvp(guest, rsvp_filter)
    ]


def _sort_key(guest: Any, attr: str) -> str:
    if attr == "rsvp_status":
        return rsvp_of(guest).lower()
    return _text(guest, attr).lower()


def sort_guests(
    guests: Sequence[Any], sort_field: Optional[str] = "name", sort_direction: Optional[str] = "asc"
) -> List[Any]:
    """Case-insensitive, stable; unknown fields fall back to name, unknown directions to asc"""
    attr = SORT_FIELDS.get((sort_field or "name").lower(), "name")
    descending = (sort_direction or "asc").lower() == "desc"
    # sorted() keeps equal keys in source order even with reverse=True
    return sorted(guests, key=lambda guest: _sort_key(guest, attr), reverse=descending)


def side_counts(guests: Sequence[Any]) -> Dict[str, int]:
    return dict(Counter(_text(guest, "side") for guest in guests))


def rsvp_counts(guests: Sequence[Any]) -> Dict[str, int]:
    """Keyed by lowercase status, the form statuses are stored in; missing counts as pending"""
    return dict(Counter(rsvp_of(guest).lower() for guest in guests))


def derive_guest_list(
    guests: Sequence[Any],
    search_text: Optional[str] = "",
    side_filter: Optional[str] = ALL,
    rsvp_filter: Optional[str] = ALL,
    sort_field: Optional[str] = "name",
    sort_direction: Optional[str] = "asc",
) -> GuestListResult:
    """Filtered, sorted guests plus counts over the whole list"""
    visible = sort_guests(
        filter_guests(guests, search_text, side_filter, rsvp_filter),
        sort_field,
        sort_direction,
    )
    return GuestListResult(
        guests=visible,
        total=len(guests),
        matched=len(visible),
        side_counts=side_counts(guests),
        rsvp_counts=rsvp_counts(guests),
    )
