from collections import Counter
from typing import Any, Dict, Sequence

from wedding_planner.services.records import field_value


def _amount(item: Any, name: str) -> int:
    return field_value(item, name) or 0


def summarize_budget(items: Sequence[Any]) -> Dict[str, Any]:
    """Totals for the budget page; remaining is estimated minus paid and may go negative"""
    total_estimated = sum(_amount(item, "estimated_amount") for item in items)
    total_actual = sum(_amount(item, "actual_amount") for item in items)
    total_paid = sum(_amount(item, "paid_amount") for item in items)
    return {
        "total_estimated": total_estimated,
        "total_actual": total_actual,
        "total_paid": total_paid,
        "remaining": total_estimated - total_paid,
        "item_count": len(items),
        "status_counts": dict(Counter(field_value(item, "status") or "pending" for item in items)),
    }
