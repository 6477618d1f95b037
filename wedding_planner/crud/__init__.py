from .user import user
from .wedding_profile import wedding_profile
from .event import event
from .guest import guest
from .task import task
from .budget_item import budget_item
from .vendor import vendor

__all__ = ["user", "wedding_profile", "event", "guest", "task", "budget_item", "vendor"]
