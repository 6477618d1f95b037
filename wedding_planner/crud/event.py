from wedding_planner.crud.base import CRUDTenantBase
from wedding_planner.models.event import Event
from wedding_planner.schemas.event import EventCreate, EventUpdate


class CRUDEvent(CRUDTenantBase[Event, EventCreate, EventUpdate]):
    pass


event = CRUDEvent(Event)
