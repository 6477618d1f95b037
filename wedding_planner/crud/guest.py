from wedding_planner.crud.base import CRUDTenantBase
from wedding_planner.models.guest import Guest
from wedding_planner.schemas.guest import GuestCreate, GuestUpdate


class CRUDGuest(CRUDTenantBase[Guest, GuestCreate, GuestUpdate]):
    pass


guest = CRUDGuest(Guest)
