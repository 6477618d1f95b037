from wedding_planner.crud.base import CRUDTenantBase
from wedding_planner.models.vendor import Vendor
from wedding_planner.schemas.vendor import VendorCreate, VendorUpdate


class CRUDVendor(CRUDTenantBase[Vendor, VendorCreate, VendorUpdate]):
    pass


vendor = CRUDVendor(Vendor)
