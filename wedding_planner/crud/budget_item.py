from wedding_planner.crud.base import CRUDTenantBase
from wedding_planner.models.budget_item import BudgetItem
from wedding_planner.schemas.budget_item import BudgetItemCreate, BudgetItemUpdate


class CRUDBudgetItem(CRUDTenantBase[BudgetItem, BudgetItemCreate, BudgetItemUpdate]):
    pass


budget_item = CRUDBudgetItem(BudgetItem)
