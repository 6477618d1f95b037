from typing import Any, Dict, Generic, List, Optional, Type, TypeVar, Union
import logging

from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from wedding_planner.core.exceptions import StorageError
from wedding_planner.core.tenancy import TENANT_FIELD
from wedding_planner.db.database import Base

logger = logging.getLogger(__name__)

ModelType = TypeVar("ModelType", bound=Base)
CreateSchemaType = TypeVar("CreateSchemaType", bound=BaseModel)
UpdateSchemaType = TypeVar("UpdateSchemaType", bound=BaseModel)


class CRUDBase(Generic[ModelType, CreateSchemaType, UpdateSchemaType]):
    def __init__(self, model: Type[ModelType]):
        """
        CRUD object with default methods to Create, Read, Update, Delete (CRUD).

        **Parameters**

        * `model`: A SQLAlchemy model class
        """
        self.model = model

    def _commit(self, db: Session, db_obj: Optional[ModelType] = None) -> None:
        try:
            db.commit()
            if db_obj is not None:
                db.refresh(db_obj)
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"{self.model.__name__} write failed: {e}")
            raise StorageError(f"Could not save {self.model.__tablename__}") from e

    def get(self, db: Session, id: Any) -> Optional[ModelType]:
        return db.query(self.model).filter(self.model.id == id).first()

    def create(self, db: Session, *, obj_in: Union[CreateSchemaType, Dict[str, Any]]) -> ModelType:
        if isinstance(obj_in, dict):
            obj_in_data = obj_in
        else:
            obj_in_data = obj_in.model_dump(mode="json")
        db_obj = self.model(**obj_in_data)
        db.add(db_obj)
        self._commit(db, db_obj)
        return db_obj

    def update(
        self, db: Session, *, db_obj: ModelType, obj_in: Union[UpdateSchemaType, Dict[str, Any]]
    ) -> ModelType:
        if isinstance(obj_in, dict):
            update_data = dict(obj_in)
        else:
            update_data = obj_in.model_dump(mode="json", exclude_unset=True)
        update_data.pop(TENANT_FIELD, None)
        columns = self.model.__table__.columns
        for field, value in update_data.items():
            if field not in columns:
                continue
            # null for a required column means "leave it alone"
            if value is None and not columns[field].nullable:
                continue
            setattr(db_obj, field, value)
        db.add(db_obj)
        self._commit(db, db_obj)
        return db_obj

    def remove(self, db: Session, *, id: int) -> Optional[ModelType]:
        obj = db.get(self.model, id)
        if obj is None:
            return None
        db.delete(obj)
        self._commit(db)
        return obj


class CRUDTenantBase(CRUDBase[ModelType, CreateSchemaType, UpdateSchemaType]):
    """Rows owned by one wedding profile"""

    def get_by_wedding_profile(
        self, db: Session, *, wedding_profile_id: int, skip: int = 0, limit: Optional[int] = None
    ) -> List[ModelType]:
        query = (
            db.query(self.model)
            .filter(self.model.wedding_profile_id == wedding_profile_id)
            .order_by(self.model.id)
            .offset(skip)
        )
        if limit is not None:
            query = query.limit(limit)
        return query.all()

    def create_with_wedding_profile(
        self, db: Session, *, obj_in: Union[CreateSchemaType, Dict[str, Any]], wedding_profile_id: int
    ) -> ModelType:
        if isinstance(obj_in, dict):
            obj_in_data = dict(obj_in)
        else:
            obj_in_data = obj_in.model_dump(mode="json")
        obj_in_data[TENANT_FIELD] = wedding_profile_id
        db_obj = self.model(**obj_in_data)
        db.add(db_obj)
        self._commit(db, db_obj)
        return db_obj
