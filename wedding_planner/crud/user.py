from typing import Optional
from sqlalchemy.orm import Session
from wedding_planner.crud.base import CRUDBase
from wedding_planner.models.user import User
from wedding_planner.schemas.auth import RegisterRequest
from wedding_planner.core.security import get_password_hash, verify_password


class CRUDUser(CRUDBase[User, RegisterRequest, RegisterRequest]):

    def get_by_username(self, db: Session, *, username: str) -> Optional[User]:
        return db.query(User).filter(User.username == username).first()

    def create(self, db: Session, *, obj_in: RegisterRequest) -> User:
        db_obj = User(
            username=obj_in.username,
            hashed_password=get_password_hash(obj_in.password),
            name=obj_in.name,
            role=obj_in.role.value,
        )
        db.add(db_obj)
        self._commit(db, db_obj)
        return db_obj

    def authenticate(self, db: Session, *, username: str, password: str) -> Optional[User]:
        user = self.get_by_username(db, username=username)
        if not user:
            return None
        if not verify_password(password, user.hashed_password):
            return None
        return user


user = CRUDUser(User)
