from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from wedding_planner.core.exceptions import StorageError
from wedding_planner.crud.base import CRUDBase
from wedding_planner.models.guest import Guest, RSVPStatus
from wedding_planner.models.user import User
from wedding_planner.models.wedding_profile import WeddingProfile
from wedding_planner.schemas.wedding_profile import WeddingProfileCreate, WeddingProfileUpdate
from wedding_planner.services.guest_import import last_name


class CRUDWeddingProfile(CRUDBase[WeddingProfile, WeddingProfileCreate, WeddingProfileUpdate]):

    def create_for_user(self, db: Session, *, obj_in: WeddingProfileCreate, owner: User) -> WeddingProfile:
        """
        Onboarding: store the profile, make it the owner's tenant and add the
        couple to the guest list as confirmed guests on their own sides.
        """
        db_obj = WeddingProfile(**obj_in.model_dump(mode="json"))
        db.add(db_obj)
        try:
            db.flush()
        except SQLAlchemyError as e:
            db.rollback()
            raise StorageError("Could not save wedding_profiles") from e

        owner.wedding_profile_id = db_obj.id
        db.add(owner)

        for full_name in (db_obj.bride_name, db_obj.groom_name):
            db.add(Guest(
                wedding_profile_id=db_obj.id,
                name=full_name,
                side=last_name(full_name),
                rsvp_status=RSVPStatus.CONFIRMED.value,
            ))

        self._commit(db, db_obj)
        return db_obj


wedding_profile = CRUDWeddingProfile(WeddingProfile)
