import logging
from typing import Any, Dict, List, Optional, Sequence

from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload, selectinload

from app.models import Apartment, Amenity, apartment_favorites
from app.repositories.base import BaseRepository, store_operation

logger = logging.getLogger(__name__)

_UPSERT_DIALECTS = {
    "postgresql": pg_insert,
    "sqlite": sqlite_insert,
}


class ApartmentRepository(BaseRepository):
    """
    Apartment storage.
    Every read expands developer, compound, amenities, agent and favorites,
    and every list comes back newest first.
    """

    def __init__(self, db: Session):
        super().__init__(db)

    def _query(self):
        return self.db.query(Apartment).options(
            joinedload(Apartment.developer),
            joinedload(Apartment.compound),
            joinedload(Apartment.agent),
            selectinload(Apartment.amenities),
            selectinload(Apartment.favorited_by),
        )

    def find(self, criteria: Sequence[Any]) -> List[Apartment]:
        with store_operation(self.db, "fetch apartments"):
            return self._query()\
                .filter(*criteria)\
                .order_by(Apartment.created_at.desc(), Apartment.id.desc())\
                .all()

    def find_by_id(self, apartment_id: int) -> Optional[Apartment]:
        with store_operation(self.db, "fetch apartment"):
            return self._query().filter(Apartment.id == apartment_id).first()

    def exists(self, apartment_id: int) -> bool:
        with store_operation(self.db, "check apartment"):
            return self.db.query(Apartment.id).filter(Apartment.id == apartment_id).first() is not None

    def _load_amenities(self, amenity_ids: List[int]) -> List[Amenity]:
        if not amenity_ids:
            return []
        return self.db.query(Amenity).filter(Amenity.id.in_(amenity_ids)).all()

    def create(self, data: Dict[str, Any], amenity_ids: List[int]) -> Apartment:
        with store_operation(self.db, "create apartment"):
            apartment = Apartment(**data)
            apartment.amenities = self._load_amenities(amenity_ids)
            self.db.add(apartment)
            self.db.commit()
            apartment_id = apartment.id
        return self.find_by_id(apartment_id)

    def update(self, apartment_id: int, data: Dict[str, Any], amenity_ids: Optional[List[int]] = None) -> Optional[Apartment]:
        with store_operation(self.db, "update apartment"):
            apartment = self.db.query(Apartment).filter(Apartment.id == apartment_id).first()
            if apartment is None:
                return None
            for key, value in data.items():
                setattr(apartment, key, value)
            if amenity_ids is not None:
                apartment.amenities = self._load_amenities(amenity_ids)
            self.db.commit()
        return self.find_by_id(apartment_id)

    def delete(self, apartment_id: int) -> bool:
        with store_operation(self.db, "delete apartment"):
            apartment = self.db.query(Apartment).filter(Apartment.id == apartment_id).first()
            if apartment is None:
                return False
            self.db.delete(apartment)
            self.db.commit()
        return True

    def toggle_availability(self, apartment_id: int) -> bool:
        """Flips is_available in one UPDATE. Returns False when no row matched."""
        with store_operation(self.db, "toggle apartment availability"):
            updated = self.db.query(Apartment)\
                .filter(Apartment.id == apartment_id)\
                .update({Apartment.is_available: ~Apartment.is_available}, synchronize_session=False)
            self.db.commit()
        return updated > 0

    def add_favorite(self, apartment_id: int, user_id: int) -> None:
        """Set-add on the favorites relation; an existing membership is left as is"""
        values = {"apartment_id": apartment_id, "user_id": user_id}
        insert = _UPSERT_DIALECTS.get(self.db.get_bind().dialect.name)
        with store_operation(self.db, "add favorite"):
            if insert is not None:
                self.db.execute(insert(apartment_favorites).values(**values).on_conflict_do_nothing())
                self.db.commit()
                return
            try:
                self.db.execute(apartment_favorites.insert().values(**values))
                self.db.commit()
            except IntegrityError:
                self.db.rollback()
                logger.debug(f"Apartment {apartment_id} already in favorites of user {user_id}")

    def remove_favorite(self, apartment_id: int, user_id: int) -> None:
        """Set-difference on the favorites relation; removing a non-member is a no-op"""
        with store_operation(self.db, "remove favorite"):
            self.db.execute(
                apartment_favorites.delete().where(
                    apartment_favorites.c.apartment_id == apartment_id,
                    apartment_favorites.c.user_id == user_id,
                )
            )
            self.db.commit()
