import logging
from typing import Any, Dict, Iterable, List, Optional, Set

from sqlalchemy import func
from sqlalchemy.orm import Session

from app.models import Apartment, Developer, Compound, Amenity
from app.repositories.base import LIKE_ESCAPE, BaseRepository, contains_pattern, store_operation

logger = logging.getLogger(__name__)


class ReferenceRepository(BaseRepository):
    """
    CRUD over a named reference table (developers, compounds, amenities).
    All three share the same shape: a unique ``name`` plus free-text fields.
    """

    # Apartments column pointing at this table, None when nothing blocks deletion
    apartment_column = None

    def __init__(self, db: Session, model):
        super().__init__(db)
        self.model = model
        self.label = model.__name__.lower()

    def find_all(self) -> List[Any]:
        with store_operation(self.db, f"fetch {self.label} list"):
            return self.db.query(self.model).order_by(self.model.name.asc()).all()

    def find_by_id(self, entity_id: int) -> Optional[Any]:
        with store_operation(self.db, f"fetch {self.label}"):
            return self.db.query(self.model).filter(self.model.id == entity_id).first()

    def find_by_name(self, name: str) -> Optional[Any]:
        """Exact name match ignoring case"""
        with store_operation(self.db, f"fetch {self.label} by name"):
            return self.db.query(self.model).filter(
                func.lower(self.model.name) == name.strip().lower()
            ).first()

    def find_ids_by_name_fragment(self, fragment: str) -> Set[int]:
        """Ids of entries whose name contains ``fragment``, case-insensitive"""
        with store_operation(self.db, f"search {self.label} by name"):
            rows = self.db.query(self.model.id)\
                .filter(self.model.name.ilike(contains_pattern(fragment), escape=LIKE_ESCAPE))\
                .all()
        return {row[0] for row in rows}

    def find_missing_ids(self, ids: Iterable[int]) -> List[int]:
        wanted = list(dict.fromkeys(ids))
        if not wanted:
            return []
        with store_operation(self.db, f"check {self.label} ids"):
            rows = self.db.query(self.model.id).filter(self.model.id.in_(wanted)).all()
        found = {row[0] for row in rows}
        return [entity_id for entity_id in wanted if entity_id not in found]

    def count_apartments(self, entity_id: int) -> int:
        if self.apartment_column is None:
            return 0
        with store_operation(self.db, f"count apartments of {self.label}"):
            return self.db.query(Apartment.id).filter(self.apartment_column == entity_id).count()

    def create(self, data: Dict[str, Any]) -> Any:
        with store_operation(self.db, f"create {self.label}"):
            entity = self.model(**data)
            self.db.add(entity)
            self.db.commit()
            self.db.refresh(entity)
        logger.info(f"Created {self.label} {entity.id} ({entity.name})")
        return entity

    def update(self, entity, data: Dict[str, Any]) -> Any:
        with store_operation(self.db, f"update {self.label}"):
            for key, value in data.items():
                setattr(entity, key, value)
            self.db.commit()
            self.db.refresh(entity)
        return entity

    def delete(self, entity) -> None:
        entity_id = entity.id
        with store_operation(self.db, f"delete {self.label}"):
            self.db.delete(entity)
            self.db.commit()
        logger.info(f"Deleted {self.label} {entity_id}")


class DeveloperRepository(ReferenceRepository):
    apartment_column = Apartment.developer_id

    def __init__(self, db: Session):
        super().__init__(db, Developer)


class CompoundRepository(ReferenceRepository):
    apartment_column = Apartment.compound_id

    def __init__(self, db: Session):
        super().__init__(db, Compound)


class AmenityRepository(ReferenceRepository):
    def __init__(self, db: Session):
        super().__init__(db, Amenity)
