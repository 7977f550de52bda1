import logging
from typing import Any, Dict, List

from app.errors import DuplicateNameError, NotFoundError, ReferenceInUseError
from app.repositories.reference_repository import ReferenceRepository

logger = logging.getLogger(__name__)


class ReferenceService:
    """
    CRUD for developers, compounds and amenities.
    Names are unique ignoring case; renaming an entry to its own name is fine.
    """

    def __init__(self, repository: ReferenceRepository, entity: str):
        self.repository = repository
        self.entity = entity

    def list_all(self) -> List[Any]:
        return self.repository.find_all()

    def get(self, entity_id: int) -> Any:
        entity = self.repository.find_by_id(entity_id)
        if entity is None:
            raise NotFoundError(self.entity, entity_id)
        return entity

    def create(self, data: Dict[str, Any]) -> Any:
        if self.repository.find_by_name(data["name"]) is not None:
            raise DuplicateNameError(self.entity, data["name"])
        return self.repository.create(data)

    def update(self, entity_id: int, data: Dict[str, Any]) -> Any:
        entity = self.get(entity_id)

        new_name = data.get("name")
        if new_name is not None:
            clash = self.repository.find_by_name(new_name)
            if clash is not None and clash.id != entity.id:
                raise DuplicateNameError(self.entity, new_name)

        data = {key: value for key, value in data.items() if value is not None or key != "name"}
        return self.repository.update(entity, data)

    def delete(self, entity_id: int) -> None:
        entity = self.get(entity_id)
        in_use = self.repository.count_apartments(entity_id)
        if in_use:
            logger.info(f"Refused to delete {self.entity} {entity_id}: used by {in_use} apartment(s)")
            raise ReferenceInUseError(self.entity, entity_id, in_use)
        self.repository.delete(entity)
