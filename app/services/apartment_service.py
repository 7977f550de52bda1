import logging
from typing import List

from app.errors import NotFoundError, ReferenceNotFoundError
from app.models import Apartment
from app.repositories.apartment_repository import ApartmentRepository
from app.repositories.reference_repository import ReferenceRepository
from app.schemas.apartment import ApartmentCreate, ApartmentUpdate
from app.schemas.filters import ApartmentFilters
from app.services.query_builder import ApartmentQuery
from app.services.visibility import ListingScope, Principal, ViewContext, VisibilityPolicy

logger = logging.getLogger(__name__)

NULLABLE_FIELDS = {"state"}


class ApartmentService:
    """
    Apartment listings: search views, lifecycle and favorites.
    """

    def __init__(
        self,
        apartments: ApartmentRepository,
        developers: ReferenceRepository,
        compounds: ReferenceRepository,
        amenities: ReferenceRepository,
        policy: VisibilityPolicy,
    ):
        self.apartments = apartments
        self.developers = developers
        self.compounds = compounds
        self.amenities = amenities
        self.policy = policy

    def _execute(self, query: ApartmentQuery) -> List[Apartment]:
        """Single path for every listing view: store query, then name narrowing if still pending"""
        apartments = self.apartments.find(query.criteria)
        if not query.fully_resolved:
            apartments = self.policy.narrow_by_names(apartments, query.name_filters)
        return apartments

    def _view(self, filters, context: ViewContext) -> List[Apartment]:
        return self._execute(self.policy.effective_query(filters, context))

    # --- search views ---

    def search_listings(self, filters: ApartmentFilters, principal: Principal) -> List[Apartment]:
        return self._view(filters, ViewContext(ListingScope.BROWSE, principal))

    def search_listings_admin(self, filters: ApartmentFilters, principal: Principal) -> List[Apartment]:
        return self._view(filters, ViewContext(ListingScope.ADMIN, principal))

    def my_listings(self, owner_id: int) -> List[Apartment]:
        return self._view(None, ViewContext(ListingScope.OWNER, Principal(id=owner_id)))

    def listings_by_compound(self, compound_id: int) -> List[Apartment]:
        return self._view(None, ViewContext(ListingScope.COMPOUND, subject_id=compound_id))

    def listings_by_developer(self, developer_id: int) -> List[Apartment]:
        return self._view(None, ViewContext(ListingScope.DEVELOPER, subject_id=developer_id))

    def favorites(self, user_id: int) -> List[Apartment]:
        return self._view(None, ViewContext(ListingScope.FAVORITES, Principal(id=user_id)))

    # --- lifecycle ---

    def get_listing(self, apartment_id: int) -> Apartment:
        apartment = self.apartments.find_by_id(apartment_id)
        if apartment is None:
            raise NotFoundError("Apartment", apartment_id)
        return apartment

    def _check_references(self, data: dict) -> None:
        if data.get("developer_id") is not None and self.developers.find_by_id(data["developer_id"]) is None:
            raise ReferenceNotFoundError("developer", data["developer_id"])
        if data.get("compound_id") is not None and self.compounds.find_by_id(data["compound_id"]) is None:
            raise ReferenceNotFoundError("compound", data["compound_id"])
        if data.get("amenity_ids"):
            missing = self.amenities.find_missing_ids(data["amenity_ids"])
            if missing:
                raise ReferenceNotFoundError("amenity", missing[0])

    def create_listing(self, data: ApartmentCreate, owner_id: int) -> Apartment:
        payload = data.model_dump()
        self._check_references(payload)

        amenity_ids = payload.pop("amenity_ids")
        payload["agent_id"] = owner_id
        apartment = self.apartments.create(payload, amenity_ids)
        logger.info(f"Apartment {apartment.id} created by agent {owner_id}")
        return apartment

    def update_listing(self, apartment_id: int, data: ApartmentUpdate) -> Apartment:
        if not self.apartments.exists(apartment_id):
            raise NotFoundError("Apartment", apartment_id)

        # Explicit nulls only make sense for optional columns
        payload = {
            key: value for key, value in data.model_dump(exclude_unset=True).items()
            if value is not None or key in NULLABLE_FIELDS
        }
        self._check_references(payload)

        amenity_ids = payload.pop("amenity_ids", None)
        apartment = self.apartments.update(apartment_id, payload, amenity_ids)
        if apartment is None:
            raise NotFoundError("Apartment", apartment_id)
        logger.info(f"Apartment {apartment_id} updated: {sorted(payload)}")
        return apartment

    def delete_listing(self, apartment_id: int) -> bool:
        deleted = self.apartments.delete(apartment_id)
        if deleted:
            logger.info(f"Apartment {apartment_id} deleted")
        return deleted

    def toggle_availability(self, apartment_id: int) -> Apartment:
        if not self.apartments.toggle_availability(apartment_id):
            raise NotFoundError("Apartment", apartment_id)
        apartment = self.get_listing(apartment_id)
        logger.info(f"Apartment {apartment_id} is now {'available' if apartment.is_available else 'unavailable'}")
        return apartment

    # --- favorites ---

    def add_favorite(self, apartment_id: int, user_id: int) -> Apartment:
        if not self.apartments.exists(apartment_id):
            raise NotFoundError("Apartment", apartment_id)
        self.apartments.add_favorite(apartment_id, user_id)
        return self.get_listing(apartment_id)

    def remove_favorite(self, apartment_id: int, user_id: int) -> Apartment:
        if not self.apartments.exists(apartment_id):
            raise NotFoundError("Apartment", apartment_id)
        self.apartments.remove_favorite(apartment_id, user_id)
        return self.get_listing(apartment_id)
