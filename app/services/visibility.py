"""
Who sees which apartments.

Every listing view goes through VisibilityPolicy: it turns the caller's filters
and view scope into the effective store query, and narrows fetched results by
compound/developer name when the store query could not express that.
"""
import enum
import logging
from dataclasses import dataclass
from typing import List, Optional

from app.errors import PermissionDeniedError
from app.models import Apartment, User, UserRole
from app.repositories.reference_repository import ReferenceRepository
from app.schemas.filters import ApartmentFilters
from app.services.query_builder import ApartmentQuery, NameFilters, build_apartment_query

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Principal:
    """Identity making the request. ``id`` is None for anonymous callers."""
    id: Optional[int] = None
    role: Optional[UserRole] = None

    @property
    def is_authenticated(self) -> bool:
        return self.id is not None

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN

    @property
    def can_publish(self) -> bool:
        return self.role in (UserRole.AGENT, UserRole.ADMIN)

    @classmethod
    def from_user(cls, user: User) -> "Principal":
        return cls(id=user.id, role=UserRole(user.role))


ANONYMOUS = Principal()


class ListingScope(str, enum.Enum):
    BROWSE = "browse"
    ADMIN = "admin"
    OWNER = "owner"
    COMPOUND = "compound"
    DEVELOPER = "developer"
    FAVORITES = "favorites"


@dataclass(frozen=True)
class ViewContext:
    scope: ListingScope
    principal: Principal = ANONYMOUS
    subject_id: Optional[int] = None  # compound or developer id for scoped views


class VisibilityPolicy:
    def __init__(self, developers: ReferenceRepository, compounds: ReferenceRepository):
        self.developers = developers
        self.compounds = compounds

    def effective_query(self, filters: Optional[ApartmentFilters], context: ViewContext) -> ApartmentQuery:
        scope = context.scope
        principal = context.principal

        if scope == ListingScope.BROWSE:
            # Browsing shows available apartments unless the caller asks otherwise
            return build_apartment_query(filters or ApartmentFilters(), force_available=True)

        if scope == ListingScope.ADMIN:
            self.ensure_admin(principal)
            return build_apartment_query(filters or ApartmentFilters())

        if scope == ListingScope.OWNER:
            self._ensure_authenticated(principal)
            return ApartmentQuery(criteria=(Apartment.agent_id == principal.id,))

        if scope == ListingScope.COMPOUND:
            return ApartmentQuery(criteria=(
                Apartment.compound_id == context.subject_id,
                Apartment.is_available == True,
            ))

        if scope == ListingScope.DEVELOPER:
            return ApartmentQuery(criteria=(
                Apartment.developer_id == context.subject_id,
                Apartment.is_available == True,
            ))

        if scope == ListingScope.FAVORITES:
            self._ensure_authenticated(principal)
            return ApartmentQuery(criteria=(
                Apartment.favorited_by.any(User.id == principal.id),
                Apartment.is_available == True,
            ))

        raise ValueError(f"Unknown listing scope: {scope}")

    def narrow_by_names(self, apartments: List[Apartment], name_filters: NameFilters) -> List[Apartment]:
        """
        Second phase of name filtering: resolve matching compounds/developers
        by name fragment, then keep apartments pointing at one of them.
        Order of ``apartments`` is preserved.
        """
        if name_filters.compound_name:
            compound_ids = self.compounds.find_ids_by_name_fragment(name_filters.compound_name)
            apartments = [a for a in apartments if a.compound_id in compound_ids]

        if name_filters.developer_name:
            developer_ids = self.developers.find_ids_by_name_fragment(name_filters.developer_name)
            apartments = [a for a in apartments if a.developer_id in developer_ids]

        return apartments

    @staticmethod
    def _ensure_authenticated(principal: Principal) -> None:
        if not principal.is_authenticated:
            raise PermissionDeniedError("Authentication required")

    @staticmethod
    def ensure_admin(principal: Principal) -> None:
        if not principal.is_admin:
            raise PermissionDeniedError("Admin access required")

    @staticmethod
    def ensure_can_create(principal: Principal) -> None:
        if not principal.can_publish:
            raise PermissionDeniedError("Only agents and admins can publish apartments")

    @staticmethod
    def ensure_can_modify(apartment: Apartment, principal: Principal) -> None:
        if principal.is_admin:
            return
        if principal.can_publish and apartment.agent_id == principal.id:
            return
        logger.warning(f"User {principal.id} tried to modify apartment {apartment.id} owned by {apartment.agent_id}")
        raise PermissionDeniedError("Not allowed to modify this apartment")
