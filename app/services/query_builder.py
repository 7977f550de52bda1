"""
Translates ApartmentFilters into SQLAlchemy criteria on the apartments table.

Compound and developer *names* live on other tables, so they cannot be turned
into a predicate here. They travel along in ``ApartmentQuery.name_filters`` and
the query reports itself as not fully resolved until they are applied.
"""
from dataclasses import dataclass
from typing import Any, Optional, Tuple

from sqlalchemy import or_

from app.models import Apartment
from app.repositories.base import LIKE_ESCAPE, contains_pattern
from app.schemas.filters import ApartmentFilters


@dataclass(frozen=True)
class NameFilters:
    compound_name: Optional[str] = None
    developer_name: Optional[str] = None


@dataclass(frozen=True)
class ApartmentQuery:
    criteria: Tuple[Any, ...] = ()
    name_filters: Optional[NameFilters] = None

    @property
    def fully_resolved(self) -> bool:
        return self.name_filters is None


def _range(column, low: Optional[float], high: Optional[float]) -> list:
    criteria = []
    if low is not None:
        criteria.append(column >= low)
    if high is not None:
        criteria.append(column <= high)
    return criteria


def build_apartment_query(filters: ApartmentFilters, force_available: bool = False) -> ApartmentQuery:
    """
    Build the store-level query for ``filters``.

    Args:
        filters: validated search criteria
        force_available: constrain to available apartments when the filters
            leave ``is_available`` unset

    Returns:
        ApartmentQuery with AND-combined criteria
    """
    criteria = []

    if filters.search:
        term = contains_pattern(filters.search)
        criteria.append(
            or_(
                Apartment.unit_name.ilike(term, escape=LIKE_ESCAPE),
                Apartment.unit_number.ilike(term, escape=LIKE_ESCAPE),
                Apartment.project.ilike(term, escape=LIKE_ESCAPE),
            )
        )

    criteria.extend(_range(Apartment.price, filters.min_price, filters.max_price))
    criteria.extend(_range(Apartment.square_feet, filters.min_square_feet, filters.max_square_feet))

    if filters.bedrooms is not None:
        criteria.append(Apartment.bedrooms == filters.bedrooms)
    if filters.bathrooms is not None:
        criteria.append(Apartment.bathrooms == filters.bathrooms)
    if filters.listing_type:
        criteria.append(Apartment.listing_type == filters.listing_type)
    if filters.city:
        criteria.append(Apartment.city.ilike(contains_pattern(filters.city), escape=LIKE_ESCAPE))
    if filters.state:
        criteria.append(Apartment.state.ilike(contains_pattern(filters.state), escape=LIKE_ESCAPE))

    is_available = filters.is_available
    if is_available is None and force_available:
        is_available = True
    if is_available is not None:
        criteria.append(Apartment.is_available == is_available)

    name_filters = None
    if filters.has_name_filters:
        name_filters = NameFilters(
            compound_name=filters.compound_name,
            developer_name=filters.developer_name,
        )

    return ApartmentQuery(criteria=tuple(criteria), name_filters=name_filters)
