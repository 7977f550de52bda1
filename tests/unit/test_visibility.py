"""Tests for role rules and store query construction."""

from unittest.mock import Mock

import pytest

from app.errors import PermissionDeniedError
from app.models import Apartment, UserRole
from app.schemas.filters import ApartmentFilters
from app.services.query_builder import build_apartment_query
from app.services.visibility import (
    ANONYMOUS, ListingScope, Principal, ViewContext, VisibilityPolicy
)

ADMIN = Principal(id=1, role=UserRole.ADMIN)
AGENT = Principal(id=2, role=UserRole.AGENT)
USER = Principal(id=3, role=UserRole.USER)


@pytest.fixture
def policy():
    return VisibilityPolicy(developers=Mock(), compounds=Mock())


@pytest.mark.unit
def test_principal_roles():
    assert not ANONYMOUS.is_authenticated
    assert ADMIN.is_admin and ADMIN.can_publish
    assert AGENT.can_publish and not AGENT.is_admin
    assert USER.is_authenticated and not USER.can_publish


@pytest.mark.unit
def test_query_without_name_filters_is_fully_resolved():
    query = build_apartment_query(ApartmentFilters.from_query({"city": "Cairo", "minPrice": "10"}))

    assert query.fully_resolved
    assert len(query.criteria) == 2


@pytest.mark.unit
def test_name_filters_are_carried_along():
    query = build_apartment_query(ApartmentFilters.from_query({"developerName": "Palm"}))

    assert not query.fully_resolved
    assert query.name_filters.developer_name == "Palm"
    assert query.criteria == ()


@pytest.mark.unit
def test_browse_forces_availability(policy):
    query = policy.effective_query(ApartmentFilters(), ViewContext(ListingScope.BROWSE, ANONYMOUS))

    assert len(query.criteria) == 1


@pytest.mark.unit
def test_admin_scope_adds_nothing(policy):
    query = policy.effective_query(None, ViewContext(ListingScope.ADMIN, ADMIN))

    assert query.criteria == ()


@pytest.mark.unit
@pytest.mark.parametrize("scope", [ListingScope.OWNER, ListingScope.FAVORITES])
def test_personal_scopes_need_a_principal(policy, scope):
    with pytest.raises(PermissionDeniedError):
        policy.effective_query(None, ViewContext(scope, ANONYMOUS))


@pytest.mark.unit
def test_narrowing_keeps_order(policy):
    policy.compounds.find_ids_by_name_fragment.return_value = {10}
    apartments = [Apartment(id=i, compound_id=c) for i, c in ((3, 10), (2, 11), (1, 10))]
    name_filters = build_apartment_query(ApartmentFilters(compound_name="west")).name_filters

    narrowed = policy.narrow_by_names(apartments, name_filters)

    assert [a.id for a in narrowed] == [3, 1]
    policy.compounds.find_ids_by_name_fragment.assert_called_once_with("west")
    policy.developers.find_ids_by_name_fragment.assert_not_called()


@pytest.mark.unit
def test_modify_rules():
    own = Apartment(id=5, agent_id=AGENT.id)

    VisibilityPolicy.ensure_can_modify(own, AGENT)
    VisibilityPolicy.ensure_can_modify(own, ADMIN)
    with pytest.raises(PermissionDeniedError):
        VisibilityPolicy.ensure_can_modify(own, Principal(id=9, role=UserRole.AGENT))
    with pytest.raises(PermissionDeniedError):
        VisibilityPolicy.ensure_can_modify(Apartment(id=6, agent_id=USER.id), USER)


@pytest.mark.unit
def test_create_rules():
    VisibilityPolicy.ensure_can_create(AGENT)
    VisibilityPolicy.ensure_can_create(ADMIN)
    with pytest.raises(PermissionDeniedError):
        VisibilityPolicy.ensure_can_create(USER)
    with pytest.raises(PermissionDeniedError):
        VisibilityPolicy.ensure_can_create(ANONYMOUS)
