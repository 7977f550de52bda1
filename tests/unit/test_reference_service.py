"""Tests for developer, compound and amenity catalogs."""

import pytest

from app.errors import DuplicateNameError, NotFoundError, ReferenceInUseError
from tests.utils import factories


@pytest.mark.unit
def test_duplicate_developer_name_ignores_case(developer_service):
    developer_service.create({"name": "Acme"})

    with pytest.raises(DuplicateNameError) as exc_info:
        developer_service.create({"name": "acme"})

    assert exc_info.value.message == "Developer with this name already exists"


@pytest.mark.unit
def test_list_is_alphabetical(compound_service):
    for name in ("Marassi", "Madinaty", "O West"):
        compound_service.create({"name": name})

    assert [c.name for c in compound_service.list_all()] == ["Madinaty", "Marassi", "O West"]


@pytest.mark.unit
def test_rename_to_own_name_in_other_casing(developer_service):
    developer = developer_service.create({"name": "Emaar Misr", "website": "https://emaar.example"})

    renamed = developer_service.update(developer.id, {"name": "EMAAR MISR"})

    assert renamed.name == "EMAAR MISR"
    assert renamed.website == "https://emaar.example"


@pytest.mark.unit
def test_rename_onto_another_entry_is_rejected(amenity_service):
    amenity_service.create({"name": "Pool"})
    gym = amenity_service.create({"name": "Gym"})

    with pytest.raises(DuplicateNameError):
        amenity_service.update(gym.id, {"name": "pool"})


@pytest.mark.unit
def test_update_keeps_name_when_null_is_sent(compound_service):
    compound = compound_service.create({"name": "Marassi"})

    updated = compound_service.update(compound.id, {"name": None, "location": "North Coast"})

    assert updated.name == "Marassi"
    assert updated.location == "North Coast"


@pytest.mark.unit
@pytest.mark.parametrize("operation", ["get", "delete"])
def test_unknown_id(amenity_service, operation):
    with pytest.raises(NotFoundError) as exc_info:
        getattr(amenity_service, operation)(42)

    assert exc_info.value.message == "Amenity not found"


@pytest.mark.unit
def test_update_unknown_id(developer_service):
    with pytest.raises(NotFoundError):
        developer_service.update(42, {"name": "Anything"})


@pytest.mark.unit
def test_delete_removes_entry(amenity_service):
    amenity = amenity_service.create({"name": "Sauna"})

    amenity_service.delete(amenity.id)

    assert amenity_service.list_all() == []


@pytest.mark.unit
def test_deleting_referenced_compound_is_refused(db, compound_service, agent, developer, compound):
    factories.create_apartment(db, agent, developer, compound)

    with pytest.raises(ReferenceInUseError) as exc_info:
        compound_service.delete(compound.id)

    assert exc_info.value.apartment_count == 1
    assert [c.id for c in compound_service.list_all()] == [compound.id]


@pytest.mark.unit
def test_deleting_amenity_in_use_detaches_it(db, amenity_service, apartment_service, agent, developer, compound):
    pool = factories.create_amenity(db, name="Pool")
    apartment = factories.create_apartment(db, agent, developer, compound, amenities=[pool])

    amenity_service.delete(pool.id)

    assert apartment_service.get_listing(apartment.id).amenities == []


@pytest.mark.unit
def test_name_fragment_search_is_literal(db, developer_service):
    developer_service.create({"name": "Palm Hills"})
    percent = developer_service.create({"name": "100% Homes"})
    repository = developer_service.repository

    assert repository.find_ids_by_name_fragment("%") == {percent.id}
    assert repository.find_ids_by_name_fragment("P_lm") == set()
    assert len(repository.find_ids_by_name_fragment("palm")) == 1
