"""Tests for sample data seeding."""

import pytest

from app.models import Apartment, UserRole
from app.seed import AMENITIES, APARTMENTS, seed_database


@pytest.mark.unit
def test_seed_is_repeatable(db):
    first = seed_database(db)
    second = seed_database(db)

    assert first == second
    assert first["amenities"] == len(AMENITIES)
    assert first["apartments"] == len(APARTMENTS)


@pytest.mark.unit
def test_seeded_apartments_belong_to_agents(db):
    seed_database(db)

    for apartment in db.query(Apartment).all():
        assert apartment.agent.role == UserRole.AGENT.value
        assert apartment.amenities
