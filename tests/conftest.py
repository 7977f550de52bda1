"""Shared pytest fixtures and configuration."""

import os

# Set test environment variables before the app reads its settings
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("DEBUG", "false")

import pytest
from fastapi.testclient import TestClient

from app.database import Base, SessionLocal, engine
from app.dependencies import (
    get_amenity_service, get_apartment_service, get_compound_service, get_developer_service
)
from app.main import app
from app.models import UserRole
from tests.utils import factories


@pytest.fixture
def db():
    """Fresh schema for every test"""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(db):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def apartment_service(db):
    return get_apartment_service(db)


@pytest.fixture
def developer_service(db):
    return get_developer_service(db)


@pytest.fixture
def compound_service(db):
    return get_compound_service(db)


@pytest.fixture
def amenity_service(db):
    return get_amenity_service(db)


@pytest.fixture
def admin(db):
    return factories.create_user(db, role=UserRole.ADMIN)


@pytest.fixture
def agent(db):
    return factories.create_user(db, role=UserRole.AGENT)


@pytest.fixture
def other_agent(db):
    return factories.create_user(db, role=UserRole.AGENT)


@pytest.fixture
def user(db):
    return factories.create_user(db, role=UserRole.USER)


@pytest.fixture
def developer(db):
    return factories.create_developer(db, name="Orascom Development")


@pytest.fixture
def compound(db):
    return factories.create_compound(db, name="O West")

