"""
Pytest configuration and fixtures.

This file provides pytest-specific fixtures. Shared constants live in
tests/__init__.py.
"""

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from core.catalog import parse_catalog
from core.config_loader import AppConfig, ConversationConfig, MatchingConfig
from database.models import Base, User, Need
from database.store import Store
from tests import CATALOG_DATA, SINGLE_CATEGORY_DATA, DEFAULT_INSTRUCTIONS, DEFAULT_QUANTITY


@pytest.fixture
def engine():
    """Fresh in-memory SQLite database per test, shared across sessions."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool
    )
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def session(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def store(session):
    return Store(session)


@pytest.fixture
def catalog():
    return parse_catalog(CATALOG_DATA)


@pytest.fixture
def single_catalog():
    return parse_catalog(SINGLE_CATEGORY_DATA)


@pytest.fixture
def matching_config():
    return MatchingConfig()


@pytest.fixture
def conversation_config():
    return ConversationConfig()


@pytest.fixture
def app_config():
    return AppConfig()


@pytest.fixture
def make_user(store):
    """Factory fixture creating a persisted user."""
    counter = {"n": 0}

    def _make(coordinates=None, phone_number=None, name=None):
        counter["n"] += 1
        user = User(
            phone_number=phone_number or f"+1555000{counter['n']:04d}",
            name=name
        )
        user.coordinates = coordinates
        store.create(user)
        return user
    return _make


@pytest.fixture
def make_need(store):
    """Factory fixture creating a persisted need."""
    def _make(owner, category="Food", name="Canned Beans", quantity=DEFAULT_QUANTITY,
              unopened_only=False, instructions=DEFAULT_INSTRUCTIONS):
        need = Need(
            created_by_id=owner.id,
            category=category,
            name=name,
            quantity=quantity,
            unopened_only=unopened_only,
            instructions=instructions
        )
        store.create(need)
        return need
    return _make
