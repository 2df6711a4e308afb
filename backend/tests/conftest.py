import os
import sys
import tempfile
from datetime import date
from pathlib import Path

# Add backend directory to Python path FIRST
backend_dir = Path(__file__).parent.parent
sys.path.insert(0, str(backend_dir))

# Settings are read at import time, so point them at throwaway locations first
os.environ.setdefault("BUSINESS_CARD_DB_URL", "sqlite://")
os.environ.setdefault("BUSINESS_CARD_LOG_DIR", tempfile.mkdtemp(prefix="business-card-logs-"))

# Now import after path is set
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from database import get_db
from models import Base, BusinessCard


@pytest.fixture
def engine():
    """In-memory database shared by every connection of one test"""
    engine = create_engine(
        'sqlite://',
        connect_args={'check_same_thread': False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db_session(engine):
    """Create in-memory database for testing"""
    SessionLocal = sessionmaker(bind=engine)
    session = SessionLocal()
    yield session
    session.close()


@pytest.fixture
def client(db_session):
    """API client whose requests all use the test session"""
    from main import app

    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def make_card():
    """Build an unsaved BusinessCard with overridable defaults"""
    def _make(**overrides):
        values = {
            "name": "John Doe",
            "email": "john@example.com",
            "phone": "123456789",
            "gender": "Male",
            "date_of_birth": date(1993, 1, 1),
            "address": "123 Main St",
        }
        values.update(overrides)
        return BusinessCard(**values)
    return _make


@pytest.fixture
def sample_cards(db_session, make_card):
    """Three stored cards with distinct fields"""
    cards = [
        make_card(),
        make_card(
            name="Jane Smith",
            email="Jane.Smith@Example.org",
            phone="555-0100",
            gender="Female",
            date_of_birth=date(1988, 7, 14),
            address="9 Elm Road",
        ),
        make_card(
            name="Sam Taylor",
            email="sam@work.net",
            phone=None,
            gender=None,
            date_of_birth=date(2000, 2, 29),
            address=None,
        ),
    ]
    db_session.add_all(cards)
    db_session.commit()
    return cards
