"""
Pytest configuration and fixtures.
"""

import os

# Cheap hashing and no startup side effects for the test run
os.environ.setdefault("BIOTRACK_BCRYPT_ROUNDS", "4")
os.environ.setdefault("BIOTRACK_CREATE_TABLES_ON_STARTUP", "false")

from datetime import date, datetime  # noqa: E402

import pytest  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from biotrack.db.database import Base  # noqa: E402

# Import models to register with Base.metadata
from biotrack.models import Measure, User  # noqa: E402
from biotrack.utils.password import hash_password  # noqa: E402


# Use test database URL from env, or default to SQLite in-memory
TEST_DATABASE_URL = os.getenv("TEST_DATABASE_URL", "sqlite:///:memory:")


@pytest.fixture(scope="function")
def test_engine():
    """Create a test database engine."""
    if TEST_DATABASE_URL.startswith("sqlite"):
        # SQLite in-memory for fast tests
        engine = create_engine(
            TEST_DATABASE_URL,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
            echo=False,
        )
    else:
        engine = create_engine(TEST_DATABASE_URL, echo=False)

    Base.metadata.create_all(bind=engine)

    yield engine

    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture(scope="function")
def test_db(test_engine):
    """Create a test database session."""
    TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)
    session = TestSessionLocal()

    try:
        yield session
    finally:
        session.close()


@pytest.fixture(scope="function")
def override_get_db(test_db):
    """Override get_db dependency for FastAPI."""

    def _get_db():
        try:
            yield test_db
        finally:
            pass  # Closed by the test_db fixture

    return _get_db


@pytest.fixture(scope="function")
def client(override_get_db):
    """TestClient bound to the test database."""
    from fastapi.testclient import TestClient

    from biotrack.db.database import get_db
    from biotrack.main import app

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


def make_user(db, **overrides) -> User:
    """Persist a user with sensible defaults."""
    fields = {
        "name": "João Silva",
        "birth_date": date(1990, 5, 15),
        "zip_code": "12345-678",
        "email": "joao.silva@email.com",
        "password": hash_password("Senha123"),
    }
    fields.update(overrides)
    user = User(**fields)
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def make_measure(db, user_id: int, **overrides) -> Measure:
    """Persist a measure with sensible defaults."""
    fields = {
        "measurement_date": datetime(2024, 1, 15, 10, 30),
        "weight_kg": 75.5,
        "height_cm": 175.0,
    }
    fields.update(overrides)
    measure = Measure(user_id=user_id, **fields)
    db.add(measure)
    db.commit()
    db.refresh(measure)
    return measure


@pytest.fixture
def create_user(test_db):
    """Factory fixture: create_user(**fields) -> stored User."""

    def _create(**overrides):
        return make_user(test_db, **overrides)

    return _create


@pytest.fixture
def create_measure(test_db):
    """Factory fixture: create_measure(user_id, **fields) -> stored Measure."""

    def _create(user_id, **overrides):
        return make_measure(test_db, user_id, **overrides)

    return _create


@pytest.fixture
def sample_user(test_db):
    """A stored user without measures."""
    return make_user(test_db)


@pytest.fixture
def other_user(test_db):
    """A second stored user."""
    return make_user(
        test_db,
        name="Maria Santos",
        birth_date=date(1992, 8, 20),
        zip_code="98765-432",
        email="maria.santos@email.com",
    )


@pytest.fixture
def measure_payload():
    """A complete measure request body (camelCase, as sent by clients)."""
    return {
        "measurementDate": "2024-01-15T10:30:00",
        "weightKg": 75.5,
        "heightCm": 175.0,
        "waistCm": 85.0,
        "hipCm": 95.0,
        "chestCm": 100.0,
        "armRightCm": 32.0,
        "armLeftCm": 31.5,
        "thighRightCm": 58.0,
        "thighLeftCm": 57.5,
        "bodyFatPercentage": 18.5,
    }


@pytest.fixture
def user_payload():
    """A complete user request body."""
    return {
        "name": "João Silva",
        "birthDate": "1990-05-15",
        "zipCode": "12345-678",
        "email": "joao.silva@email.com",
        "password": "Senha123",
    }
