"""Shared test fixtures."""

import os

# Keep the app's own engine off disk; tests use the engine below
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from horse_diet.core.database import Base, get_db
from horse_diet.main import app
from horse_diet.seed_data import seed_feeds

test_engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


@pytest.fixture
def db():
    """Fresh database seeded with the bundled feed catalog."""
    Base.metadata.create_all(bind=test_engine)
    session = TestingSessionLocal()
    seed_feeds(session)
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def client(db):
    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()
