"""Shared fixtures: in-memory database, API client, and skill factories."""

from __future__ import annotations

from datetime import datetime

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from skillfade.config import DecayConfig
from skillfade.database import Base, get_db
from skillfade.main import app
from skillfade.schemas.skill import SkillCategory, SkillRead
from skillfade.services.skill_decay import get_freshness_level
from skillfade.services.skill_service import SkillService

# ---------------------------------------------------------------------------
# In-memory SQLite test database (shared via StaticPool)
# ---------------------------------------------------------------------------
SQLALCHEMY_DATABASE_URL = "sqlite://"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

NOW = datetime(2024, 6, 1, 12, 0, 0)


def override_get_db():
    """Dependency override that uses the test in-memory database."""
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture(autouse=True)
def setup_db():
    """Create and tear down tables around each test."""
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client():
    """TestClient with the DB dependency overridden."""
    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def db():
    """SQLAlchemy session for pre-populating test data."""
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def config():
    """Decay configuration with default thresholds."""
    return DecayConfig()


@pytest.fixture
def service(db, config):
    """SkillService bound to the test session."""
    return SkillService(db, config)


@pytest.fixture
def make_skill_view():
    """Factory for SkillRead views with a given displayed score."""

    def _make(skill_id: int, name: str, score: float,
              category: SkillCategory = SkillCategory.PROGRAMMING_LANGUAGE,
              decay_rate: float = 0.05) -> SkillRead:
        return SkillRead(
            id=skill_id,
            name=name,
            category=category,
            decay_rate=decay_rate,
            initial_proficiency=70,
            current_score=score,
            stored_score=score,
            freshness=get_freshness_level(score),
            days_since_practice=0,
            last_practiced_at=NOW,
            created_at=NOW,
            updated_at=NOW,
        )

    return _make
