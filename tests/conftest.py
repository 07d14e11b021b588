"""
Pytest Configuration and Fixtures

Shared fixtures for the VitalNexus backend tests.
"""
import pytest
from pathlib import Path
import sys

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from vitalnexus.core.recommendation import PredictionRecord, RecommendationEngine
from vitalnexus.db import Base
from vitalnexus.services import ConsultationStore


@pytest.fixture
def engine() -> RecommendationEngine:
    """Recommendation engine with the default catalog."""
    return RecommendationEngine()


@pytest.fixture
def empty_prediction() -> PredictionRecord:
    """Prediction with every field set to the absent marker."""
    return PredictionRecord(
        additional_diseases="nan",
        detected_diseases="nan",
        sleep_disorders="nan",
    )


@pytest.fixture
def db_session_factory():
    """Session factory over a fresh in-memory SQLite database."""
    db_engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(db_engine)
    factory = sessionmaker(autocommit=False, autoflush=False, bind=db_engine)
    yield factory
    db_engine.dispose()


@pytest.fixture
def db_session(db_session_factory):
    session = db_session_factory()
    yield session
    session.close()


@pytest.fixture
def consultation_store(tmp_path) -> ConsultationStore:
    """Consultation store in a temporary directory."""
    store = ConsultationStore(directory=str(tmp_path / "consultations"), ttl_seconds=60)
    yield store
    store.close()
