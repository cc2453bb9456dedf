import os
import shutil
import tempfile
from pathlib import Path

# Set environment variables BEFORE any imports that might use settings
_test_db_dir = tempfile.mkdtemp()
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_test_db_dir, 'test_movie_catalog.db')}"
os.environ["LOG_LEVEL"] = "INFO"
os.environ["EXPOSE_INFRASTRUCTURE_DETAILS"] = "false"

import pytest
from alembic import command
from alembic.config import Config
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from movie_catalog.api.deps import get_db, get_event_bus
from movie_catalog.events import InMemoryEventBus
from movie_catalog.main import app

ROOT = Path(__file__).resolve().parents[1]


@pytest.fixture(scope="function")
def db_session():
    """Create a fresh database for each test and run migrations."""
    temp_db_dir = tempfile.mkdtemp()
    test_db_url = f"sqlite:///{os.path.join(temp_db_dir, 'test.db')}"

    test_engine = create_engine(test_db_url, connect_args={"check_same_thread": False})
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)

    alembic_cfg = Config(str(ROOT / "alembic.ini"))
    alembic_cfg.set_main_option("script_location", str(ROOT / "alembic"))
    alembic_cfg.set_main_option("sqlalchemy.url", test_db_url)
    command.upgrade(alembic_cfg, "head")

    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        test_engine.dispose()
        shutil.rmtree(temp_db_dir, ignore_errors=True)


@pytest.fixture(scope="function")
def db(db_session):
    """Alias for db_session to match test naming conventions."""
    return db_session


@pytest.fixture(scope="function")
def event_bus() -> InMemoryEventBus:
    return InMemoryEventBus()


@pytest.fixture(scope="function")
def client(db_session, event_bus):
    """Create a test client with database and event bus overrides."""

    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_event_bus] = lambda: event_bus

    yield TestClient(app)

    app.dependency_overrides.clear()
