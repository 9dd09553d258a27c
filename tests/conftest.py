import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from risk_categories.api.status import ServerStatus
from risk_categories.database.config import connection_engine
from risk_categories.database.config.config import settings
from risk_categories.database.entities.risk_category import RiskCategory  # noqa: F401
from risk_categories.main import create_app

USER_ID = "5f4e994f025923001fdd6bc8"


@pytest.fixture(autouse=True)
def test_env(monkeypatch):
    monkeypatch.setattr(settings, "APP_ENV", "test")


@pytest.fixture
def engine(monkeypatch):
    """In-memory database bound for the duration of one test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    connection_engine.metadata.create_all(engine)
    monkeypatch.setattr(connection_engine, "connection_engine", engine)
    yield engine
    engine.dispose()


@pytest.fixture
def no_engine(monkeypatch):
    monkeypatch.setattr(connection_engine, "connection_engine", None)


@pytest.fixture
def server_status():
    return ServerStatus()


@pytest.fixture
def client(engine, server_status):
    return TestClient(create_app(server_status))


@pytest.fixture
def protests():
    return {
        "keywords": ["protest", "protesting", "protester", "protested", "#protest", "#protesting"],
        "language_code": "en",
        "name": "Protests",
        "risk_level": 2,
        "updated_by_user_id": USER_ID,
    }


@pytest.fixture
def exclusions():
    return {
        "keywords": ["fake protest", "@protest", "counter protest", "counter protesting"],
        "language_code": "en",
        "name": "Exclusions",
        "risk_level": -1,
        "updated_by_user_id": USER_ID,
    }
