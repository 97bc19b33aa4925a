from __future__ import annotations

import sys
from pathlib import Path
from typing import Generator

import pytest

# Ensure the application package is importable as a flat module set
_ROOT = Path(__file__).resolve().parents[1]
_APP = str(_ROOT / "app")
if _APP not in sys.path:
    sys.path.insert(0, _APP)

_ENV_VARS = [
    "DATABASE_URL", "DATABASE__URL", "DB_HOST", "DB_PORT", "DB_NAME", "DB_USER",
    "DB_PASSWORD", "DB_ECHO", "DATABASE__HOST", "DATABASE__PORT", "DATABASE__NAME",
    "DATABASE__USER", "DATABASE__PASSWORD", "OPENAI_API_KEY", "OPENAI__API_KEY",
    "OPENAI_BASE_URL", "OPENAI_MODEL", "OPENAI__MODEL", "OPENAI_TEMPERATURE",
    "OPENAI_MAX_TOKENS", "OPENAI_TIMEOUT", "SCRAPER_USER_AGENT", "SCRAPER_TIMEOUT",
    "SCRAPER_MIN_CONTENT_LENGTH", "SCRAPER__MIN_CONTENT_LENGTH", "JWT_SECRET",
    "AUTH__SECRET_KEY", "JWT_ALGORITHM", "JWT_EXPIRE_MINUTES", "LOG_LEVEL",
    "CREATE_TABLES", "CORS_ORIGINS",
]


def _clear_caches() -> None:
    from core.config import get_settings
    from db.session import reset_engine
    from services.stats import invalidate_user_stats

    get_settings.cache_clear()
    reset_engine()
    invalidate_user_stats()


@pytest.fixture(autouse=True)
def temp_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Point every test at its own SQLite file and a clean environment."""
    # Disable .env file loading by changing to a temp directory
    monkeypatch.chdir(tmp_path)
    for var in _ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{tmp_path / 'test.db'}")
    monkeypatch.setenv("JWT_SECRET", "test-secret")

    _clear_caches()
    yield
    _clear_caches()


@pytest.fixture
def db() -> None:
    """Create all tables in the per-test database."""
    from db import init_db

    init_db()


@pytest.fixture
def fake_provider():
    from fakes import FakeProvider

    return FakeProvider()


@pytest.fixture
def fake_scraper():
    from fakes import FakeScraper

    return FakeScraper()


@pytest.fixture
def app(db, fake_provider, fake_scraper):
    """Application with the LLM provider and scraper replaced by fakes."""
    from server import create_app
    from services.summarizer import SummaryService

    application = create_app()
    application.state.summarizer = SummaryService(fake_provider)
    application.state.scraper = fake_scraper
    return application


@pytest.fixture
def test_client(app) -> Generator:
    from fastapi.testclient import TestClient

    with TestClient(app) as client:
        yield client


def register_user(client, username: str = "alice", email: str = "alice@example.com") -> dict:
    response = client.post(
        "/api/auth/register",
        json={"username": username, "email": email, "password": "secret123"},
    )
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['token']}"}


@pytest.fixture
def auth_headers(test_client) -> dict:
    """Bearer headers for a freshly registered user."""
    return register_user(test_client)


@pytest.fixture
def other_auth_headers(test_client) -> dict:
    return register_user(test_client, username="bob", email="bob@example.com")


@pytest.fixture
def users():
    from db import UserRepository

    return UserRepository()


@pytest.fixture
def summaries_repo():
    from db import UserSummaryRepository

    return UserSummaryRepository()


@pytest.fixture
def make_user(db, users):
    """Factory inserting a user row directly."""
    counter = {"n": 0}

    def _make(username: str | None = None):
        counter["n"] += 1
        name = username or f"user{counter['n']}"
        return users.create_user(
            username=name,
            email=f"{name}@example.com",
            password_hash="not-a-real-hash",
        )

    return _make


@pytest.fixture
def make_summary(summaries_repo):
    """Factory inserting a summary row for a user."""

    def _make(user, title: str = "An article", original: int = 100, summary: int = 20, **extra):
        fields = dict(
            user_id=user.id,
            title=title,
            original_content="original " * original,
            summary_content="summary text for " + title,
            key_points="Point one|Point two",
            original_word_count=original,
            summary_word_count=summary,
            compression_ratio=int((original - summary) / original * 100) if original else 0,
        )
        fields.update(extra)
        return summaries_repo.create_summary(**fields)

    return _make
