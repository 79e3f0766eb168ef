"""Pytest configuration and fixtures for vontta.

Uses app.main:app for HTTP tests with the state cache and unit-of-work factory
on app.state replaced by in-memory fakes (tests/fakes.py), so no database is
needed. DATABASE_URL is set to an in-memory SQLite URL only to satisfy
settings validation.
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

from dataclasses import dataclass  # noqa: E402

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from app.api.websocket import ConnectionManager  # noqa: E402
from app.application.dtos.catalog import ProjectResult, SectorResult, UserResult  # noqa: E402
from app.application.services.activity_log_service import ActivityLogService  # noqa: E402
from app.application.services.state_cache import StateCache  # noqa: E402
from app.core.config import get_settings  # noqa: E402
from app.core.limiter import limiter  # noqa: E402
from app.domain.enums import UserRole  # noqa: E402
from tests.fakes import FakeCompletionClient, InMemoryStore  # noqa: E402

get_settings.cache_clear()


@dataclass
class Seed:
    """Reference rows every test starts with."""

    admin: UserResult
    carlos: UserResult
    bea: UserResult
    dev: SectorResult
    design: SectorResult
    app_project: ProjectResult
    site_project: ProjectResult


def seed_store(store: InMemoryStore) -> Seed:
    """Insert two sectors, two projects and three profiles as committed rows."""
    dev = SectorResult(id="s-dev", name="Desenvolvimento")
    design = SectorResult(id="s-design", name="Design")
    app_project = ProjectResult(id="p-app", name="Vontta App", sector_id=dev.id)
    site_project = ProjectResult(id="p-site", name="Website Institucional", sector_id=design.id)
    admin = UserResult(
        id="u-ana", name="Ana Silva", email="ana@vontta.com", avatar="",
        role=UserRole.ADMIN, sector="Desenvolvimento",
    )
    carlos = UserResult(
        id="u-carlos", name="Carlos Dev", email="carlos@vontta.com", avatar="",
        role=UserRole.USER, sector="Desenvolvimento",
    )
    bea = UserResult(
        id="u-bea", name="Beatriz Design", email="bea@vontta.com", avatar="",
        role=UserRole.USER, sector="Design",
    )
    store.tables["sectors"].update({dev.id: dev, design.id: design})
    store.tables["projects"].update({app_project.id: app_project, site_project.id: site_project})
    store.tables["users"].update({u.id: u for u in (admin, carlos, bea)})
    return Seed(admin, carlos, bea, dev, design, app_project, site_project)


@pytest.fixture(autouse=True)
def _reset_rate_limits() -> None:
    """The limiter keeps in-memory counters across tests; start each test clean."""
    limiter.reset()


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def seed(store: InMemoryStore) -> Seed:
    return seed_store(store)


@pytest.fixture
async def cache(store: InMemoryStore, seed: Seed) -> StateCache:
    """State cache over the fake store, loaded (creates the default channel)."""
    state_cache = StateCache(store, activity_log_limit=20, chat_message_limit=200)
    await state_cache.load()
    return state_cache


@pytest.fixture
def activity_log(store: InMemoryStore, cache: StateCache) -> ActivityLogService:
    return ActivityLogService(store, cache)


@pytest.fixture
def completion_client() -> FakeCompletionClient:
    return FakeCompletionClient()


@pytest.fixture
async def client(
    store: InMemoryStore,
    cache: StateCache,
    completion_client: FakeCompletionClient,
) -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI) with in-memory state."""
    from app.main import app

    app.state.state_cache = cache
    app.state.uow_factory = store
    app.state.ws_manager = ConnectionManager()
    app.state.completion_client = completion_client
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
