"""Tests for the dashboard analytics use case."""

import pytest

from app.application.services.state_cache import StateCache
from app.application.use_cases.analytics import GetDashboardStatsUseCase
from app.domain.enums import LoadTier, TaskStatus
from app.domain.exceptions import ResourceNotFoundException
from tests.conftest import Seed
from tests.fakes import InMemoryStore, make_task


@pytest.fixture
async def loaded(store: InMemoryStore, cache: StateCache, seed: Seed) -> StateCache:
    store.tables["tasks"].update(
        {
            "t-1": make_task(
                id="t-1", collaborator_id=seed.carlos.id, project_id=seed.app_project.id,
                hours_dedicated="41:00", status=TaskStatus.COMPLETED,
            ),
            "t-2": make_task(
                id="t-2", collaborator_id=seed.bea.id, project_id=seed.site_project.id,
                hours_dedicated="05:30",
            ),
        }
    )
    await cache.refresh("tasks")
    return cache


class TestDashboardStats:
    async def test_team_wide(self, loaded: StateCache, seed: Seed) -> None:
        stats = GetDashboardStatsUseCase(loaded).get_dashboard_stats()
        assert stats.total_hours == "46:30"
        assert stats.completion.percent == 50
        assert [p.name for p in stats.hours_by_project.items] == [
            "Vontta App",
            "Website Institucional",
        ]
        assert stats.hours_by_project.max_minutes == 41 * 60
        loads = {load.user_id: load for load in stats.collaborator_load}
        assert loads[seed.carlos.id].tier == LoadTier.ELEVATED
        assert loads[seed.admin.id].minutes == 0
        assert stats.capacity_hours == 44

    async def test_per_collaborator(self, loaded: StateCache, seed: Seed) -> None:
        stats = GetDashboardStatsUseCase(loaded).get_dashboard_stats(seed.bea.id)
        assert stats.total_hours == "05:30"
        assert stats.completion.total == 1
        assert [p.project_id for p in stats.hours_by_project.items] == [seed.site_project.id]
        # Load always covers every profile.
        assert len(stats.collaborator_load) == 3

    async def test_unknown_collaborator(self, loaded: StateCache) -> None:
        with pytest.raises(ResourceNotFoundException):
            GetDashboardStatsUseCase(loaded).get_dashboard_stats("u-missing")

    async def test_custom_capacity(self, loaded: StateCache, seed: Seed) -> None:
        stats = GetDashboardStatsUseCase(
            loaded, capacity_hours=40, elevated_hours=30
        ).get_dashboard_stats()
        loads = {load.user_id: load for load in stats.collaborator_load}
        assert loads[seed.carlos.id].tier == LoadTier.OVER_CAPACITY
        assert stats.capacity_hours == 40
