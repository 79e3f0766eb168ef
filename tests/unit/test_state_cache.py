"""Tests for the state cache (load, refresh, change notification, name resolution)."""

import pytest

from app.application.dtos.chat import DEFAULT_CHANNEL_NAME
from app.application.services.activity_log_service import ActivityLogService
from app.application.services.state_cache import TASKS, StateCache
from app.domain.enums import ActivityAction
from tests.conftest import Seed
from tests.fakes import InMemoryStore, make_task


class TestLoad:
    async def test_load_fetches_reference_data(self, cache: StateCache, seed: Seed) -> None:
        assert {u.id for u in cache.users()} == {"u-ana", "u-carlos", "u-bea"}
        assert cache.get_project("p-app") == seed.app_project
        assert cache.get_sector("s-design") == seed.design

    async def test_load_creates_default_channel(self, cache: StateCache) -> None:
        assert [c.name for c in cache.chat_channels()] == [DEFAULT_CHANNEL_NAME]

    async def test_load_keeps_existing_channels(self, store: InMemoryStore, seed: Seed) -> None:
        first = StateCache(store)
        await first.load()
        second = StateCache(store)
        await second.load()
        assert len(second.chat_channels()) == 1


class TestRefresh:
    async def test_refresh_replaces_table_snapshot(
        self, store: InMemoryStore, cache: StateCache
    ) -> None:
        before = cache.tasks()
        store.tables["tasks"]["t-1"] = make_task()
        await cache.refresh(TASKS)
        assert before == ()
        assert [t.id for t in cache.tasks()] == ["t-1"]

    async def test_unknown_table_rejected(self, cache: StateCache) -> None:
        with pytest.raises(ValueError, match="Unknown cache table"):
            await cache.refresh("tasks", "invoices")

    async def test_listener_called_once_with_tables(self, cache: StateCache) -> None:
        received: list[frozenset[str]] = []
        cache.subscribe(received.append)
        await cache.refresh("tasks", "board_tasks")
        assert received == [frozenset({"tasks", "board_tasks"})]

    async def test_refresh_without_notify(self, cache: StateCache) -> None:
        received: list[frozenset[str]] = []
        cache.subscribe(received.append)
        await cache.refresh(TASKS, notify=False)
        assert received == []

    async def test_handle_change_refreshes_and_notifies(
        self, store: InMemoryStore, cache: StateCache
    ) -> None:
        received: list[frozenset[str]] = []
        cache.subscribe(received.append)
        store.tables["tasks"]["t-1"] = make_task()
        await cache.handle_change(TASKS)
        assert cache.get_task("t-1") is not None
        assert received == [frozenset({TASKS})]


class TestNotify:
    async def test_unsubscribe(self, cache: StateCache) -> None:
        received: list[frozenset[str]] = []
        unsubscribe = cache.subscribe(received.append)
        unsubscribe()
        unsubscribe()
        await cache.notify({TASKS})
        assert received == []

    async def test_async_listener_awaited(self, cache: StateCache) -> None:
        received: list[frozenset[str]] = []

        async def listener(tables: frozenset[str]) -> None:
            received.append(tables)

        cache.subscribe(listener)
        await cache.notify({TASKS})
        assert received == [frozenset({TASKS})]

    async def test_failing_listener_does_not_stop_others(self, cache: StateCache) -> None:
        received: list[frozenset[str]] = []

        def broken(tables: frozenset[str]) -> None:
            raise RuntimeError("listener down")

        cache.subscribe(broken)
        cache.subscribe(received.append)
        await cache.notify({TASKS})
        assert received == [frozenset({TASKS})]


class TestNameResolution:
    async def test_known_names(self, cache: StateCache) -> None:
        assert cache.resolve_project_name("p-app") == "Vontta App"
        assert cache.resolve_user_name("u-bea") == "Beatriz Design"

    async def test_unknown_falls_back_to_id(self, cache: StateCache) -> None:
        assert cache.resolve_project_name("p-gone") == "p-gone"
        assert cache.resolve_user_name("u-gone") == "u-gone"


class TestActivityLog:
    async def test_record_appends_and_refreshes_window(
        self, store: InMemoryStore, cache: StateCache, activity_log: ActivityLogService
    ) -> None:
        entry = await activity_log.record("u-ana", ActivityAction.CREATE, "Nova atividade: X")
        assert store.tables["activity_logs"][entry.id] == entry
        assert activity_log.recent()[0] == entry

    async def test_window_keeps_latest_first(
        self, store: InMemoryStore, seed: Seed
    ) -> None:
        cache = StateCache(store, activity_log_limit=2)
        await cache.load()
        service = ActivityLogService(store, cache)
        for n in range(3):
            await service.record("u-ana", ActivityAction.UPDATE, f"update {n}")
        assert [e.description for e in cache.activity_logs()] == ["update 2", "update 1"]
