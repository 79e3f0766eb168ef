"""Tests for week closing, history and report endpoints."""

import io

from httpx import AsyncClient
from openpyxl import load_workbook

from tests.conftest import Seed
from tests.fakes import InMemoryStore, auth


async def _log_task(client: AsyncClient, seed: Seed) -> None:
    response = await client.post(
        "/api/v1/tasks",
        json={
            "project_id": seed.app_project.id,
            "planned_activity": "Implementar login",
            "hours_dedicated": "03:15",
        },
        headers=auth(seed.carlos),
    )
    assert response.status_code == 201


async def test_close_week_requires_admin(client: AsyncClient, seed: Seed) -> None:
    response = await client.post("/api/v1/history/close-week", headers=auth(seed.carlos))
    assert response.status_code == 403
    assert response.json()["message"] == "Admin role required"


async def test_close_week_archives_and_clears(
    client: AsyncClient, seed: Seed, store: InMemoryStore
) -> None:
    await _log_task(client, seed)

    response = await client.post("/api/v1/history/close-week", headers=auth(seed.admin))

    assert response.status_code == 201
    data = response.json()
    assert data["archived"] is True
    assert data["cleanup"] == {
        "tasks_deleted": True,
        "board_tasks_deleted": True,
        "fully_cleared": True,
    }
    assert data["history"]["total_hours"] == "03:15"
    assert data["history"]["title"] is None
    assert data["history"]["display_title"].startswith("Semana de ")
    assert store.rows("tasks") == []

    listed = await client.get("/api/v1/tasks", headers=auth(seed.carlos))
    assert listed.json() == []


async def test_close_week_archive_failure_returns_503(
    client: AsyncClient, seed: Seed, store: InMemoryStore
) -> None:
    await _log_task(client, seed)
    store.fail_on["weekly_history.create"] = RuntimeError("disk full")

    response = await client.post("/api/v1/history/close-week", headers=auth(seed.admin))

    assert response.status_code == 503
    assert response.json()["error"] == "ARCHIVE_WRITE_FAILED"
    assert len(store.rows("tasks")) == 1


async def test_close_week_partial_cleanup_still_201(
    client: AsyncClient, seed: Seed, store: InMemoryStore
) -> None:
    await _log_task(client, seed)
    store.fail_on["tasks.delete_by_ids"] = RuntimeError("timeout")

    response = await client.post("/api/v1/history/close-week", headers=auth(seed.admin))

    assert response.status_code == 201
    assert response.json()["cleanup"]["tasks_deleted"] is False
    assert response.json()["cleanup"]["fully_cleared"] is False


async def test_history_detail_rename_and_report(client: AsyncClient, seed: Seed) -> None:
    await _log_task(client, seed)
    closed = await client.post("/api/v1/history/close-week", headers=auth(seed.admin))
    history_id = closed.json()["history"]["id"]

    listed = await client.get("/api/v1/history", headers=auth(seed.bea))
    assert [h["id"] for h in listed.json()] == [history_id]
    assert "tasks" not in listed.json()[0]

    detail = await client.get(f"/api/v1/history/{history_id}", headers=auth(seed.bea))
    assert detail.json()["tasks"][0]["planned_activity"] == "Implementar login"

    renamed = await client.patch(
        f"/api/v1/history/{history_id}", json={"title": "Sprint 42"}, headers=auth(seed.bea)
    )
    assert renamed.json()["display_title"] == "Sprint 42"

    too_long = await client.patch(
        f"/api/v1/history/{history_id}", json={"title": "x" * 201}, headers=auth(seed.bea)
    )
    assert too_long.status_code == 422

    report = await client.get(f"/api/v1/history/{history_id}/report", headers=auth(seed.bea))
    row = report.json()["task_rows"][0]
    assert row["collaborator"] == "Carlos Dev"
    assert row["project"] == "Vontta App"


async def test_report_download(client: AsyncClient, seed: Seed) -> None:
    await _log_task(client, seed)
    closed = await client.post("/api/v1/history/close-week", headers=auth(seed.admin))
    history_id = closed.json()["history"]["id"]

    response = await client.get(
        f"/api/v1/history/{history_id}/report.xlsx", headers=auth(seed.carlos)
    )

    assert response.status_code == 200
    assert response.headers["content-type"].startswith(
        "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
    )
    assert "Vontta_Relatorio_" in response.headers["content-disposition"]
    workbook = load_workbook(io.BytesIO(response.content))
    assert workbook["Atividades"]["C5"].value == "Carlos Dev"


async def test_unknown_history_returns_404(client: AsyncClient, seed: Seed) -> None:
    response = await client.get("/api/v1/history/h-missing/report", headers=auth(seed.admin))
    assert response.status_code == 404
