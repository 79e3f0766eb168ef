"""Seed dev data from scripts/seed-data.json into the database.

Loads sectors, projects and profiles (skipped when a row with the same name or
email exists), then tasks for the current week through TaskService so sectors
are copied from projects and activity entries are written.

Usage:
    uv run python -m scripts.seed_dev_data [path/to/seed-data.json]

Requires: DATABASE_URL and a migrated database (uv run alembic upgrade head).
"""

from __future__ import annotations

import asyncio
import json
import sys
from datetime import timedelta
from pathlib import Path

from dotenv import load_dotenv

from app.application.dtos.catalog import UserCreate
from app.application.dtos.task import TaskCreate
from app.application.services.activity_log_service import ActivityLogService
from app.application.services.planning import local_today
from app.application.services.state_cache import StateCache
from app.application.use_cases.catalog import CatalogService
from app.application.use_cases.tasks import TaskService
from app.core.config import get_settings
from app.domain.enums import TaskPriority, TaskStatus, UserRole
from app.infrastructure.persistence.database import dispose_engine
from app.infrastructure.persistence.unit_of_work import SqlUnitOfWork
from app.shared.utils.datetime import get_zone, utc_now


def _project_root() -> Path:
    return Path(__file__).resolve().parent.parent


def _load_env() -> None:
    """Load .env from project root so get_settings() sees DATABASE_* when run as script."""
    load_dotenv(_project_root() / ".env", override=True)


async def run(path: Path) -> None:
    _load_env()
    if not path.exists():
        print(f"Seed file not found: {path}", file=sys.stderr)
        sys.exit(1)
    with path.open() as f:
        data = json.load(f)

    settings = get_settings()
    cache = StateCache(SqlUnitOfWork)
    await cache.load()
    catalog = CatalogService(SqlUnitOfWork, cache)
    tasks = TaskService(SqlUnitOfWork, cache, ActivityLogService(SqlUnitOfWork, cache))

    sectors = {s.name: s.id for s in cache.sectors()}
    for name in data.get("sectors", []):
        if name not in sectors:
            sectors[name] = (await catalog.create_sector(name)).id

    projects = {p.name: p.id for p in cache.projects()}
    for item in data.get("projects", []):
        if item["name"] not in projects:
            created = await catalog.create_project(item["name"], sectors[item["sector"]])
            projects[item["name"]] = created.id

    users = {u.email: u for u in cache.users()}
    for item in data.get("users", []):
        email = item["email"].lower()
        if email not in users:
            users[email] = await catalog.create_user(
                UserCreate(
                    name=item["name"],
                    email=email,
                    role=UserRole(item.get("role", "user")),
                    sector=item.get("sector", ""),
                )
            )

    admin = next((u for u in users.values() if u.is_admin), None)
    if admin is None:
        print("No admin profile in seed data; skipping tasks.", file=sys.stderr)
    else:
        today = local_today(utc_now(), get_zone(settings.planning_timezone))
        for item in data.get("tasks", []):
            await tasks.create(
                admin,
                TaskCreate(
                    project_id=projects[item["project"]],
                    collaborator_id=users[item["collaborator"]].id,
                    planned_activity=item["planned_activity"],
                    delivered_activity=item.get("delivered_activity", ""),
                    priority=TaskPriority(item.get("priority", TaskPriority.MEDIUM.value)),
                    status=TaskStatus(item.get("status", TaskStatus.PENDING.value)),
                    due_date=today + timedelta(days=item.get("due_in_days", 0)),
                    hours_dedicated=item.get("hours_dedicated", "00:00"),
                    notes=item.get("notes", ""),
                ),
            )
    await dispose_engine()
    print(
        f"Seeded: {len(sectors)} sectors, {len(projects)} projects, "
        f"{len(users)} profiles, {len(cache.tasks())} live tasks"
    )


def main() -> None:
    root = _project_root()
    path_arg = sys.argv[1] if len(sys.argv) > 1 else None
    path = Path(path_arg) if path_arg else root / "scripts" / "seed-data.json"
    if not path.is_absolute():
        path = (root / path).resolve()
    asyncio.run(run(path))


if __name__ == "__main__":
    main()
