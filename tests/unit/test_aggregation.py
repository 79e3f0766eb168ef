"""Tests for the aggregation engine (hours, completion rate, collaborator load)."""

import pytest

from app.application.dtos.catalog import ProjectResult, UserResult
from app.application.services.aggregation import (
    UNKNOWN_PROJECT_LABEL,
    classify_load,
    compute_collaborator_load,
    compute_completion_rate,
    compute_hours_by_project,
    compute_total_hours,
)
from app.domain.enums import LoadTier, TaskStatus, UserRole
from tests.fakes import make_task


def _user(user_id: str, name: str) -> UserResult:
    return UserResult(
        id=user_id, name=name, email=f"{user_id}@vontta.com", avatar="",
        role=UserRole.USER, sector="",
    )


class TestTotalHours:
    def test_sums_and_pads(self) -> None:
        tasks = [
            make_task(id="t1", hours_dedicated="01:30"),
            make_task(id="t2", hours_dedicated="00:45"),
        ]
        assert compute_total_hours(tasks) == "02:15"

    def test_empty_is_zero(self) -> None:
        assert compute_total_hours([]) == "00:00"

    def test_malformed_durations_are_skipped(self) -> None:
        tasks = [
            make_task(id="t1", hours_dedicated="02:00"),
            make_task(id="t2", hours_dedicated="duas horas"),
            make_task(id="t3", hours_dedicated=""),
        ]
        assert compute_total_hours(tasks) == "02:00"

    def test_filter_by_collaborator(self) -> None:
        tasks = [
            make_task(id="t1", collaborator_id="u-a", hours_dedicated="03:00"),
            make_task(id="t2", collaborator_id="u-b", hours_dedicated="01:00"),
        ]
        assert compute_total_hours(tasks, collaborator_id="u-b") == "01:00"

    def test_over_100_hours(self) -> None:
        tasks = [make_task(id=f"t{i}", hours_dedicated="50:30") for i in range(2)]
        assert compute_total_hours(tasks) == "101:00"


class TestHoursByProject:
    def test_top_five_sorted_descending(self) -> None:
        projects = [ProjectResult(id=f"p{i}", name=f"Projeto {i}", sector_id="s") for i in range(6)]
        tasks = [
            make_task(id=f"t{i}", project_id=f"p{i}", hours_dedicated=f"{i + 1:02d}:00")
            for i in range(6)
        ]
        result = compute_hours_by_project(tasks, projects)
        assert [item.project_id for item in result.items] == ["p5", "p4", "p3", "p2", "p1"]
        assert result.max_minutes == 6 * 60
        assert result.items[0].formatted == "6h 00"

    def test_accumulates_per_project(self) -> None:
        tasks = [
            make_task(id="t1", project_id="p-app", hours_dedicated="01:15"),
            make_task(id="t2", project_id="p-app", hours_dedicated="00:50"),
        ]
        result = compute_hours_by_project(tasks, {"p-app": "Vontta App"})
        assert len(result.items) == 1
        assert result.items[0].name == "Vontta App"
        assert result.items[0].minutes == 125

    def test_unknown_project_is_labelled(self) -> None:
        tasks = [make_task(project_id="p-gone", hours_dedicated="01:00")]
        result = compute_hours_by_project(tasks, [])
        assert result.items[0].name == UNKNOWN_PROJECT_LABEL
        assert result.items[0].project_id == "p-gone"

    def test_projects_without_time_are_left_out(self) -> None:
        tasks = [make_task(hours_dedicated="00:00")]
        result = compute_hours_by_project(tasks, {"p-app": "Vontta App"})
        assert result.items == ()

    def test_empty_max_defaults_to_one(self) -> None:
        assert compute_hours_by_project([], []).max_minutes == 1


class TestCompletionRate:
    def test_empty_is_zero_percent(self) -> None:
        rate = compute_completion_rate([])
        assert rate.percent == 0
        assert rate.total == 0

    def test_rounds_half_up(self) -> None:
        tasks = [make_task(id="t0", status=TaskStatus.COMPLETED)] + [
            make_task(id=f"t{i}") for i in range(1, 8)
        ]
        rate = compute_completion_rate(tasks)
        assert rate.percent == 13
        assert rate.completed_count == 1
        assert rate.pending_count == 7

    def test_only_completed_counts(self) -> None:
        tasks = [
            make_task(id="t1", status=TaskStatus.COMPLETED),
            make_task(id="t2", status=TaskStatus.IN_PROGRESS),
            make_task(id="t3", status=TaskStatus.BLOCKED),
        ]
        assert compute_completion_rate(tasks).percent == 33

    def test_all_completed(self) -> None:
        tasks = [make_task(id=f"t{i}", status=TaskStatus.COMPLETED) for i in range(3)]
        assert compute_completion_rate(tasks).percent == 100


class TestCollaboratorLoad:
    def test_tiers_compare_minutes(self) -> None:
        assert classify_load(40 * 60) == LoadTier.NORMAL
        assert classify_load(40 * 60 + 1) == LoadTier.ELEVATED
        assert classify_load(44 * 60) == LoadTier.ELEVATED
        assert classify_load(44 * 60 + 1) == LoadTier.OVER_CAPACITY

    def test_includes_idle_users_and_sorts_busiest_first(self) -> None:
        users = [_user("u-a", "Ana"), _user("u-b", "Bea"), _user("u-c", "Caio")]
        tasks = [
            make_task(id="t1", collaborator_id="u-b", hours_dedicated="10:00"),
            make_task(id="t2", collaborator_id="u-c", hours_dedicated="02:00"),
        ]
        loads = compute_collaborator_load(tasks, users)
        assert [load.user_id for load in loads] == ["u-b", "u-c", "u-a"]
        assert loads[-1].minutes == 0
        assert loads[-1].tier == LoadTier.NORMAL

    def test_percentage_capped_minutes_not(self) -> None:
        tasks = [make_task(collaborator_id="u-a", hours_dedicated="50:00")]
        (load,) = compute_collaborator_load(tasks, [_user("u-a", "Ana")])
        assert load.percentage == 100.0
        assert load.minutes == 3000
        assert load.formatted == "50h 00"
        assert load.tier == LoadTier.OVER_CAPACITY

    def test_percentage_of_capacity(self) -> None:
        tasks = [make_task(collaborator_id="u-a", hours_dedicated="22:00")]
        (load,) = compute_collaborator_load(tasks, [_user("u-a", "Ana")])
        assert load.percentage == pytest.approx(50.0)

    def test_non_positive_capacity_rejected(self) -> None:
        with pytest.raises(ValueError, match="capacity"):
            compute_collaborator_load([], [], capacity_minutes=0)

    def test_same_inputs_same_output(self) -> None:
        users = [_user("u-a", "Ana"), _user("u-b", "Bea"), _user("u-c", "Caio")]
        tasks = [
            make_task(id="t1", collaborator_id="u-a", hours_dedicated="41:00"),
            make_task(id="t2", collaborator_id="u-b", hours_dedicated="03:30"),
            make_task(id="t3", collaborator_id="u-c", hours_dedicated="03:30"),
            make_task(id="t4", collaborator_id="u-b", hours_dedicated="bad"),
        ]
        first = compute_collaborator_load(tasks, users)
        second = compute_collaborator_load(tasks, users)
        assert first == second
        assert [load.user_id for load in first] == [load.user_id for load in second]
