"""Tests for the weekly history snapshot JSON codec."""

from datetime import date

from app.application.dtos.board_task import Subtask
from app.domain.enums import BoardStatus, TaskPriority, TaskStatus
from app.infrastructure.persistence.snapshot_codec import (
    decode_board_task,
    decode_subtasks,
    decode_task,
    encode_board_task,
    encode_task,
)
from tests.fakes import make_board_task, make_task


class TestTaskCodec:
    def test_encoded_form_is_plain_json(self) -> None:
        raw = encode_task(
            make_task(priority=TaskPriority.HIGH, status=TaskStatus.COMPLETED, due_date=date(2026, 10, 21))
        )
        assert raw["priority"] == "Alta"
        assert raw["status"] == "Concluído"
        assert raw["due_date"] == "2026-10-21"
        assert raw["updated_at"].startswith("2026-10-19T12:00:00")

    def test_decode_restores_task(self) -> None:
        task = make_task(due_date=date(2026, 10, 21), hours_dedicated="01:15", notes="n")
        assert decode_task(encode_task(task)) == task

    def test_decode_tolerates_missing_optional_keys(self) -> None:
        task = decode_task({"id": "t-old", "updated_at": "2026-01-05T10:00:00"})
        assert task.status == TaskStatus.PENDING
        assert task.priority == TaskPriority.MEDIUM
        assert task.due_date is None
        assert task.notes == ""
        assert task.updated_at.tzinfo is not None


class TestBoardTaskCodec:
    def test_decode_restores_board_task(self) -> None:
        board_task = make_board_task(
            member_ids=("u-a", "u-b"),
            status=BoardStatus.DOING,
            start_date=date(2026, 10, 19),
            subtasks=(Subtask(id="s1", title="A", completed=True), Subtask(id="s2", title="B")),
        )
        raw = encode_board_task(board_task)
        assert raw["member_ids"] == ["u-a", "u-b"]
        assert decode_board_task(raw) == board_task

    def test_subtasks_keep_order_and_defaults(self) -> None:
        subtasks = decode_subtasks([{"id": "s2", "title": "B"}, {"id": "s1", "title": "A", "completed": True}])
        assert [s.id for s in subtasks] == ["s2", "s1"]
        assert subtasks[0].completed is False

    def test_no_subtasks(self) -> None:
        assert decode_subtasks(None) == ()
