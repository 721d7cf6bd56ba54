"""Tests for the read-once hand-off buffer and board loading."""

from weekwise.board.defaults import DEFAULT_DAYS
from weekwise.board.handoff import HandoffBuffer
from weekwise.board.plan_board import load_board
from weekwise.schemas.plan import TrainingDay, TrainingPlan
from weekwise.config import Settings
from weekwise.utils.constants import HANDOFF_KEY, WEEKDAY_KEYS


def test_plan_is_delivered_at_most_once(tmp_path):
    buffer = HandoffBuffer(tmp_path / "slot" / "generatedTrainingPlan.json")
    plan = TrainingPlan(title="周计划", schedule=[TrainingDay(day="周一", content="跑步")])

    buffer.put(plan)
    assert buffer.path.is_file()

    assert buffer.take() == plan
    assert not buffer.path.exists()
    assert buffer.take() is None


def test_invalid_json_loads_default_board(tmp_path):
    path = tmp_path / "generatedTrainingPlan.json"
    path.write_text("{not json", encoding="utf-8")

    board = load_board(HandoffBuffer(path), "zh")

    for key in WEEKDAY_KEYS:
        assert board.days[key].content == DEFAULT_DAYS["zh"][key]["content"]
    assert path.read_text(encoding="utf-8") == "{not json"


def test_undecodable_bytes_load_default_board(tmp_path):
    path = tmp_path / "generatedTrainingPlan.json"
    path.write_bytes(b'{"title": "\xff\xfe"}')

    board = load_board(HandoffBuffer(path), "zh")

    assert board.days["monday"].content == DEFAULT_DAYS["zh"]["monday"]["content"]
    assert path.is_file()


def test_wrong_shape_is_treated_as_no_plan(tmp_path):
    path = tmp_path / "generatedTrainingPlan.json"
    path.write_text('["周一"]', encoding="utf-8")

    assert HandoffBuffer(path).take() is None


def test_load_board_merges_pending_plan(tmp_path):
    buffer = HandoffBuffer(tmp_path / "generatedTrainingPlan.json")
    buffer.put(
        TrainingPlan(
            title="Strength week",
            schedule=[TrainingDay(day="Monday", content="Squats", duration="50 min", notes="")],
            tips=["Sleep"],
        )
    )

    board = load_board(buffer, "en")

    assert board.title == "Strength week"
    assert board.days["monday"].content == "Squats"
    assert board.days["tuesday"].content == DEFAULT_DAYS["en"]["tuesday"]["content"]
    assert board.tips == ["Sleep"]
    assert not buffer.path.exists()


def test_missing_slot_gives_default_board(tmp_path):
    board = load_board(HandoffBuffer(tmp_path / "absent.json"))
    assert board.days["sunday"].duration == "35分钟"


def test_default_slot_is_named_after_handoff_key(monkeypatch):
    monkeypatch.delenv("HANDOFF_PATH", raising=False)

    assert Settings(_env_file=None).handoff_path == f".weekwise/{HANDOFF_KEY}.json"
