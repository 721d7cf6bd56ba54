"""Tests for the static weekday label tables."""

import pytest

from weekwise.utils.constants import (
    DAY_LABELS,
    day_label,
    resolve_day,
    validate_day_labels,
)


def test_every_language_covers_all_seven_slots():
    validate_day_labels()


def test_incomplete_table_fails_validation():
    broken = {"zh": dict(DAY_LABELS["zh"]), "en": dict(DAY_LABELS["en"])}
    del broken["en"]["Sunday"]

    with pytest.raises(RuntimeError):
        validate_day_labels(broken)


def test_duplicate_slot_fails_validation():
    broken = {"zh": dict(DAY_LABELS["zh"]), "en": dict(DAY_LABELS["en"])}
    broken["zh"]["周日"] = "saturday"

    with pytest.raises(RuntimeError):
        validate_day_labels(broken)


def test_resolve_day_accepts_either_language():
    assert resolve_day("周日") == "sunday"
    assert resolve_day("Wednesday") == "wednesday"
    assert resolve_day(" thursday ") == "thursday"
    assert resolve_day("星期八") is None
    assert resolve_day("") is None


def test_day_label_lookup():
    assert day_label("monday", "zh") == "周一"
    assert day_label("monday", "en") == "Monday"
