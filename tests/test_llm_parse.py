"""Tests for strict reply parsing and the plain-chat fallback."""

import json

from weekwise.utils.llm_parse import PlainReply, StructuredReply, parse_model_reply


def _reply_json(**overrides):
    data = {
        "response": "Here is your plan",
        "trainingPlan": {
            "title": "Fat loss week",
            "subtitle": "Easy start",
            "schedule": [
                {"day": "周一", "content": "跑步", "duration": "30分钟", "notes": "慢跑"},
            ],
            "tips": ["Drink water"],
            "strategies": [{"title": "Consistency", "description": "Show up"}],
        },
    }
    data.update(overrides)
    return data


def test_schema_compliant_json_passes_through_unchanged():
    data = _reply_json(extra={"kept": True})
    parsed = parse_model_reply(json.dumps(data, ensure_ascii=False))

    assert isinstance(parsed, StructuredReply)
    assert parsed.to_body() == data
    assert parsed.training_plan.title == "Fat loss week"


def test_structured_reply_without_plan():
    parsed = parse_model_reply('{"response": "Tell me more", "trainingPlan": null}')

    assert isinstance(parsed, StructuredReply)
    assert parsed.training_plan is None
    assert parsed.to_body() == {"response": "Tell me more", "trainingPlan": None}


def test_non_json_completion_degrades_to_plain_reply():
    raw = "  Sure! Let's start with a few questions.\n"
    parsed = parse_model_reply(raw)

    assert isinstance(parsed, PlainReply)
    assert parsed.to_body() == {"response": raw, "trainingPlan": None}


def test_fenced_json_is_not_repaired():
    raw = '```json\n{"response": "hi", "trainingPlan": null}\n```'
    parsed = parse_model_reply(raw)

    assert isinstance(parsed, PlainReply)
    assert parsed.response == raw


def test_json_that_is_not_an_object_degrades():
    assert isinstance(parse_model_reply("[1, 2, 3]"), PlainReply)
    assert isinstance(parse_model_reply('"just a string"'), PlainReply)


def test_schema_mismatch_degrades():
    raw = json.dumps({"response": 42, "trainingPlan": None})
    parsed = parse_model_reply(raw)
    assert isinstance(parsed, PlainReply)
    assert parsed.response == raw

    raw = json.dumps({"message": "missing the response key"})
    assert parse_model_reply(raw).to_body() == {"response": raw, "trainingPlan": None}
