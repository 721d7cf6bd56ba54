"""One-slot, read-once storage carrying a generated plan between front ends."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from weekwise.schemas.plan import TrainingPlan

logger = logging.getLogger(__name__)


class HandoffBuffer:
    """A single JSON file holding at most one pending TrainingPlan.

    ``put`` overwrites the slot. ``take`` delivers the plan at most once: the
    file is deleted after a successful read, and an unreadable slot is logged
    and reported as empty.
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def put(self, plan: TrainingPlan) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        payload = plan.model_dump(mode="json")
        self.path.write_text(json.dumps(payload, ensure_ascii=False), encoding="utf-8")
        logger.info("Stored generated plan in %s", self.path)

    def take(self) -> TrainingPlan | None:
        if not self.path.is_file():
            return None
        try:
            raw = self.path.read_text(encoding="utf-8")
            plan = TrainingPlan.model_validate(json.loads(raw))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError, ValidationError) as exc:
            logger.error("Could not read the stored training plan from %s: %s", self.path, exc)
            return None
        self.clear()
        logger.info("Loaded generated plan from %s", self.path)
        return plan

    def clear(self) -> None:
        self.path.unlink(missing_ok=True)

    def __repr__(self) -> str:
        return f"HandoffBuffer({str(self.path)!r})"
