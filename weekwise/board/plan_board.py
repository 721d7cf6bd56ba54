"""Local editable weekly plan: seven fixed slots, AI merge and single-cell edits."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from weekwise.board.defaults import (
    DEFAULT_DAYS,
    DEFAULT_STRATEGIES,
    DEFAULT_TIPS,
    DEFAULT_TITLE,
)
from weekwise.board.handoff import HandoffBuffer
from weekwise.schemas.plan import TrainingDay, TrainingPlan, TrainingStrategy
from weekwise.utils.constants import (
    DEFAULT_LANGUAGE,
    SUPPORTED_LANGUAGES,
    WEEKDAY_KEYS,
    day_label,
    resolve_day,
)

logger = logging.getLogger(__name__)

EDITABLE_FIELDS: tuple[str, ...] = ("content", "duration", "notes")


@dataclass(frozen=True)
class EditTarget:
    """The cell being edited; ``day`` is None when the title is edited."""

    day: str | None
    field: str


@dataclass
class MergeResult:
    matched: list[str] = field(default_factory=list)
    dropped: list[str] = field(default_factory=list)
    title_replaced: bool = False
    tips_replaced: bool = False
    strategies_replaced: bool = False


class PlanBoard:
    """Editable plan state backing the printable poster.

    The board always holds exactly seven day slots (monday..sunday). AI plans are
    merged slot by slot; user edits touch one field at a time and only land on
    commit.
    """

    def __init__(self, language: str = DEFAULT_LANGUAGE):
        if language not in SUPPORTED_LANGUAGES:
            language = DEFAULT_LANGUAGE
        self.language = language
        self.title = DEFAULT_TITLE[language]
        self.subtitle = ""
        self.days: dict[str, TrainingDay] = {
            key: TrainingDay(day=day_label(key, language), **DEFAULT_DAYS[language][key])
            for key in WEEKDAY_KEYS
        }
        self.completed: dict[str, bool] = {key: False for key in WEEKDAY_KEYS}
        self.tips: list[str] = list(DEFAULT_TIPS[language])
        self.strategies: list[TrainingStrategy] = [
            strategy.model_copy() for strategy in DEFAULT_STRATEGIES[language]
        ]
        self._editing: EditTarget | None = None
        self._draft = ""

    @classmethod
    def default(cls, language: str = DEFAULT_LANGUAGE) -> "PlanBoard":
        return cls(language)

    # --- AI merge ---

    def merge(self, plan: TrainingPlan | None) -> MergeResult:
        """Overlay an AI plan onto the board.

        Matched days are overwritten as a unit, unknown day labels are dropped,
        and tips/strategies are replaced only when the plan carries some.
        """
        result = MergeResult()
        if plan is None:
            logger.error("No training plan to merge")
            return result

        if plan.title:
            self.title = plan.title
            result.title_replaced = True
        if plan.subtitle:
            self.subtitle = plan.subtitle

        for entry in plan.schedule:
            key = resolve_day(entry.day)
            if key is None:
                logger.warning("No weekday slot for day label %r; entry skipped", entry.day)
                result.dropped.append(entry.day)
                continue
            self.days[key] = TrainingDay(
                day=self.days[key].day,
                content=entry.content,
                duration=entry.duration,
                notes=entry.notes,
            )
            result.matched.append(key)

        if plan.tips:
            self.tips = list(plan.tips)
            result.tips_replaced = True
        if plan.strategies:
            self.strategies = [strategy.model_copy() for strategy in plan.strategies]
            result.strategies_replaced = True

        logger.info(
            "Merged plan: %d day(s) updated, %d dropped", len(result.matched), len(result.dropped)
        )
        return result

    # --- cell editing ---

    @property
    def editing(self) -> EditTarget | None:
        return self._editing

    @property
    def draft(self) -> str:
        return self._draft

    def begin_edit(self, day: str, field_name: str) -> None:
        if day not in self.days:
            raise KeyError(f"Unknown day slot: {day}")
        if field_name not in EDITABLE_FIELDS:
            raise ValueError(f"Field {field_name!r} is not editable")
        self._start(EditTarget(day=day, field=field_name), getattr(self.days[day], field_name))

    def begin_title_edit(self) -> None:
        self._start(EditTarget(day=None, field="title"), self.title)

    def set_draft(self, text: str) -> None:
        if self._editing is None:
            raise RuntimeError("No cell is being edited")
        self._draft = text

    def commit_edit(self) -> None:
        """Write the draft into the edited field (Enter or focus loss)."""
        target = self._editing
        if target is None:
            return
        if target.day is None:
            self.title = self._draft
        else:
            self.days[target.day] = self.days[target.day].model_copy(
                update={target.field: self._draft}
            )
        self._clear_edit()

    def cancel_edit(self) -> None:
        """Drop the draft (Escape); the board keeps its pre-edit value."""
        self._clear_edit()

    def _start(self, target: EditTarget, current: str) -> None:
        # Moving to another cell blurs the current one, which commits it.
        if self._editing is not None:
            self.commit_edit()
        self._editing = target
        self._draft = current

    def _clear_edit(self) -> None:
        self._editing = None
        self._draft = ""

    # --- completion ---

    def toggle_complete(self, day: str) -> bool:
        if day not in self.completed:
            raise KeyError(f"Unknown day slot: {day}")
        self.completed[day] = not self.completed[day]
        return self.completed[day]

    def to_plan(self) -> TrainingPlan:
        return TrainingPlan(
            title=self.title,
            subtitle=self.subtitle,
            schedule=[self.days[key].model_copy() for key in WEEKDAY_KEYS],
            tips=list(self.tips),
            strategies=[strategy.model_copy() for strategy in self.strategies],
        )


def load_board(buffer: HandoffBuffer, language: str = DEFAULT_LANGUAGE) -> PlanBoard:
    """Build the default board and merge a plan waiting in the hand-off buffer, if any."""
    board = PlanBoard.default(language)
    plan = buffer.take()
    if plan is not None:
        board.merge(plan)
    return board
