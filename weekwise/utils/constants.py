"""Static tables and magic values shared across the gateway and the plan board."""

SUPPORTED_LANGUAGES: tuple[str, ...] = ("zh", "en")
DEFAULT_LANGUAGE = "zh"

# Canonical weekday slots, Monday first.
WEEKDAY_KEYS: tuple[str, ...] = (
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
    "sunday",
)

# Display label -> slot, one table per language.
DAY_LABELS: dict[str, dict[str, str]] = {
    "zh": {
        "周一": "monday",
        "周二": "tuesday",
        "周三": "wednesday",
        "周四": "thursday",
        "周五": "friday",
        "周六": "saturday",
        "周日": "sunday",
    },
    "en": {
        "Monday": "monday",
        "Tuesday": "tuesday",
        "Wednesday": "wednesday",
        "Thursday": "thursday",
        "Friday": "friday",
        "Saturday": "saturday",
        "Sunday": "sunday",
    },
}

# Name of the hand-off slot written by the chat front end.
HANDOFF_KEY = "generatedTrainingPlan"

# Substrings inspected when a provider error carries no usable status code.
# Checked in this order; the first matching group wins.
RATE_LIMIT_MARKERS: tuple[str, ...] = ("429", "rate limit")
UNAVAILABLE_MARKERS: tuple[str, ...] = (
    "timeout",
    "timed out",
    "etimedout",
    "econnreset",
    "econnrefused",
    "enotfound",
)
AUTH_MARKERS: tuple[str, ...] = ("401", "unauthorized")
QUOTA_MARKERS: tuple[str, ...] = ("quota", "limit")


def validate_day_labels(tables: dict[str, dict[str, str]] | None = None) -> None:
    """Raise RuntimeError unless every language maps a label to each of the seven slots."""
    tables = DAY_LABELS if tables is None else tables
    for language in SUPPORTED_LANGUAGES:
        labels = tables.get(language) or {}
        missing = [key for key in WEEKDAY_KEYS if key not in set(labels.values())]
        if missing or len(labels) != len(WEEKDAY_KEYS):
            raise RuntimeError(
                f"Weekday labels for {language!r} are incomplete (missing: {missing or 'duplicates'})"
            )


def day_label(slot: str, language: str) -> str:
    """Return the display label of ``slot`` in ``language``."""
    for label, key in DAY_LABELS.get(language, DAY_LABELS[DEFAULT_LANGUAGE]).items():
        if key == slot:
            return label
    raise KeyError(slot)


def resolve_day(label: str) -> str | None:
    """Map a day label in any supported language to its slot, or None."""
    text = (label or "").strip()
    if not text:
        return None
    for labels in DAY_LABELS.values():
        if text in labels:
            return labels[text]
    lowered = text.lower()
    for labels in DAY_LABELS.values():
        for candidate, key in labels.items():
            if candidate.lower() == lowered:
                return key
    return None


validate_day_labels()
