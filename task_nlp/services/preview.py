from typing import Dict, List, Optional, Tuple

from task_nlp.schemas import ParsedTaskData
from task_nlp.services.recurrence import is_valid_rule
from task_nlp.services.trigger_config import TriggerConfig

PREVIEW_SEPARATOR = " • "
DETAILS_PREVIEW_LENGTH = 50

_PERIOD_NAMES = {"DAILY": "day", "WEEKLY": "week", "MONTHLY": "month", "YEARLY": "year"}
_DAY_NAMES = {
    "MO": "Monday",
    "TU": "Tuesday",
    "WE": "Wednesday",
    "TH": "Thursday",
    "FR": "Friday",
    "SA": "Saturday",
    "SU": "Sunday",
}
_POSITION_NAMES = {1: "first", 2: "second", 3: "third", 4: "fourth", -1: "last"}


def describe_rule(rule: Optional[str]) -> str:
    """Short English description of an RRULE body, e.g. "every 2 weeks on Monday"."""
    if not is_valid_rule(rule):
        return "Invalid recurrence"

    parts: Dict[str, str] = dict(
        item.split("=", 1) for item in rule.split(";") if "=" in item
    )
    period = _PERIOD_NAMES.get(parts["FREQ"], parts["FREQ"].lower())
    interval = int(parts.get("INTERVAL", "1"))
    text = f"every {interval} {period}s" if interval > 1 else f"every {period}"

    days = [_DAY_NAMES.get(code, code) for code in parts.get("BYDAY", "").split(",") if code]
    if not days:
        return text
    if "BYSETPOS" in parts:
        position = _POSITION_NAMES.get(int(parts["BYSETPOS"]), parts["BYSETPOS"])
        return f"{text} on the {position} {days[0]}"
    return f"{text} on {', '.join(days)}"


def _with_time(day, time: Optional[str]) -> str:
    return f"{day.isoformat()} at {time}" if time else day.isoformat()


def get_preview_data(parsed: ParsedTaskData, triggers: Optional[TriggerConfig] = None) -> List[Tuple[str, str]]:
    """Ordered (icon, text) pairs describing ``parsed`` for display."""
    prefixes = (triggers or TriggerConfig()).as_mapping()
    parts: List[Tuple[str, str]] = []

    parts.append(("edit-3", f'"{parsed.title}"'))
    if parsed.details:
        snippet = parsed.details[:DETAILS_PREVIEW_LENGTH]
        ellipsis = "..." if len(parsed.details) > DETAILS_PREVIEW_LENGTH else ""
        parts.append(("file-text", f'Details: "{snippet}{ellipsis}"'))
    if parsed.due_date:
        parts.append(("calendar", f"Due: {_with_time(parsed.due_date, parsed.due_time)}"))
    if parsed.scheduled_date:
        parts.append(("calendar-clock", f"Scheduled: {_with_time(parsed.scheduled_date, parsed.scheduled_time)}"))
    if parsed.priority:
        parts.append(("alert-triangle", f"Priority: {parsed.priority}"))
    if parsed.status:
        parts.append(("activity", f"Status: {parsed.status}"))
    if parsed.contexts:
        prefix = prefixes.get("contexts", "@")
        parts.append(("map-pin", "Contexts: " + ", ".join(prefix + c for c in parsed.contexts)))
    if parsed.projects:
        prefix = prefixes.get("projects", "+")
        parts.append(("folder", "Projects: " + ", ".join(prefix + p for p in parsed.projects)))
    if parsed.tags:
        prefix = prefixes.get("tags", "#")
        parts.append(("tag", "Tags: " + ", ".join(prefix + t for t in parsed.tags)))
    if parsed.recurrence_rule:
        parts.append(("repeat", f"Recurrence: {describe_rule(parsed.recurrence_rule)}"))
    if parsed.estimate_minutes is not None:
        parts.append(("clock", f"Estimate: {parsed.estimate_minutes} min"))

    return parts


def get_preview_text(parsed: ParsedTaskData, triggers: Optional[TriggerConfig] = None) -> str:
    return PREVIEW_SEPARATOR.join(text for _, text in get_preview_data(parsed, triggers))
