import logging
from datetime import datetime
from functools import lru_cache
from typing import Any, Dict, Optional, Tuple

from task_nlp.locales.types import LanguagePack
from task_nlp.services.date_resolver import DateMatch, DateResolver
from task_nlp.services.extraction import Extraction
from task_nlp.utils.error_handler import ErrorType, report_parse_issue
from task_nlp.utils.logger import redact_text
from task_nlp.utils.text import keyword_regex, remove_span

logger = logging.getLogger(__name__)

# How far (in characters) a date phrase may start after its trigger word.
MAX_TRIGGER_GAP = 3


@lru_cache(maxsize=64)
def _trigger_regex(words: Tuple[str, ...]):
    return keyword_regex(words) if words else None


def format_time(value: datetime) -> str:
    return value.strftime("%H:%M")


class DateTimeProcessor:
    """Routes date phrases found by a :class:`DateResolver` to the due or scheduled field.

    A phrase introduced by a due trigger ("due", "by", ...) always becomes
    the due date. A phrase introduced by a scheduled trigger becomes the
    scheduled date. A bare phrase goes to the default field when it is free,
    otherwise to the other one.
    """

    def __init__(self, resolver: DateResolver, pack: LanguagePack, default_to_scheduled: bool = True):
        self.resolver = resolver
        self.pack = pack
        self.default_to_scheduled = default_to_scheduled

    def extract(self, text: str, now: datetime) -> Extraction:
        fields: Dict[str, Any] = {}

        for field_name, triggers in (("due", self.pack.due_triggers), ("scheduled", self.pack.scheduled_triggers)):
            found = self._find_after_trigger(text, triggers, now)
            if found:
                start, end, match = found
                self._assign(fields, field_name, match)
                text = remove_span(text, start, end)

        free = [name for name in self._field_order() if f"{name}_date" not in fields]
        if free:
            match = self._safe_resolve(text, now)
            if match:
                self._assign(fields, free[0], match)
                text = remove_span(text, match.start, match.end)

        if not fields:
            return Extraction(None, text)
        return Extraction(fields, text)

    def _field_order(self):
        return ("scheduled", "due") if self.default_to_scheduled else ("due", "scheduled")

    def _find_after_trigger(self, text: str, triggers, now: datetime) -> Optional[Tuple[int, int, DateMatch]]:
        regex = _trigger_regex(tuple(triggers))
        if regex is None:
            return None
        for trigger in regex.finditer(text):
            after = text[trigger.end():]
            match = self._safe_resolve(after, now)
            if match and match.start <= MAX_TRIGGER_GAP:
                shifted = DateMatch(
                    text=match.text,
                    start=trigger.end() + match.start,
                    value=match.value,
                    has_time=match.has_time,
                )
                return trigger.start(), shifted.end, shifted
        return None

    def _safe_resolve(self, text: str, now: datetime) -> Optional[DateMatch]:
        if not text.strip():
            return None
        try:
            return self.resolver.resolve(text, now)
        except Exception as e:
            report_parse_issue(ErrorType.RESOLVER_FAILURE, redact_text(text, logger), exc=e)
            return None

    @staticmethod
    def _assign(fields: Dict[str, Any], field_name: str, match: DateMatch):
        fields[f"{field_name}_date"] = match.value.date()
        fields[f"{field_name}_time"] = format_time(match.value) if match.has_time else None
        logger.debug(f"Date phrase {match.text!r} -> {field_name} {match.value.isoformat()}")
