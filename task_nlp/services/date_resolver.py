import logging
import re
from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Protocol

from dateparser.search import search_dates

logger = logging.getLogger(__name__)

TIME_HINT = re.compile(
    r"\d{1,2}:\d{2}"
    r"|\d{1,2}\s*(?:am|pm|a\.m\.|p\.m\.)(?!\w)"
    r"|(?<!\w)(?:noon|midnight|midi|minuit|mittag|mezzogiorno|mediodía)(?!\w)"
    r"|(?<!\w)(?:at|um|à|a las|alle|om|kl\.?|às|в|о)\s+\d{1,2}(?!\d)"
    r"|\d{1,2}\s*(?:uhr|h)(?!\w)"
    r"|\d{1,2}\s*(?:点|點|時|时)",
    re.IGNORECASE,
)


@dataclass
class DateMatch:
    text: str
    start: int
    value: datetime
    has_time: bool = False

    @property
    def end(self) -> int:
        return self.start + len(self.text)


class DateResolver(Protocol):
    """Finds the first date phrase in a piece of text."""

    def resolve(self, text: str, reference_now: datetime) -> Optional[DateMatch]:
        ...


class NullResolver:
    """Resolver that never finds a date; useful when dates should be left in the title."""

    def resolve(self, text: str, reference_now: datetime) -> Optional[DateMatch]:
        return None


class DateparserResolver:
    """Date phrase search backed by ``dateparser``."""

    def __init__(self, language: str = "en", prefer_dates_from: str = "future"):
        self.language = language
        self.settings = {
            "PREFER_DATES_FROM": prefer_dates_from,
            "RETURN_AS_TIMEZONE_AWARE": False,
        }

    def resolve(self, text: str, reference_now: datetime) -> Optional[DateMatch]:
        if not text or not text.strip():
            return None

        base = reference_now.replace(tzinfo=None) if reference_now.tzinfo else reference_now
        found = search_dates(
            text,
            languages=[self.language],
            settings=dict(self.settings, RELATIVE_BASE=base),
        )
        if not found:
            return None

        phrase, value = found[0]
        start = text.find(phrase)
        if start < 0:
            start = text.lower().find(phrase.lower())
        if start < 0:
            logger.debug(f"Could not locate date phrase {phrase!r} in input")
            return None

        return DateMatch(
            text=text[start:start + len(phrase)],
            start=start,
            value=value,
            has_time=bool(TIME_HINT.search(phrase)),
        )
