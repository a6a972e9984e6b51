import logging
import re
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from functools import lru_cache
from typing import Callable, Optional, Tuple

from dateutil.rrule import rrulestr

from task_nlp.locales.types import FREQUENCIES, LanguagePack
from task_nlp.services.extraction import Extraction
from task_nlp.utils.error_handler import ErrorType, report_parse_issue
from task_nlp.utils.text import WORD_END, WORD_START, alternation, remove_span

logger = logging.getLogger(__name__)

_VALIDATION_START = datetime(2000, 1, 3)


class PatternKind(Enum):
    ORDINAL_WEEKDAY = "ordinal_weekday"
    INTERVAL = "interval"
    EVERY_OTHER = "every_other"
    EVERY_WEEKDAY = "every_weekday"
    PLURAL_WEEKDAY = "plural_weekday"
    FREQUENCY = "frequency"


@dataclass(frozen=True)
class RecurrencePattern:
    kind: PatternKind
    regex: re.Pattern
    build: Callable[[re.Match], Optional[str]]


def is_valid_rule(rule: Optional[str]) -> bool:
    """True when ``rule`` is an RRULE body dateutil can expand."""
    if not rule or not rule.startswith("FREQ="):
        return False
    if any(not part.partition("=")[2] for part in rule.split(";")):
        return False
    interval = re.search(r"INTERVAL=(\d+)", rule)
    if interval and int(interval.group(1)) < 1:
        return False
    try:
        rrulestr(rule, dtstart=_VALIDATION_START)
    except (ValueError, TypeError, KeyError):
        return False
    return True


def _words(groups) -> Tuple[str, ...]:
    return tuple(word for words in groups.values() for word in words)


@lru_cache(maxsize=32)
def recurrence_patterns(pack: LanguagePack) -> Tuple[RecurrencePattern, ...]:
    """Compile the recurrence grammar for ``pack``, most specific family first."""
    sep = r"\s*" if pack.compact_script else r"\s+"
    every = alternation(pack.every)
    other = alternation(pack.other)
    ordinals = alternation(_words(pack.ordinals))
    weekdays = alternation(_words(pack.weekdays))
    periods = alternation(_words(pack.periods))

    def compile_(body: str) -> re.Pattern:
        return re.compile(rf"{WORD_START}{body}{WORD_END}", re.IGNORECASE)

    def weekday(text: str) -> Optional[str]:
        return pack.lookup(pack.weekdays, text)

    def period(text: str) -> Optional[str]:
        return pack.lookup(pack.periods, text)

    def ordinal_weekday(match):
        position = pack.lookup(pack.ordinals, match.group("ordinal"))
        day = weekday(match.group("day"))
        if position is None or day is None:
            return None
        return f"FREQ=MONTHLY;BYDAY={day};BYSETPOS={position}"

    def interval(match):
        freq = period(match.group("period"))
        if freq is None:
            return None
        return f"FREQ={freq};INTERVAL={int(match.group('count'))}"

    def every_other_period(match):
        freq = period(match.group("period"))
        return f"FREQ={freq};INTERVAL=2" if freq else None

    def every_other_weekday(match):
        day = weekday(match.group("day"))
        return f"FREQ=WEEKLY;INTERVAL=2;BYDAY={day}" if day else None

    def every_weekday(match):
        day = weekday(match.group("day"))
        return f"FREQ=WEEKLY;BYDAY={day}" if day else None

    def plural_weekday(match):
        day = pack.lookup(pack.plural_weekdays, match.group("day"))
        return f"FREQ=WEEKLY;BYDAY={day}" if day else None

    patterns = []
    if every and ordinals and weekdays:
        patterns.append(RecurrencePattern(
            PatternKind.ORDINAL_WEEKDAY,
            compile_(rf"(?:{every}){sep}(?P<ordinal>{ordinals}){sep}(?P<day>{weekdays})"),
            ordinal_weekday,
        ))
    if every and periods:
        patterns.append(RecurrencePattern(
            PatternKind.INTERVAL,
            compile_(rf"(?:{every})\s*(?P<count>\d+){sep}(?P<period>{periods})"),
            interval,
        ))
    if every and other and periods:
        patterns.append(RecurrencePattern(
            PatternKind.EVERY_OTHER,
            compile_(rf"(?:{every}){sep}(?:{other}){sep}(?P<period>{periods})"),
            every_other_period,
        ))
    if every and other and weekdays:
        patterns.append(RecurrencePattern(
            PatternKind.EVERY_OTHER,
            compile_(rf"(?:{every}){sep}(?:{other}){sep}(?P<day>{weekdays})"),
            every_other_weekday,
        ))
    if every and weekdays:
        patterns.append(RecurrencePattern(
            PatternKind.EVERY_WEEKDAY,
            compile_(rf"(?:{every}){sep}(?P<day>{weekdays})"),
            every_weekday,
        ))
    plural = alternation(_words(pack.plural_weekdays))
    if plural:
        patterns.append(RecurrencePattern(
            PatternKind.PLURAL_WEEKDAY,
            compile_(rf"(?P<day>{plural})"),
            plural_weekday,
        ))
    for freq in FREQUENCIES:
        words = alternation(pack.frequencies.get(freq, ()))
        if words:
            patterns.append(RecurrencePattern(
                PatternKind.FREQUENCY,
                compile_(rf"(?:{words})"),
                lambda match, freq=freq: f"FREQ={freq}",
            ))
    return tuple(patterns)


def extract_recurrence(text: str, pack: LanguagePack) -> Extraction:
    """Find the first recurrence phrase and return it as an RRULE body.

    Families are tried from most to least specific; within a family the
    earliest phrase in the text wins. A rule that dateutil refuses is
    treated as no match and the next family is tried.
    """
    for pattern in recurrence_patterns(pack):
        match = pattern.regex.search(text)
        if not match:
            continue
        rule = pattern.build(match)
        if not is_valid_rule(rule):
            report_parse_issue(ErrorType.INVALID_RECURRENCE, repr(rule))
            continue
        logger.debug(f"Recurrence {pattern.kind.value} -> {rule}")
        return Extraction(rule, remove_span(text, match.start(), match.end()))
    return Extraction(None, text)
