import re
from datetime import datetime, timedelta
from typing import Optional

import pytest

from task_nlp.services.date_resolver import DateMatch
from task_nlp.services.task_parser import TaskParser

# Wednesday
NOW = datetime(2025, 1, 15, 10, 0)


class StubResolver:
    """Recognises a handful of fixed phrases relative to the reference time."""

    PHRASES = {
        "tomorrow at 3pm": (timedelta(days=1), (15, 0)),
        "next week": (timedelta(days=7), None),
        "tomorrow": (timedelta(days=1), None),
        "friday": (timedelta(days=2), None),
        "завтра": (timedelta(days=1), None),
    }
    PATTERN = re.compile(
        r"(?<!\w)(" + "|".join(sorted(PHRASES, key=len, reverse=True)) + r")(?!\w)",
        re.IGNORECASE,
    )

    def __init__(self):
        self.calls = []

    def resolve(self, text: str, reference_now: datetime) -> Optional[DateMatch]:
        self.calls.append(text)
        match = self.PATTERN.search(text)
        if not match:
            return None
        offset, clock = self.PHRASES[match.group(1).lower()]
        value = reference_now + offset
        if clock:
            value = value.replace(hour=clock[0], minute=clock[1])
        return DateMatch(text=match.group(1), start=match.start(), value=value, has_time=clock is not None)


class ExplodingResolver:
    def resolve(self, text, reference_now):
        raise RuntimeError("calendar backend unavailable")


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def resolver():
    return StubResolver()


@pytest.fixture
def make_parser(resolver):
    def _make(**kwargs):
        kwargs.setdefault("resolver", resolver)
        return TaskParser(**kwargs)

    return _make
