import logging
from datetime import date

import pytest

from task_nlp.locales import get_pack
from task_nlp.services.date_resolver import DateparserResolver, NullResolver
from task_nlp.services.datetime_processor import DateTimeProcessor

from .conftest import ExplodingResolver

EN = get_pack("en")
TOMORROW = date(2025, 1, 16)
FRIDAY = date(2025, 1, 17)


def test_bare_date_goes_to_scheduled_by_default(resolver, now):
    found = DateTimeProcessor(resolver, EN).extract("Call mom tomorrow", now)

    assert found.value == {"scheduled_date": TOMORROW, "scheduled_time": None}
    assert found.remaining == "Call mom"


def test_bare_date_goes_to_due_when_configured(resolver, now):
    found = DateTimeProcessor(resolver, EN, default_to_scheduled=False).extract("Call mom tomorrow", now)

    assert found.value == {"due_date": TOMORROW, "due_time": None}


@pytest.mark.parametrize("text", ["Submit report due friday", "Submit report by friday", "Submit report deadline friday"])
def test_due_trigger_wins_due_date(resolver, now, text):
    found = DateTimeProcessor(resolver, EN).extract(text, now)

    assert found.value["due_date"] == FRIDAY
    assert "scheduled_date" not in found.value
    assert found.remaining == "Submit report"


def test_due_trigger_and_bare_date_fill_both_fields(resolver, now):
    found = DateTimeProcessor(resolver, EN).extract("Plan trip tomorrow due friday", now)

    assert found.value["due_date"] == FRIDAY
    assert found.value["scheduled_date"] == TOMORROW
    assert found.remaining == "Plan trip"


def test_bare_date_falls_back_to_the_free_field(resolver, now):
    processor = DateTimeProcessor(resolver, EN)

    found = processor.extract("Prepare scheduled for tomorrow then friday", now)

    assert found.value["scheduled_date"] == TOMORROW
    assert found.value["due_date"] == FRIDAY


def test_trigger_must_be_close_to_the_date(resolver, now):
    found = DateTimeProcessor(resolver, EN).extract("due soon, call on friday", now)

    assert found.value == {"scheduled_date": FRIDAY, "scheduled_time": None}
    assert found.remaining == "due soon, call"


def test_time_is_kept_when_stated(resolver, now):
    found = DateTimeProcessor(resolver, EN).extract("Meeting tomorrow at 3pm", now)

    assert found.value["scheduled_date"] == TOMORROW
    assert found.value["scheduled_time"] == "15:00"
    assert found.remaining == "Meeting"


def test_no_date_leaves_text_untouched(resolver, now):
    found = DateTimeProcessor(resolver, EN).extract("Water the plants", now)

    assert found.value is None
    assert found.remaining == "Water the plants"


def test_null_resolver_never_finds_dates(now):
    found = DateTimeProcessor(NullResolver(), EN).extract("Call mom tomorrow", now)

    assert found.value is None
    assert found.remaining == "Call mom tomorrow"


def test_resolver_failure_is_reported_not_raised(now, caplog):
    caplog.set_level(logging.WARNING)

    found = DateTimeProcessor(ExplodingResolver(), EN).extract("Call mom tomorrow", now)

    assert found.value is None
    assert found.remaining == "Call mom tomorrow"
    assert "Date resolver failed" in caplog.text


def test_dateparser_resolver_finds_relative_dates(now):
    match = DateparserResolver("en").resolve("meeting tomorrow", now)

    assert match is not None
    assert match.text.lower() == "tomorrow"
    assert match.start == len("meeting ")
    assert match.value.date() == TOMORROW
    assert not match.has_time


def test_dateparser_resolver_ignores_blank_text(now):
    assert DateparserResolver("en").resolve("   ", now) is None
