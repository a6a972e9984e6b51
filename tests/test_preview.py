from datetime import date

import pytest

from task_nlp.schemas import ParsedTaskData
from task_nlp.services.preview import describe_rule, get_preview_data, get_preview_text
from task_nlp.services.trigger_config import PropertyTrigger, TriggerConfig


@pytest.mark.parametrize(
    "rule, text",
    [
        ("FREQ=DAILY", "every day"),
        ("FREQ=WEEKLY;INTERVAL=2", "every 2 weeks"),
        ("FREQ=MONTHLY;INTERVAL=1", "every month"),
        ("FREQ=WEEKLY;BYDAY=MO", "every week on Monday"),
        ("FREQ=WEEKLY;INTERVAL=2;BYDAY=FR", "every 2 weeks on Friday"),
        ("FREQ=MONTHLY;BYDAY=TU;BYSETPOS=2", "every month on the second Tuesday"),
        ("FREQ=MONTHLY;BYDAY=FR;BYSETPOS=-1", "every month on the last Friday"),
        ("FREQ=NEVER", "Invalid recurrence"),
    ],
)
def test_describe_rule(rule, text):
    assert describe_rule(rule) == text


def test_preview_text_joins_parts_in_order():
    parsed = ParsedTaskData(title="Buy milk", priority="high", tags=["errands"], estimate_minutes=15)

    assert get_preview_text(parsed) == '"Buy milk" • Priority: high • Tags: #errands • Estimate: 15 min'


def test_preview_data_has_icons():
    parsed = ParsedTaskData(
        title="Ship release",
        due_date=date(2025, 1, 17),
        due_time="09:30",
        scheduled_date=date(2025, 1, 16),
        status="in-progress",
        contexts=["office"],
        projects=["[[Launch]]", "infra"],
        recurrence_rule="FREQ=WEEKLY",
    )

    data = get_preview_data(parsed)

    assert data[0] == ("edit-3", '"Ship release"')
    assert ("calendar", "Due: 2025-01-17 at 09:30") in data
    assert ("calendar-clock", "Scheduled: 2025-01-16") in data
    assert ("activity", "Status: in-progress") in data
    assert ("map-pin", "Contexts: @office") in data
    assert ("folder", "Projects: +[[Launch]], +infra") in data
    assert ("repeat", "Recurrence: every week") in data


def test_long_details_are_shortened():
    parsed = ParsedTaskData(title="Notes", details="x" * 80)

    icon, text = get_preview_data(parsed)[1]

    assert icon == "file-text"
    assert text == 'Details: "' + "x" * 50 + '..."'


def test_zero_estimate_is_shown():
    parsed = ParsedTaskData(title="Ping", estimate_minutes=0)

    assert get_preview_text(parsed).endswith("Estimate: 0 min")


def test_preview_uses_configured_triggers():
    triggers = TriggerConfig(triggers=[PropertyTrigger(property_id="tags", trigger="tag:")])
    parsed = ParsedTaskData(title="Plan", tags=["travel"])

    assert get_preview_text(parsed, triggers) == '"Plan" • Tags: tag:travel'
