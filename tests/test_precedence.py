import pytest

from task_nlp.locales import get_pack
from task_nlp.schemas import PriorityConfig, StatusConfig
from task_nlp.services.precedence import find_builtin_keyword, resolve_priority, resolve_status

EN = get_pack("en")


@pytest.fixture
def status_configs():
    return [
        StatusConfig(id="open", value="open", label="Open"),
        StatusConfig(id="blocked", value="blocked", label="Blocked"),
        StatusConfig(id="progress", value="progress", label="Progress"),
        StatusConfig(id="in-progress", value="in-progress", label="In Progress"),
        StatusConfig(id="active", value="active", label="Active = Now"),
        StatusConfig(id="shipped", value="shipped", label="Shipped", is_completed=True),
    ]


def test_builtin_status():
    found = resolve_status("Task done", EN)

    assert found.value.value == "done"
    assert found.value.config is None
    assert found.remaining == "Task"


def test_builtin_earliest_occurrence_wins():
    found = resolve_priority("low effort but urgent", EN)

    assert found.value.value == "low"
    assert found.remaining == "effort but urgent"


def test_builtin_longer_keyword_wins_at_same_position():
    found = resolve_priority("Fix login high priority", EN)

    assert found.value.value == "high"
    assert found.remaining == "Fix login"


def test_builtin_keywords_need_word_boundaries():
    assert find_builtin_keyword("Download the file", EN.status_keywords) is None
    assert find_builtin_keyword("Highlight notes", EN.priority_keywords) is None


def test_configured_blocked_never_becomes_waiting(status_configs):
    found = resolve_status("Fix bug blocked", EN, status_configs)

    assert found.value.value == "blocked"
    assert found.value.config.id == "blocked"
    assert found.remaining == "Fix bug"


def test_builtin_words_are_ignored_when_configs_exist(status_configs):
    found = resolve_status("Task done waiting", EN, status_configs)

    assert found.value is None
    assert found.remaining == "Task done waiting"


def test_configured_label_in_the_middle(status_configs):
    found = resolve_status("Task with Open status", EN, status_configs)

    assert found.value.value == "open"
    assert found.remaining == "Task with status"


def test_configured_label_with_punctuation(status_configs):
    found = resolve_status("Task Active = Now", EN, status_configs)

    assert found.value.value == "active"
    assert found.remaining == "Task"


def test_configured_label_must_be_whole_words(status_configs):
    found = resolve_status("Task Progressive work", EN, status_configs)

    assert found.value is None


def test_longest_configured_label_wins(status_configs):
    found = resolve_status("Task In Progress today", EN, status_configs)

    assert found.value.value == "in-progress"
    assert found.remaining == "Task today"


def test_configured_value_also_matches(status_configs):
    found = resolve_status("Release in-progress", EN, status_configs)

    assert found.value.value == "in-progress"


def test_configured_match_is_case_insensitive(status_configs):
    found = resolve_status("deploy SHIPPED", EN, status_configs)

    assert found.value.value == "shipped"
    assert found.value.config.is_completed


def test_custom_priority_overrides_builtin_words():
    configs = [PriorityConfig(id="custom", value="custom", label="CustomPriority")]

    found = resolve_priority("CustomPriority important task", EN, configs)

    assert found.value.value == "custom"
    assert found.remaining == "important task"


def test_trigger_prefix_is_consumed():
    found = resolve_status("Task *Done", EN, trigger="*")

    assert found.value.value == "done"
    assert found.remaining == "Task"


def test_trigger_prefix_with_configs(status_configs):
    found = resolve_status("Fix bug *Blocked", EN, status_configs, trigger="*")

    assert found.value.value == "blocked"
    assert found.remaining == "Fix bug"


def test_localized_builtin_status():
    found = resolve_status("tarea en progreso", get_pack("es"))

    assert found.value.value == "in-progress"
    assert found.remaining == "tarea"


@pytest.mark.parametrize("text, remaining", [("Ship it P1.", "Ship it ."), ("Ship it (P1)", "Ship it ( )")])
def test_configured_priority_may_touch_punctuation(text, remaining):
    configs = [PriorityConfig(id="p1", value="p1", label="P1")]

    found = resolve_priority(text, EN, configs)

    assert found.value.value == "p1"
    assert found.remaining == remaining


def test_configured_priority_still_needs_word_edges():
    configs = [PriorityConfig(id="p1", value="p1", label="P1")]

    assert resolve_priority("Review AP1 draft", EN, configs).value is None
    assert resolve_priority("Review P10 draft", EN, configs).value is None


def test_symbol_priority_label_needs_whitespace():
    configs = [PriorityConfig(id="hot", value="hot", label="!!")]

    assert resolve_priority("Fix it !!", EN, configs).value.value == "hot"
    assert resolve_priority("Fix a!!b", EN, configs).value is None


def test_configured_status_keeps_whitespace_edges(status_configs):
    found = resolve_status("Fix bug blocked.", EN, status_configs)

    assert found.value is None
