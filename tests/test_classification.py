import pytest

from task_nlp.locales import get_pack
from task_nlp.services.classification import extract_classifications
from task_nlp.services.trigger_config import PropertyTrigger, TriggerConfig


def test_extracts_all_marker_kinds():
    found = extract_classifications("Buy milk #errands @store +groceries")

    assert found.value == {"tags": ["errands"], "contexts": ["store"], "projects": ["groceries"]}
    assert found.remaining == "Buy milk"


def test_nested_tags_and_projects_keep_slashes_and_dashes():
    found = extract_classifications("Draft #work/q3 +side-project notes")

    assert found.value["tags"] == ["work/q3"]
    assert found.value["projects"] == ["side-project"]
    assert found.remaining == "Draft notes"


def test_wikilink_project_is_kept_verbatim():
    found = extract_classifications("Write report +[[Quarterly Review]] #work")

    assert found.value["projects"] == ["[[Quarterly Review]]"]
    assert found.value["tags"] == ["work"]
    assert found.remaining == "Write report"


@pytest.mark.parametrize(
    "text",
    [
        "Email bob@example.com about C# code",
        "Compute a+b quickly",
        "Plain task without markers",
        "Fix issue#42 today",
    ],
)
def test_markers_only_count_at_word_start(text):
    found = extract_classifications(text)

    assert found.value is None
    assert found.remaining == text


def test_trailing_punctuation_ends_a_marker():
    found = extract_classifications("Call @phone, then rest")

    assert found.value["contexts"] == ["phone"]
    assert found.remaining == "Call , then rest"


@pytest.mark.parametrize(
    "text",
    [
        "Buy milk #errands @store +groceries",
        "#a#b @c@d +e+f",
        "x #a.#b @home,@work",
        "Write +[[Note]]x +[[Other]] #t",
    ],
)
def test_running_twice_finds_nothing_new(text):
    first = extract_classifications(text)
    second = extract_classifications(first.remaining)

    assert second.value is None
    assert second.remaining == first.remaining


def test_disabled_trigger_is_ignored():
    triggers = TriggerConfig(
        triggers=[
            PropertyTrigger(property_id="tags", trigger="#"),
            PropertyTrigger(property_id="contexts", trigger="@", enabled=False),
            PropertyTrigger(property_id="projects", trigger="+"),
        ]
    )

    found = extract_classifications("Call @home #family", triggers)

    assert found.value == {"tags": ["family"], "contexts": [], "projects": []}
    assert found.remaining == "Call @home"


def test_custom_trigger_strings():
    triggers = TriggerConfig(
        triggers=[
            PropertyTrigger(property_id="tags", trigger="tag:"),
            PropertyTrigger(property_id="contexts", trigger="ctx:"),
        ]
    )

    found = extract_classifications("Plan tag:travel ctx:laptop #ignored", triggers)

    assert found.value["tags"] == ["travel"]
    assert found.value["contexts"] == ["laptop"]
    assert found.remaining == "Plan #ignored"


def test_trigger_config_defaults():
    config = TriggerConfig.from_pack(get_pack("en"))

    assert config.get_trigger("tags") == "#"
    assert config.get_trigger("status") == "*"
    assert config.get_trigger("priority") is None
    assert config.get_property("@") == "contexts"
    assert config.get_property("!") is None


def test_enabled_triggers_are_ordered_longest_first():
    config = TriggerConfig(
        triggers=[
            PropertyTrigger(property_id="tags", trigger="#"),
            PropertyTrigger(property_id="contexts", trigger="ctx:"),
            PropertyTrigger(property_id="status", trigger="*", enabled=False),
        ]
    )

    assert [t.trigger for t in config.enabled_triggers()] == ["ctx:", "#"]


def test_trigger_must_not_contain_whitespace():
    with pytest.raises(ValueError):
        PropertyTrigger(property_id="tags", trigger="# ")
