import dataclasses

import pytest

from task_nlp.locales import (
    DEFAULT_LANGUAGE,
    LANGUAGE_PACKS,
    Language,
    available_languages,
    get_pack,
    is_supported,
    resolve_language,
)
from task_nlp.locales.types import FREQUENCIES, PRIORITY_VALUES, STATUS_VALUES, WEEKDAY_CODES


def test_every_language_has_a_pack():
    assert set(LANGUAGE_PACKS) == set(Language)
    for language, pack in LANGUAGE_PACKS.items():
        assert pack.code == language.value


@pytest.mark.parametrize("code", ["xx", "", "klingon", None, 42, 3.5, ["en"]])
def test_unknown_codes_fall_back_to_english(code):
    assert get_pack(code) is LANGUAGE_PACKS[DEFAULT_LANGUAGE]


@pytest.mark.parametrize(
    "code, expected",
    [
        ("pt-BR", Language.PT),
        ("EN", Language.EN),
        (" de ", Language.DE),
        ("zh_CN", Language.ZH),
        (Language.JA, Language.JA),
    ],
)
def test_codes_are_normalized(code, expected):
    assert resolve_language(code) is expected


def test_is_supported():
    assert is_supported("fr")
    assert is_supported("sv-SE")
    assert not is_supported("xx")
    assert not is_supported(None)


def test_available_languages_lists_codes_and_names():
    languages = dict(available_languages())
    assert len(languages) == 12
    assert languages["en"] == "English"
    assert languages["ru"]


def test_packs_are_immutable():
    pack = get_pack("en")
    with pytest.raises(dataclasses.FrozenInstanceError):
        pack.code = "fr"
    with pytest.raises(TypeError):
        pack.status_keywords["blocked"] = "done"
    with pytest.raises(TypeError):
        pack.frequencies["DAILY"] = ("whenever",)


@pytest.mark.parametrize("pack", list(LANGUAGE_PACKS.values()), ids=lambda p: p.code)
def test_pack_vocabulary_maps_to_canonical_values(pack):
    assert set(pack.status_keywords.values()) <= set(STATUS_VALUES)
    assert set(pack.priority_keywords.values()) <= set(PRIORITY_VALUES)
    assert set(pack.frequencies) <= set(FREQUENCIES)
    assert set(pack.periods) <= set(FREQUENCIES)
    assert set(pack.weekdays) == set(WEEKDAY_CODES)
    assert set(pack.duration_units.values()) <= {1, 60}
    assert pack.hour_units and pack.minute_units
    assert pack.due_triggers and pack.scheduled_triggers


def test_duration_units_carry_multipliers():
    units = get_pack("en").duration_units
    assert units["hours"] == 60
    assert units["h"] == 60
    assert units["min"] == 1


def test_lookup_is_case_and_space_insensitive():
    pack = get_pack("de")
    assert pack.lookup(pack.frequencies, "Jeden  TAG") == "DAILY"
    assert pack.lookup(pack.weekdays, "nope") is None
