from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Dict, Mapping, Tuple


class Language(str, Enum):
    EN = "en"
    ES = "es"
    FR = "fr"
    DE = "de"
    RU = "ru"
    ZH = "zh"
    JA = "ja"
    IT = "it"
    NL = "nl"
    PT = "pt"
    SV = "sv"
    UK = "uk"


STATUS_VALUES = ("open", "in-progress", "done", "cancelled", "waiting")
PRIORITY_VALUES = ("urgent", "high", "normal", "low")
FREQUENCIES = ("DAILY", "WEEKLY", "MONTHLY", "YEARLY")
WEEKDAY_CODES = ("MO", "TU", "WE", "TH", "FR", "SA", "SU")

DEFAULT_MARKERS = {"tags": "#", "contexts": "@", "projects": "+"}


def _freeze(groups: Mapping) -> Mapping:
    return MappingProxyType({key: tuple(words) for key, words in groups.items()})


def _flatten(groups: Mapping[str, Tuple[str, ...]]) -> Mapping[str, str]:
    """Keyword -> canonical value. A keyword listed under two groups keeps the first."""
    flat: Dict[str, str] = {}
    for canonical, words in groups.items():
        for word in words:
            flat.setdefault(word.lower(), canonical)
    return MappingProxyType(flat)


@dataclass(frozen=True, eq=False)
class LanguagePack:
    """Keyword and phrase vocabulary for one natural language.

    Groups are keyed by their canonical output: status groups by status
    value, priority groups by priority value, frequencies and periods by
    RRULE frequency, weekdays by RRULE day code and ordinals by BYSETPOS.
    """

    code: str
    name: str
    date_locale: str
    due_triggers: Tuple[str, ...]
    scheduled_triggers: Tuple[str, ...]
    frequencies: Mapping[str, Tuple[str, ...]]
    every: Tuple[str, ...]
    other: Tuple[str, ...]
    weekdays: Mapping[str, Tuple[str, ...]]
    plural_weekdays: Mapping[str, Tuple[str, ...]]
    ordinals: Mapping[int, Tuple[str, ...]]
    periods: Mapping[str, Tuple[str, ...]]
    hour_units: Tuple[str, ...]
    minute_units: Tuple[str, ...]
    status_groups: Mapping[str, Tuple[str, ...]]
    priority_groups: Mapping[str, Tuple[str, ...]]
    marker_prefixes: Mapping[str, str] = field(default_factory=lambda: dict(DEFAULT_MARKERS))
    compact_script: bool = False
    status_keywords: Mapping[str, str] = field(init=False, repr=False)
    priority_keywords: Mapping[str, str] = field(init=False, repr=False)
    duration_units: Mapping[str, int] = field(init=False, repr=False)

    def __post_init__(self):
        for name in (
            "frequencies",
            "weekdays",
            "plural_weekdays",
            "ordinals",
            "periods",
            "status_groups",
            "priority_groups",
        ):
            object.__setattr__(self, name, _freeze(getattr(self, name)))
        object.__setattr__(self, "marker_prefixes", MappingProxyType(dict(self.marker_prefixes)))
        for name in ("due_triggers", "scheduled_triggers", "every", "other", "hour_units", "minute_units"):
            object.__setattr__(self, name, tuple(getattr(self, name)))

        object.__setattr__(self, "status_keywords", _flatten(self.status_groups))
        object.__setattr__(self, "priority_keywords", _flatten(self.priority_groups))

        units: Dict[str, int] = {}
        for unit in self.minute_units:
            units.setdefault(unit.lower(), 1)
        for unit in self.hour_units:
            units[unit.lower()] = 60
        object.__setattr__(self, "duration_units", MappingProxyType(units))

    def lookup(self, groups: Mapping, text: str):
        """Return the group key whose words contain ``text`` (case-insensitive)."""
        wanted = " ".join(text.lower().split())
        for key, words in groups.items():
            if any(" ".join(word.lower().split()) == wanted for word in words):
                return key
        return None
