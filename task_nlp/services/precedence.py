"""Status and priority keyword resolution.

Two vocabularies can name a status or priority: the built-in words of the
active language pack and the labels/values of user-supplied configs. The
choice between them depends only on whether the user supplied any
configs. When they did, the built-in words are never consulted, so a
configured "blocked" status can never turn into the built-in "waiting".
"""

import logging
import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Iterable, List, Mapping, Optional, Sequence, Tuple, Union

from task_nlp.locales.types import LanguagePack
from task_nlp.schemas import PriorityConfig, StatusConfig
from task_nlp.services.extraction import Extraction
from task_nlp.utils.text import (
    TOKEN_END,
    TOKEN_START,
    WORD_END,
    WORD_START,
    alternation,
    normalize_phrase,
    phrase_pattern,
    remove_span,
)

logger = logging.getLogger(__name__)

UserConfig = Union[StatusConfig, PriorityConfig]


@dataclass(frozen=True)
class KeywordMatch:
    value: str
    start: int
    end: int
    text: str
    config: Optional[UserConfig] = None


def _trigger_prefix(trigger: Optional[str]) -> str:
    if not trigger:
        return ""
    return rf"(?:{TOKEN_START}{re.escape(trigger)})?"


@lru_cache(maxsize=128)
def _builtin_regex(words: Tuple[str, ...], trigger: Optional[str]) -> re.Pattern:
    return re.compile(
        rf"{_trigger_prefix(trigger)}{WORD_START}(?P<word>{alternation(words)}){WORD_END}",
        re.IGNORECASE,
    )


@lru_cache(maxsize=512)
def _configured_regex(phrase: str, trigger: Optional[str], word_bounded: bool = False) -> re.Pattern:
    start, end = TOKEN_START, TOKEN_END
    if word_bounded:
        # Word edges of the phrase may touch punctuation ("P1."); symbol edges still need whitespace.
        if re.match(r"\w", phrase):
            start = WORD_START
        if re.match(r"\w", phrase[-1]):
            end = WORD_END
    return re.compile(
        rf"{start}{_trigger_prefix(trigger)}(?P<word>{phrase_pattern(phrase)}){end}",
        re.IGNORECASE,
    )


def find_builtin_keyword(
    text: str, keywords: Mapping[str, str], trigger: Optional[str] = None
) -> Optional[KeywordMatch]:
    """Earliest built-in keyword in ``text``; at a shared start the longer keyword wins."""
    if not keywords:
        return None
    match = _builtin_regex(tuple(keywords), trigger).search(text)
    if not match:
        return None
    value = keywords.get(normalize_phrase(match.group("word")))
    if value is None:
        return None
    return KeywordMatch(value=value, start=match.start(), end=match.end(), text=match.group(0))


def _candidates(configs: Iterable[UserConfig]) -> List[Tuple[str, UserConfig]]:
    seen = set()
    candidates = []
    for config in configs:
        for phrase in (config.label, config.value):
            key = normalize_phrase(phrase or "")
            if not key or (key, config.value) in seen:
                continue
            seen.add((key, config.value))
            candidates.append((phrase.strip(), config))
    # Stable sort keeps config order among labels of equal length.
    return sorted(candidates, key=lambda item: len(item[0]), reverse=True)


def find_configured_keyword(
    text: str, configs: Sequence[UserConfig], trigger: Optional[str] = None, word_bounded: bool = False
) -> Optional[KeywordMatch]:
    """Longest configured label or value that stands as whole whitespace-separated words.

    With ``word_bounded`` a label may also touch punctuation, as in "Ship it P1.".
    """
    for phrase, config in _candidates(configs):
        match = _configured_regex(phrase, trigger, word_bounded).search(text)
        if match:
            return KeywordMatch(
                value=config.value,
                start=match.start(),
                end=match.end(),
                text=match.group(0),
                config=config,
            )
    return None


def _resolve(
    text: str,
    builtin: Mapping[str, str],
    configs: Sequence[UserConfig],
    trigger: Optional[str],
    word_bounded: bool = False,
):
    has_user_config = bool(configs)
    if has_user_config:
        match = find_configured_keyword(text, configs, trigger, word_bounded)
    else:
        match = find_builtin_keyword(text, builtin, trigger)
    if match is None:
        return Extraction(None, text)
    logger.debug(
        f"Matched {match.text!r} -> {match.value} "
        f"({'user config' if has_user_config else 'language pack'})"
    )
    return Extraction(match, remove_span(text, match.start, match.end))


def resolve_status(
    text: str,
    pack: LanguagePack,
    configs: Sequence[StatusConfig] = (),
    trigger: Optional[str] = None,
) -> Extraction:
    return _resolve(text, pack.status_keywords, configs, trigger)


def resolve_priority(
    text: str,
    pack: LanguagePack,
    configs: Sequence[PriorityConfig] = (),
    trigger: Optional[str] = None,
) -> Extraction:
    return _resolve(text, pack.priority_keywords, configs, trigger, word_bounded=True)
