import re
from typing import Iterable

WORD_START = r"(?<!\w)"
WORD_END = r"(?!\w)"
TOKEN_START = r"(?<!\S)"
TOKEN_END = r"(?!\S)"


def normalize_phrase(text: str) -> str:
    return " ".join(text.lower().split())


def phrase_pattern(phrase: str) -> str:
    """Escape a vocabulary phrase, letting any run of whitespace separate its words."""
    return r"\s+".join(re.escape(part) for part in phrase.split())


def alternation(words: Iterable[str]) -> str:
    """Regex alternation of ``words``, longest first so longer phrases win at the same position."""
    unique = {normalize_phrase(w): w for w in words if w and w.strip()}
    ordered = sorted(unique.values(), key=lambda w: (-len(w), w.lower()))
    return "|".join(phrase_pattern(w) for w in ordered)


def keyword_regex(words: Iterable[str]) -> re.Pattern:
    return re.compile(rf"{WORD_START}({alternation(words)}){WORD_END}", re.IGNORECASE)


def cleanup_whitespace(text: str) -> str:
    return " ".join(text.split())


def remove_span(text: str, start: int, end: int) -> str:
    return cleanup_whitespace(f"{text[:start]} {text[end:]}")
