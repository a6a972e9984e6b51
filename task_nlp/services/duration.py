import logging
import re
from functools import lru_cache
from typing import NamedTuple

from task_nlp.locales.types import LanguagePack
from task_nlp.services.extraction import Extraction
from task_nlp.utils.text import WORD_START, alternation, remove_span

logger = logging.getLogger(__name__)

# A digit, decimal point or comma before the number means it is part of a larger number ("1.5 hours").
NUMBER_START = r"(?<![\d.,])"


class DurationPatterns(NamedTuple):
    phrase: re.Pattern
    pair: re.Pattern


@lru_cache(maxsize=32)
def duration_patterns(pack: LanguagePack) -> DurationPatterns:
    units = alternation(pack.duration_units)
    # Units may be glued to the next number ("1h30m"), so only a following letter ends the match early.
    unit_end = "" if pack.compact_script else r"(?![^\W\d_])"
    pair = rf"{NUMBER_START}\d+\s*(?:{units}){unit_end}"
    return DurationPatterns(
        phrase=re.compile(rf"{WORD_START}{pair}(?:\s*{pair})*", re.IGNORECASE),
        pair=re.compile(rf"{NUMBER_START}(\d+)\s*({units}){unit_end}", re.IGNORECASE),
    )


def extract_duration(text: str, pack: LanguagePack) -> Extraction:
    """Find the first duration phrase and return its total in minutes.

    A phrase is one or more adjacent ``<number> <unit>`` pairs, so
    "2 hours 30 minutes" and "1h30m" both yield 150. An explicit zero
    ("0 minutes") is a found value of 0, not a miss.
    """
    patterns = duration_patterns(pack)
    match = patterns.phrase.search(text)
    if not match:
        return Extraction(None, text)

    total = 0
    for amount, unit in patterns.pair.findall(match.group(0)):
        total += int(amount) * pack.duration_units.get(unit.lower(), 1)

    logger.debug(f"Duration phrase {match.group(0)!r} -> {total} minutes")
    return Extraction(total, remove_span(text, match.start(), match.end()))
