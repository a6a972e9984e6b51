import logging
import re
from functools import lru_cache
from typing import Dict, List, Optional

from task_nlp.services.extraction import Extraction
from task_nlp.services.trigger_config import TriggerConfig
from task_nlp.utils.text import TOKEN_START, cleanup_whitespace

logger = logging.getLogger(__name__)

# A marker token has to end at whitespace, closing punctuation or the end of text.
MARKER_END = r"(?=[\s,.;:!?)\]]|$)"

CLASSIFICATION_FIELDS = ("tags", "contexts", "projects")


@lru_cache(maxsize=64)
def _marker_regex(trigger: str, body: str) -> re.Pattern:
    return re.compile(rf"{TOKEN_START}{re.escape(trigger)}(?P<value>{body}){MARKER_END}")


def _collect(pattern: re.Pattern, text: str, found: List[str]) -> str:
    def take(match):
        found.append(match.group("value"))
        return " "

    return pattern.sub(take, text)


def extract_classifications(text: str, triggers: Optional[TriggerConfig] = None) -> Extraction:
    """Pull ``#tag``, ``@context`` and ``+project`` markers out of ``text``.

    A marker only counts at the start of a word, so ``email@example.com``
    and ``C#`` stay in the title. Projects may also be written as a
    wikilink, ``+[[Some Note]]``, which is kept verbatim including the
    brackets. Running the extractor again on its own output finds nothing.
    """
    triggers = triggers or TriggerConfig()
    values: Dict[str, List[str]] = {name: [] for name in CLASSIFICATION_FIELDS}

    tag_trigger = triggers.get_trigger("tags")
    if tag_trigger:
        text = _collect(_marker_regex(tag_trigger, r"[\w/-]+"), text, values["tags"])

    context_trigger = triggers.get_trigger("contexts")
    if context_trigger:
        text = _collect(_marker_regex(context_trigger, r"\w+"), text, values["contexts"])

    project_trigger = triggers.get_trigger("projects")
    if project_trigger:
        text = _collect(_marker_regex(project_trigger, r"\[\[[^\[\]]+\]\]"), text, values["projects"])
        text = _collect(_marker_regex(project_trigger, r"[\w/-]+"), text, values["projects"])

    if not any(values.values()):
        return Extraction(None, text)

    logger.debug(
        f"Found {len(values['tags'])} tags, {len(values['contexts'])} contexts, "
        f"{len(values['projects'])} projects"
    )
    return Extraction(values, cleanup_whitespace(text))
