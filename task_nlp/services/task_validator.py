import logging
import re
from datetime import date, datetime
from typing import Any, Dict, List, Optional, Tuple

from task_nlp.schemas import PLACEHOLDER_TITLE, ParsedTaskData
from task_nlp.utils.error_handler import ErrorType, report_parse_issue
from task_nlp.utils.text import cleanup_whitespace

logger = logging.getLogger(__name__)

DEFAULT_MAX_INPUT_LENGTH = 4000

TIME_FORMAT = re.compile(r"([01]\d|2[0-3]):[0-5]\d")


class TaskValidator:
    def __init__(self, max_input_length: int = DEFAULT_MAX_INPUT_LENGTH, placeholder_title: str = PLACEHOLDER_TITLE):
        self.max_input_length = max_input_length
        self.placeholder_title = placeholder_title

    def sanitize_input(self, user_input: Any) -> str:
        if user_input is None:
            return ""

        if not isinstance(user_input, str):
            report_parse_issue(ErrorType.INVALID_INPUT_TYPE, type(user_input).__name__)
            return ""

        sanitized = user_input.replace('\x00', '').strip()

        if len(sanitized) > self.max_input_length:
            report_parse_issue(ErrorType.INPUT_TRUNCATED, str(self.max_input_length))
            sanitized = sanitized[:self.max_input_length]

        return sanitized

    def split_title_and_details(self, text: str) -> Tuple[str, Optional[str]]:
        """First line is the working title; the remaining lines are kept verbatim as details."""
        first, _, rest = text.partition("\n")
        details = rest.strip()
        return first.strip(), details or None

    def finalize(self, draft: Dict[str, Any]) -> ParsedTaskData:
        task = dict(draft)

        title = cleanup_whitespace(task.get("title") or "")
        task["title"] = title or self.placeholder_title

        for name in ("tags", "contexts", "projects"):
            task[name] = self._dedupe(task.get(name) or [])

        for name in ("due", "scheduled"):
            if isinstance(task.get(f"{name}_date"), datetime):
                task[f"{name}_date"] = task[f"{name}_date"].date()
            if not isinstance(task.get(f"{name}_date"), date):
                task[f"{name}_date"] = None
                task[f"{name}_time"] = None
            elif not self._valid_time(task.get(f"{name}_time")):
                task[f"{name}_time"] = None

        estimate = task.get("estimate_minutes")
        if estimate is not None and estimate < 0:
            task["estimate_minutes"] = None

        return ParsedTaskData(**task)

    @staticmethod
    def _dedupe(values: List[str]) -> List[str]:
        seen = set()
        unique = []
        for value in values:
            if value not in seen:
                seen.add(value)
                unique.append(value)
        return unique

    @staticmethod
    def _valid_time(value) -> bool:
        return value is None or bool(TIME_FORMAT.fullmatch(value))


task_validator = TaskValidator()
