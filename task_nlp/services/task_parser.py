import logging
from datetime import datetime
from functools import partial
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence, Tuple, Type, Union

from pydantic import BaseModel

from task_nlp.config.settings import Settings, get_settings
from task_nlp.locales import get_pack, is_supported
from task_nlp.schemas import PLACEHOLDER_TITLE, ParsedTaskData, PriorityConfig, StatusConfig
from task_nlp.services.classification import extract_classifications
from task_nlp.services.date_resolver import DateparserResolver, DateResolver
from task_nlp.services.datetime_processor import DateTimeProcessor
from task_nlp.services.duration import extract_duration
from task_nlp.services.precedence import resolve_priority, resolve_status
from task_nlp.services.preview import get_preview_data, get_preview_text
from task_nlp.services.recurrence import extract_recurrence
from task_nlp.services.task_validator import DEFAULT_MAX_INPUT_LENGTH, TaskValidator, task_validator
from task_nlp.services.trigger_config import TriggerConfig
from task_nlp.utils.error_handler import ErrorType, report_parse_issue
from task_nlp.utils.logger import redact_text

logger = logging.getLogger(__name__)

Stage = Callable[[str, Dict[str, Any]], str]


def _coerce_configs(configs: Optional[Iterable[Any]], model: Type[BaseModel]) -> Tuple[Any, ...]:
    if not configs:
        return ()
    return tuple(c if isinstance(c, model) else model.model_validate(c) for c in configs)


class TaskParser:
    """Turns one line of free text into a :class:`ParsedTaskData`.

    The first line of input is the working title; every stage removes what
    it recognises from it and records the value on a draft. Stages run in a
    fixed order: classification markers, recurrence, duration, priority,
    status and dates. Whatever is left becomes the title, and any lines
    after the first are kept as details.

    A parser only holds read-only configuration, so one instance can be
    shared between threads.
    """

    def __init__(
        self,
        language_code: Optional[str] = "en",
        status_configs: Sequence[Union[StatusConfig, Dict[str, Any]]] = (),
        priority_configs: Sequence[Union[PriorityConfig, Dict[str, Any]]] = (),
        auto_suggest_enabled: bool = False,
        default_to_scheduled: bool = True,
        trigger_config: Optional[TriggerConfig] = None,
        resolver: Optional[DateResolver] = None,
        placeholder_title: str = PLACEHOLDER_TITLE,
        max_input_length: int = DEFAULT_MAX_INPUT_LENGTH,
    ):
        if language_code is not None and not is_supported(language_code):
            report_parse_issue(ErrorType.UNSUPPORTED_LANGUAGE, repr(language_code))

        self.pack = get_pack(language_code)
        self.status_configs = _coerce_configs(status_configs, StatusConfig)
        self.priority_configs = _coerce_configs(priority_configs, PriorityConfig)
        self.auto_suggest_enabled = auto_suggest_enabled
        self.default_to_scheduled = default_to_scheduled
        self.trigger_config = trigger_config or TriggerConfig.from_pack(self.pack)
        self.resolver = resolver or DateparserResolver(self.pack.date_locale)
        if max_input_length == DEFAULT_MAX_INPUT_LENGTH and placeholder_title == PLACEHOLDER_TITLE:
            self.validator = task_validator
        else:
            self.validator = TaskValidator(max_input_length=max_input_length, placeholder_title=placeholder_title)
        self.datetime_processor = DateTimeProcessor(self.resolver, self.pack, default_to_scheduled)

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None, **overrides) -> "TaskParser":
        settings = settings or get_settings()
        options = {
            "language_code": settings.language,
            "auto_suggest_enabled": settings.auto_suggest_enabled,
            "default_to_scheduled": settings.default_to_scheduled,
            "placeholder_title": settings.placeholder_title,
            "max_input_length": settings.max_input_length,
        }
        options.update(overrides)
        return cls(**options)

    def parse(self, text: Any, now: Optional[datetime] = None) -> ParsedTaskData:
        now = now or datetime.now()
        sanitized = self.validator.sanitize_input(text)
        title, details = self.validator.split_title_and_details(sanitized)
        draft: Dict[str, Any] = {"details": details}

        for name, stage in self._stages(now):
            title = self._run_stage(name, stage, title, draft)

        draft["title"] = title
        result = self.validator.finalize(draft)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"Parsed {redact_text(sanitized, logger)!r} ({self.pack.code}): {result.model_dump(exclude_none=True)}")
        return result

    def get_preview_data(self, parsed: ParsedTaskData) -> List[Tuple[str, str]]:
        return get_preview_data(parsed, self.trigger_config)

    def get_preview_text(self, parsed: ParsedTaskData) -> str:
        return get_preview_text(parsed, self.trigger_config)

    def _stages(self, now: datetime) -> List[Tuple[str, Stage]]:
        return [
            ("classification", self._extract_classifications),
            ("recurrence", self._extract_recurrence),
            ("duration", self._extract_duration),
            ("priority", self._extract_priority),
            ("status", self._extract_status),
            ("dates", partial(self._extract_dates, now=now)),
        ]

    def _run_stage(self, name: str, stage: Stage, text: str, draft: Dict[str, Any]) -> str:
        if not text:
            return text
        try:
            return stage(text, draft)
        except Exception as e:
            report_parse_issue(ErrorType.STAGE_FAILURE, name, exc=e)
            return text

    def _extract_classifications(self, text: str, draft: Dict[str, Any]) -> str:
        found = extract_classifications(text, self.trigger_config)
        if found.found:
            draft.update(found.value)
        return found.remaining

    def _extract_recurrence(self, text: str, draft: Dict[str, Any]) -> str:
        found = extract_recurrence(text, self.pack)
        if found.found:
            draft["recurrence_rule"] = found.value
        return found.remaining

    def _extract_duration(self, text: str, draft: Dict[str, Any]) -> str:
        found = extract_duration(text, self.pack)
        if found.found:
            draft["estimate_minutes"] = found.value
        return found.remaining

    def _keyword_trigger(self, property_id: str) -> Optional[str]:
        if not self.auto_suggest_enabled:
            return None
        return self.trigger_config.get_trigger(property_id)

    def _extract_priority(self, text: str, draft: Dict[str, Any]) -> str:
        found = resolve_priority(text, self.pack, self.priority_configs, self._keyword_trigger("priority"))
        if found.found:
            draft["priority"] = found.value.value
        return found.remaining

    def _extract_status(self, text: str, draft: Dict[str, Any]) -> str:
        found = resolve_status(text, self.pack, self.status_configs, self._keyword_trigger("status"))
        if found.found:
            match = found.value
            draft["status"] = match.value
            if match.config is not None:
                draft["is_completed"] = match.config.is_completed
            else:
                draft["is_completed"] = match.value == "done"
        return found.remaining

    def _extract_dates(self, text: str, draft: Dict[str, Any], now: datetime) -> str:
        found = self.datetime_processor.extract(text, now)
        if found.found:
            draft.update(found.value)
        return found.remaining


def parse(
    text: Any,
    language_code: Optional[str] = "en",
    status_configs: Sequence[Union[StatusConfig, Dict[str, Any]]] = (),
    priority_configs: Sequence[Union[PriorityConfig, Dict[str, Any]]] = (),
    auto_suggest_enabled: bool = False,
    *,
    now: Optional[datetime] = None,
    resolver: Optional[DateResolver] = None,
    default_to_scheduled: bool = True,
) -> ParsedTaskData:
    """Parse ``text`` with a one-off :class:`TaskParser`; pattern tables are cached per language."""
    parser = TaskParser(
        language_code=language_code,
        status_configs=status_configs,
        priority_configs=priority_configs,
        auto_suggest_enabled=auto_suggest_enabled,
        default_to_scheduled=default_to_scheduled,
        resolver=resolver,
    )
    return parser.parse(text, now=now)
