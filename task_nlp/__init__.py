from task_nlp.locales import Language, LanguagePack, available_languages, get_pack
from task_nlp.schemas import ParsedTaskData, PriorityConfig, StatusConfig
from task_nlp.services.date_resolver import DateMatch, DateparserResolver, DateResolver, NullResolver
from task_nlp.services.preview import get_preview_data, get_preview_text
from task_nlp.services.task_parser import TaskParser, parse
from task_nlp.services.trigger_config import PropertyTrigger, TriggerConfig

__version__ = "0.1.0"

__all__ = [
    "DateMatch",
    "DateResolver",
    "DateparserResolver",
    "Language",
    "LanguagePack",
    "NullResolver",
    "ParsedTaskData",
    "PriorityConfig",
    "PropertyTrigger",
    "StatusConfig",
    "TaskParser",
    "TriggerConfig",
    "available_languages",
    "get_pack",
    "get_preview_data",
    "get_preview_text",
    "parse",
]
