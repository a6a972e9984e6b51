import logging
from enum import Enum
from typing import Optional

logger = logging.getLogger(__name__)


class ErrorType(Enum):
    UNSUPPORTED_LANGUAGE = "unsupported_language"
    INPUT_TRUNCATED = "input_truncated"
    INVALID_INPUT_TYPE = "invalid_input_type"
    STAGE_FAILURE = "stage_failure"
    RESOLVER_FAILURE = "resolver_failure"
    INVALID_RECURRENCE = "invalid_recurrence"


_LEVELS = {
    ErrorType.UNSUPPORTED_LANGUAGE: logging.INFO,
    ErrorType.INPUT_TRUNCATED: logging.WARNING,
    ErrorType.INVALID_INPUT_TYPE: logging.WARNING,
    ErrorType.STAGE_FAILURE: logging.ERROR,
    ErrorType.RESOLVER_FAILURE: logging.WARNING,
    ErrorType.INVALID_RECURRENCE: logging.DEBUG,
}


def report_parse_issue(error_type: ErrorType, context: Optional[str] = None, exc: Optional[BaseException] = None):
    """Log a recoverable parse problem. Parsing always continues afterwards."""
    message = _get_issue_message(error_type, context)
    logger.log(
        _LEVELS.get(error_type, logging.WARNING),
        message,
        exc_info=exc if exc is not None and error_type is ErrorType.STAGE_FAILURE else None,
    )
    return message


def _get_issue_message(error_type: ErrorType, context: Optional[str] = None) -> str:
    messages = {
        ErrorType.UNSUPPORTED_LANGUAGE: "Unsupported language code {}; falling back to English.",
        ErrorType.INPUT_TRUNCATED: "Input longer than {} characters was truncated.",
        ErrorType.INVALID_INPUT_TYPE: "Expected text input, got {}; treating it as empty.",
        ErrorType.STAGE_FAILURE: "Parse stage {} failed; its text was left unchanged.",
        ErrorType.RESOLVER_FAILURE: "Date resolver failed on {}; no date extracted.",
        ErrorType.INVALID_RECURRENCE: "Discarded invalid recurrence rule {}.",
    }
    template = messages.get(error_type, "Parse issue: {}")
    return template.format(context if context is not None else "(no context)")
