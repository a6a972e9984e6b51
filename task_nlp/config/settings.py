import logging

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from task_nlp.schemas import PLACEHOLDER_TITLE


class Settings(BaseSettings):
    language: str = "en"
    default_to_scheduled: bool = True
    auto_suggest_enabled: bool = False
    placeholder_title: str = PLACEHOLDER_TITLE
    max_input_length: int = 4000
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix='TASK_NLP_',
        env_file='.env',
        case_sensitive=False,
        extra='ignore'
    )

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v):
        if not isinstance(logging.getLevelName(v.upper()), int):
            raise ValueError(f'TASK_NLP_LOG_LEVEL must be a logging level name, got {v!r}')
        return v.upper()

    @field_validator('max_input_length')
    @classmethod
    def validate_max_input_length(cls, v):
        if v <= 0:
            raise ValueError('TASK_NLP_MAX_INPUT_LENGTH must be positive')
        return v

    @field_validator('placeholder_title')
    @classmethod
    def validate_placeholder_title(cls, v):
        if not v or not v.strip():
            raise ValueError('TASK_NLP_PLACEHOLDER_TITLE must not be blank')
        return v.strip()


def get_settings() -> Settings:
    return Settings()
