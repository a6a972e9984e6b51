import re
from datetime import date
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


PLACEHOLDER_TITLE = "Untitled Task"


class StatusConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    value: str
    label: str
    color: Optional[str] = None
    is_completed: bool = False
    order: int = 0


class PriorityConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    value: str
    label: str
    color: Optional[str] = None
    weight: int = 0


class ParsedTaskData(BaseModel):
    title: str = Field(min_length=1)
    details: Optional[str] = None
    priority: Optional[str] = None
    status: Optional[str] = None
    due_date: Optional[date] = None
    due_time: Optional[str] = None
    scheduled_date: Optional[date] = None
    scheduled_time: Optional[str] = None
    estimate_minutes: Optional[int] = Field(default=None, ge=0)
    recurrence_rule: Optional[str] = None
    tags: List[str] = []
    contexts: List[str] = []
    projects: List[str] = []
    is_completed: bool = False

    @field_validator("title")
    def validate_title(cls, v):
        if not v.strip():
            raise ValueError("title must not be blank")
        return v

    @field_validator("due_time", "scheduled_time")
    def validate_time(cls, v):
        if v is None:
            return v
        if not re.fullmatch(r"([01]\d|2[0-3]):[0-5]\d", v):
            raise ValueError("invalid time")
        return v

    @field_validator("recurrence_rule")
    def validate_recurrence_rule(cls, v):
        if v is None:
            return v
        if not v.startswith("FREQ="):
            raise ValueError("recurrence rule must start with FREQ=")
        return v
