from typing import Dict, List, Optional

from pydantic import BaseModel, Field, field_validator

from task_nlp.locales.types import DEFAULT_MARKERS, LanguagePack


class PropertyTrigger(BaseModel):
    property_id: str
    trigger: str
    enabled: bool = True

    @field_validator("trigger")
    @classmethod
    def validate_trigger(cls, v):
        if not v or any(ch.isspace() for ch in v):
            raise ValueError("trigger must be a non-empty string without whitespace")
        return v


def _default_triggers() -> List[PropertyTrigger]:
    return [
        PropertyTrigger(property_id="tags", trigger=DEFAULT_MARKERS["tags"]),
        PropertyTrigger(property_id="contexts", trigger=DEFAULT_MARKERS["contexts"]),
        PropertyTrigger(property_id="projects", trigger=DEFAULT_MARKERS["projects"]),
        PropertyTrigger(property_id="status", trigger="*"),
        PropertyTrigger(property_id="priority", trigger="!", enabled=False),
    ]


class TriggerConfig(BaseModel):
    """Which prefix character introduces each marker-style property."""

    triggers: List[PropertyTrigger] = Field(default_factory=_default_triggers)

    @classmethod
    def from_pack(cls, pack: LanguagePack) -> "TriggerConfig":
        config = cls()
        by_property = {t.property_id: t for t in config.triggers}
        for property_id, prefix in pack.marker_prefixes.items():
            if property_id in by_property:
                by_property[property_id] = by_property[property_id].model_copy(update={"trigger": prefix})
        return cls(triggers=list(by_property.values()))

    def get_trigger(self, property_id: str) -> Optional[str]:
        """Trigger string for ``property_id``, or None if it is unknown or disabled."""
        for trigger in self.triggers:
            if trigger.property_id == property_id and trigger.enabled:
                return trigger.trigger
        return None

    def get_property(self, trigger: str) -> Optional[str]:
        for config in self.enabled_triggers():
            if config.trigger == trigger:
                return config.property_id
        return None

    def enabled_triggers(self) -> List[PropertyTrigger]:
        """Enabled triggers, longest first so multi-character triggers match before single ones."""
        enabled = [t for t in self.triggers if t.enabled]
        return sorted(enabled, key=lambda t: len(t.trigger), reverse=True)

    def as_mapping(self) -> Dict[str, str]:
        return {t.property_id: t.trigger for t in self.triggers if t.enabled}
