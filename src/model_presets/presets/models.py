"""Model preset domain types."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable


class ReasoningEffort(str, Enum):
    MINIMAL = "minimal"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


@dataclass(frozen=True)
class ReasoningEffortPreset:
    """A reasoning effort option that can be surfaced for a model."""

    effort: ReasoningEffort
    description: str


@dataclass(frozen=True)
class ModelPreset:
    """A selectable model configuration shown to end users."""

    id: str
    model: str
    display_name: str
    description: str
    default_reasoning_effort: ReasoningEffort | None = None
    supported_reasoning_efforts: tuple[ReasoningEffortPreset, ...] = ()
    is_default: bool = False

    def supports(self, effort: ReasoningEffort) -> bool:
        return any(option.effort == effort for option in self.supported_reasoning_efforts)

    def to_dict(self) -> dict[str, Any]:
        default_effort = self.default_reasoning_effort
        return {
            "id": self.id,
            "model": self.model,
            "display_name": self.display_name,
            "description": self.description,
            "default_reasoning_effort": default_effort.value if default_effort else None,
            "supported_reasoning_efforts": [
                {"effort": option.effort.value, "description": option.description}
                for option in self.supported_reasoning_efforts
            ],
            "is_default": self.is_default,
        }


def default_preset(presets: Iterable[ModelPreset]) -> ModelPreset | None:
    return next((preset for preset in presets if preset.is_default), None)


def find_preset(presets: Iterable[ModelPreset], preset_id: str) -> ModelPreset | None:
    return next((preset for preset in presets if preset.id == preset_id), None)
