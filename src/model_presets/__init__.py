"""Model preset resolution for first-party and OCA authentication."""

from model_presets.presets import (
    AuthMode,
    ModelPreset,
    ReasoningEffort,
    ReasoningEffortPreset,
    resolve_async,
    resolve_blocking,
)

__all__ = [
    "AuthMode",
    "ModelPreset",
    "ReasoningEffort",
    "ReasoningEffortPreset",
    "resolve_async",
    "resolve_blocking",
]
