"""Preset domain types, catalogs and resolution."""

from model_presets.presets.auth import AuthMode, requires_remote_catalog
from model_presets.presets.models import (
    ModelPreset,
    ReasoningEffort,
    ReasoningEffortPreset,
    default_preset,
    find_preset,
)
from model_presets.presets.service import resolve_async, resolve_blocking, resolve_from_settings

__all__ = [
    "AuthMode",
    "ModelPreset",
    "ReasoningEffort",
    "ReasoningEffortPreset",
    "default_preset",
    "find_preset",
    "requires_remote_catalog",
    "resolve_async",
    "resolve_blocking",
    "resolve_from_settings",
]
