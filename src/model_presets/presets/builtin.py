"""Built-in presets for first-party authentication."""

from __future__ import annotations

from model_presets.presets.models import ModelPreset, ReasoningEffort, ReasoningEffortPreset

PRESETS: tuple[ModelPreset, ...] = (
    ModelPreset(
        id="gpt-5-codex",
        model="gpt-5-codex",
        display_name="gpt-5-codex",
        description="Optimized for coding tasks with many tools.",
        default_reasoning_effort=ReasoningEffort.MEDIUM,
        supported_reasoning_efforts=(
            ReasoningEffortPreset(
                effort=ReasoningEffort.LOW,
                description="Fastest responses with limited reasoning",
            ),
            ReasoningEffortPreset(
                effort=ReasoningEffort.MEDIUM,
                description="Dynamically adjusts reasoning based on the task",
            ),
            ReasoningEffortPreset(
                effort=ReasoningEffort.HIGH,
                description="Maximizes reasoning depth for complex or ambiguous problems",
            ),
        ),
        is_default=True,
    ),
    ModelPreset(
        id="gpt-5",
        model="gpt-5",
        display_name="gpt-5",
        description="Broad world knowledge with strong general reasoning.",
        default_reasoning_effort=ReasoningEffort.MEDIUM,
        supported_reasoning_efforts=(
            ReasoningEffortPreset(
                effort=ReasoningEffort.MINIMAL,
                description="Fastest responses with little reasoning",
            ),
            ReasoningEffortPreset(
                effort=ReasoningEffort.LOW,
                description=(
                    "Balances speed with some reasoning; useful for straightforward "
                    "queries and short explanations"
                ),
            ),
            ReasoningEffortPreset(
                effort=ReasoningEffort.MEDIUM,
                description=(
                    "Provides a solid balance of reasoning depth and latency for "
                    "general-purpose tasks"
                ),
            ),
            ReasoningEffortPreset(
                effort=ReasoningEffort.HIGH,
                description="Maximizes reasoning depth for complex or ambiguous problems",
            ),
        ),
        is_default=False,
    ),
)


def get() -> list[ModelPreset]:
    return list(PRESETS)
