"""Small utility helpers used across the application package."""

from __future__ import annotations

from pathlib import Path
import os
from typing import Any

import yaml

from model_presets.core.errors import ConfigError


def load_yaml(path: str | Path) -> dict[str, Any]:
    candidate = Path(path)
    if not candidate.exists():
        return {}
    try:
        data = yaml.safe_load(candidate.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Could not parse config file {candidate}: {exc}") from exc
    return data if isinstance(data, dict) else {}


def pick_env(name: str, fallback: Any) -> Any:
    value = os.getenv(name)
    return value if value not in (None, "") else fallback
