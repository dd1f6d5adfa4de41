"""CLI entrypoint for model_presets."""

from __future__ import annotations

from model_presets.runtime.runner import main

if __name__ == "__main__":
    main()
