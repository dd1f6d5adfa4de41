"""Runner facade used by the CLI."""

from __future__ import annotations

import argparse
import asyncio
import json
import sys

from model_presets.core.errors import PresetError
from model_presets.core.log import configure_logging
from model_presets.core.settings import AppSettings, load_settings
from model_presets.presets.auth import AuthMode, requires_remote_catalog
from model_presets.presets.models import ModelPreset, find_preset
from model_presets.presets.service import resolve_blocking, resolve_from_settings


def resolve_presets(settings: AppSettings) -> list[ModelPreset]:
    if requires_remote_catalog(settings.auth_mode):
        return asyncio.run(resolve_from_settings(settings))
    return resolve_blocking(settings.auth_mode)


def render_table(presets: list[ModelPreset]) -> str:
    lines = []
    for preset in presets:
        marker = "*" if preset.is_default else " "
        effort = preset.default_reasoning_effort.value if preset.default_reasoning_effort else "-"
        line = f"{marker} {preset.id:<24} {effort:<8} {preset.display_name}"
        if preset.description:
            line = f"{line}  {preset.description}"
        lines.append(line.rstrip())
    return "\n".join(lines)


def run_list(settings: AppSettings, output_format: str = "table") -> str:
    presets = resolve_presets(settings)
    if output_format == "json":
        return json.dumps([preset.to_dict() for preset in presets], indent=2, ensure_ascii=True)
    return render_table(presets)


def run_show(settings: AppSettings, preset_id: str) -> str:
    preset = find_preset(resolve_presets(settings), preset_id)
    if preset is None:
        raise PresetError(f"Unknown preset: {preset_id}")
    return json.dumps(preset.to_dict(), indent=2, ensure_ascii=True)


def _add_common_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--auth-mode",
        choices=[mode.value for mode in AuthMode],
        help="Authentication mode that selects the catalog source.",
    )
    parser.add_argument("--base-url", help="Model registry base URL for OCA mode.")
    parser.add_argument("--config", help="Path to a YAML settings file.")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="model-presets")
    sub = parser.add_subparsers(dest="command", required=True)

    list_cmd = sub.add_parser("list", help="List the presets for an auth mode.")
    _add_common_options(list_cmd)
    list_cmd.add_argument(
        "--format",
        choices=["table", "json"],
        default="table",
        help="Output format for the catalog.",
    )

    show = sub.add_parser("show", help="Show a single preset as JSON.")
    show.add_argument("preset_id", help="Preset id, e.g. gpt-5-codex.")
    _add_common_options(show)
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        bundle = load_settings(args.config, auth_mode=args.auth_mode, base_url=args.base_url)
        configure_logging(bundle.settings.log_level)
        if args.command == "list":
            print(run_list(bundle.settings, args.format))
        elif args.command == "show":
            print(run_show(bundle.settings, args.preset_id))
    except PresetError as exc:
        print(str(exc), file=sys.stderr)
        raise SystemExit(1) from exc
