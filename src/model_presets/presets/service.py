"""Preset resolution: pick the catalog source for an authentication mode."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import httpx

from model_presets.core.errors import (
    EmptyCatalogError,
    FetchError,
    MissingCredentialsError,
    RemoteResolutionError,
    UsageError,
)
from model_presets.presets import builtin
from model_presets.presets.auth import AuthMode, requires_remote_catalog
from model_presets.presets.models import ModelPreset
from model_presets.presets.registry import fetch_remote

if TYPE_CHECKING:
    from model_presets.core.settings import AppSettings

logger = logging.getLogger(__name__)


def resolve_blocking(auth_mode: AuthMode | None) -> list[ModelPreset]:
    """Return presets without network I/O.

    OCA mode needs the remote registry and raises ``UsageError``; route it
    through ``resolve_async`` instead.
    """
    if requires_remote_catalog(auth_mode):
        raise UsageError("OCA auth mode requires the async resolve_async entry point")
    logger.debug("Using built-in presets for auth mode %s", auth_mode)
    return builtin.get()


async def resolve_async(
    auth_mode: AuthMode | None,
    base_url: str | None = None,
    access_token: str | None = None,
    *,
    client: httpx.AsyncClient | None = None,
    timeout_s: float | None = None,
) -> list[ModelPreset]:
    if not requires_remote_catalog(auth_mode):
        logger.debug("Using built-in presets for auth mode %s", auth_mode)
        return builtin.get()

    missing = [
        name
        for name, value in (("base_url", base_url), ("access_token", access_token))
        if not (value or "").strip()
    ]
    if missing:
        raise MissingCredentialsError(f"OCA auth mode requires {', '.join(missing)}")

    try:
        presets = await fetch_remote(base_url, access_token, client=client, timeout_s=timeout_s)
    except FetchError as exc:
        logger.warning("Remote preset resolution failed: %s", exc)
        raise RemoteResolutionError(exc) from exc

    if not presets:
        logger.warning("Model registry at %s returned no models", base_url)
        raise EmptyCatalogError(f"Model registry at {base_url} returned no models")
    logger.info("Resolved %d presets from model registry", len(presets))
    return presets


async def resolve_from_settings(
    settings: AppSettings,
    *,
    client: httpx.AsyncClient | None = None,
) -> list[ModelPreset]:
    return await resolve_async(
        settings.auth_mode,
        settings.base_url,
        settings.access_token,
        client=client,
        timeout_s=settings.request_timeout_s,
    )
