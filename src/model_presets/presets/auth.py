"""Authentication modes that decide where presets come from."""

from __future__ import annotations

from enum import Enum


class AuthMode(str, Enum):
    API_KEY = "api_key"
    CHATGPT = "chatgpt"
    OCA = "oca"


def requires_remote_catalog(auth_mode: AuthMode | None) -> bool:
    return auth_mode == AuthMode.OCA


def parse_auth_mode(raw: object) -> AuthMode | None:
    if raw is None or isinstance(raw, AuthMode):
        return raw
    value = str(raw).strip().lower().replace("-", "_")
    if not value:
        return None
    return AuthMode(value)
