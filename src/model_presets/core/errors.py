"""Custom exceptions for model preset resolution."""

from __future__ import annotations


class PresetError(Exception):
    """Base exception for application-level errors."""


class ConfigError(PresetError):
    """Raised when configuration cannot be loaded or validated."""


class UsageError(PresetError):
    """Raised when an entry point is called in a mode it cannot serve."""


class ParseError(PresetError):
    """Raised when a registry body does not match the expected schema."""


class FetchError(PresetError):
    """Base for failures while fetching the remote registry."""


class HttpStatusError(FetchError):
    def __init__(self, status_code: int) -> None:
        super().__init__(f"Model registry request failed with status: {status_code}")
        self.status_code = status_code


class MalformedResponseError(FetchError):
    """Raised when the registry answered but the body could not be mapped."""


class TransportError(FetchError):
    """Raised when the request never produced a response."""


class ResolutionError(PresetError):
    """Caller-facing failure of the asynchronous resolution path."""


class MissingCredentialsError(ResolutionError):
    """Raised when remote resolution lacks a base URL or access token."""


class RemoteResolutionError(ResolutionError):
    def __init__(self, cause: FetchError) -> None:
        super().__init__(str(cause))
        self.cause = cause


class EmptyCatalogError(ResolutionError):
    """Raised when the remote registry lists no models."""
