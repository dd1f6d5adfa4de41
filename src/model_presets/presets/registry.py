"""Remote model registry client and schema adapter.

The registry exposes a LiteLLM-style ``/v1/model/info`` listing. Only the
fields needed to build presets are required; everything else in the payload
is ignored so that registry-side additions never break parsing.
"""

from __future__ import annotations

import logging

import httpx
from pydantic import BaseModel, ConfigDict, ValidationError

from model_presets.core.errors import HttpStatusError, MalformedResponseError, ParseError, TransportError
from model_presets.presets.models import ModelPreset

logger = logging.getLogger(__name__)

MODEL_INFO_PATH = "/v1/model/info"


class LiteLLMParams(BaseModel):
    model_config = ConfigDict(extra="ignore")

    model: str


class ModelInfoParams(BaseModel):
    model_config = ConfigDict(extra="ignore")

    description: str | None = None


class ModelInfo(BaseModel):
    model_config = ConfigDict(extra="ignore", protected_namespaces=())

    model_name: str
    litellm_params: LiteLLMParams
    model_info: ModelInfoParams | None = None


class ModelInfoResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    object: str | None = None
    data: list[ModelInfo]


def build_model_info_url(base_url: str) -> str:
    return f"{base_url.rstrip('/')}{MODEL_INFO_PATH}"


def _to_preset(record: ModelInfo, *, is_default: bool) -> ModelPreset:
    # The registry carries no reasoning-effort metadata.
    info = record.model_info
    return ModelPreset(
        id=record.litellm_params.model,
        model=record.litellm_params.model,
        display_name=record.model_name,
        description=(info.description if info else None) or "",
        default_reasoning_effort=None,
        supported_reasoning_efforts=(),
        is_default=is_default,
    )


def parse_and_map(raw: bytes | str) -> list[ModelPreset]:
    """Parse a registry body and map each record to a preset.

    The first record becomes the default preset. Raises ``ParseError`` when
    the body is not JSON or a required field is missing or mistyped.
    """
    try:
        response = ModelInfoResponse.model_validate_json(raw)
    except ValidationError as exc:
        raise ParseError(f"Malformed model registry response: {exc}") from exc
    return [_to_preset(record, is_default=index == 0) for index, record in enumerate(response.data)]


async def fetch_remote(
    base_url: str,
    access_token: str,
    *,
    client: httpx.AsyncClient | None = None,
    timeout_s: float | None = None,
) -> list[ModelPreset]:
    url = build_model_info_url(base_url)
    headers = {
        "Accept": "application/json",
        "Authorization": f"Bearer {access_token}",
    }
    logger.debug("Fetching model registry from %s", url)
    try:
        if client is None:
            client_kwargs = {"timeout": timeout_s} if timeout_s is not None else {}
            async with httpx.AsyncClient(**client_kwargs) as owned_client:
                response = await owned_client.get(url, headers=headers)
        else:
            response = await client.get(url, headers=headers)
    except httpx.HTTPError as exc:
        raise TransportError(f"Model registry request to {url} failed: {exc}") from exc

    if not response.is_success:
        raise HttpStatusError(response.status_code)

    try:
        presets = parse_and_map(response.content)
    except ParseError as exc:
        raise MalformedResponseError(str(exc)) from exc
    logger.debug("Model registry at %s returned %d models", url, len(presets))
    return presets
