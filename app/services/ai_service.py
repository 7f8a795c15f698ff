"""AI provider service (Gemini + Ollama) returning validated pydantic models."""

from __future__ import annotations

import json
import logging
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from app.core.config import settings

logger = logging.getLogger(__name__)

SUPPORTED_PROVIDERS = {"gemini", "ollama"}

ModelT = TypeVar("ModelT", bound=BaseModel)


class AIServiceError(Exception):
    """Raised when structured generation fails."""


def generate_structured(
    task: str,
    payload: dict[str, Any],
    response_model: type[ModelT],
    provider: str | None = None,
) -> ModelT:
    """Ask the configured provider for JSON shaped like ``response_model``.

    One attempt only. Transport errors, timeouts, bodies of the wrong shape
    and output that does not validate all surface as ``AIServiceError``.
    """
    provider_name = (provider or settings.ai_provider).strip().lower()
    if provider_name not in SUPPORTED_PROVIDERS:
        raise AIServiceError(f"Unsupported provider '{provider_name}'. Use 'gemini' or 'ollama'.")

    prompt = _build_prompt(task, payload, response_model)
    raw = _call_provider(provider_name, prompt, response_model)
    if isinstance(raw, response_model):
        return raw

    try:
        if isinstance(raw, dict):
            return response_model.model_validate(raw)
        if isinstance(raw, str):
            return response_model.model_validate_json(_unfence(raw))
    except ValidationError as exc:
        raise AIServiceError(
            f"{provider_name} output does not match {response_model.__name__}: "
            f"{exc.error_count()} error(s), first: {exc.errors()[0]['msg']}"
        ) from exc
    raise AIServiceError(f"{provider_name} returned {type(raw).__name__} instead of JSON text")


def _call_provider(provider: str, prompt: str, response_model: type[BaseModel]) -> Any:
    if provider == "gemini":
        return _call_gemini(prompt, response_model)
    return _call_ollama(prompt, response_model)


def _call_gemini(prompt: str, response_model: type[BaseModel]) -> Any:
    if not settings.gemini_api_key:
        raise AIServiceError("GEMINI_API_KEY is not configured")

    try:
        from google import genai
        from google.genai import types
    except ImportError as exc:
        raise AIServiceError("Gemini SDK is not installed. Add 'google-genai' to dependencies.") from exc

    try:
        client = genai.Client(
            api_key=settings.gemini_api_key,
            http_options=types.HttpOptions(timeout=int(settings.ai_timeout_seconds * 1000)),
        )
        # The SDK accepts the pydantic class as the schema and parses into it.
        response = client.models.generate_content(
            model=settings.gemini_model,
            contents=prompt,
            config=types.GenerateContentConfig(
                response_mime_type="application/json",
                response_schema=response_model,
            ),
        )
    except Exception as exc:  # noqa: BLE001 - SDK raises transport and API errors of many types
        raise AIServiceError(f"Gemini request failed: {exc}") from exc

    parsed = getattr(response, "parsed", None)
    if parsed is not None:
        return parsed
    if not getattr(response, "text", None):
        raise AIServiceError("Gemini returned an empty response")
    return response.text


def _call_ollama(prompt: str, response_model: type[BaseModel]) -> Any:
    url = settings.ollama_base_url.rstrip("/") + "/api/generate"
    body = {
        "model": settings.ollama_model,
        "prompt": prompt,
        "stream": False,
        "format": response_model.model_json_schema(),
    }

    try:
        response = httpx.post(url, json=body, timeout=settings.ai_timeout_seconds)
        response.raise_for_status()
        data = response.json()
    except httpx.HTTPError as exc:
        raise AIServiceError(f"Ollama request failed: {exc}") from exc
    except ValueError as exc:
        raise AIServiceError("Ollama returned a non-JSON body") from exc

    if not isinstance(data, dict):
        raise AIServiceError(f"Ollama returned a {type(data).__name__} body, expected an object")
    if "response" not in data:
        raise AIServiceError("Ollama response missing 'response' field")
    return data["response"]


def _unfence(text: str) -> str:
    """Drop a surrounding ```json ... ``` block if the model added one."""
    body = text.strip()
    if body.startswith("```") and body.endswith("```"):
        body = body[3:-3]
        first_line, _, rest = body.partition("\n")
        body = rest if first_line.strip().isalpha() or not first_line.strip() else body
    return body.strip()


def _build_prompt(task: str, payload: dict[str, Any], response_model: type[BaseModel]) -> str:
    return (
        "You are a career guidance assistant for students exploring their first career steps. "
        "Answer with a single JSON object and nothing else.\n\n"
        f"Task:\n{task}\n\n"
        f"User profile:\n{json.dumps(payload, ensure_ascii=True)}\n\n"
        f"Answer schema:\n{json.dumps(response_model.model_json_schema(), ensure_ascii=True)}"
    )
