"""Thin wrapper around the OpenAI SDK used by every flow."""
from __future__ import annotations

import logging
from typing import Optional

import openai

from app.core.config import settings
from app.services.ai.errors import LLMProviderError

logger = logging.getLogger(__name__)

MISSING_KEY_MESSAGE = (
    "FAILED_PRECONDITION: Please pass in the API key or set the OPENAI_API_KEY environment variable."
)


def get_client() -> openai.OpenAI:
    """Build a client from settings; a missing key is reported as FAILED_PRECONDITION."""
    api_key = settings.openai_api_key
    if not api_key:
        raise LLMProviderError(MISSING_KEY_MESSAGE)
    return openai.OpenAI(api_key=api_key, base_url=settings.openai_base_url)


def complete_json(
    system_prompt: Optional[str],
    user_prompt: str,
    *,
    model: Optional[str] = None,
) -> Optional[str]:
    """Run one JSON-mode chat completion and return the raw message content."""
    client = get_client()
    messages = []
    if system_prompt:
        messages.append({"role": "system", "content": system_prompt})
    messages.append({"role": "user", "content": user_prompt})

    kwargs = {}
    if settings.llm_temperature is not None:
        kwargs["temperature"] = settings.llm_temperature
    try:
        completion = client.chat.completions.create(
            model=model or settings.openai_model,
            response_format={"type": "json_object"},
            messages=messages,
            **kwargs,
        )
    except openai.OpenAIError as exc:
        raise translate_provider_error(exc) from exc

    if not completion.choices:
        return None
    return completion.choices[0].message.content


def generate_image(prompt: str, *, model: Optional[str] = None) -> Optional[str]:
    """Generate one image and return it as a base64 data URI."""
    client = get_client()
    try:
        response = client.images.generate(
            model=model or settings.openai_image_model,
            prompt=prompt,
            n=1,
            response_format="b64_json",
        )
    except openai.OpenAIError as exc:
        raise translate_provider_error(exc) from exc

    if not response.data or not response.data[0].b64_json:
        return None
    return f"data:image/png;base64,{response.data[0].b64_json}"


def translate_provider_error(exc: Exception) -> LLMProviderError:
    """Prefix SDK errors with the status codes the error normalizer looks for."""
    detail = str(exc)
    if isinstance(exc, (openai.AuthenticationError, openai.PermissionDeniedError)):
        message = f"FAILED_PRECONDITION: {detail}"
    elif isinstance(exc, openai.RateLimitError):
        if getattr(exc, "code", None) == "insufficient_quota":
            message = f"QUOTA_EXCEEDED: {detail}"
        else:
            message = f"RATE_LIMIT_EXCEEDED: {detail}"
    elif isinstance(exc, openai.APITimeoutError):
        message = f"NETWORK_ERROR: request timeout ({detail})"
    elif isinstance(exc, openai.APIConnectionError):
        message = f"NETWORK_ERROR: Connection failed ({detail})"
    elif isinstance(exc, openai.NotFoundError):
        message = f"The requested model was not found: {detail}"
    else:
        message = detail
    logger.warning("LLM provider error: %s", message)
    return LLMProviderError(message)
