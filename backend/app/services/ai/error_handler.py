"""Map raw provider and flow errors to user-facing messages."""
from __future__ import annotations

from typing import Callable, TypeVar

from app.services.ai.errors import AIFlowError

T = TypeVar("T")

CONFIGURATION_MESSAGE = (
    "Please configure your OpenAI API key in the .env file. "
    "Get your key from https://platform.openai.com/api-keys and add it as OPENAI_API_KEY."
)
QUOTA_MESSAGE = (
    "You have exceeded your OpenAI API quota. Please check your usage at "
    "https://platform.openai.com/usage and try again later."
)
RATE_LIMIT_MESSAGE = "Too many requests to the OpenAI API. Please wait a moment and try again."
NETWORK_MESSAGE = (
    "Network error occurred while contacting the OpenAI API. "
    "Please check your internet connection and try again."
)
NETWORK_MARKERS = ("NETWORK_ERROR", "Connection", "timeout")


def handle_ai_error(error: object, context: str) -> AIFlowError:
    """
    Return a user-friendly error for anything raised by a flow.

    Matching is by substring of the error message and the first rule that
    matches wins, so a quota error mentioning the model still reads as quota.
    """
    if not isinstance(error, BaseException):
        return AIFlowError(f"Failed to generate {context}. Please try again.")

    message = str(error)
    if "FAILED_PRECONDITION" in message:
        return AIFlowError(CONFIGURATION_MESSAGE)
    if "QUOTA_EXCEEDED" in message:
        return AIFlowError(QUOTA_MESSAGE)
    if "RATE_LIMIT_EXCEEDED" in message:
        return AIFlowError(RATE_LIMIT_MESSAGE)
    if any(marker in message for marker in NETWORK_MARKERS):
        return AIFlowError(NETWORK_MESSAGE)
    if "model" in message:
        return AIFlowError(
            f"The AI model encountered an issue while generating {context}. "
            "Please try again with different input."
        )
    return AIFlowError(f"Failed to generate {context}: {message}")


def execute_ai_flow(operation: Callable[[], T], context: str) -> T:
    """Run ``operation`` and re-raise any failure as a normalized AIFlowError."""
    try:
        return operation()
    except Exception as exc:
        raise handle_ai_error(exc, context) from exc
