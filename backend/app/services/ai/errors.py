"""Exception types raised along the flow call chain."""
from __future__ import annotations


class LLMProviderError(RuntimeError):
    """Raised by the model client; the message starts with a canonical status code."""


class FlowGenerationError(RuntimeError):
    """The model answered without usable structured output."""


class AIFlowError(RuntimeError):
    """User-facing error produced by the error normalizer."""
