from __future__ import annotations

import pytest

from app.services.ai.error_handler import (
    CONFIGURATION_MESSAGE,
    NETWORK_MESSAGE,
    QUOTA_MESSAGE,
    RATE_LIMIT_MESSAGE,
    execute_ai_flow,
    handle_ai_error,
)
from app.services.ai.errors import AIFlowError


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("FAILED_PRECONDITION: Please pass in the API key", CONFIGURATION_MESSAGE),
        ("QUOTA_EXCEEDED: monthly limit reached", QUOTA_MESSAGE),
        ("RATE_LIMIT_EXCEEDED: slow down", RATE_LIMIT_MESSAGE),
        ("NETWORK_ERROR: request timeout", NETWORK_MESSAGE),
        ("Connection reset by peer", NETWORK_MESSAGE),
        ("socket timeout after 30s", NETWORK_MESSAGE),
    ],
)
def test_known_markers_map_to_fixed_messages(raw, expected) -> None:
    assert str(handle_ai_error(RuntimeError(raw), "goal suggestions")) == expected


def test_first_matching_rule_wins() -> None:
    error = RuntimeError("QUOTA_EXCEEDED for model gpt-4o, Connection closed")

    assert str(handle_ai_error(error, "goal suggestions")) == QUOTA_MESSAGE


def test_model_errors_mention_context() -> None:
    error = RuntimeError("The requested model was not found")

    message = str(handle_ai_error(error, "critical steps analysis"))

    assert message == (
        "The AI model encountered an issue while generating critical steps analysis. "
        "Please try again with different input."
    )


def test_other_errors_keep_original_message() -> None:
    message = str(handle_ai_error(ValueError("Resume text is empty"), "travel suggestion"))

    assert message == "Failed to generate travel suggestion: Resume text is empty"


def test_non_exception_values_get_generic_message() -> None:
    message = str(handle_ai_error("oops", "monthly plan suggestions"))

    assert message == "Failed to generate monthly plan suggestions. Please try again."


def test_execute_ai_flow_passes_through_results() -> None:
    assert execute_ai_flow(lambda: {"steps": []}, "critical steps analysis") == {"steps": []}


def test_execute_ai_flow_normalizes_and_chains() -> None:
    def failing():
        raise RuntimeError("RATE_LIMIT_EXCEEDED: too many requests")

    with pytest.raises(AIFlowError) as excinfo:
        execute_ai_flow(failing, "goal suggestions")

    assert str(excinfo.value) == RATE_LIMIT_MESSAGE
    assert isinstance(excinfo.value.__cause__, RuntimeError)
