"""One budget-friendly destination for the current month."""
from __future__ import annotations

from datetime import date
from typing import Any, Dict, Optional

from pydantic import Field

from app.services.ai.base import Flow, FlowModel, to_json


class GenerateTravelSuggestionInput(FlowModel):
    exclude: Optional[str] = Field(default=None, description="A destination not to suggest again.")
    user_data: Optional[Dict[str, Any]] = Field(default=None, description="The user's AppData for personalization.")


class GenerateTravelSuggestionOutput(FlowModel):
    destination: str = Field(..., description='The suggested destination, e.g., "Kyoto, Japan".')
    reasoning: str = Field(..., description="Why it suits this month, including budget travel tips.")


def _build_prompt(payload: GenerateTravelSuggestionInput) -> str:
    current_month = date.today().strftime("%B")
    parts = [f"You are a travel expert and budget-conscious advisor. The current month is {current_month}.\n"]
    if payload.user_data:
        parts.append(
            f"User Profile Data:\n{to_json(payload.user_data)}\n\n"
            "Based on the user's profile, suggest a budget-friendly travel destination that would be perfect for "
            "them this month. Consider:\n"
            "- Their financial situation (emergency fund, income sources, existing travel goals)\n"
            "- Their career status and availability\n"
            "- Their current life priorities and goals\n"
            "- Previous travel destinations they've visited\n"
            "- Budget-friendly options that provide great value\n"
        )
    else:
        parts.append(
            "Suggest one interesting budget-friendly travel destination that is particularly good to visit "
            "during this month.\n"
        )
    parts.append(
        "Consider factors like:\n"
        "- Weather and seasonal beauty\n"
        "- Local events or festivals\n"
        "- Cost-effectiveness and budget options\n"
        "- Unique experiences available during this time\n"
        "- Accessibility and travel convenience\n"
    )
    if payload.exclude:
        parts.append(f"Do not suggest the following destination again: {payload.exclude}.\n")
    parts.append(
        "Focus on destinations that offer great experiences without breaking the bank. Include budget travel "
        "tips in your reasoning."
    )
    return "\n".join(parts)


generate_travel_suggestion = Flow(
    name="generate_travel_suggestion",
    input_model=GenerateTravelSuggestionInput,
    output_model=GenerateTravelSuggestionOutput,
    build_prompt=_build_prompt,
    failure_message="The AI model failed to generate a travel suggestion. This may be a temporary issue.",
    error_context="travel suggestion",
)
