"""Suggestions for the next monthly action plans."""
from __future__ import annotations

from datetime import date
from typing import Any, Dict, List

from pydantic import Field

from app.services.ai.base import Flow, FlowModel, to_json


class GenerateMonthlyPlanSuggestionsInput(FlowModel):
    context: Dict[str, Any] = Field(..., description="The complete AppData document for the user's dashboard.")


class SuggestedMonthlyPlan(FlowModel):
    month: str = Field(..., description='The month and year for the plan, e.g., "September 2025".')
    theme: str = Field(..., description="A brief, inspiring theme for the month.")
    tasks: List[str] = Field(
        ..., description="A list of 2-3 actionable tasks for the month that align with the theme and user goals."
    )


class GenerateMonthlyPlanSuggestionsOutput(FlowModel):
    suggestions: List[SuggestedMonthlyPlan] = Field(..., description="A list of 2-3 new monthly plan suggestions.")


def _build_prompt(payload: GenerateMonthlyPlanSuggestionsInput) -> str:
    current_date = date.today().strftime("%a %b %d %Y")
    return (
        "You are a productivity coach AI. Your task is to suggest a new, relevant monthly action plan for the "
        "user based on their overall dashboard data.\n\n"
        f"The current date is {current_date}.\n\n"
        "Analyze the user's data, focusing on their goals, job search, and financial situation. Identify the "
        "next logical upcoming month that is not already in their plan.\n\n"
        "Based on your analysis, generate 2-3 suggestions for a new monthly plan. Each plan should be for a "
        "future month not already present in the user's `monthlyPlan` data. Each plan must include:\n"
        "1. A month and year (e.g., \"September 2025\").\n"
        "2. An inspiring theme for that month.\n"
        "3. A list of 2-3 specific, actionable tasks that help the user make progress on their main goals.\n\n"
        "**User's Data Context:**\n"
        f"```json\n{to_json(payload.context)}\n```"
    )


generate_monthly_plan_suggestions = Flow(
    name="generate_monthly_plan_suggestions",
    input_model=GenerateMonthlyPlanSuggestionsInput,
    output_model=GenerateMonthlyPlanSuggestionsOutput,
    build_prompt=_build_prompt,
    failure_message="The AI model failed to generate valid plan suggestions. This may be a temporary issue.",
    error_context="monthly plan suggestions",
)
