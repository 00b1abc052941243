"""Next-step suggestions for one existing goal."""
from __future__ import annotations

from datetime import date
from typing import Any, Dict, List, Literal

from pydantic import Field

from app.services.ai.base import Flow, FlowModel, to_json


class GenerateGoalStepSuggestionsInput(FlowModel):
    goal: Dict[str, Any] = Field(..., description="The goal object for which to generate step suggestions.")
    context: Dict[str, Any] = Field(..., description="The complete AppData document for personalization.")


class SuggestedStep(FlowModel):
    text: str = Field(..., description="A clear, actionable step towards achieving the goal.")
    priority: Literal["Low", "Medium", "High"] = Field(..., description="The suggested priority for this step.")
    reasoning: str = Field(..., description="Why this step is important for achieving the goal.")


class GenerateGoalStepSuggestionsOutput(FlowModel):
    suggestions: List[SuggestedStep] = Field(
        ..., description="A list of 3-5 personalized actionable step suggestions for the goal."
    )


def _build_prompt(payload: GenerateGoalStepSuggestionsInput) -> str:
    return (
        "You are an AI life coach helping users break down their goals into actionable steps.\n\n"
        f"Current Date: {date.today().isoformat()}\n\n"
        f"User's Goal Details:\n{to_json(payload.goal)}\n\n"
        f"User's Complete Profile and Data:\n{to_json(payload.context)}\n\n"
        "Based on the user's goal, existing progress, and their overall life context, generate 3-5 specific, "
        "actionable steps they can take to move closer to achieving this goal.\n\n"
        "Guidelines:\n"
        "- Make steps specific and measurable\n"
        "- Consider the user's existing data (other goals, tasks, finances, etc.) for personalized suggestions\n"
        "- Prioritize steps based on impact and feasibility\n"
        "- Ensure steps are realistic and achievable\n"
        "- Consider the goal's deadline and current progress\n"
        "- Avoid suggesting steps that are already completed or very similar to existing steps\n"
        "- Make steps diverse (short-term and long-term, different types of actions)\n\n"
        "For each step, provide:\n"
        "1. A clear, actionable text description\n"
        "2. A priority level (Low/Medium/High)\n"
        "3. A brief reasoning for why this step is important"
    )


def _no_suggestions(_: GenerateGoalStepSuggestionsInput) -> GenerateGoalStepSuggestionsOutput:
    return GenerateGoalStepSuggestionsOutput(suggestions=[])


generate_goal_step_suggestions = Flow(
    name="generate_goal_step_suggestions",
    input_model=GenerateGoalStepSuggestionsInput,
    output_model=GenerateGoalStepSuggestionsOutput,
    build_prompt=_build_prompt,
    failure_message="The AI model failed to generate valid goal step suggestions. This may be a temporary issue.",
    error_context="goal step suggestions",
    fallback=_no_suggestions,
)
