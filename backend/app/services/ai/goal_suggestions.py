"""Personalized new-goal suggestions drawn from the whole dashboard."""
from __future__ import annotations

from datetime import date
from typing import Any, Dict, List, Literal

from pydantic import Field

from app.services.ai.base import Flow, FlowModel, to_json


class GenerateGoalSuggestionsInput(FlowModel):
    context: Dict[str, Any] = Field(..., description="The complete AppData document for the user's dashboard.")


class SuggestedGoal(FlowModel):
    title: str = Field(..., description="A clear, concise title for the suggested goal.")
    description: str = Field(
        ..., description="A brief, motivating description of the goal and why it is relevant to the user."
    )
    category: Literal["Health", "Career", "Personal"] = Field(..., description="The category for the goal.")
    steps: List[str] = Field(..., description="A list of 2-3 actionable initial steps to get started on this goal.")


class GenerateGoalSuggestionsOutput(FlowModel):
    suggestions: List[SuggestedGoal] = Field(..., description="A list of 3-5 personalized goal suggestions.")


def _build_prompt(payload: GenerateGoalSuggestionsInput) -> str:
    current_date = date.today().strftime("%a %b %d %Y")
    return (
        "You are an expert life and career coach AI. Your task is to provide personalized, actionable, "
        "and inspiring goal suggestions based on the user's complete dashboard data.\n\n"
        f"The current date is {current_date}.\n\n"
        "Analyze all sections of the user's data, including their existing goals, finances (loans, emergency "
        "fund, income), job applications, monthly plans, and travel goals. Identify areas for improvement, new "
        "opportunities, or next logical steps.\n\n"
        "**Analysis guide:**\n"
        "- **Goals:** Are any goals stagnant? Are there related goals that could be created?\n"
        "- **Finance:** Does the user have high-interest debt? Is their emergency fund low? Could they start "
        "investing (based on income vs. expenses)? Suggest financial goals like \"Pay off Personal Loan\" or "
        "\"Start a Monthly SIP of 2000\".\n"
        "- **Job Search:** If they are actively searching, suggest goals related to skill-building for their "
        "target roles (e.g., \"Complete a Certification in [Relevant Skill]\"). If they just got a job, suggest "
        "a goal for their first 90 days.\n"
        "- **Monthly Plan/Daily-Todo:** Are they consistently missing tasks in a certain area? This could "
        "indicate a need for a new goal to address the root cause.\n"
        "- **Travel:** If they have planned trips, suggest a goal like \"Learn Basic Phrases in [Language of "
        "Destination]\".\n\n"
        "Based on your analysis, generate 3-5 new, distinct, and highly relevant goal suggestions. Do not "
        "suggest goals they already have. For each suggestion, provide a clear title, a motivating description, "
        "a suitable category ('Health', 'Career', or 'Personal'), and 2-3 concrete initial steps to get them "
        "started.\n\n"
        "**User's Data Context:**\n"
        f"```json\n{to_json(payload.context)}\n```"
    )


generate_goal_suggestions = Flow(
    name="generate_goal_suggestions",
    input_model=GenerateGoalSuggestionsInput,
    output_model=GenerateGoalSuggestionsOutput,
    build_prompt=_build_prompt,
    failure_message="The AI model failed to generate valid goal suggestions. This may be a temporary issue.",
    error_context="goal suggestions",
)
