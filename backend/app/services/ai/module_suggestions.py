"""Contextual suggestions for a single dashboard module."""
from __future__ import annotations

from datetime import date
from typing import Any, List, Literal, Optional

from pydantic import Field

from app.core.config import settings
from app.services.ai.base import Flow, FlowModel, to_json

DashboardModule = Literal[
    "DashboardOverview",
    "MonthlyPlan",
    "CarSale",
    "Finance",
    "JobSearch",
    "Travel",
    "DailyTodo",
]


class ModuleSuggestionInput(FlowModel):
    module: DashboardModule
    context: Any = Field(..., description="The data for the specified module.")
    user_query: Optional[str] = Field(default=None, description="An optional specific question from the user.")
    focused_month: Optional[str] = Field(
        default=None,
        description='The month (e.g., "July 2025") to generate tasks for within the MonthlyPlan module.',
    )


class ModuleSuggestionOutput(FlowModel):
    suggestions: List[str] = Field(..., description="A list of 3-5 concise, actionable suggestions.")


def _module_instructions(payload: ModuleSuggestionInput) -> str:
    module = payload.module
    if module == "DashboardOverview":
        return (
            "Analyze the user's entire action plan (provided in the JSON context). Look at goals, tasks, and "
            "finances. Provide 3-5 high-level, encouraging suggestions. For example, identify a goal that's falling "
            "behind and suggest a relevant task, or congratulate them on their financial progress and suggest the "
            "next step."
        )
    if module == "MonthlyPlan":
        if payload.focused_month:
            return (
                "Analyze the user's overall goals and data from the provided context. Based on this, suggest 3-5 "
                "new, relevant, and actionable tasks specifically for the month of "
                f"**{payload.focused_month}**. These tasks should help the user make progress on their broader "
                "goals (e.g., financial, career). Do not suggest tasks that are already in the plan for this month."
            )
        return (
            "Analyze the provided monthly plan data. Focus on the current and next month. Identify potential gaps "
            "or suggest new, relevant tasks that align with their overall goals. Do not repeat existing tasks. The "
            "context data will be an array of months with tasks."
        )
    if module == "CarSale":
        return (
            "Analyze the car sale financials. The user is selling a car for the specified sale price and has a "
            "loan payoff amount. Calculate the net cash. Provide advice on whether this is a good deal and suggest "
            "negotiation points or next steps. If the user provides a specific query, address it."
        )
    if module == "Finance":
        return (
            "Analyze the user's loans and emergency fund. The target emergency fund is "
            f"{settings.emergency_fund_target_default}. Suggest strategies to pay down loans (e.g., avalanche or "
            "snowball method) and realistic steps to build their emergency fund. The context data contains loans "
            "and the current fund amount."
        )
    if module == "JobSearch":
        return (
            "Review the user's job applications. Suggest networking strategies, how to follow up on applications, "
            "or ways to improve their profile based on the roles they are applying for. The context data is a list "
            "of their applications."
        )
    if module == "Travel":
        return (
            "Look at their planned and completed travel goals. For planned trips, suggest 1-2 interesting "
            "activities. For completed trips, suggest a similar destination they might enjoy next. The context "
            "data is a list of travel goals."
        )
    return (
        "Analyze the user's to-do list provided in the context. Identify overdue tasks and suggest prioritizing "
        "them. Look for days with a heavy workload and suggest balancing tasks across different days. If tasks "
        "seem large or vague (e.g., \"Work on project\"), suggest breaking them down into smaller, more concrete "
        "steps. Provide 3-5 encouraging and actionable tips to improve their daily productivity."
    )


def _build_prompt(payload: ModuleSuggestionInput) -> str:
    current_date = date.today().strftime("%a %b %d %Y")
    query_block = f"**User's Specific Question:**\n{payload.user_query}\n\n" if payload.user_query else ""
    return (
        "You are an expert life and career coach AI. Your task is to provide concise, actionable suggestions "
        "based on the user's data for a specific module of their personal dashboard.\n\n"
        f"The user is asking for suggestions for the '{payload.module}' module. The current date is {current_date}.\n\n"
        f"**Instructions for the '{payload.module}' module:**\n"
        f"{_module_instructions(payload)}\n\n"
        "**User's Data Context:**\n"
        f"```json\n{to_json(payload.context)}\n```\n\n"
        f"{query_block}"
        "Based on these instructions and data, provide 3-5 tailored, insightful, and encouraging suggestions."
    )


generate_module_suggestions = Flow(
    name="generate_module_suggestions",
    input_model=ModuleSuggestionInput,
    output_model=ModuleSuggestionOutput,
    build_prompt=_build_prompt,
    failure_message="The AI model failed to generate valid suggestions. This may be a temporary issue.",
)
