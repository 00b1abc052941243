"""Daily task suggestions that move the user's larger goals forward."""
from __future__ import annotations

from datetime import date
from typing import Any, Dict, List, Literal, Optional

from pydantic import Field

from app.services.ai.base import Flow, FlowModel, to_json


class GenerateTaskSuggestionsInput(FlowModel):
    context: Dict[str, Any] = Field(..., description="The complete AppData document for the user's dashboard.")


class SuggestedTask(FlowModel):
    title: str = Field(..., description="A clear, actionable title for the suggested task.")
    description: Optional[str] = Field(default=None, description="Why this task is important today.")
    category: Literal["Work", "Personal", "Errands"] = Field(..., description="The category for the task.")
    priority: Literal["Low", "Medium", "High"] = Field(..., description="The suggested priority for the task.")


class GenerateTaskSuggestionsOutput(FlowModel):
    suggestions: List[SuggestedTask] = Field(..., description="A list of 3-5 personalized daily task suggestions.")


def _build_prompt(payload: GenerateTaskSuggestionsInput) -> str:
    current_date = date.today().strftime("%a %b %d %Y")
    return (
        "You are a productivity coach AI. Your task is to suggest 3-5 specific, actionable daily tasks for the "
        "user based on their overall dashboard data. The goal is to help them make progress on their larger goals.\n\n"
        f"The current date is {current_date}. The tasks you suggest should be for today.\n\n"
        "Analyze the user's data, focusing on:\n"
        "- **Active Goals:** Look at the next uncompleted step for each active goal. If a step is large (e.g., "
        "\"Apply to 10 jobs\"), break it down into a smaller daily task (e.g., \"Apply to 2-3 jobs today\" or "
        "\"Research 5 companies to apply to\").\n"
        "- **Monthly Plan:** Check the current month's plan for any outstanding tasks.\n"
        "- **Financials:** If they have a goal to build an emergency fund but haven't started, suggest a task "
        "like \"Research and open a high-yield savings account\".\n"
        "- **Existing Daily Tasks:** Avoid suggesting tasks that are already on their to-do list for today.\n\n"
        "Based on your analysis, generate 3-5 highly relevant daily tasks. For each task, provide a clear title, "
        "a brief description of its relevance, a suitable category ('Work', 'Personal', or 'Errands'), and a "
        "priority ('Low', 'Medium', 'High').\n\n"
        "**User's Data Context:**\n"
        f"```json\n{to_json(payload.context)}\n```"
    )


generate_task_suggestions = Flow(
    name="generate_task_suggestions",
    input_model=GenerateTaskSuggestionsInput,
    output_model=GenerateTaskSuggestionsOutput,
    build_prompt=_build_prompt,
    failure_message="The AI model failed to generate valid task suggestions. This may be a temporary issue.",
)
