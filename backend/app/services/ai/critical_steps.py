"""The three most critical next steps across goals, plans, career and finances."""
from __future__ import annotations

from datetime import date
from typing import Any, Dict, List, Literal

from pydantic import Field

from app.services.ai.base import Flow, FlowModel, to_json

CRITICAL_STEP_COUNT = 3


class GenerateCriticalStepsInput(FlowModel):
    context: Dict[str, Any] = Field(..., description="The complete AppData document for analysis.")


class CriticalStep(FlowModel):
    text: str = Field(..., description="A clear, actionable critical step the user should take next.")
    priority: Literal["High", "Critical", "Urgent"] = Field(..., description="The priority level of this step.")
    category: Literal["Goals", "Career", "Finance", "Personal"] = Field(
        ..., description="The area this step belongs to."
    )
    reasoning: str = Field(..., description="Brief explanation of why this step is critical right now.")
    timeframe: Literal["Today", "This Week", "This Month"] = Field(
        ..., description="Recommended timeframe to complete this step."
    )


class GenerateCriticalStepsOutput(FlowModel):
    steps: List[CriticalStep] = Field(
        ...,
        min_length=CRITICAL_STEP_COUNT,
        max_length=CRITICAL_STEP_COUNT,
        description="Exactly 3 critical steps ranked by priority and urgency.",
    )


def _build_prompt(payload: GenerateCriticalStepsInput) -> str:
    return (
        "You are an AI life coach analyzing a user's complete life data to identify the 3 most critical next "
        "steps they should take.\n\n"
        f"Current Date: {date.today().isoformat()}\n\n"
        f"User's Complete Profile and Data:\n{to_json(payload.context)}\n\n"
        "Analyze the user's complete situation focusing specifically on these 4 key areas:\n"
        "1. **Goals** - Progress, deadlines, blocked steps\n"
        "2. **Monthly Plan** - Current month tasks and themes\n"
        "3. **Job Search** - Application status, interview progress, career advancement\n"
        "4. **Finance Tracker** - Emergency fund, loans, SIPs, income sources\n\n"
        "Based on this analysis, identify the 3 MOST CRITICAL steps the user should take next from these areas only.\n\n"
        "Priority Factors (focus only on these 4 areas):\n"
        "- **Goals**: Urgent deadlines approaching, blocked or stalled progress on important goals\n"
        "- **Monthly Plan**: Key tasks for current month that are behind schedule or critical\n"
        "- **Job Search**: Time-sensitive applications, interview preparations, career opportunities\n"
        "- **Finance Tracker**: Emergency fund shortfalls, high-interest loans, SIP optimizations\n"
        "- High-impact actions that unlock progress across multiple areas\n"
        "- Financial security and stability needs\n\n"
        "CRITICAL REQUIREMENTS for step text:\n"
        "- Keep each step text under 50 characters maximum\n"
        "- Use concise, actionable language and focus on the core action needed\n"
        "- Example good formats: \"Pay Home Loan EMI 45k\", \"Complete 3 overdue tasks\", "
        "\"Apply to 2 priority jobs\", \"Build emergency fund +20k\", \"Review monthly goals\"\n\n"
        "Guidelines:\n"
        "- Focus on actionable, specific steps (not generic advice)\n"
        "- Prioritize steps that have the highest impact on their overall life progress\n"
        "- Consider dependencies between different areas of their life\n"
        "- Balance urgent vs important (Eisenhower Matrix thinking)\n"
        "- Be realistic about what they can accomplish in the given timeframes\n"
        "- Avoid suggesting steps that are already in progress or completed\n\n"
        "For each critical step, provide:\n"
        "1. Clear, specific actionable text (UNDER 50 CHARACTERS)\n"
        "2. Priority level (Critical > Urgent > High)\n"
        "3. Category (Goals/Career/Finance/Personal)\n"
        "4. Reasoning for why this is critical right now\n"
        "5. Realistic timeframe (Today/This Week/This Month)"
    )


generate_critical_steps = Flow(
    name="generate_critical_steps",
    input_model=GenerateCriticalStepsInput,
    output_model=GenerateCriticalStepsOutput,
    build_prompt=_build_prompt,
    failure_message="The AI model failed to generate valid critical steps. This may be a temporary issue.",
    error_context="critical steps analysis",
)
