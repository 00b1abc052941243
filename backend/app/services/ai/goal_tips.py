"""Tailored tips for overcoming a specific obstacle on a goal."""
from __future__ import annotations

from typing import List

from pydantic import Field

from app.services.ai.base import Flow, FlowModel


class GenerateGoalTipsInput(FlowModel):
    goal: str = Field(..., description="The specific goal the user is trying to achieve.")
    obstacle: str = Field(..., description="The specific obstacle the user is facing.")


class GenerateGoalTipsOutput(FlowModel):
    tips: List[str] = Field(
        ..., description="A list of tailored tips to overcome the obstacle and achieve the goal."
    )


def _build_prompt(payload: GenerateGoalTipsInput) -> str:
    return (
        "You are a motivational coach providing advice to users trying to achieve their goals.\n\n"
        "The user is trying to achieve the following goal:\n"
        f"{payload.goal}\n\n"
        "The user is facing the following obstacle:\n"
        f"{payload.obstacle}\n\n"
        "Provide 3 tailored tips to overcome this obstacle and achieve the goal."
    )


generate_goal_tips = Flow(
    name="generate_goal_tips",
    input_model=GenerateGoalTipsInput,
    output_model=GenerateGoalTipsOutput,
    build_prompt=_build_prompt,
    failure_message="The AI model failed to generate valid tips. This may be a temporary issue.",
)
