"""Job openings that fit the user's resume."""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import Field

from app.services.ai.base import Flow, FlowModel, to_json


class GenerateJobSuggestionsInput(FlowModel):
    resume: Optional[Dict[str, Any]] = Field(default=None, description="The user's parsed resume data.")


class SuggestedJobApplication(FlowModel):
    company: str = Field(..., description="The name of the company hiring.")
    role: str = Field(..., description="The job title or role being offered.")
    reasoning: str = Field(
        ..., description="Why this job is a good fit for the user based on their resume (1-2 sentences)."
    )


class GenerateJobSuggestionsOutput(FlowModel):
    suggestions: List[SuggestedJobApplication] = Field(..., description="A list of 3-5 relevant job suggestions.")


def _build_prompt(payload: GenerateJobSuggestionsInput) -> str:
    if not payload.resume:
        raise ValueError("Resume data is required to generate job suggestions.")
    return (
        "You are an expert career advisor and recruitment specialist. Your task is to analyze the user's resume "
        "and suggest highly relevant job opportunities.\n\n"
        "Analyze the user's work experience (especially roles and responsibilities) and their skills. Based on "
        "this, generate 3-5 realistic and suitable job suggestions.\n\n"
        "For each suggestion, provide:\n"
        "1. **Company Name:** A plausible, well-known company in the relevant industry.\n"
        "2. **Job Role:** The specific job title.\n"
        "3. **Reasoning:** A short, 1-2 sentence explanation of why this role is a good match, referencing "
        "specific skills or experiences from their resume.\n\n"
        "**User's Resume Data:**\n"
        f"```json\n{to_json(payload.resume)}\n```"
    )


generate_job_suggestions = Flow(
    name="generate_job_suggestions",
    input_model=GenerateJobSuggestionsInput,
    output_model=GenerateJobSuggestionsOutput,
    build_prompt=_build_prompt,
    failure_message="The AI model failed to generate valid job suggestions. This may be a temporary issue.",
)
