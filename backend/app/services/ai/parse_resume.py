"""Extract structured resume data from raw resume text."""
from __future__ import annotations

from pydantic import Field

from app.api.schemas.app_data import ResumeData
from app.services.ai.base import Flow, FlowModel


class ParseResumeInput(FlowModel):
    resume_text: str = Field(..., min_length=1, description="The full text content of the resume.")


def _build_prompt(payload: ParseResumeInput) -> str:
    return (
        "You are an expert resume parser. Analyze the following resume text and extract the information into a "
        "structured JSON format. Pay close attention to dates, job titles, and responsibilities. Group skills by "
        "their category, with each category mapped to a comma-separated string of skills.\n\n"
        "Resume Text:\n"
        f"```\n{payload.resume_text}\n```"
    )


parse_resume = Flow(
    name="parse_resume",
    input_model=ParseResumeInput,
    output_model=ResumeData,
    build_prompt=_build_prompt,
    failure_message="The AI model failed to parse the resume. Please check the content and try again.",
)
