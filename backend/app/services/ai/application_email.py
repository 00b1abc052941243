"""Cover email for a job application."""
from __future__ import annotations

from typing import Any, Dict

from pydantic import Field

from app.services.ai.base import Flow, FlowModel, to_json


class GenerateApplicationEmailInput(FlowModel):
    resume: Dict[str, Any] = Field(..., description="The user's full resume data as a JSON object.")
    job_application: Dict[str, Any] = Field(..., description="The specific job application details.")


class GenerateApplicationEmailOutput(FlowModel):
    subject: str = Field(..., description="A compelling subject line for the job application email.")
    body: str = Field(
        ...,
        description=(
            "The full body of the email, formatted professionally. Personalized, mentions the company and role, "
            "and highlights 2-3 key skills or experiences from the resume that match the job. Uses placeholders "
            "like [Hiring Manager Name] if not known."
        ),
    )


def _build_prompt(payload: GenerateApplicationEmailInput) -> str:
    company = payload.job_application.get("company", "")
    role = payload.job_application.get("role", "")
    name = (payload.resume.get("contactInfo") or {}).get("name", "")
    return (
        "You are an expert career coach AI assisting a user in writing a professional and effective email to "
        "apply for a job.\n\n"
        "Analyze the user's resume and the specific job application details provided. Your task is to craft a "
        "compelling subject line and a personalized email body.\n\n"
        "**Key instructions for the email body:**\n"
        f"- Address it to \"Dear Hiring Team,\" or \"Dear {company} Team,\".\n"
        f"- Clearly state the position being applied for: '{role} at {company}'.\n"
        "- Briefly introduce the user and express enthusiasm for the role.\n"
        "- **Crucially, connect the user's background to the job.** Pick 2-3 of the most relevant skills or "
        "experiences from the resume and explain how they align with the key responsibilities or required skills "
        "of the job application.\n"
        "- Keep the tone professional, confident, and concise.\n"
        "- End with a call to action, expressing eagerness for an interview.\n"
        f"- Sign off as \"{name}\".\n\n"
        f"**User's Resume Data:**\n```json\n{to_json(payload.resume)}\n```\n\n"
        f"**Job Application Details:**\n```json\n{to_json(payload.job_application)}\n```"
    )


generate_application_email = Flow(
    name="generate_application_email",
    input_model=GenerateApplicationEmailInput,
    output_model=GenerateApplicationEmailOutput,
    build_prompt=_build_prompt,
    failure_message="The AI model failed to generate a valid email. This may be a temporary issue.",
)
