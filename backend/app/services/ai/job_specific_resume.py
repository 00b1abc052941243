"""Tailor the user's base resume to one job application."""
from __future__ import annotations

from typing import Any, Dict, List

from pydantic import Field

from app.api.schemas.app_data import (
    ResumeContactInfo,
    ResumeEducation,
    ResumeProject,
    ResumeSummary,
    ResumeWorkExperience,
)
from app.services.ai.base import Flow, FlowModel, to_json

NO_JOB_DESCRIPTION = "No additional job description provided"


class GenerateJobSpecificResumeInput(FlowModel):
    base_resume: Dict[str, Any] = Field(..., description="The base resume data object.")
    job_application: Dict[str, Any] = Field(..., description="The job application data object.")


class TailoredSkills(FlowModel):
    technical_skills: str = Field(
        ..., alias="Technical Skills", description="Programming languages, frameworks, and technical tools."
    )
    soft_skills: str = Field(
        ..., alias="Soft Skills", description="Communication, leadership, and interpersonal skills."
    )
    industry_skills: str = Field(
        ..., alias="Industry Skills", description="Domain-specific knowledge and industry expertise."
    )
    tools_and_technologies: str = Field(
        ...,
        alias="Tools & Technologies",
        description="Software tools, platforms, and development environments.",
    )


class GenerateJobSpecificResumeOutput(FlowModel):
    contact_info: ResumeContactInfo
    summary: ResumeSummary
    skills: TailoredSkills = Field(..., description="Skills categorized and enhanced to match job requirements.")
    work_experience: List[ResumeWorkExperience]
    projects: List[ResumeProject]
    education: List[ResumeEducation]


def _build_prompt(payload: GenerateJobSpecificResumeInput) -> str:
    job_description = payload.job_application.get("additionalDescription") or NO_JOB_DESCRIPTION
    return (
        "You are an expert resume writer. Customize the given resume for a specific job application.\n\n"
        f"Base Resume:\n{to_json(payload.base_resume)}\n\n"
        f"Job Application:\n{to_json(payload.job_application)}\n\n"
        f"Job Description:\n{job_description}\n\n"
        "IMPORTANT INSTRUCTIONS:\n"
        "- Do NOT mention the target company name anywhere in the resume\n"
        "- Do NOT reference the specific company in experience descriptions\n"
        "- Use generic terms like \"previous employer\", \"current company\", or industry-specific terms\n"
        "- Focus on skills and achievements that are transferable to the target role\n\n"
        "Return the customized resume with:\n"
        "1. Keep all contact info exactly the same\n"
        "2. Update the summary title and text to match the job role (without mentioning target company)\n"
        "3. Reorder and enhance skills to match job requirements\n"
        "4. Rewrite work experience descriptions to highlight relevant achievements without company-specific "
        "references\n"
        "5. Enhance project descriptions to showcase relevant skills\n"
        "6. Keep education details factual\n"
        "7. Use action verbs and quantifiable achievements\n"
        "8. Ensure all content is generic enough to be applicable to similar roles at different companies\n\n"
        "Make the resume compelling for this specific job while staying truthful and company-agnostic."
    )


def _base_resume(payload: GenerateJobSpecificResumeInput) -> GenerateJobSpecificResumeOutput:
    base = dict(payload.base_resume)
    skills = base.get("skills") or {}
    base["skills"] = {
        "Technical Skills": skills.get("Technical Skills", ""),
        "Soft Skills": skills.get("Soft Skills", ""),
        "Industry Skills": skills.get("Industry Skills", ""),
        "Tools & Technologies": skills.get("Tools & Technologies", ""),
    }
    return GenerateJobSpecificResumeOutput.model_validate(base)


generate_job_specific_resume = Flow(
    name="generate_job_specific_resume",
    input_model=GenerateJobSpecificResumeInput,
    output_model=GenerateJobSpecificResumeOutput,
    build_prompt=_build_prompt,
    failure_message="The AI model failed to generate a job-specific resume. This may be a temporary issue.",
    error_context="job-specific resume generation",
    fallback=_base_resume,
)
