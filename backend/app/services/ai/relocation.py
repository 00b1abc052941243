"""Country recommendations and a per-country relocation roadmap."""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import Field

from app.api.schemas.app_data import CountryRecommendation, RelocationQuestionnaire
from app.services.ai.base import Flow, FlowModel, to_json


class RelocationAdviceInput(FlowModel):
    resume: Optional[Dict[str, Any]] = Field(default=None, description="The user's full resume data.")
    questionnaire: RelocationQuestionnaire


class RelocationAdviceOutput(FlowModel):
    recommendations: List[CountryRecommendation] = Field(
        ..., description="A list of 3-5 recommended countries, sorted by suitability score."
    )


class RelocationRoadmapInput(FlowModel):
    country: str = Field(..., description="The country selected by the user for the roadmap.")
    profile: RelocationAdviceInput


class VisaSection(FlowModel):
    title: str
    steps: List[str] = Field(..., description="Step-by-step visa requirements and application process.")


class HousingSection(FlowModel):
    title: str
    options: List[str] = Field(
        ..., description="Typical housing options with estimated monthly costs, e.g. \"1-bedroom apartment: $1500\"."
    )


class JobSearchSection(FlowModel):
    title: str
    strategies: List[str] = Field(
        ..., description="Job search (or study plan) strategies with milestones for the local market."
    )


class CulturalAdaptationSection(FlowModel):
    title: str
    tips: List[str] = Field(..., description="Practical tips for cultural integration.")


class LocalResourcesSection(FlowModel):
    title: str
    resources: List[str] = Field(..., description="Expat forums, government sites and community groups.")


class RelocationRoadmapOutput(FlowModel):
    visa: VisaSection
    housing: HousingSection
    job_search: JobSearchSection
    cultural_adaptation: CulturalAdaptationSection
    local_resources: LocalResourcesSection


def _build_advice_prompt(payload: RelocationAdviceInput) -> str:
    questionnaire = payload.questionnaire
    prompt = (
        "You are an expert global relocation advisor. Your task is to analyze the user's profile and recommend "
        "the most suitable countries for them to live and work/study in.\n\n"
        "Analyze the user's resume (if provided) and their answers to the detailed questionnaire. The resume is "
        "the primary source for their profession, skills, and current location. The questionnaire provides "
        "lifestyle, family, and specific relocation preferences.\n\n"
        f"**The user's primary reason for relocating is: {questionnaire.reason_for_relocation}**\n\n"
        "Based on all available information, generate a list of 3-5 suitable countries.\n"
        "For each country, provide:\n"
        "1. A suitability score (1-100) based on how well it matches the user's entire profile.\n"
        "2. A brief summary explaining the recommendation.\n"
        "3. A list of specific pros (advantages) for the user.\n"
        "4. A list of specific cons (challenges) for the user.\n\n"
        "Consider all factors:\n"
        "- **If relocating for 'Jobs':** Focus on the job market for their profession, cost of living vs. "
        "potential salary, and career growth opportunities.\n"
        "- **If relocating for 'Study':** Focus on top universities for their field, student life, post-study "
        "work visa options, and affordability for students.\n"
        "- **General Factors:** Quality of life, healthcare, education (if family size > 1), cultural aspects, "
        "and language.\n\n"
        f"**User's Questionnaire Data:**\n```json\n{to_json(questionnaire)}\n```\n"
    )
    if payload.resume:
        prompt += (
            "\n**User's Resume Data (Primary source for profession, skills, and current country):**\n"
            f"```json\n{to_json(payload.resume)}\n```\n"
        )
    return prompt + "\nProvide the recommendations sorted from the highest suitability score to the lowest."


def _build_roadmap_prompt(payload: RelocationRoadmapInput) -> str:
    reason = payload.profile.questionnaire.reason_for_relocation
    return (
        "You are an expert global relocation advisor. The user has chosen a country and needs a detailed "
        "step-by-step roadmap.\n\n"
        "Based on the selected country and the user's profile, generate a comprehensive relocation plan. "
        f"The user's primary reason for moving is **{reason}**.\n\n"
        f"**Selected Country:** {payload.country}\n\n"
        f"**User's Profile:**\n```json\n{to_json(payload.profile)}\n```\n\n"
        "Create a roadmap with the following sections. Each section must contain a title and a list of detailed, "
        "actionable points.\n"
        "1. **Visa & Documentation:** Outline the most likely visa pathway and the key steps to apply. Include "
        "required documents.\n"
        "2. **Career & Job Search (if reason is 'Jobs') OR University & Study Plan (if reason is 'Study'):** "
        "For jobs, give search strategies tailored to the user's profession and milestones with timelines "
        "(e.g., \"0-3 Months: Network and apply\"). For study, suggest universities and milestones like "
        "\"3-6 Months Out: Submit applications\". Use the matching title for this section.\n"
        "3. **Housing & Living:** Typical housing options with realistic monthly cost estimates.\n"
        "4. **Cultural Integration:** Social etiquette, networking, and language basics.\n"
        "5. **Helpful Local Resources:** Expat forums, government sites, or community groups."
    )


class _RelocationAdviceFlow(Flow):
    def parse_output(self, content):
        output = super().parse_output(content)
        if output is not None:
            output.recommendations.sort(key=lambda rec: rec.suitability_score, reverse=True)
        return output


generate_relocation_advice = _RelocationAdviceFlow(
    name="generate_relocation_advice",
    input_model=RelocationAdviceInput,
    output_model=RelocationAdviceOutput,
    build_prompt=_build_advice_prompt,
    failure_message="The AI model failed to generate relocation advice. This may be a temporary issue.",
)

generate_relocation_roadmap = Flow(
    name="generate_relocation_roadmap",
    input_model=RelocationRoadmapInput,
    output_model=RelocationRoadmapOutput,
    build_prompt=_build_roadmap_prompt,
    failure_message="The AI model failed to generate a relocation roadmap.",
)
