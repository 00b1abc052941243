"""Pydantic schemas for the per-user AppData document.

Field names are snake_case in Python and camelCase on the wire, matching the
JSON the web client writes. Unknown keys are preserved so a document can be
read and written back unchanged.
"""
from __future__ import annotations

from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

GoalCategory = Literal["Health", "Career", "Personal"]
LoanStatus = Literal["Active", "Closed"]
JobStatus = Literal["Need to Apply", "Applied", "Interviewing", "Offer", "Rejected"]
JobType = Literal["Full-time", "Part-time", "Contract", "Internship"]
TravelGoalStatus = Literal["Completed", "Planned"]
DailyTaskPriority = Literal["Low", "Medium", "High"]
DailyTaskCategory = Literal["Work", "Personal", "Errands"]


class DocumentModel(BaseModel):
    """Base for every model stored inside (or derived from) the AppData document."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")


class Step(DocumentModel):
    id: str
    text: str
    completed: bool = False


class Goal(DocumentModel):
    id: str
    title: str
    description: Optional[str] = None
    category: GoalCategory
    deadline: str = Field(..., description="ISO timestamp")
    steps: List[Step] = Field(default_factory=list)


class PlanTask(DocumentModel):
    text: str
    done: bool = False


class MonthlyPlan(DocumentModel):
    month: str
    theme: str
    tasks: List[PlanTask] = Field(default_factory=list)


class ChecklistItem(DocumentModel):
    id: str
    text: str
    done: bool = False


class Loan(DocumentModel):
    id: str
    name: str
    principal: str
    rate: Optional[str] = Field(default=None, description="Annual interest rate in %")
    tenure: Optional[str] = Field(default=None, description="Tenure in months")
    emis_paid: Optional[str] = None
    status: LoanStatus
    last_auto_update: Optional[str] = None


class JobApplication(DocumentModel):
    date: str
    company: str
    role: str
    status: JobStatus
    source: Optional[Literal["AI"]] = None
    location: Optional[str] = None
    job_type: Optional[JobType] = None
    salary_range: Optional[str] = None
    key_responsibilities: Optional[List[str]] = None
    required_skills: Optional[List[str]] = None
    apply_link: Optional[str] = None
    additional_description: Optional[str] = None


class TravelGoal(DocumentModel):
    id: str
    destination: str
    status: TravelGoalStatus
    travel_date: Optional[str] = None
    notes: Optional[str] = None
    image: str = ""


class DailyTask(DocumentModel):
    id: str
    title: str
    description: Optional[str] = None
    due_date: str
    priority: DailyTaskPriority
    category: DailyTaskCategory
    completed: bool = False


class IncomeSource(DocumentModel):
    id: str
    name: str
    amount: str


class SIP(DocumentModel):
    id: str
    amount: str
    mutual_fund: str
    platform: Optional[str] = None


class ResumeContactInfo(DocumentModel):
    name: str = Field(..., description="The full name of the person.")
    location: str = Field(..., description='The city and country, e.g., "New Delhi".')
    phone: str = Field(..., description="The phone number.")
    email: str = Field(..., description="The email address.")
    linkedin: str = Field(..., description="The full LinkedIn profile URL.")
    github: str = Field(..., description="The full GitHub profile URL.")


class ResumeSummary(DocumentModel):
    title: str = Field(..., description='The main job title or headline, e.g., "Software Quality Analyst".')
    text: str = Field(..., description="The professional summary text.")


class ResumeWorkExperience(DocumentModel):
    company: str
    location: str
    role: str
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    is_current: bool = False
    description_points: List[str] = Field(default_factory=list)


class ResumeProject(DocumentModel):
    name: str
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    is_current: bool = False
    description: str


class ResumeEducation(DocumentModel):
    institution: str
    degree: str
    location: str
    gpa: str
    end_date: Optional[str] = None


class ResumeData(DocumentModel):
    contact_info: ResumeContactInfo
    summary: ResumeSummary
    skills: Dict[str, str] = Field(
        default_factory=dict,
        description="Skill categories mapped to comma-separated skills.",
    )
    work_experience: List[ResumeWorkExperience] = Field(default_factory=list)
    projects: List[ResumeProject] = Field(default_factory=list)
    education: List[ResumeEducation] = Field(default_factory=list)


class RelocationQuestionnaire(DocumentModel):
    current_profession: str = Field(..., description="The user's current profession or field of work.")
    reason_for_relocation: Literal["Jobs", "Study"] = Field(
        default="Jobs", description="The user's primary reason for relocating."
    )
    lifestyle: Literal["City", "Suburban", "Rural", "Flexible"]
    family_size: int = Field(..., gt=0, description="People in the family who would be relocating.")
    language_skills: str = Field(
        ..., description='Languages and proficiency, e.g., "English (Fluent), Spanish (Beginner)".'
    )
    climate_preference: Literal["Warm", "Cold", "Temperate", "No Preference"]
    work_life_balance: Literal["Priority", "Important", "Balanced", "Flexible"]
    career_goals: str = Field(..., description="Primary career goals for the relocation.")


class CountryRecommendation(DocumentModel):
    country: str = Field(..., description="The name of the recommended country.")
    suitability_score: float = Field(..., ge=1, le=100, description="How suitable the country is, 1-100.")
    summary: str = Field(..., description="A brief, 2-3 sentence summary explaining the match.")
    pros: List[str] = Field(..., description="3-5 key advantages for the user.")
    cons: List[str] = Field(..., description="3-5 key disadvantages or challenges.")


class LivingAdvisorData(DocumentModel):
    questionnaire: RelocationQuestionnaire
    recommendations: List[CountryRecommendation] = Field(default_factory=list)


class AppData(DocumentModel):
    goals: List[Goal] = Field(default_factory=list)
    monthly_plan: List[MonthlyPlan] = Field(default_factory=list)
    car_sale_checklist: List[ChecklistItem] = Field(default_factory=list)
    car_sale_price: str = ""
    car_loan_payoff: str = ""
    loans: List[Loan] = Field(default_factory=list)
    job_applications: List[JobApplication] = Field(default_factory=list)
    emergency_fund: str = "0"
    emergency_fund_target: str = ""
    sips: List[SIP] = Field(default_factory=list)
    travel_goals: List[TravelGoal] = Field(default_factory=list)
    daily_tasks: List[DailyTask] = Field(default_factory=list)
    income_sources: List[IncomeSource] = Field(default_factory=list)
    resume: Optional[ResumeData] = None
    living_advisor: Optional[LivingAdvisorData] = None
    last_job_suggestion_check: Optional[str] = None
