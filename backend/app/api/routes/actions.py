"""Server actions: thin HTTP wrappers that turn flow failures into ``{"error": ...}``."""
from __future__ import annotations

import logging
from time import perf_counter
from typing import Any, Callable, Union

from fastapi import APIRouter, Body, Request
from pydantic import BaseModel

from app.api.schemas.actions import ActionError
from app.api.schemas.app_data import ResumeData
from app.observability.metrics import log_metric
from app.observability.tracing import trace
from app.services.ai.application_email import GenerateApplicationEmailOutput, generate_application_email
from app.services.ai.critical_steps import GenerateCriticalStepsOutput, generate_critical_steps
from app.services.ai.goal_step_suggestions import (
    GenerateGoalStepSuggestionsOutput,
    generate_goal_step_suggestions,
)
from app.services.ai.goal_suggestions import GenerateGoalSuggestionsOutput, generate_goal_suggestions
from app.services.ai.goal_tips import GenerateGoalTipsOutput, generate_goal_tips
from app.services.ai.job_specific_resume import GenerateJobSpecificResumeOutput, generate_job_specific_resume
from app.services.ai.job_suggestions import GenerateJobSuggestionsOutput, generate_job_suggestions
from app.services.ai.module_suggestions import ModuleSuggestionOutput, generate_module_suggestions
from app.services.ai.monthly_plan_suggestions import (
    GenerateMonthlyPlanSuggestionsOutput,
    generate_monthly_plan_suggestions,
)
from app.services.ai.parse_resume import parse_resume
from app.services.ai.relocation import (
    RelocationAdviceOutput,
    RelocationRoadmapOutput,
    generate_relocation_advice,
    generate_relocation_roadmap,
)
from app.services.ai.task_suggestions import GenerateTaskSuggestionsOutput, generate_task_suggestions
from app.services.ai.travel_image import GenerateTravelImageOutput, generate_travel_image
from app.services.ai.travel_itinerary import GenerateTravelItineraryOutput, generate_travel_itinerary
from app.services.ai.travel_suggestion import GenerateTravelSuggestionOutput, generate_travel_suggestion

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/actions", tags=["actions"])

GENERIC_SUGGESTIONS_ERROR = "Failed to generate AI suggestions. Please try again."


def _run_action(
    request: Request,
    action: str,
    flow: Callable[[Any], BaseModel],
    payload: Any,
    fallback_message: str,
) -> Union[BaseModel, ActionError]:
    request_id = getattr(request.state, "request_id", None)
    start = perf_counter()
    try:
        with trace(f"action.{action}", metadata={"action": action}, request_id=request_id):
            result = flow(payload)
    except Exception as exc:
        logger.error("Action %s failed: %s", action, exc, exc_info=True)
        log_metric("action.error", 1, metadata={"action": action})
        return ActionError(error=str(exc) or fallback_message)
    log_metric(f"action.{action}.latency_ms", (perf_counter() - start) * 1000)
    return result


@router.post("/goal-tips", response_model=Union[GenerateGoalTipsOutput, ActionError])
def get_ai_tips(request: Request, payload: Any = Body(default=None)):
    return _run_action(
        request,
        "goal_tips",
        generate_goal_tips,
        payload,
        "Failed to generate AI tips. Please try again.",
    )


@router.post("/module-suggestions", response_model=Union[ModuleSuggestionOutput, ActionError])
def get_module_suggestions(request: Request, payload: Any = Body(default=None)):
    return _run_action(request, "module_suggestions", generate_module_suggestions, payload, GENERIC_SUGGESTIONS_ERROR)


@router.post("/goal-suggestions", response_model=Union[GenerateGoalSuggestionsOutput, ActionError])
def get_ai_goal_suggestions(request: Request, payload: Any = Body(default=None)):
    return _run_action(request, "goal_suggestions", generate_goal_suggestions, payload, GENERIC_SUGGESTIONS_ERROR)


@router.post("/goal-step-suggestions", response_model=Union[GenerateGoalStepSuggestionsOutput, ActionError])
def get_ai_goal_step_suggestions(request: Request, payload: Any = Body(default=None)):
    return _run_action(
        request, "goal_step_suggestions", generate_goal_step_suggestions, payload, GENERIC_SUGGESTIONS_ERROR
    )


@router.post("/task-suggestions", response_model=Union[GenerateTaskSuggestionsOutput, ActionError])
def get_ai_task_suggestions(request: Request, payload: Any = Body(default=None)):
    return _run_action(request, "task_suggestions", generate_task_suggestions, payload, GENERIC_SUGGESTIONS_ERROR)


@router.post(
    "/monthly-plan-suggestions", response_model=Union[GenerateMonthlyPlanSuggestionsOutput, ActionError]
)
def get_ai_monthly_plan_suggestions(request: Request, payload: Any = Body(default=None)):
    return _run_action(
        request, "monthly_plan_suggestions", generate_monthly_plan_suggestions, payload, GENERIC_SUGGESTIONS_ERROR
    )


@router.post("/critical-steps", response_model=Union[GenerateCriticalStepsOutput, ActionError])
def get_critical_steps(request: Request, payload: Any = Body(default=None)):
    return _run_action(
        request,
        "critical_steps",
        generate_critical_steps,
        payload,
        "Failed to generate critical steps. Please try again.",
    )


@router.post("/parse-resume", response_model=Union[ResumeData, ActionError])
def get_parsed_resume(request: Request, payload: Any = Body(default=None)):
    return _run_action(request, "parse_resume", parse_resume, payload, "Failed to parse resume. Please try again.")


@router.post("/job-suggestions", response_model=Union[GenerateJobSuggestionsOutput, ActionError])
def get_job_suggestions(request: Request, payload: Any = Body(default=None)):
    return _run_action(
        request,
        "job_suggestions",
        generate_job_suggestions,
        payload,
        "Failed to generate job suggestions. Please try again.",
    )


@router.post("/job-specific-resume", response_model=Union[GenerateJobSpecificResumeOutput, ActionError])
def get_job_specific_resume(request: Request, payload: Any = Body(default=None)):
    return _run_action(
        request,
        "job_specific_resume",
        generate_job_specific_resume,
        payload,
        "Failed to generate resume. Please try again.",
    )


@router.post("/application-email", response_model=Union[GenerateApplicationEmailOutput, ActionError])
def get_application_email(request: Request, payload: Any = Body(default=None)):
    return _run_action(
        request,
        "application_email",
        generate_application_email,
        payload,
        "Failed to generate email. Please try again.",
    )


@router.post("/relocation-advice", response_model=Union[RelocationAdviceOutput, ActionError])
def get_relocation_advice(request: Request, payload: Any = Body(default=None)):
    return _run_action(
        request,
        "relocation_advice",
        generate_relocation_advice,
        payload,
        "Failed to generate relocation advice. Please try again.",
    )


@router.post("/relocation-roadmap", response_model=Union[RelocationRoadmapOutput, ActionError])
def get_relocation_roadmap(request: Request, payload: Any = Body(default=None)):
    return _run_action(
        request,
        "relocation_roadmap",
        generate_relocation_roadmap,
        payload,
        "Failed to generate relocation roadmap. Please try again.",
    )


@router.post("/travel-itinerary", response_model=Union[GenerateTravelItineraryOutput, ActionError])
def get_travel_itinerary(request: Request, payload: Any = Body(default=None)):
    return _run_action(
        request,
        "travel_itinerary",
        generate_travel_itinerary,
        payload,
        "Failed to generate itinerary. Please try again.",
    )


@router.post("/travel-suggestion", response_model=Union[GenerateTravelSuggestionOutput, ActionError])
def get_travel_suggestion(request: Request, payload: Any = Body(default=None)):
    return _run_action(
        request,
        "travel_suggestion",
        generate_travel_suggestion,
        {} if payload is None else payload,
        "Failed to get suggestion. Please try again.",
    )


@router.post("/travel-image", response_model=Union[GenerateTravelImageOutput, ActionError])
def get_travel_image(request: Request, payload: Any = Body(default=None)):
    return _run_action(
        request, "travel_image", generate_travel_image, payload, "Failed to generate image. Please try again."
    )
