"""Simulated AI task-processing endpoint."""
from __future__ import annotations

import asyncio
import logging
from datetime import datetime, timezone
from time import perf_counter

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from app.api.schemas.process_task import ProcessTaskHealth, ProcessTaskRequest, ProcessTaskResponse
from app.core.config import settings
from app.observability.metrics import log_metric
from app.observability.tracing import trace
from app.services.task_processor import (
    INTERNAL_ERROR,
    MISSING_FIELDS_ERROR,
    TaskValidationError,
    generate_ai_response,
    list_model_ids,
    validate_task_request,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/ai", tags=["ai-tasks"])

SERVICE_NAME = "AI Task Processing API"


def _respond(payload: ProcessTaskResponse, status_code: int = status.HTTP_200_OK) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=payload.model_dump(by_alias=True, exclude_none=True))


@router.post("/process-task", response_model=ProcessTaskResponse)
async def process_task(request: Request) -> JSONResponse:
    start = perf_counter()

    def elapsed_ms() -> int:
        return int((perf_counter() - start) * 1000)

    try:
        raw = await request.json()
        try:
            body = ProcessTaskRequest.model_validate(raw)
        except ValidationError:
            log_metric("process_task.rejected", 1)
            return _respond(
                ProcessTaskResponse(success=False, error=MISSING_FIELDS_ERROR, execution_time=elapsed_ms()),
                status.HTTP_400_BAD_REQUEST,
            )
        try:
            spec = validate_task_request(body.prompt, body.model, body.task_id)
        except TaskValidationError as exc:
            log_metric("process_task.rejected", 1)
            return _respond(
                ProcessTaskResponse(
                    success=False,
                    error=str(exc),
                    execution_time=elapsed_ms(),
                    model=body.model,
                    task_id=body.task_id,
                ),
                status.HTTP_400_BAD_REQUEST,
            )

        with trace("process_task.run", metadata={"model": body.model, "task_id": body.task_id}):
            if settings.process_task_simulate_latency:
                await asyncio.sleep(spec.processing_time_ms / 1000)
            result = generate_ai_response(body.prompt, spec)
    except Exception:
        logger.exception("AI task processing failed")
        log_metric("process_task.error", 1)
        return _respond(
            ProcessTaskResponse(success=False, error=INTERNAL_ERROR, execution_time=0, model="", task_id=""),
            status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    log_metric("process_task.latency_ms", elapsed_ms(), metadata={"model": body.model})
    return _respond(
        ProcessTaskResponse(
            success=True,
            result=result,
            execution_time=elapsed_ms(),
            model=spec.name,
            task_id=body.task_id,
        )
    )


@router.get("/process-task", response_model=ProcessTaskHealth)
async def process_task_health() -> ProcessTaskHealth:
    return ProcessTaskHealth(
        status="healthy",
        service=SERVICE_NAME,
        models=list_model_ids(),
        timestamp=datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z"),
    )
