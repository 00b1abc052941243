"""Schemas for job operations endpoints."""
from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel


class JobRunRequest(BaseModel):
    job: Literal["job_suggestions"] = "job_suggestions"
    user_id: Optional[str] = None


class JobRunResponse(BaseModel):
    job: str
    users_processed: int
    applications_added: int
    request_id: str
