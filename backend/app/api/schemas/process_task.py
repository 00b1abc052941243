"""Schemas for the simulated AI task-processing endpoint."""
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ProcessTaskRequest(_CamelModel):
    prompt: Optional[str] = None
    model: Optional[str] = None
    task_id: Optional[str] = None


class ProcessTaskResponse(_CamelModel):
    success: bool
    result: Optional[str] = None
    error: Optional[str] = None
    execution_time: int
    model: Optional[str] = None
    task_id: Optional[str] = None


class ProcessTaskHealth(BaseModel):
    status: str
    service: str
    models: List[str]
    timestamp: str
