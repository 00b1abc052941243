"""Schemas shared by the server action endpoints."""
from __future__ import annotations

from pydantic import BaseModel


class ActionError(BaseModel):
    """Returned with HTTP 200 when an action fails; callers check for ``error``."""

    error: str
