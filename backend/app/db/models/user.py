"""Per-user AppData document model."""
from __future__ import annotations

from sqlalchemy import Column, DateTime, String, func

from app.db.base import Base
from app.db.types import JSONDocument


class User(Base):
    """One row per authenticated user; ``data`` holds the whole AppData document."""

    __tablename__ = "users"

    id = Column(String(length=128), primary_key=True)
    data = Column(JSONDocument, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )
