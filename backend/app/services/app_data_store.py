"""Whole-document persistence for a user's AppData.

Each user owns a single JSON document. Reads return the whole document,
updates run an updater against a deep-copied draft, and writes send the whole
document back with merge semantics (nested objects merged, lists and scalars
replaced).
"""
from __future__ import annotations

import copy
import logging
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.api.schemas.app_data import AppData
from app.core.config import settings
from app.db.models.user import User
from app.observability.tracing import trace
from app.services.initial_data import DEFAULT_INCOME_SOURCES, initial_app_data

logger = logging.getLogger(__name__)

Document = Dict[str, Any]
Updater = Callable[[Document], Optional[Document]]

LIST_FIELDS = (
    "goals",
    "travelGoals",
    "monthlyPlan",
    "carSaleChecklist",
    "loans",
    "jobApplications",
    "dailyTasks",
    "sips",
)
EPOCH_ISO = "1970-01-01T00:00:00.000Z"


def normalize_app_data(raw: Optional[Document]) -> Document:
    """Overlay a stored document on the seed so older documents gain every field."""
    data: Document = {**initial_app_data(), **copy.deepcopy(raw or {})}
    for field in LIST_FIELDS:
        data[field] = data.get(field) or []
    data["emergencyFundTarget"] = data.get("emergencyFundTarget") or settings.emergency_fund_target_default
    if not data.get("incomeSources"):
        data["incomeSources"] = copy.deepcopy(DEFAULT_INCOME_SOURCES)
    data["lastJobSuggestionCheck"] = data.get("lastJobSuggestionCheck") or EPOCH_ISO
    return data


def validate_app_data(data: Document) -> AppData:
    """Structural check only; raises pydantic.ValidationError on malformed documents."""
    return AppData.model_validate(data)


def get_user_document(db: Session, user_id: str) -> User | None:
    return db.get(User, user_id)


def load_app_data(db: Session, user_id: str) -> Document:
    """Return the user's normalized document, creating it from the seed on first read."""
    with trace("app_data.load", user_id=user_id):
        user = get_user_document(db, user_id)
        if user is None or user.data is None:
            logger.info("No AppData for user %s; writing initial plan", user_id)
            seed = initial_app_data()
            _write(db, user_id, seed, merge=False)
            return normalize_app_data(seed)
        return normalize_app_data(user.data)


def save_app_data(db: Session, user_id: str, data: Document, *, merge: bool = True) -> Document:
    """Write the whole document back. With ``merge`` nested objects are merged into the stored copy."""
    with trace("app_data.save", user_id=user_id):
        return _write(db, user_id, data, merge=merge)


def update_app_data(db: Session, user_id: str, updater: Updater) -> Document:
    """
    Apply ``updater`` to a draft of the current document and persist the result.

    The updater may mutate the draft in place or return a replacement. When the
    draft ends up equal to the loaded document nothing is written.
    """
    current = load_app_data(db, user_id)
    draft = copy.deepcopy(current)
    replaced = updater(draft)
    if replaced is not None:
        draft = replaced

    validate_app_data(draft)
    if draft == current:
        return current
    return save_app_data(db, user_id, draft)


def delete_app_data(db: Session, user_id: str) -> bool:
    user = get_user_document(db, user_id)
    if user is None:
        return False
    db.delete(user)
    db.commit()
    return True


def list_user_ids(db: Session) -> list[str]:
    rows = db.query(User.id).order_by(User.id).all()
    return [row[0] for row in rows]


def merge_documents(base: Document, incoming: Document) -> Document:
    """Recursive merge: dicts merge key by key, everything else is replaced by ``incoming``."""
    merged = copy.deepcopy(base)
    for key, value in incoming.items():
        existing = merged.get(key)
        if isinstance(existing, dict) and isinstance(value, dict):
            merged[key] = merge_documents(existing, value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


def _write(db: Session, user_id: str, data: Document, *, merge: bool) -> Document:
    user = get_user_document(db, user_id)
    if user is None:
        user = User(id=user_id, data=copy.deepcopy(data))
        db.add(user)
    else:
        stored = user.data or {}
        # Assign a new object so SQLAlchemy sees the JSON column as dirty.
        user.data = merge_documents(stored, data) if merge else copy.deepcopy(data)
        user.updated_at = datetime.now(timezone.utc)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        logger.exception("Failed to persist AppData for user %s", user_id)
        raise
    db.refresh(user)
    return copy.deepcopy(user.data)
