"""Batch runner for the daily job-suggestion check."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, List, Optional

from sqlalchemy.orm import Session

from app.services.app_data_store import get_user_document, list_user_ids
from app.services.job_suggestions import run_job_suggestion_check


logger = logging.getLogger(__name__)


@dataclass
class JobRunResult:
    users_processed: int
    applications_added: int
    users_failed: int = 0


def run_job_suggestions_for_user(db: Session, user_id: str, *, now: Optional[datetime] = None) -> int:
    if get_user_document(db, user_id) is None:
        raise ValueError(f"User {user_id} not found")
    result = run_job_suggestion_check(db, user_id, now)
    return result.added


def run_job_suggestions_for_all_users(
    db: Session,
    *,
    user_ids: Optional[Iterable[str]] = None,
    now: Optional[datetime] = None,
) -> JobRunResult:
    ids = _normalize_user_ids(user_ids, db)
    users_processed = 0
    applications_added = 0
    failed = 0
    for uid in ids:
        try:
            added = run_job_suggestions_for_user(db, uid, now=now)
        except Exception:
            db.rollback()
            failed += 1
            logger.exception("Job suggestion run failed for user %s", uid)
            continue
        users_processed += 1
        applications_added += added
    return JobRunResult(users_processed=users_processed, applications_added=applications_added, users_failed=failed)


def _normalize_user_ids(user_ids: Optional[Iterable[str]], db: Session) -> List[str]:
    if user_ids is None:
        return list_user_ids(db)
    return list(dict.fromkeys(user_ids))
