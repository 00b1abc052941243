"""Daily AI job-suggestion check for users with a parsed resume."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, Optional
from zoneinfo import ZoneInfo

from sqlalchemy.orm import Session

from app.core.config import settings
from app.services.ai.job_suggestions import SuggestedJobApplication, generate_job_suggestions
from app.services.app_data_store import EPOCH_ISO, load_app_data, save_app_data
from app.services.loan_progress import parse_iso, to_iso

logger = logging.getLogger(__name__)

NEW_JOB_STATUS = "Need to Apply"


@dataclass
class JobCheckResult:
    due: bool
    added: int = 0
    failed: bool = False


def check_time_for(now: datetime) -> datetime:
    """Today's check time in the scheduler timezone."""
    local_now = now.astimezone(ZoneInfo(settings.scheduler_timezone))
    return local_now.replace(
        hour=settings.job_suggestion_hour,
        minute=settings.job_suggestion_minute,
        second=0,
        microsecond=0,
    )


def is_job_check_due(now: datetime, last_check: Optional[str], has_resume: bool) -> bool:
    if not has_resume:
        return False
    threshold = check_time_for(now)
    last = parse_iso(last_check or EPOCH_ISO) or datetime.fromtimestamp(0, tz=timezone.utc)
    return now >= threshold and last < threshold


def merge_job_suggestions(
    data: Dict[str, Any],
    suggestions: Iterable[SuggestedJobApplication],
    now: datetime,
) -> int:
    """Prepend unseen suggestions to ``jobApplications`` in place and stamp the check time."""
    applications = data.setdefault("jobApplications", [])
    stamp = to_iso(now)
    added = 0
    for suggestion in suggestions:
        exists = any(
            app.get("company") == suggestion.company and app.get("role") == suggestion.role
            for app in applications
        )
        if exists:
            continue
        applications.insert(
            0,
            {
                **suggestion.model_dump(by_alias=True),
                "status": NEW_JOB_STATUS,
                "source": "AI",
                "date": stamp,
            },
        )
        added += 1
    data["lastJobSuggestionCheck"] = stamp
    return added


def run_job_suggestion_check(db: Session, user_id: str, now: Optional[datetime] = None) -> JobCheckResult:
    """
    Run the check for one user if it is due.

    A failed suggestion call still stamps ``lastJobSuggestionCheck`` so the
    check is not retried until the next day.
    """
    current = now or datetime.now(timezone.utc)
    data = load_app_data(db, user_id)
    if not is_job_check_due(current, data.get("lastJobSuggestionCheck"), bool(data.get("resume"))):
        return JobCheckResult(due=False)

    suggestions = []
    failed = False
    try:
        suggestions = generate_job_suggestions({"resume": data["resume"]}).suggestions
    except Exception:
        failed = True
        logger.exception("Job suggestion check failed for user %s", user_id)

    changes: Dict[str, Any] = {"jobApplications": list(data.get("jobApplications") or [])}
    added = merge_job_suggestions(changes, suggestions, current)
    save_app_data(db, user_id, changes)
    logger.info("Job suggestion check for user %s added %s application(s)", user_id, added)
    return JobCheckResult(due=True, added=added, failed=failed)
