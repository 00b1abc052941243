"""Dedicated APScheduler worker process."""
from __future__ import annotations

import logging
import signal
import threading

from apscheduler.schedulers.background import BackgroundScheduler

from app.core.config import settings
from app.core.logging import configure_logging
from app.db.session import SessionLocal
from app.services.job_runner import run_job_suggestions_for_all_users


logger = logging.getLogger(__name__)

JOB_ID = "job_suggestions_job"


def main() -> None:
    configure_logging(log_level=settings.log_level)
    logger.info("Scheduler worker starting (enabled=%s)", settings.scheduler_enabled)

    scheduler = BackgroundScheduler(timezone=settings.scheduler_timezone)

    if settings.scheduler_enabled:
        register_jobs(scheduler)
        scheduler.start()
        if settings.jobs_run_on_startup:
            logger.info("Running job suggestions once on startup")
            run_job_suggestions_job()
    else:
        logger.warning("Scheduler disabled via config; worker will idle")

    stop_event = threading.Event()

    def shutdown(signum, frame):  # pragma: no cover - signal handler
        logger.info("Scheduler worker shutting down (signal=%s)", signum)
        if scheduler.running:
            scheduler.shutdown(wait=False)
        stop_event.set()

    signal.signal(signal.SIGINT, shutdown)
    signal.signal(signal.SIGTERM, shutdown)

    try:
        stop_event.wait()
    except KeyboardInterrupt:  # pragma: no cover - manual stop
        shutdown(signal.SIGINT, None)


def register_jobs(scheduler: BackgroundScheduler) -> None:
    scheduler.add_job(
        run_job_suggestions_job,
        trigger="cron",
        hour=settings.job_suggestion_hour,
        minute=settings.job_suggestion_minute,
        id=JOB_ID,
        replace_existing=True,
    )
    logger.info(
        "Registered daily job suggestions (time=%02d:%02d %s)",
        settings.job_suggestion_hour,
        settings.job_suggestion_minute,
        settings.scheduler_timezone,
    )


def run_job_suggestions_job() -> None:
    session = SessionLocal()
    try:
        result = run_job_suggestions_for_all_users(session)
        logger.info(
            "Job suggestions complete: users=%s, added=%s, failed=%s",
            result.users_processed,
            result.applications_added,
            result.users_failed,
        )
    except Exception:
        logger.exception("Job suggestions job failed")
    finally:
        session.close()


if __name__ == "__main__":  # pragma: no cover - manual launch
    main()
