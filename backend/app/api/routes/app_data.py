"""Per-user AppData document endpoints."""
from __future__ import annotations

import logging
from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, HTTPException, Request, status
from pydantic import ValidationError
from sqlalchemy.orm import Session

from app.db.deps import get_db
from app.observability.metrics import log_metric
from app.observability.tracing import trace
from app.services.app_data_store import (
    delete_app_data,
    load_app_data,
    merge_documents,
    save_app_data,
    update_app_data,
    validate_app_data,
)
from app.services.loan_progress import apply_loan_emi_progress

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users/{user_id}/data", tags=["app-data"])

Document = Dict[str, Any]


@router.get("")
def read_app_data(user_id: str, request: Request, db: Session = Depends(get_db)) -> Document:
    """Load the document (seeding it on first read) and roll loan EMIs forward."""
    request_id = getattr(request.state, "request_id", None)
    with trace("app_data.read", metadata={"route": "/users/{user_id}/data"}, user_id=user_id, request_id=request_id):
        data = load_app_data(db, user_id)
        data, changed = apply_loan_emi_progress(data)
        if changed:
            logger.info("Advanced loan EMIs for user %s", user_id)
            save_app_data(db, user_id, {"loans": data["loans"]})
    log_metric("app_data.read.success", 1)
    return data


@router.put("")
def replace_app_data(
    user_id: str,
    request: Request,
    payload: Document = Body(...),
    db: Session = Depends(get_db),
) -> Document:
    """Write the whole document back; nested objects are merged into the stored copy."""
    _validate_or_422(payload)
    request_id = getattr(request.state, "request_id", None)
    with trace("app_data.write", metadata={"route": "/users/{user_id}/data"}, user_id=user_id, request_id=request_id):
        stored = save_app_data(db, user_id, payload)
    log_metric("app_data.write.success", 1)
    return stored


@router.patch("")
def patch_app_data(
    user_id: str,
    request: Request,
    payload: Document = Body(...),
    db: Session = Depends(get_db),
) -> Document:
    """Merge a partial document into the current one; unchanged documents are not rewritten."""
    request_id = getattr(request.state, "request_id", None)
    with trace("app_data.patch", metadata={"route": "/users/{user_id}/data"}, user_id=user_id, request_id=request_id):
        try:
            result = update_app_data(db, user_id, lambda draft: merge_documents(draft, payload))
        except ValidationError as exc:
            raise _unprocessable(exc) from exc
    log_metric("app_data.patch.success", 1)
    return result


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
def remove_app_data(user_id: str, db: Session = Depends(get_db)) -> None:
    if not delete_app_data(db, user_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User data not found")
    logger.info("Deleted AppData for user %s", user_id)


def _validate_or_422(payload: Document) -> None:
    try:
        validate_app_data(payload)
    except ValidationError as exc:
        raise _unprocessable(exc) from exc


def _unprocessable(exc: ValidationError) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        detail=exc.errors(include_url=False, include_context=False),
    )
