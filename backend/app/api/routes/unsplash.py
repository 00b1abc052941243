"""Travel-goal photo lookup proxied to Unsplash."""
from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from app.observability.metrics import log_metric
from app.observability.tracing import trace
from app.services.unsplash import (
    UnsplashNotConfiguredError,
    UnsplashUpstreamError,
    fetch_random_photo_url,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["unsplash"])


@router.get("/unsplash")
def get_unsplash_photo(request: Request, query: Optional[str] = None) -> JSONResponse:
    if not query:
        return JSONResponse({"error": "Query parameter is required"}, status_code=status.HTTP_400_BAD_REQUEST)

    request_id = getattr(request.state, "request_id", None)
    try:
        with trace("unsplash.random_photo", metadata={"query": query}, request_id=request_id):
            url = fetch_random_photo_url(query)
    except UnsplashNotConfiguredError as exc:
        return JSONResponse({"error": str(exc)}, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
    except UnsplashUpstreamError as exc:
        log_metric("unsplash.upstream_error", 1, metadata={"status": exc.status_code})
        return JSONResponse({"error": exc.detail}, status_code=exc.status_code)
    except Exception:
        logger.exception("Unsplash lookup failed")
        log_metric("unsplash.error", 1)
        return JSONResponse({"error": "Internal Server Error"}, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
    return JSONResponse({"url": url})
