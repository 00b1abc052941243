"""Metric helpers recorded as Opik traces named ``metric:<name>``."""
from __future__ import annotations

import logging
from contextlib import contextmanager
from time import perf_counter
from typing import Any, Dict, Iterator, Optional

from app.observability.client import get_opik_client

logger = logging.getLogger(__name__)


def log_metric(name: str, value: float | int, metadata: Optional[Dict[str, Any]] = None) -> None:
    """Record one metric value; a no-op when Opik is disabled."""
    client = get_opik_client()
    if not client:
        return

    payload: Dict[str, Any] = {"value": value}
    if metadata:
        payload.update(metadata)

    try:
        metric_trace = client.trace(name=f"metric:{name}", metadata=payload)
        metric_trace.end()
    except Exception as exc:  # pragma: no cover - SDK/network failure
        logger.debug("Unable to record metric %s: %s", name, exc)


@contextmanager
def timed(name: str, metadata: Optional[Dict[str, Any]] = None) -> Iterator[None]:
    """Record ``<name>.success`` (1 or 0) and ``<name>.latency_ms`` around a block."""
    start = perf_counter()
    success = False
    try:
        yield
        success = True
    finally:
        log_metric(f"{name}.success", 1 if success else 0, metadata=metadata)
        log_metric(f"{name}.latency_ms", (perf_counter() - start) * 1000, metadata=metadata)
