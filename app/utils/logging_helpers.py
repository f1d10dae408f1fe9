"""
Structured logging helpers for background workers.

Logging contract:
- correlation_id: Unique identifier for the worker iteration
- component: Component name (worker, service, infra)
- operation: Operation name (expiry_sweep_iteration, renew_subscription, ...)
- outcome: success | degraded | failed | skipped

Failure taxonomy:
- infra_error: Infrastructure errors (store unavailable, network, timeouts)
- domain_error: Business logic errors (validation, business rules)
- unexpected_error: Unexpected errors (bugs, unhandled exceptions)
"""

import json
import logging
import uuid
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Optional

_correlation_id: ContextVar[Optional[str]] = ContextVar('correlation_id', default=None)

logger = logging.getLogger(__name__)


def generate_correlation_id() -> str:
    return str(uuid.uuid4())


def set_correlation_id(correlation_id: str) -> None:
    _correlation_id.set(correlation_id)


def get_correlation_id() -> Optional[str]:
    return _correlation_id.get()


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def log_worker_iteration_start(
    worker_name: str,
    iteration_number: Optional[int] = None,
    **kwargs
) -> str:
    """
    Log worker iteration start.

    Args:
        worker_name: Name of the worker (e.g., "expiry_sweep")
        iteration_number: Iteration number (optional)
        **kwargs: Additional context to log

    Returns:
        Correlation ID for this iteration
    """
    correlation_id = generate_correlation_id()
    set_correlation_id(correlation_id)

    log_data = {
        "event": "ITERATION_START",
        "worker": worker_name,
        "correlation_id": correlation_id,
        "component": "worker",
        "operation": f"{worker_name}_iteration",
        "timestamp": _timestamp(),
    }

    if iteration_number is not None:
        log_data["iteration_number"] = iteration_number

    if kwargs:
        log_data.update(kwargs)

    log_data["level"] = "INFO"
    logger.info(json.dumps(log_data))
    return correlation_id


def log_worker_iteration_end(
    worker_name: str,
    outcome: str,  # "success" | "degraded" | "failed" | "skipped"
    items_processed: Optional[int] = None,
    error_type: Optional[str] = None,
    duration_ms: Optional[float] = None,
    **kwargs
) -> None:
    """
    Log worker iteration end.

    Args:
        worker_name: Name of the worker
        outcome: Outcome of the iteration ("success" | "degraded" | "failed" | "skipped")
        items_processed: Number of items processed (optional)
        error_type: Type of error if outcome is "failed" (optional)
        duration_ms: Duration of the iteration in milliseconds (optional)
        **kwargs: Additional context to log
    """
    log_data = {
        "event": "ITERATION_END",
        "worker": worker_name,
        "correlation_id": get_correlation_id(),
        "component": "worker",
        "operation": f"{worker_name}_iteration",
        "outcome": outcome,
        "timestamp": _timestamp(),
    }

    if items_processed is not None:
        log_data["items_processed"] = items_processed

    if error_type:
        log_data["error_type"] = error_type

    if duration_ms is not None:
        log_data["duration_ms"] = duration_ms

    if kwargs:
        log_data.update(kwargs)

    if outcome == "failed":
        log_data["level"] = "ERROR"
        logger.error(json.dumps(log_data))
    elif outcome == "degraded":
        log_data["level"] = "WARNING"
        logger.warning(json.dumps(log_data))
    else:
        log_data["level"] = "INFO"
        logger.info(json.dumps(log_data))


def classify_error(exception: Exception) -> str:
    """
    Classify error type for failure taxonomy.

    Returns:
        Error type: "infra_error" | "domain_error" | "unexpected_error"
    """
    import redis
    from app.services.memberships.exceptions import MembershipServiceError

    if isinstance(exception, MembershipServiceError):
        return "domain_error"

    if isinstance(exception, (
        redis.exceptions.RedisError,
        TimeoutError,
        ConnectionError,
        OSError,
    )):
        return "infra_error"

    return "unexpected_error"
