"""
Structured logging normalization.

Single contract for membership lifecycle logs:
- component
- operation
- outcome
- correlation_id (optional, taken from the current worker iteration if unset)
- member_id (optional)
- duration_ms (optional, omitted if None)
- reason (optional)

Member names are never logged.
"""
from logging import Logger
from typing import Optional

from app.utils.logging_helpers import get_correlation_id


def log_event(
    logger: Logger,
    *,
    component: str,
    operation: str,
    outcome: str,
    correlation_id: Optional[str] = None,
    member_id: Optional[int] = None,
    duration_ms: Optional[int] = None,
    reason: Optional[str] = None,
    level: str = "info",
    message: Optional[str] = None,
) -> None:
    """
    Emit structured log event.

    Args:
        logger: Logger instance
        component: Component name (e.g., "service", "worker", "infra")
        operation: Operation name (e.g., "renew_subscription", "expiry_sweep")
        outcome: Outcome (e.g., "success", "rejected", "failed")
        correlation_id: Iteration identifier (optional)
        member_id: Member the event is about (optional)
        duration_ms: Duration in milliseconds (omitted if None)
        reason: Short non-PII explanation (optional)
        level: Log level ("info", "warning", "error", "critical", "debug")
        message: Optional override message (defaults to component/operation/outcome)
    """
    extra: dict = {
        "component": component,
        "operation": operation,
        "outcome": outcome,
    }
    if correlation_id is None:
        correlation_id = get_correlation_id()
    if correlation_id is not None:
        extra["correlation_id"] = str(correlation_id)
    if member_id is not None:
        extra["member_id"] = member_id
    if duration_ms is not None:
        extra["duration_ms"] = duration_ms
    if reason is not None:
        extra["reason"] = reason

    msg = message or f"{component} {operation} outcome={outcome}"
    log_method = getattr(logger, level.lower(), logger.info)
    log_method(msg, extra=extra)
