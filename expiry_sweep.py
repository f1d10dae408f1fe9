"""
Expiry Sweep - periodic deactivation of expired memberships

Background loop that runs SubscriptionService.deactivate_expired_members()
every SWEEP_INTERVAL_SECONDS.

Requirements:
- Interval configurable (60-3600 seconds, see config.SWEEP_INTERVAL_SECONDS)
- Uses UTC time for expiry comparison
- Idempotent: already inactive members are never touched or re-notified
- A failed iteration is logged and retried on the next cycle, the loop keeps running
"""
import logging
import threading
import time
from datetime import datetime
from typing import Optional

import config
from app.services.memberships import SubscriptionService
from app.utils.logging_helpers import (
    classify_error,
    log_worker_iteration_end,
    log_worker_iteration_start,
)

logger = logging.getLogger(__name__)

WORKER_NAME = "expiry_sweep"


def run_sweep_iteration(
    service: SubscriptionService,
    iteration_number: Optional[int] = None,
    now: Optional[datetime] = None,
) -> str:
    """
    Run one sweep and log it as a worker iteration.

    Returns:
        Iteration outcome: "success" or "failed"
    """
    iteration_start_time = time.time()
    log_worker_iteration_start(worker_name=WORKER_NAME, iteration_number=iteration_number)

    outcome = "success"
    error_type = None
    items_processed = 0

    try:
        result = service.deactivate_expired_members(now=now)
        items_processed = result.deactivated
        if result.deactivated:
            logger.info(f"sweep: DEACTIVATED [count={result.deactivated}, member_ids={result.deactivated_ids}]")
    except Exception as e:
        outcome = "failed"
        error_type = classify_error(e)
        logger.error(f"{WORKER_NAME}: Sweep failed: {type(e).__name__}: {str(e)[:100]}")
        logger.debug(f"{WORKER_NAME}: Full traceback for sweep", exc_info=True)
    finally:
        log_worker_iteration_end(
            worker_name=WORKER_NAME,
            outcome=outcome,
            items_processed=items_processed,
            error_type=error_type,
            duration_ms=(time.time() - iteration_start_time) * 1000,
        )

    return outcome


def expiry_sweep_loop(
    service: SubscriptionService,
    stop_event: Optional[threading.Event] = None,
    interval_seconds: Optional[float] = None,
    max_iterations: Optional[int] = None,
) -> int:
    """
    Run the sweep until stop_event is set (or max_iterations is reached).

    Waits one interval before the first sweep. After a failed iteration the
    next wait is at least MINIMUM_SAFE_SLEEP_ON_FAILURE.

    Returns:
        Number of iterations run
    """
    if stop_event is None:
        stop_event = threading.Event()
    if interval_seconds is None:
        interval_seconds = config.SWEEP_INTERVAL_SECONDS

    logger.info(f"Expiry sweep worker started (interval: {interval_seconds} seconds, using UTC time)")

    iteration_number = 0
    wait_seconds = interval_seconds

    while max_iterations is None or iteration_number < max_iterations:
        if stop_event.wait(wait_seconds):
            break

        iteration_number += 1
        outcome = run_sweep_iteration(service, iteration_number=iteration_number)

        if outcome == "failed":
            wait_seconds = max(interval_seconds, config.MINIMUM_SAFE_SLEEP_ON_FAILURE)
        else:
            wait_seconds = interval_seconds

    logger.info(f"Expiry sweep worker stopped (iterations={iteration_number})")
    return iteration_number
