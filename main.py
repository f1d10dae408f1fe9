import logging
import signal
import sys
import threading
from dataclasses import dataclass
from typing import Optional

# Configure logging FIRST (before any other imports that may log)
# Routes INFO/WARNING → stdout, ERROR/CRITICAL → stderr for correct container classification
from app.core.logging_config import setup_logging
import config
setup_logging(config.LOG_LEVEL)

import expiry_sweep
import redis_client
from app.adapters import InMemoryMemberStore, InMemoryPaymentLedger, LoggingNotifier, RedisMemberStore
from app.core.structured_logger import log_event
from app.services.memberships import (
    MemberStore,
    MembershipStatusChecker,
    Notifier,
    PaymentVerifier,
    SubscriptionService,
)

# ====================================================================================
# LOGGING CONTRACT
# ====================================================================================
# Standard log fields: component, operation, correlation_id, outcome,
# duration_ms, reason (see app.core.structured_logger).
# Workers log ITERATION_START / ITERATION_END once per cycle.
# Member names are never logged, member ids are.
# ====================================================================================

logger = logging.getLogger(__name__)


@dataclass
class Services:
    """Composition root output"""
    store: MemberStore
    payments: PaymentVerifier
    notifier: Notifier
    status: MembershipStatusChecker
    subscriptions: SubscriptionService


def build_store() -> MemberStore:
    """Redis store when REDIS_URL is configured, in-memory store otherwise."""
    client = redis_client.get_redis_client()
    if client is None:
        logger.warning("REDIS_URL not configured - using in-memory member store")
        return InMemoryMemberStore()

    if not redis_client.check_redis_connection():
        logger.warning("Redis not reachable at startup - sweeps will fail until it recovers")
    return RedisMemberStore(client, prefix=config.MEMBER_KEY_PREFIX)


def build_services(
    store: Optional[MemberStore] = None,
    payments: Optional[PaymentVerifier] = None,
    notifier: Optional[Notifier] = None,
) -> Services:
    store = store if store is not None else build_store()
    payments = payments if payments is not None else InMemoryPaymentLedger()
    notifier = notifier if notifier is not None else LoggingNotifier()

    return Services(
        store=store,
        payments=payments,
        notifier=notifier,
        status=MembershipStatusChecker(store),
        subscriptions=SubscriptionService(store, payments, notifier),
    )


def main() -> int:
    logger.info(f"Starting membership service in {config.APP_ENV.upper()} environment")
    services = build_services()

    stop_event = threading.Event()

    def _request_stop(signum, frame):
        logger.info(f"Received signal {signum}, stopping expiry sweep")
        stop_event.set()

    signal.signal(signal.SIGINT, _request_stop)
    signal.signal(signal.SIGTERM, _request_stop)

    log_event(logger, component="app", operation="startup", outcome="success")
    try:
        expiry_sweep.expiry_sweep_loop(services.subscriptions, stop_event=stop_event)
    finally:
        redis_client.close_redis_client()
        log_event(logger, component="app", operation="shutdown", outcome="success")
    return 0


if __name__ == "__main__":
    sys.exit(main())
