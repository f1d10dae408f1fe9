"""
In-memory payment ledger.

Stands in for a payment provider during local runs and tests. Payments are
recorded up front; verification consumes a matching payment, so one payment
can fund at most one renewal.
"""

import logging
from collections import defaultdict
from decimal import Decimal
from typing import Dict, List, Union

from app.services.memberships.interfaces import PaymentVerifier

logger = logging.getLogger(__name__)

Amount = Union[Decimal, int, float, str]


def to_amount(value: Amount) -> Decimal:
    # str() first so floats like 9.99 do not drag binary noise into Decimal
    return value if isinstance(value, Decimal) else Decimal(str(value))


class InMemoryPaymentLedger(PaymentVerifier):
    """Payment verifier backed by recorded, not yet consumed payments"""

    def __init__(self):
        self._payments: Dict[int, List[Decimal]] = defaultdict(list)

    def record_payment(self, member_id: int, amount: Amount) -> None:
        amount = to_amount(amount)
        if amount <= 0:
            raise ValueError(f"Payment amount must be positive, got {amount}")
        self._payments[member_id].append(amount)
        logger.info(f"PAYMENT_RECORDED [member_id={member_id}, amount={amount}]")

    def pending(self, member_id: int) -> List[Decimal]:
        return list(self._payments.get(member_id, ()))

    def verify_payment(self, member_id: int, amount: Amount) -> bool:
        """
        Verify and consume a recorded payment covering amount.

        The first recorded payment of at least amount is consumed.
        Non-positive amounts never verify.
        """
        amount = to_amount(amount)
        if amount <= 0:
            logger.warning(f"PAYMENT_INVALID_AMOUNT [member_id={member_id}, amount={amount}]")
            return False

        payments = self._payments.get(member_id, [])
        for index, paid in enumerate(payments):
            if paid >= amount:
                del payments[index]
                logger.info(f"PAYMENT_VERIFIED [member_id={member_id}, amount={amount}, paid={paid}]")
                return True

        logger.info(f"PAYMENT_NOT_FOUND [member_id={member_id}, amount={amount}]")
        return False
