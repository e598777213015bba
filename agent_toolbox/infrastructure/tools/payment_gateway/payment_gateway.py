# agent_toolbox/infrastructure/tools/payment_gateway/payment_gateway.py

import logging
import threading
import uuid
from datetime import datetime, timezone
from numbers import Real
from typing import Any, Dict, List, Optional, Union

from agent_toolbox.abstractions.dto.tools import ErrorMessage
from ..config import Config
from ..tool_base import Tool

logger = logging.getLogger(__name__)


class PaymentGatewayTool(Tool):
    """
    Simulated payment gateway.

    Charges and refunds always succeed once the amount is valid. Each call
    produces a transaction record with a fresh id; passing the same
    ``idempotency_key`` again returns the recorded transaction instead of
    creating a second one.
    """

    def __init__(self, api_key: Optional[str] = None, currency: Optional[str] = None):
        super().__init__()
        self.api_key = api_key if api_key is not None else Config.PAYMENT_GATEWAY_API_KEY
        self.currency = currency or Config.PAYMENT_CURRENCY
        self._transactions: List[Dict[str, Any]] = []
        self._by_idempotency_key: Dict[str, Dict[str, Any]] = {}
        self._lock = threading.Lock()

    @property
    def name(self) -> str:
        return "payment_gateway"

    @property
    def description(self) -> str:
        return (
            "Charges a customer or refunds a customer a given amount and returns "
            "the transaction record, including its transaction id."
        )

    @property
    def transactions(self) -> List[Dict[str, Any]]:
        """Recorded transactions, oldest first."""
        with self._lock:
            return [dict(t) for t in self._transactions]

    def charge_customer(
        self, *, customer_id: str, amount: float, idempotency_key: Optional[str] = None
    ) -> Union[Dict[str, Any], ErrorMessage]:
        return self._transact("charge", customer_id, amount, idempotency_key)

    def refund_customer(
        self, *, customer_id: str, amount: float, idempotency_key: Optional[str] = None
    ) -> Union[Dict[str, Any], ErrorMessage]:
        return self._transact("refund", customer_id, amount, idempotency_key)

    def _transact(
        self, transaction_type: str, customer_id: str, amount: float, idempotency_key: Optional[str]
    ) -> Union[Dict[str, Any], ErrorMessage]:
        if isinstance(amount, bool) or not isinstance(amount, Real) or not amount > 0:
            logger.warning(f"Rejected {transaction_type} for {customer_id}: invalid amount {amount!r}")
            return self.failure("invalid_amount", f"Invalid amount: {amount}")

        with self._lock:
            if idempotency_key is not None and idempotency_key in self._by_idempotency_key:
                previous = self._by_idempotency_key[idempotency_key]
                same_call = (
                    previous["transaction_type"] == transaction_type
                    and previous["customer_id"] == customer_id
                    and previous["amount"] == amount
                )
                if not same_call:
                    logger.warning(f"Idempotency key {idempotency_key} reused with different parameters")
                    return self.failure(
                        "idempotency_conflict",
                        f"Idempotency key reused with different parameters: {idempotency_key}",
                    )
                logger.info(f"Replayed {transaction_type} {previous['transaction_id']} for key {idempotency_key}")
                return dict(previous)

            record = {
                "success": True,
                "transaction_id": str(uuid.uuid4()),
                "amount": amount,
                "currency": self.currency,
                "customer_id": customer_id,
                "transaction_type": transaction_type,
                "timestamp": datetime.now(timezone.utc).isoformat(),
            }
            self._transactions.append(record)
            if idempotency_key is not None:
                self._by_idempotency_key[idempotency_key] = record

        logger.info(f"Recorded {transaction_type} {record['transaction_id']}: {amount} {self.currency} for {customer_id}")
        return dict(record)
