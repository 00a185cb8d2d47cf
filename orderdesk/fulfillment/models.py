# © 2025 Tejas Gajjar. All rights reserved.
# Owner: Tejas Gajjar — Agentic Middleware for Enterprise Integration
# Contact: tejas.gajjar@macys.com | tejgajjar2001@gmail.com
# Note: This module is part of the orderdesk order-fulfillment service.

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Dict
import itertools, threading

@dataclass(frozen=True)
class Order:
    id: str
    sku: str
    quantity: int
    unit_price: Decimal

    @property
    def total(self) -> Decimal:
        return self.unit_price * self.quantity

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "sku": self.sku, "quantity": self.quantity,
                "unit_price": str(self.unit_price), "total": str(self.total)}

class OrderIdSequence:
    """Monotonic order ids of the form ``{prefix}{n}``, safe across threads."""

    def __init__(self, prefix: str = "ORD-", base: int = 1000):
        self.prefix = prefix
        self._counter = itertools.count(base)
        self._lock = threading.Lock()

    def next_id(self) -> str:
        with self._lock:
            return f"{self.prefix}{next(self._counter)}"
