# © 2025 Tejas Gajjar. All rights reserved.
# Owner: Tejas Gajjar — Agentic Middleware for Enterprise Integration
# Contact: tejas.gajjar@macys.com | tejgajjar2001@gmail.com
# Note: This module is part of the orderdesk order-fulfillment service.

import dataclasses, threading
from typing import Dict, List, Optional

from .errors import OrderNotFound
from .models import Order

class OrderStore:
    def __init__(self):
        self._orders: Dict[str, Order] = {}
        self._lock = threading.RLock()

    def create(self, order: Order) -> bool:
        # Insert-if-absent; callers pick another id on False
        with self._lock:
            if order.id in self._orders:
                return False
            self._orders[order.id] = order
            return True

    def get(self, order_id: str) -> Optional[Order]:
        with self._lock:
            return self._orders.get(order_id)

    def update(self, order_id: str, **fields) -> Order:
        with self._lock:
            current = self._orders.get(order_id)
            if current is None:
                raise OrderNotFound(order_id)
            fields.pop("id", None)
            updated = dataclasses.replace(current, **fields)
            self._orders[order_id] = updated
            return updated

    def delete(self, order_id: str) -> bool:
        return self.pop(order_id) is not None

    def pop(self, order_id: str) -> Optional[Order]:
        with self._lock:
            return self._orders.pop(order_id, None)

    def list_all(self) -> List[Order]:
        with self._lock:
            return list(self._orders.values())

    def __contains__(self, order_id) -> bool:
        with self._lock:
            return order_id in self._orders

    def __len__(self) -> int:
        with self._lock:
            return len(self._orders)
