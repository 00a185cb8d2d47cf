# © 2025 Tejas Gajjar. All rights reserved.
# Owner: Tejas Gajjar — Agentic Middleware for Enterprise Integration
# Contact: tejas.gajjar@macys.com | tejgajjar2001@gmail.com
# Note: This module is part of the orderdesk order-fulfillment service.

import threading
from typing import Dict, List, Mapping

def _blank(sku) -> bool:
    return not isinstance(sku, str) or not sku.strip()

class InventoryLedger:
    """Available quantity per SKU.

    A SKU that drops to zero is removed from the table, so ``list_all`` never
    reports zero entries and ``quantity`` returns 0 for it. Mutations on the
    same SKU are serialised by one of a fixed set of striped locks, so memory
    does not grow with the number of SKUs ever touched. Invalid input is a
    silent no-op that returns the current quantity.
    """

    LOCK_STRIPES = 64

    def __init__(self, initial: Mapping[str, int] | None = None, stripes: int | None = None):
        self._stock: Dict[str, int] = {}
        self._table_lock = threading.Lock()
        self._locks: List[threading.Lock] = [threading.Lock() for _ in range(stripes or self.LOCK_STRIPES)]
        if initial:
            self.seed(initial)

    def _lock_for(self, sku: str) -> threading.Lock:
        # Same SKU always maps to the same stripe
        return self._locks[hash(sku) % len(self._locks)]

    def _write(self, sku: str, qty: int) -> int:
        with self._table_lock:
            if qty <= 0:
                self._stock.pop(sku, None)
                return 0
            self._stock[sku] = qty
            return qty

    def quantity(self, sku: str) -> int:
        return self._stock.get(sku, 0)

    def add(self, sku: str, qty: int = 1) -> int:
        if _blank(sku) or qty <= 0:
            return self.quantity(sku)
        with self._lock_for(sku):
            return self._write(sku, self.quantity(sku) + qty)

    def remove(self, sku: str, qty: int = 1) -> int:
        if _blank(sku) or qty <= 0:
            return self.quantity(sku)
        with self._lock_for(sku):
            return self._write(sku, max(0, self.quantity(sku) - qty))

    def reserve(self, sku: str, qty: int) -> int:
        """Decrement ``sku`` by ``qty`` only if the stock covers it.

        Returns the quantity seen before the decrement; the reservation
        happened iff that value is ``>= qty``.
        """
        if _blank(sku) or qty <= 0:
            return self.quantity(sku)
        with self._lock_for(sku):
            current = self.quantity(sku)
            if current >= qty:
                self._write(sku, current - qty)
            return current

    def set(self, sku: str, qty: int) -> int:
        if _blank(sku):
            return self.quantity(sku)
        with self._lock_for(sku):
            return self._write(sku, qty)

    def delete(self, sku: str) -> bool:
        with self._lock_for(sku):
            with self._table_lock:
                return self._stock.pop(sku, None) is not None

    def list_all(self) -> Dict[str, int]:
        with self._table_lock:
            return dict(self._stock)

    def seed(self, initial: Mapping[str, int]):
        for sku, qty in initial.items():
            self.set(sku, int(qty))
