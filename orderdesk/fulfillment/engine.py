# © 2025 Tejas Gajjar. All rights reserved.
# Owner: Tejas Gajjar — Agentic Middleware for Enterprise Integration
# Contact: tejas.gajjar@macys.com | tejgajjar2001@gmail.com
# Note: This module is part of the orderdesk order-fulfillment service.

from decimal import Decimal, InvalidOperation
from typing import Any, List, Optional

from .errors import InsufficientInventoryError, OrderNotFound, ValidationError
from .ledger import InventoryLedger
from .models import Order, OrderIdSequence
from .store import OrderStore
from ..agent.logger import log_json
from ..infra.notifier import LogNotifier

def _require_sku(sku, label: str = "SKU"):
    if not isinstance(sku, str) or not sku.strip():
        raise ValidationError(f"{label} is required")

def _require_quantity(quantity):
    if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity <= 0:
        raise ValidationError("Quantity must be positive")

def _require_price(price) -> Decimal:
    if price is None or isinstance(price, bool):
        raise ValidationError("Price must be positive")
    try:
        value = price if isinstance(price, Decimal) else Decimal(str(price))
    except (InvalidOperation, ValueError):
        raise ValidationError("Price must be positive")
    if not value.is_finite() or value <= 0:
        raise ValidationError("Price must be positive")
    return value

class FulfillmentEngine:
    """Compound order operations over the inventory ledger and order store.

    The engine keeps no state between calls besides the id sequence; every
    operation reads and writes through the ledger and store.
    """

    def __init__(self, ledger: InventoryLedger, store: OrderStore, notifier=None,
                 id_prefix: str = "ORD-", id_base: int = 1000):
        self.ledger = ledger
        self.store = store
        self.notifier = notifier or LogNotifier()
        self.ids = OrderIdSequence(id_prefix, id_base)

    def _persist_new(self, sku: str, quantity: int, price: Decimal) -> Order:
        # Skip ids already taken by seeded or imported orders
        while True:
            order = Order(id=self.ids.next_id(), sku=sku, quantity=quantity, unit_price=price)
            if self.store.create(order):
                return order

    def _reserve(self, sku: str, quantity: int):
        available = self.ledger.reserve(sku, quantity)
        if available < quantity:
            log_json(level="warning", msg="inventory_insufficient", sku=sku,
                     requested=quantity, available=available)
            raise InsufficientInventoryError(sku, quantity, available)

    def create_order(self, sku: str, quantity: int, price: Any) -> Order:
        _require_sku(sku)
        _require_quantity(quantity)
        price = _require_price(price)

        self._reserve(sku, quantity)
        order = self._persist_new(sku, quantity, price)

        message = (f"Order {order.id} created successfully for {quantity} units of {sku} "
                   f"at ${price} each")
        log_json(level="info", msg="order_created", order_id=order.id, sku=sku, quantity=quantity)
        self.notifier.notify(message)
        return order

    def get_order(self, order_id: str) -> Optional[Order]:
        return self.store.get(order_id)

    def list_orders(self) -> List[Order]:
        return self.store.list_all()

    def update_order(self, order_id: str, sku: str, quantity: int, price: Any) -> Order:
        _require_sku(sku)
        _require_quantity(quantity)
        price = _require_price(price)
        order = self.store.update(order_id, sku=sku, quantity=quantity, unit_price=price)
        log_json(level="info", msg="order_updated", order_id=order_id, sku=sku, quantity=quantity)
        return order

    def cancel_order(self, order_id: str) -> bool:
        # Administrative delete; stock only comes back through a refund
        removed = self.store.delete(order_id)
        log_json(level="info", msg="order_cancelled" if removed else "order_cancel_missing",
                 order_id=order_id)
        return removed

    def process_refund(self, order_id: str, sku: Optional[str] = None,
                       quantity: Optional[int] = None, price: Any = None) -> str:
        if sku is not None:
            _require_sku(sku)
        if quantity is not None:
            _require_quantity(quantity)

        order = self.store.pop(order_id)
        if order is None:
            log_json(level="warning", msg="refund_order_missing", order_id=order_id)
            raise OrderNotFound(order_id)

        sku = sku if sku is not None else order.sku
        quantity = quantity if quantity is not None else order.quantity
        self.ledger.add(sku, quantity)

        summary = (f"Refund processed for order {order_id}. "
                   f"{quantity} units of {sku} returned to inventory")
        log_json(level="info", msg="refund_processed", order_id=order_id, sku=sku,
                 quantity=quantity, amount=str(order.total))
        self.notifier.notify(summary)
        return summary

    def process_replacement(self, order_id: str, original_sku: Optional[str] = None,
                            new_sku: Optional[str] = None, quantity: Optional[int] = None,
                            new_price: Any = None) -> Order:
        if original_sku is not None:
            _require_sku(original_sku, "Original SKU")
        if new_sku is not None:
            _require_sku(new_sku, "New SKU")
        if quantity is not None:
            _require_quantity(quantity)
        if new_price is not None:
            new_price = _require_price(new_price)

        original = self.store.get(order_id)
        if original is None:
            log_json(level="warning", msg="replacement_order_missing", order_id=order_id)
            raise OrderNotFound(order_id)

        original_sku = original_sku if original_sku is not None else original.sku
        new_sku = new_sku if new_sku is not None else original_sku
        quantity = quantity if quantity is not None else original.quantity
        new_price = new_price if new_price is not None else original.unit_price

        # Reserve first so a shortage leaves the ledger untouched
        self._reserve(new_sku, quantity)
        if self.store.pop(order_id) is None:
            self.ledger.add(new_sku, quantity)
            log_json(level="warning", msg="replacement_order_vanished", order_id=order_id)
            raise OrderNotFound(order_id)
        self.ledger.add(original_sku, quantity)
        replacement = self._persist_new(new_sku, quantity, new_price)

        message = (f"Replacement order {replacement.id} created for {order_id}. "
                   f"Exchanging {quantity} units of {original_sku} for {new_sku}")
        log_json(level="info", msg="replacement_created", order_id=order_id,
                 replacement_id=replacement.id, original_sku=original_sku, new_sku=new_sku,
                 quantity=quantity)
        self.notifier.notify(message)
        return replacement
