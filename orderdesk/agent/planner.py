# © 2025 Tejas Gajjar. All rights reserved.
# Owner: Tejas Gajjar — Agentic Middleware for Enterprise Integration
# Contact: tejas.gajjar@macys.com | tejgajjar2001@gmail.com
# Note: This module is part of the orderdesk order-fulfillment service.

from typing import Optional

from .models import ClassifiedRequest, Decision, Intent, OperationType, OrderSearchResult, PlanStep
from ..fulfillment.ledger import InventoryLedger

def decide(request: ClassifiedRequest, search: OrderSearchResult, ledger: InventoryLedger) -> Decision:
    """Refund-or-replace rule.

    A replacement needs stock for the ordered SKU; without it the request is
    refunded and the decision is flagged as an inventory fallback. Requests
    with no recognised intent are left alone, even when the SKU is out of
    stock: an unclassified message never refunds an order on its own, so it
    is answered with no action and left for a person to review.
    """
    if not search.exists:
        return Decision(OperationType.NONE, reason="order_not_found")
    if request.intent == Intent.UNKNOWN:
        return Decision(OperationType.NONE, reason="intent_unknown")

    in_stock = ledger.quantity(search.order.sku) > 0
    if request.intent == Intent.REPLACEMENT and in_stock:
        return Decision(OperationType.REPLACE, reason="replacement_in_stock")
    if request.intent == Intent.REPLACEMENT:
        return Decision(OperationType.REFUND, inventory_fallback=True, reason="replacement_out_of_stock")
    return Decision(OperationType.REFUND, reason="refund_requested")

def build_step(decision: Decision, search: OrderSearchResult) -> Optional[PlanStep]:
    order = search.order
    if decision.operation == OperationType.REPLACE:
        # Same SKU, quantity and price as the original order
        return PlanStep(name="replace", tool="process_replacement",
                        params={"order_id": order.id, "original_sku": order.sku, "new_sku": order.sku,
                                "quantity": order.quantity, "new_price": order.unit_price})
    if decision.operation == OperationType.REFUND:
        return PlanStep(name="refund", tool="process_refund",
                        params={"order_id": order.id, "sku": order.sku,
                                "quantity": order.quantity, "price": order.unit_price})
    return None
