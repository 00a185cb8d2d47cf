"""Refund-or-replace decision across intent and stock."""

from decimal import Decimal

import pytest

from orderdesk.agent.models import (ClassifiedRequest, Decision, Intent, OperationType,
                                    OrderSearchResult)
from orderdesk.agent.planner import build_step, decide
from orderdesk.fulfillment.ledger import InventoryLedger
from orderdesk.fulfillment.models import Order

ORDER = Order(id="ORD-9", sku="mug", quantity=2, unit_price=Decimal("3.00"))
FOUND = OrderSearchResult(order=ORDER, exists=True)


@pytest.mark.parametrize("intent,stock,operation,fallback", [
    (Intent.REFUND, 5, OperationType.REFUND, False),
    (Intent.REFUND, 0, OperationType.REFUND, False),
    (Intent.REPLACEMENT, 5, OperationType.REPLACE, False),
    (Intent.REPLACEMENT, 0, OperationType.REFUND, True),
])
def test_decision_matrix(intent, stock, operation, fallback):
    ledger = InventoryLedger({"mug": stock})
    decision = decide(ClassifiedRequest("ORD-9", intent), FOUND, ledger)
    assert decision.operation == operation
    assert decision.inventory_fallback is fallback


def test_unknown_intent_takes_no_action():
    for stock in (0, 3):
        decision = decide(ClassifiedRequest("ORD-9", Intent.UNKNOWN), FOUND, InventoryLedger({"mug": stock}))
        assert decision.operation == OperationType.NONE


def test_unknown_intent_out_of_stock_is_not_refunded():
    decision = decide(ClassifiedRequest("ORD-9", Intent.UNKNOWN), FOUND, InventoryLedger({"mug": 0}))
    assert decision.operation == OperationType.NONE
    assert decision.inventory_fallback is False
    assert decision.reason == "intent_unknown"
    assert build_step(decision, FOUND) is None


def test_missing_order_takes_no_action():
    decision = decide(ClassifiedRequest("ORD-1", Intent.REFUND),
                      OrderSearchResult(order=None, exists=False), InventoryLedger())
    assert decision.operation == OperationType.NONE
    assert decision.reason == "order_not_found"


def test_replace_step_reuses_order_fields():
    step = build_step(Decision(OperationType.REPLACE), FOUND)
    assert step.tool == "process_replacement"
    assert step.params == {"order_id": "ORD-9", "original_sku": "mug", "new_sku": "mug",
                           "quantity": 2, "new_price": Decimal("3.00")}


def test_refund_step():
    step = build_step(Decision(OperationType.REFUND), FOUND)
    assert step.tool == "process_refund"
    assert step.params["order_id"] == "ORD-9"
    assert step.params["quantity"] == 2


def test_no_step_for_none():
    assert build_step(Decision(OperationType.NONE), FOUND) is None
