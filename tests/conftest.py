from decimal import Decimal

import pytest

from orderdesk.agent.core import SupportAgent
from orderdesk.config import load_policies
from orderdesk.fulfillment.engine import FulfillmentEngine
from orderdesk.fulfillment.ledger import InventoryLedger
from orderdesk.fulfillment.models import Order
from orderdesk.fulfillment.store import OrderStore


class RecordingNotifier:
    def __init__(self):
        self.messages = []

    def notify(self, message):
        self.messages.append(message)


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def ledger():
    return InventoryLedger({"shirt-s": 0, "shirt-m": 6, "shirt-l": 0, "shirt-xl": 2})


@pytest.fixture
def store():
    s = OrderStore()
    s.create(Order(id="ORD-123", sku="shirt-l", quantity=1, unit_price=Decimal("1.00")))
    s.create(Order(id="ORD-456", sku="shirt-m", quantity=1, unit_price=Decimal("10.00")))
    return s


@pytest.fixture
def engine(ledger, store, notifier):
    return FulfillmentEngine(ledger, store, notifier=notifier)


@pytest.fixture
def policies():
    return load_policies()


@pytest.fixture
def agent(engine, policies):
    return SupportAgent(engine, policies=policies)
