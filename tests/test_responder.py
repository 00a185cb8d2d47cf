from decimal import Decimal

import pytest

from orderdesk.agent.models import (AdjustmentOutcome, ClassifiedRequest, Intent, OperationType,
                                    Sentiment)
from orderdesk.agent.responder import (REFUND_TIMELINE, REPLACEMENT_TIMELINE, RemoteResponder,
                                       TemplateResponder, build_prompt)
from orderdesk.fulfillment.models import Order
from orderdesk.infra.services import ServiceError

ORIGINAL = Order(id="ORD-1", sku="mug", quantity=1, unit_price=Decimal("3.00"))
NEW = Order(id="ORD-1000", sku="mug", quantity=1, unit_price=Decimal("3.00"))


def _outcome(op, resulting=None, fallback=False, original=ORIGINAL):
    return AdjustmentOutcome(original_order=original, resulting_order=resulting, operation_type=op,
                             summary="s", requested_intent=Intent.REPLACEMENT, inventory_fallback=fallback,
                             trace_id="t-1")


class TestTemplateResponder:
    def test_replacement(self):
        msg = TemplateResponder().generate(_outcome(OperationType.REPLACE, NEW),
                                           ClassifiedRequest("ORD-1", Intent.REPLACEMENT))
        assert "ORD-1000" in msg
        assert REPLACEMENT_TIMELINE in msg
        assert msg.endswith("ACME Support")

    def test_fallback_refund_mentions_stock(self):
        msg = TemplateResponder("Globex").generate(_outcome(OperationType.REFUND, fallback=True),
                                                   ClassifiedRequest("ORD-1", Intent.REPLACEMENT, Sentiment.NEGATIVE))
        assert msg.startswith("We're sorry")
        assert "out of stock" in msg
        assert REFUND_TIMELINE in msg
        assert "Globex" in msg

    def test_plain_refund(self):
        msg = TemplateResponder().generate(_outcome(OperationType.REFUND),
                                           ClassifiedRequest("ORD-1", Intent.REFUND, Sentiment.POSITIVE))
        assert "refund for order ORD-1 has been processed" in msg
        assert "out of stock" not in msg

    def test_not_found(self):
        msg = TemplateResponder().generate(_outcome(OperationType.NONE, original=None),
                                           ClassifiedRequest("ORD-9", Intent.REFUND))
        assert "couldn't find" in msg

    def test_unknown_intent_asks(self):
        msg = TemplateResponder().generate(_outcome(OperationType.NONE),
                                           ClassifiedRequest("ORD-1", Intent.UNKNOWN))
        assert "refund or a replacement" in msg


def test_prompt_carries_request_and_fallback():
    prompt = build_prompt(_outcome(OperationType.REFUND, fallback=True),
                          ClassifiedRequest("ORD-1", Intent.REPLACEMENT, Sentiment.NEGATIVE), company="Initech")
    assert "has been refunded" in prompt
    assert "Customer's original sentiment: NEGATIVE" in prompt
    assert "Customer requested: REPLACEMENT" in prompt
    assert "out of stock" in prompt
    assert "Company name: Initech" in prompt


class _Client:
    def __init__(self, response):
        self.response = response
        self.calls = []

    def post(self, path, body, trace_id=None):
        self.calls.append((path, body, trace_id))
        return self.response


def test_remote_responder():
    client = _Client({"message": "Hi there"})
    msg = RemoteResponder(client).generate(_outcome(OperationType.REPLACE, NEW),
                                           ClassifiedRequest("ORD-1", Intent.REPLACEMENT))
    assert msg == "Hi there"
    path, body, trace_id = client.calls[0]
    assert path == "/respond"
    assert body["outcome"]["operation_type"] == "REPLACE"
    assert "prompt" in body
    assert trace_id == "t-1"


def test_remote_responder_requires_message():
    with pytest.raises(ServiceError):
        RemoteResponder(_Client({})).generate(_outcome(OperationType.REFUND),
                                              ClassifiedRequest("ORD-1", Intent.REFUND))
