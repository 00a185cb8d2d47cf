# © 2025 Tejas Gajjar. All rights reserved.
# Owner: Tejas Gajjar — Agentic Middleware for Enterprise Integration
# Contact: tejas.gajjar@macys.com | tejgajjar2001@gmail.com
# Note: This module is part of the orderdesk order-fulfillment service.

from typing import Protocol

from .models import AdjustmentOutcome, ClassifiedRequest, OperationType, Sentiment
from ..infra.services import ServiceClient, ServiceError

REFUND_TIMELINE = "Refunds appear on your card within 1 business day."
REPLACEMENT_TIMELINE = "Replacements ship within 1-3 business days."

_ACTION_WORDS = {OperationType.REFUND: "refunded", OperationType.REPLACE: "replaced", OperationType.NONE: "reviewed"}

class ResponseGenerator(Protocol):
    def generate(self, outcome: AdjustmentOutcome, request: ClassifiedRequest) -> str: ...

def build_prompt(outcome: AdjustmentOutcome, request: ClassifiedRequest, company: str = "ACME") -> str:
    action = _ACTION_WORDS[outcome.operation_type]
    order = outcome.original_order.to_dict() if outcome.original_order else None
    lines = [
        f"You are a customer support representative informing a customer that their order has been {action}.",
        "",
        "Order details:",
        f"{order}",
        "",
        f"Customer's original sentiment: {request.sentiment.value}",
        f"Customer requested: {request.intent.value}",
        f"Action taken: {action}",
    ]
    if outcome.inventory_fallback:
        lines += ["", "The customer requested a replacement but the item is out of stock, so a refund was processed instead."]
    lines += [
        "",
        "Create a professional response that acknowledges their sentiment and shares in frustration if negative.",
        "Keep it under 100 words.",
        "",
        "Standard timelines:",
        f"- {REPLACEMENT_TIMELINE}",
        f"- {REFUND_TIMELINE}",
        "",
        f"Company name: {company}",
    ]
    return "\n".join(lines)

class TemplateResponder:
    def __init__(self, company: str = "ACME"):
        self.company = company

    def generate(self, outcome: AdjustmentOutcome, request: ClassifiedRequest) -> str:
        parts = []
        if request.sentiment == Sentiment.NEGATIVE:
            parts.append("We're sorry to hear about the trouble with your order.")
        elif request.sentiment == Sentiment.POSITIVE:
            parts.append("Thanks for getting in touch!")

        original = outcome.original_order
        if original is None:
            parts.append("We couldn't find that order. Please check the order number and try again.")
        elif outcome.operation_type == OperationType.REPLACE:
            parts.append(f"A replacement for order {original.id} has been placed as order "
                         f"{outcome.resulting_order.id}. {REPLACEMENT_TIMELINE}")
        elif outcome.operation_type == OperationType.REFUND:
            if outcome.inventory_fallback:
                parts.append(f"The item on order {original.id} is out of stock, so we've issued "
                             f"a refund instead of a replacement.")
            else:
                parts.append(f"Your refund for order {original.id} has been processed.")
            parts.append(REFUND_TIMELINE)
        else:
            parts.append(f"Could you let us know whether you'd like a refund or a replacement "
                         f"for order {original.id}?")
        parts.append(f"- {self.company} Support")
        return " ".join(parts)

class RemoteResponder:
    """Sends the prompt and structured outcome to the ``responder`` service."""

    def __init__(self, client: ServiceClient, company: str = "ACME"):
        self.client = client
        self.company = company

    def generate(self, outcome: AdjustmentOutcome, request: ClassifiedRequest) -> str:
        body = {"prompt": build_prompt(outcome, request, self.company), "outcome": outcome.to_dict()}
        data = self.client.post("/respond", body, trace_id=outcome.trace_id)
        message = data.get("message")
        if not isinstance(message, str) or not message.strip():
            raise ServiceError("responder returned no message")
        return message

def build_responder(config: dict) -> ResponseGenerator:
    support = config.get("support") or {}
    company = support.get("company", "ACME")
    if support.get("responder", "template") == "remote":
        return RemoteResponder(ServiceClient("responder", config), company=company)
    return TemplateResponder(company=company)
