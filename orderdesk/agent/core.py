# © 2025 Tejas Gajjar. All rights reserved.
# Owner: Tejas Gajjar — Agentic Middleware for Enterprise Integration
# Contact: tejas.gajjar@macys.com | tejgajjar2001@gmail.com
# Note: This module is part of the orderdesk order-fulfillment service.

from typing import Any, Dict, Optional
import time, uuid

from .classifier import Classifier, KeywordClassifier
from .executor import Executor
from .logger import log_json
from .models import (AdjustmentOutcome, ClassifiedRequest, Decision, Intent, OperationType,
                     OrderSearchResult, SupportReply)
from .planner import build_step, decide
from .responder import ResponseGenerator, TemplateResponder
from .sanitizer import configure as sanitize_config
from ..config import load_policies
from ..fulfillment.engine import FulfillmentEngine
from ..fulfillment.errors import InsufficientInventoryError
from ..infra.tracing import get_tracer

ORDER_NOT_FOUND = "Order not found"

class Context:
    def __init__(self, request: ClassifiedRequest, engine: FulfillmentEngine, policies: Dict[str, Any]):
        self.request = request
        self.engine = engine
        self.policies = policies
        self.trace_id = str(uuid.uuid4())
        self.started_ms = time.time() * 1000.0
        self.results: Dict[str, Any] = {}
        self.current_step_name: str = ""

    def latency_ms(self) -> float:
        return (time.time() * 1000.0) - self.started_ms

class SupportAgent:
    """Parse -> retrieve -> decide/act -> assemble, for one support request."""

    def __init__(self, engine: FulfillmentEngine, classifier: Classifier | None = None,
                 responder: ResponseGenerator | None = None, policies: Dict[str, Any] | None = None):
        self.engine = engine
        self.ledger = engine.ledger
        self.classifier = classifier or KeywordClassifier(id_prefix=engine.ids.prefix)
        self.responder = responder or TemplateResponder()
        self.policies = policies if policies is not None else load_policies()
        self.executor = Executor(policies=self.policies)
        sanitize_config(self.policies)

    def parse_request(self, text: str) -> ClassifiedRequest:
        log_json(level="info", msg="support_parse", chars=len(text or ""))
        return self.classifier.classify(text)

    def retrieve_order(self, request: ClassifiedRequest) -> OrderSearchResult:
        log_json(level="info", msg="support_retrieve", order_id=request.order_id)
        order = self.engine.get_order(request.order_id) if request.order_id else None
        return OrderSearchResult(order=order, exists=order is not None)

    def _act(self, decision: Decision, search: OrderSearchResult, ctx: Context) -> Optional[Dict[str, Any]]:
        step = build_step(decision, search)
        if step is None:
            return None
        return self.executor.execute_step(step, ctx)

    def _assemble(self, request: ClassifiedRequest, search: OrderSearchResult, decision: Decision,
                  result: Optional[Dict[str, Any]], ctx: Context) -> AdjustmentOutcome:
        if not search.exists:
            summary = ORDER_NOT_FOUND
        elif result is None:
            summary = "No action taken: request intent not recognised"
        else:
            summary = result["summary"]
        return AdjustmentOutcome(
            original_order=search.order,
            resulting_order=(result or {}).get("order"),
            operation_type=decision.operation,
            summary=summary,
            requested_intent=request.intent,
            inventory_fallback=decision.inventory_fallback,
            trace_id=ctx.trace_id,
        )

    def handle_support_request(self, request: ClassifiedRequest) -> AdjustmentOutcome:
        tracer = get_tracer("agent.handle_support_request")
        ctx = Context(request, self.engine, self.policies)

        with tracer.start_as_current_span("retrieve"):
            search = self.retrieve_order(request)

        with tracer.start_as_current_span("decide"):
            decision = decide(request, search, self.ledger)
            log_json(level="info", msg="support_decision", trace_id=ctx.trace_id, order_id=request.order_id,
                     intent=request.intent.value, operation=decision.operation.value,
                     fallback=decision.inventory_fallback, reason=decision.reason)

        with tracer.start_as_current_span("act"):
            try:
                result = self._act(decision, search, ctx)
            except InsufficientInventoryError as e:
                # Stock went between the check and the reservation
                decision = Decision(OperationType.REFUND, inventory_fallback=True, reason="replacement_lost_stock")
                log_json(level="warning", msg="support_replan_refund", trace_id=ctx.trace_id,
                         order_id=request.order_id, available=e.available)
                result = self._act(decision, search, ctx)

        with tracer.start_as_current_span("assemble"):
            outcome = self._assemble(request, search, decision, result, ctx)

        log_json(level="info", msg="support_done", trace_id=ctx.trace_id, operation=outcome.operation_type.value,
                 latency_ms=int(ctx.latency_ms()))
        return outcome

    def handle_message(self, text: str) -> SupportReply:
        tracer = get_tracer("agent.handle_message")
        with tracer.start_as_current_span("parse"):
            request = self.parse_request(text)
        outcome = self.handle_support_request(request)
        with tracer.start_as_current_span("respond"):
            message = self.responder.generate(outcome, request)
        return SupportReply(outcome=outcome, message=message)

__all__ = ["SupportAgent", "ClassifiedRequest", "Intent", "OperationType", "AdjustmentOutcome",
           "SupportReply", "ORDER_NOT_FOUND"]
