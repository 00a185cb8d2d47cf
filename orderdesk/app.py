# © 2025 Tejas Gajjar. All rights reserved.
# Owner: Tejas Gajjar — Agentic Middleware for Enterprise Integration
# Contact: tejas.gajjar@macys.com | tejgajjar2001@gmail.com
# Note: This module is part of the orderdesk order-fulfillment service.

from decimal import Decimal
from fastapi import FastAPI, HTTPException, Request, Response
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from typing import Any, Dict, Optional
import time

from .agent.classifier import build_classifier
from .agent.core import SupportAgent
from .agent.logger import log_json
from .agent.models import ClassifiedRequest, Intent, Sentiment
from .agent.responder import build_responder
from .config import load_config, load_policies
from .fulfillment import errors
from .fulfillment.engine import FulfillmentEngine
from .fulfillment.ledger import InventoryLedger
from .fulfillment.models import Order
from .fulfillment.store import OrderStore
from .infra.notifier import build_notifier
from .infra.services import ServiceError
from .infra.tracing import init_tracing

class OrderIn(BaseModel):
    sku: str
    quantity: int
    unit_price: Decimal

class ReplaceIn(BaseModel):
    new_sku: Optional[str] = None
    new_price: Optional[Decimal] = None

class InventoryMutation(BaseModel):
    sku: str = ""
    qty: int = 1

class SupportIn(BaseModel):
    message: str

class ClassifiedIn(BaseModel):
    order_id: str
    intent: Intent
    sentiment: Sentiment = Sentiment.NEUTRAL

def build_engine(config: Dict[str, Any]) -> FulfillmentEngine:
    ocfg = config.get("orders") or {}
    seed = config.get("seed") or {}
    ledger = InventoryLedger(seed.get("inventory") or {})
    store = OrderStore()
    for o in seed.get("orders") or []:
        store.create(Order(id=str(o["id"]), sku=o["sku"], quantity=int(o["quantity"]),
                           unit_price=Decimal(str(o["unit_price"]))))
    return FulfillmentEngine(ledger, store, notifier=build_notifier(config),
                             id_prefix=ocfg.get("id_prefix", "ORD-"), id_base=int(ocfg.get("id_base", 1000)))

def create_app(config: Dict[str, Any] | None = None, policies: Dict[str, Any] | None = None) -> FastAPI:
    config = config if config is not None else load_config()
    policies = policies if policies is not None else load_policies()

    tcfg = config.get("tracing") or {}
    init_tracing(service_name=tcfg.get("service_name", "orderdesk"), endpoint=tcfg.get("otlp_endpoint") or None)

    engine = build_engine(config)
    agent = SupportAgent(engine, classifier=build_classifier(config),
                         responder=build_responder(config), policies=policies)

    app = FastAPI(title="orderdesk")
    app.state.engine = engine
    app.state.agent = agent

    @app.exception_handler(errors.ValidationError)
    def on_validation(request: Request, exc: errors.ValidationError):
        return JSONResponse(status_code=400, content={"detail": exc.message})

    @app.exception_handler(errors.InsufficientInventoryError)
    def on_insufficient(request: Request, exc: errors.InsufficientInventoryError):
        return JSONResponse(status_code=409, content={"detail": f"{exc}. Available: {exc.available}",
                                                      "sku": exc.sku, "available": exc.available})

    @app.exception_handler(errors.OrderNotFound)
    def on_not_found(request: Request, exc: errors.OrderNotFound):
        return JSONResponse(status_code=404, content={"detail": "Order not found"})

    @app.exception_handler(ServiceError)
    def on_service_error(request: Request, exc: ServiceError):
        log_json(level="error", msg="service_failed", path=request.url.path, error=str(exc))
        return JSONResponse(status_code=502, content={"detail": "Upstream service unavailable"})

    @app.get("/health")
    def health():
        return {"status": "ok", "time": int(time.time())}

    # Inventory

    @app.get("/api/inventory")
    def list_inventory():
        return engine.ledger.list_all()

    @app.get("/api/inventory/{sku}")
    def get_inventory(sku: str):
        qty = engine.ledger.quantity(sku)
        if qty <= 0:
            raise HTTPException(status_code=404, detail="SKU not found")
        return {"sku": sku, "qty": qty}

    @app.post("/api/inventory/add")
    def add_inventory(req: InventoryMutation):
        if not req.sku.strip():
            raise HTTPException(status_code=400, detail="SKU is required")
        return {"sku": req.sku, "qty": engine.ledger.add(req.sku, req.qty)}

    @app.post("/api/inventory/remove")
    def remove_inventory(req: InventoryMutation):
        if not req.sku.strip():
            raise HTTPException(status_code=400, detail="SKU is required")
        return {"sku": req.sku, "qty": engine.ledger.remove(req.sku, req.qty)}

    @app.put("/api/inventory/{sku}")
    def set_inventory(sku: str, qty: int):
        if not sku.strip():
            raise HTTPException(status_code=400, detail="SKU is required")
        return {"sku": sku, "qty": max(0, engine.ledger.set(sku, qty))}

    @app.delete("/api/inventory/{sku}", status_code=204)
    def delete_inventory(sku: str):
        if not engine.ledger.delete(sku):
            raise HTTPException(status_code=404, detail="SKU not found")
        return Response(status_code=204)

    # Orders

    @app.post("/api/orders", status_code=201)
    def create_order(req: OrderIn):
        return engine.create_order(req.sku, req.quantity, req.unit_price).to_dict()

    @app.get("/api/orders")
    def list_orders():
        return [o.to_dict() for o in engine.list_orders()]

    @app.get("/api/orders/{order_id}")
    def get_order(order_id: str):
        order = engine.get_order(order_id)
        if order is None:
            raise errors.OrderNotFound(order_id)
        return order.to_dict()

    @app.put("/api/orders/{order_id}")
    def update_order(order_id: str, req: OrderIn):
        return engine.update_order(order_id, req.sku, req.quantity, req.unit_price).to_dict()

    @app.delete("/api/orders/{order_id}")
    def cancel_order(order_id: str):
        if not engine.cancel_order(order_id):
            raise errors.OrderNotFound(order_id)
        return {"detail": "Order cancelled successfully"}

    @app.post("/api/orders/{order_id}/refund")
    def refund_order(order_id: str):
        return {"summary": engine.process_refund(order_id)}

    @app.post("/api/orders/{order_id}/replace")
    def replace_order(order_id: str, req: ReplaceIn | None = None):
        req = req or ReplaceIn()
        return engine.process_replacement(order_id, new_sku=req.new_sku, new_price=req.new_price).to_dict()

    # Support

    @app.post("/api/support")
    def support(req: SupportIn):
        reply = agent.handle_message(req.message)
        return {"message": reply.message, "outcome": reply.outcome.to_dict()}

    @app.post("/api/support/classified")
    def support_classified(req: ClassifiedIn):
        outcome = agent.handle_support_request(
            ClassifiedRequest(order_id=req.order_id, intent=req.intent, sentiment=req.sentiment))
        return outcome.to_dict()

    log_json(level="info", msg="app_ready", skus=len(engine.ledger.list_all()), orders=len(engine.store))
    return app
