# © 2025 Tejas Gajjar. All rights reserved.
# Owner: Tejas Gajjar — Agentic Middleware for Enterprise Integration
# Contact: tejas.gajjar@macys.com | tejgajjar2001@gmail.com
# Note: This module is part of the orderdesk order-fulfillment service.

from typing import Any, Callable, Dict

# Registry
_TOOL_REGISTRY: Dict[str, Callable] = {}

def tool(name: str):
    def deco(fn: Callable):
        _TOOL_REGISTRY[name] = fn
        return fn
    return deco

def registered_tools():
    return sorted(_TOOL_REGISTRY)

def run_tool(name: str, params: Dict[str, Any], ctx) -> Dict[str, Any]:
    if name not in _TOOL_REGISTRY:
        raise RuntimeError(f"Unknown tool: {name}")
    # Guardrails (RBAC)
    allow = ctx.policies.get("rbac", {}).get("roles", {}).get("agent", {}).get("allow_tools", [])
    if name not in allow:
        raise PermissionError(f"Tool not allowed by RBAC: {name}")
    return _TOOL_REGISTRY[name](params, ctx)

@tool("process_refund")
def process_refund(params, ctx):
    summary = ctx.engine.process_refund(params["order_id"], params.get("sku"),
                                        params.get("quantity"), params.get("price"))
    return {"summary": summary, "order": None}

@tool("process_replacement")
def process_replacement(params, ctx):
    order = ctx.engine.process_replacement(params["order_id"], params.get("original_sku"),
                                           params.get("new_sku"), params.get("quantity"),
                                           params.get("new_price"))
    return {"summary": f"Replacement order {order.id} created", "order": order}
