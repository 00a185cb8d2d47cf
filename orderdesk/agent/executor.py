# © 2025 Tejas Gajjar. All rights reserved.
# Owner: Tejas Gajjar — Agentic Middleware for Enterprise Integration
# Contact: tejas.gajjar@macys.com | tejgajjar2001@gmail.com
# Note: This module is part of the orderdesk order-fulfillment service.

from typing import Any, Dict
from .tools import run_tool
from .logger import log_json
from ..fulfillment.errors import FulfillmentError

class Executor:
    """Runs a plan step against the engine.

    Engine operations are in-memory and not retried: a business error is
    logged against the step and re-raised to the agent.
    """

    def __init__(self, policies: Dict[str, Any]):
        self.policies = policies

    def execute_step(self, step, ctx) -> Dict[str, Any]:
        ctx.current_step_name = step.name
        try:
            res = run_tool(step.tool, step.params, ctx)
        except FulfillmentError as e:
            log_json(level="warning", msg="step_rejected", step=step.name, trace_id=ctx.trace_id,
                     error=type(e).__name__, detail=str(e))
            raise
        ctx.results[step.name] = res
        log_json(level="info", msg="step_ok", step=step.name, trace_id=ctx.trace_id)
        return res
