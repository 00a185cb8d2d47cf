# © 2025 Tejas Gajjar. All rights reserved.
# Owner: Tejas Gajjar — Agentic Middleware for Enterprise Integration
# Contact: tejas.gajjar@macys.com | tejgajjar2001@gmail.com
# Note: This module is part of the orderdesk order-fulfillment service.

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional

from ..fulfillment.models import Order

class Intent(str, Enum):
    REFUND = "REFUND"
    REPLACEMENT = "REPLACEMENT"
    UNKNOWN = "UNKNOWN"

class Sentiment(str, Enum):
    POSITIVE = "POSITIVE"
    NEUTRAL = "NEUTRAL"
    NEGATIVE = "NEGATIVE"

class OperationType(str, Enum):
    REFUND = "REFUND"
    REPLACE = "REPLACE"
    NONE = "NONE"

@dataclass(frozen=True)
class ClassifiedRequest:
    order_id: Optional[str]
    intent: Intent = Intent.UNKNOWN
    sentiment: Sentiment = Sentiment.NEUTRAL

@dataclass(frozen=True)
class OrderSearchResult:
    order: Optional[Order]
    exists: bool

@dataclass(frozen=True)
class Decision:
    operation: OperationType
    inventory_fallback: bool = False
    reason: str = ""

@dataclass
class PlanStep:
    name: str
    tool: str
    params: Dict[str, Any] = field(default_factory=dict)

@dataclass(frozen=True)
class AdjustmentOutcome:
    original_order: Optional[Order]
    resulting_order: Optional[Order]
    operation_type: OperationType
    summary: str
    requested_intent: Intent = Intent.UNKNOWN
    inventory_fallback: bool = False
    trace_id: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "original_order": self.original_order.to_dict() if self.original_order else None,
            "resulting_order": self.resulting_order.to_dict() if self.resulting_order else None,
            "operation_type": self.operation_type.value,
            "summary": self.summary,
            "requested_intent": self.requested_intent.value,
            "inventory_fallback": self.inventory_fallback,
            "trace_id": self.trace_id,
        }

@dataclass(frozen=True)
class SupportReply:
    outcome: AdjustmentOutcome
    message: str
