# © 2025 Tejas Gajjar. All rights reserved.
# Owner: Tejas Gajjar — Agentic Middleware for Enterprise Integration
# Contact: tejas.gajjar@macys.com | tejgajjar2001@gmail.com
# Note: This module is part of the orderdesk order-fulfillment service.

import re
from typing import Any, Dict, Optional, Protocol

from .logger import log_json
from .models import ClassifiedRequest, Intent, Sentiment
from ..infra.services import ServiceClient

class Classifier(Protocol):
    def classify(self, text: str) -> ClassifiedRequest: ...

_NEGATIVE = ("broken", "defective", "snapped", "cracked", "damaged", "ripped")
_POSITIVE = ("thank", "love", "great", "appreciate")
_REPLACE = ("replace", "replacement", "exchange")

class KeywordClassifier:
    """Deterministic fast-path; an external model can sit behind the same interface."""

    def __init__(self, id_prefix: str = "ORD-"):
        self.id_prefix = id_prefix
        self._prefixed = re.compile(re.escape(id_prefix) + r"\d+", re.IGNORECASE)
        self._bare = re.compile(r"\border\s*(?:#|no\.?|number|id)?\s*:?\s*#?(\d+)\b", re.IGNORECASE)

    def extract_order_id(self, text: str) -> Optional[str]:
        m = self._prefixed.search(text)
        if m:
            return self.id_prefix + m.group(0)[len(self.id_prefix):]
        m = self._bare.search(text)
        if m:
            return f"{self.id_prefix}{m.group(1)}"
        return None

    def classify(self, text: str) -> ClassifiedRequest:
        if not text or not text.strip():
            return ClassifiedRequest(order_id=None)
        lower = text.lower()

        sentiment = Sentiment.NEUTRAL
        if any(w in lower for w in _NEGATIVE):
            sentiment = Sentiment.NEGATIVE
        elif any(w in lower for w in _POSITIVE):
            sentiment = Sentiment.POSITIVE

        intent = Intent.UNKNOWN
        if "refund" in lower:
            intent = Intent.REFUND
        elif any(w in lower for w in _REPLACE):
            intent = Intent.REPLACEMENT

        return ClassifiedRequest(order_id=self.extract_order_id(text), intent=intent, sentiment=sentiment)

def _enum_or(enum_cls, value, default):
    try:
        return enum_cls(str(value).upper())
    except ValueError:
        return default

def request_from_dict(data: Dict[str, Any]) -> ClassifiedRequest:
    return ClassifiedRequest(
        order_id=data.get("order_id") or None,
        intent=_enum_or(Intent, data.get("intent"), Intent.UNKNOWN),
        sentiment=_enum_or(Sentiment, data.get("sentiment"), Sentiment.NEUTRAL),
    )

class RemoteClassifier:
    """Calls the ``classifier`` service: POST /classify {"text"} -> {order_id, intent, sentiment}."""

    def __init__(self, client: ServiceClient):
        self.client = client

    def classify(self, text: str) -> ClassifiedRequest:
        data = self.client.post("/classify", {"text": text})
        req = request_from_dict(data)
        log_json(level="info", msg="remote_classified", order_id=req.order_id,
                 intent=req.intent.value, sentiment=req.sentiment.value)
        return req

def build_classifier(config: dict) -> Classifier:
    kind = (config.get("support") or {}).get("classifier", "keyword")
    if kind == "remote":
        return RemoteClassifier(ServiceClient("classifier", config))
    prefix = (config.get("orders") or {}).get("id_prefix", "ORD-")
    return KeywordClassifier(id_prefix=prefix)
