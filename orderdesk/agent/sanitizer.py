# © 2025 Tejas Gajjar. All rights reserved.
# Owner: Tejas Gajjar — Agentic Middleware for Enterprise Integration
# Contact: tejas.gajjar@macys.com | tejgajjar2001@gmail.com
# Note: This module is part of the orderdesk order-fulfillment service.

from typing import Any, Dict, Set

DEFAULT_REDACT_FIELDS = frozenset(["email", "phone", "card_number", "address", "password", "token", "api_key"])

_REDACT_FIELDS: Set[str] = set(DEFAULT_REDACT_FIELDS)

def configure(policies: Dict[str, Any]):
    global _REDACT_FIELDS
    rf = (policies.get("data_policy") or {}).get("redact_fields")
    if isinstance(rf, list):
        _REDACT_FIELDS = set(str(x).lower() for x in rf)

def redacted_fields() -> Set[str]:
    return set(_REDACT_FIELDS)

def _sanitize_obj(o):
    if isinstance(o, dict):
        return {k: ("***" if str(k).lower() in _REDACT_FIELDS else _sanitize_obj(v)) for k, v in o.items()}
    if isinstance(o, (list, tuple)):
        return [_sanitize_obj(x) for x in o]
    return o

def sanitize(o):
    return _sanitize_obj(o)
