# © 2025 Tejas Gajjar. All rights reserved.
# Owner: Tejas Gajjar — Agentic Middleware for Enterprise Integration
# Contact: tejas.gajjar@macys.com | tejgajjar2001@gmail.com
# Note: This module is part of the orderdesk order-fulfillment service.

import os
from typing import Optional

_SCHEMES = {"bearer": "Bearer", "basic": "Basic"}

class SecretProvider:
    """Looks a secret up in the environment, then a file map, then a static map."""

    def __init__(self, config: dict | None = None):
        self.files = (config or {}).get("files") or {}
        self.static = (config or {}).get("static") or {}

    def get(self, name: str) -> Optional[str]:
        val = os.environ.get(name)
        if val:
            return val
        path = self.files.get(name)
        if path and os.path.exists(path):
            with open(path, "r") as f:
                return f.read().strip()
        return self.static.get(name)

# "bearer:CLASSIFIER_TOKEN" -> {"Authorization": "Bearer <secret>"}
def auth_header_from_spec(spec: str | None, sp: SecretProvider) -> dict:
    kind, _, key = (spec or "").partition(":")
    scheme = _SCHEMES.get(kind)
    secret = sp.get(key) if scheme and key else None
    return {"Authorization": f"{scheme} {secret}"} if secret else {}
