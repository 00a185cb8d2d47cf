# © 2025 Tejas Gajjar. All rights reserved.
# Owner: Tejas Gajjar — Agentic Middleware for Enterprise Integration
# Contact: tejas.gajjar@macys.com | tejgajjar2001@gmail.com
# Note: This module is part of the orderdesk order-fulfillment service.

from typing import Any, Dict, Optional
import requests

from .secret import SecretProvider, auth_header_from_spec

class ServiceError(RuntimeError):
    pass

class ServiceClient:
    """JSON-over-HTTP client for one entry under ``services:`` in the app config."""

    def __init__(self, name: str, config: dict, secrets: SecretProvider | None = None):
        svc = (config.get("services") or {}).get(name) or {}
        self.name = name
        self.base_url = (svc.get("base_url") or "").rstrip("/")
        self.auth_spec = svc.get("auth")  # e.g. "bearer:CLASSIFIER_TOKEN"
        self.timeout = float(svc.get("timeout_s", 5))
        self.secrets = secrets or SecretProvider(config.get("secrets", {}))
        if not self.base_url:
            raise ServiceError(f"service '{name}' has no base_url configured")

    def _headers(self, trace_id: Optional[str]) -> Dict[str, str]:
        headers = {"content-type": "application/json"}
        if trace_id:
            headers["x-trace-id"] = trace_id
        headers |= auth_header_from_spec(self.auth_spec, self.secrets)
        return headers

    def post(self, path: str, body: Dict[str, Any], trace_id: Optional[str] = None) -> Dict[str, Any]:
        url = self.base_url + path
        try:
            resp = requests.post(url, json=body, headers=self._headers(trace_id), timeout=self.timeout)
        except requests.RequestException as e:
            raise ServiceError(f"{self.name} http_error: {e}") from e
        if resp.status_code >= 400:
            raise ServiceError(f"{self.name} returned {resp.status_code}")
        try:
            return resp.json()
        except ValueError as e:
            raise ServiceError(f"{self.name} returned non-JSON body") from e
