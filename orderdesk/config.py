# © 2025 Tejas Gajjar. All rights reserved.
# Owner: Tejas Gajjar — Agentic Middleware for Enterprise Integration
# Contact: tejas.gajjar@macys.com | tejgajjar2001@gmail.com
# Note: This module is part of the orderdesk order-fulfillment service.

import os
from typing import Any, Dict
import yaml

PACKAGE_DIR = os.path.dirname(__file__)
DEFAULT_CONFIG_PATH = os.path.join(PACKAGE_DIR, "config.example.yaml")
DEFAULT_POLICY_PATH = os.path.join(PACKAGE_DIR, "agent", "policies.yaml")

def load_yaml(path: str) -> Dict[str, Any]:
    with open(path, "r") as f:
        return yaml.safe_load(f) or {}

def load_config(path: str | None = None) -> Dict[str, Any]:
    return load_yaml(path or os.environ.get("APP_CONFIG", DEFAULT_CONFIG_PATH))

def load_policies(path: str | None = None) -> Dict[str, Any]:
    return load_yaml(path or os.environ.get("POLICY_PATH", DEFAULT_POLICY_PATH))
