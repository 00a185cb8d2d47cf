# © 2025 Tejas Gajjar. All rights reserved.
# Owner: Tejas Gajjar — Agentic Middleware for Enterprise Integration
# Contact: tejas.gajjar@macys.com | tejgajjar2001@gmail.com
# Note: This module is part of the orderdesk order-fulfillment service.

import json, time
from typing import Callable, Optional

from ..agent.logger import log_json
from .kafka import get_producer

class LogNotifier:
    def notify(self, message: str):
        log_json(level="info", msg="customer_notified", message=message)

class KafkaNotifier:
    """Publishes notifications to a topic; logs instead when Kafka isn't configured."""

    def __init__(self, topic: str = "orderdesk.notifications",
                 producer_factory: Optional[Callable] = None):
        self.topic = topic
        self._producer_factory = producer_factory or get_producer

    def notify(self, message: str):
        prod = self._producer_factory()
        payload = json.dumps({"ts": int(time.time()*1000), "message": message})
        if prod is None:
            log_json(level="info", msg="notify_stub", topic=self.topic, message=message, fallback=True)
            return
        # Best-effort; the order change is already committed
        try:
            prod.produce(self.topic, payload.encode("utf-8"))
            prod.poll(0)
        except Exception as e:
            log_json(level="error", msg="notify_kafka_fail", topic=self.topic, error=str(e))
            return
        log_json(level="info", msg="notify_kafka", topic=self.topic, fallback=False)

def build_notifier(config: dict):
    ncfg = config.get("notifications", {}) or {}
    if ncfg.get("kind", "log") == "kafka":
        return KafkaNotifier(topic=ncfg.get("topic", "orderdesk.notifications"))
    return LogNotifier()
