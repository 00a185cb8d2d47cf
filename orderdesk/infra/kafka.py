# © 2025 Tejas Gajjar. All rights reserved.
# Owner: Tejas Gajjar — Agentic Middleware for Enterprise Integration
# Contact: tejas.gajjar@macys.com | tejgajjar2001@gmail.com
# Note: This module is part of the orderdesk order-fulfillment service.

import os, threading
from confluent_kafka import Producer

_producer = None
_lock = threading.Lock()

def _sasl_conf():
    mech = os.environ.get("SASL_MECHANISM", "PLAIN")
    user = os.environ.get("SASL_USERNAME")
    pw = os.environ.get("SASL_PASSWORD")
    proto = os.environ.get("SECURITY_PROTOCOL", "SASL_SSL" if (user and pw) else "PLAINTEXT")
    ca = os.environ.get("SSL_CA_LOCATION")  # optional
    return mech, user, pw, proto, ca

def get_bootstrap():
    return os.environ.get("KAFKA_BOOTSTRAP_SERVERS")

def build_conf(bootstrap: str) -> dict:
    conf = {
        "bootstrap.servers": bootstrap,
        "enable.idempotence": True,
        "acks": "all"
    }
    mech, user, pw, proto, ca = _sasl_conf()
    if user and pw:
        conf.update({"security.protocol": proto, "sasl.mechanisms": mech, "sasl.username": user, "sasl.password": pw})
    if ca:
        conf.update({"ssl.ca.location": ca})
    return conf

def get_producer():
    """Shared producer, or None when no bootstrap server is configured."""
    global _producer
    with _lock:
        if _producer is not None:
            return _producer
        bs = get_bootstrap()
        if not bs:
            return None
        _producer = Producer(build_conf(bs))
        return _producer

def reset_producer():
    global _producer
    with _lock:
        if _producer is not None:
            _producer.flush()
        _producer = None
