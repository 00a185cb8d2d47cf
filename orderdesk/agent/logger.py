# © 2025 Tejas Gajjar. All rights reserved.
# Owner: Tejas Gajjar — Agentic Middleware for Enterprise Integration
# Contact: tejas.gajjar@macys.com | tejgajjar2001@gmail.com
# Note: This module is part of the orderdesk order-fulfillment service.

import json, sys, threading, time
from .sanitizer import sanitize

_write_lock = threading.Lock()

def log_json(**kwargs):
    rec = {"ts": int(time.time()*1000)}
    rec.update(kwargs)
    safe = sanitize(rec)
    line = json.dumps(safe, default=str) + "\n"
    # Request threads share stdout; keep records on whole lines
    with _write_lock:
        sys.stdout.write(line)
        sys.stdout.flush()
