# © 2025 Tejas Gajjar. All rights reserved.
# Owner: Tejas Gajjar — Agentic Middleware for Enterprise Integration
# Contact: tejas.gajjar@macys.com | tejgajjar2001@gmail.com
# Note: This module is part of the orderdesk order-fulfillment service.

class FulfillmentError(Exception):
    """Base for business errors raised by the fulfillment engine."""


class ValidationError(FulfillmentError):
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InsufficientInventoryError(FulfillmentError):
    def __init__(self, sku: str, requested: int, available: int):
        super().__init__(f"Insufficient inventory for {sku}")
        self.sku = sku
        self.requested = requested
        self.available = available


class OrderNotFound(FulfillmentError):
    # The message stays generic; the id is kept for logs only
    def __init__(self, order_id: str):
        super().__init__("Order not found")
        self.order_id = order_id
