"""
Exceptions raised by the storefront models and services
"""


class StoreError(Exception):
    """Base exception for all storefront errors."""

    pass


class InvalidStatusTransitionError(StoreError):
    """Raised when an order is moved to a status its current status does not allow."""

    def __init__(self, order_id: int, current: str, requested: str):
        self.order_id = order_id
        self.current = current
        self.requested = requested
        super().__init__(f"Order {order_id} cannot move from {current} to {requested}")


class OrderNotFoundError(StoreError):
    """Raised when an order id is not in the history."""

    def __init__(self, order_id: int):
        self.order_id = order_id
        super().__init__(f"Order not found: {order_id}")
