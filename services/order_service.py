"""
Order service - order creation and history
"""
import logging
from typing import Dict, List, Any, Optional

from core.constants import EVENTS
from database.repository import OrderRepository
from models.cart import Cart
from models.errors import InvalidStatusTransitionError, OrderNotFoundError
from models.order import Order, OrderStatus
from .event_bus import EventBus
from .notification_service import NotificationService

log = logging.getLogger(__name__)


class OrderService:
    # Order history of this device, kept in memory and mirrored to storage

    def __init__(self, order_repository: OrderRepository, event_bus: EventBus,
                 notifications: NotificationService):
        self.order_repo = order_repository
        self.event_bus = event_bus
        self.notifications = notifications
        self.orders: List[Order] = self.load_order_history()

    def load_order_history(self) -> List[Order]:
        orders = []
        for record in self.order_repo.get_order_history():
            try:
                orders.append(Order.from_persisted(record))
            except (KeyError, ValueError, TypeError) as e:
                log.warning("Skipping unreadable order record: %s", e)
        return orders

    def place_order(self, cart: Cart, user_id: str) -> Dict[str, Any]:
        # Snapshot the cart and append it to the stored history; nothing changes if the write fails
        order = Order.from_cart(cart, user_id)

        if not self.order_repo.add_order(order):
            return {"success": False, "error": "Order could not be saved"}

        self.orders.append(order)
        log.info("Order %s created for %s (total %s)", order.id, user_id, order.total)
        self.event_bus.emit(EVENTS["ORDER_CREATED"], {"order": order})

        return {
            "success": True,
            "order_id": order.id,
            "order": order,
            "message": f"Order placed. Order number: {order.id}"
        }

    def get_order_history(self, user_id: Optional[str] = None) -> List[Order]:
        if user_id is None:
            return list(self.orders)
        return [order for order in self.orders if order.user_id == user_id]

    def get_order(self, order_id: int) -> Optional[Order]:
        for order in self.orders:
            if order.id == order_id:
                return order
        return None

    def _require_order(self, order_id: int) -> Order:
        order = self.get_order(order_id)
        if order is None:
            raise OrderNotFoundError(order_id)
        return order

    def update_order_status(self, order_id: int, status: OrderStatus) -> Dict[str, Any]:
        try:
            order = self._require_order(order_id)
            order.update_status(status)
        except (OrderNotFoundError, InvalidStatusTransitionError) as e:
            return {"success": False, "error": str(e)}

        saved = self.order_repo.update_order(order)
        return {
            "success": True,
            "persisted": saved,
            "order_id": order_id,
            "status": order.status.value,
            "message": f"Order {order_id} is now {order.status.value}"
        }

    def cancel_order(self, order_id: int) -> Dict[str, Any]:
        order = self.get_order(order_id)
        if order is None:
            return {"success": False, "error": f"Order not found: {order_id}"}
        if not order.can_be_cancelled():
            return {"success": False, "error": f"Order {order_id} can no longer be cancelled"}

        result = self.update_order_status(order_id, OrderStatus.CANCELLED)
        if result["success"]:
            self.notifications.info(f"Order {order_id} cancelled")
        return result
