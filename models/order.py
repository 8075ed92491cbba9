"""
Order related data models
"""
import time
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional, Dict, Any, TYPE_CHECKING
from enum import Enum

from .errors import InvalidStatusTransitionError

if TYPE_CHECKING:
    from .cart import Cart


class OrderStatus(Enum):
    PROCESSING = "Processing"
    SHIPPED = "Shipped"
    DELIVERED = "Delivered"
    CANCELLED = "Cancelled"


# Labels written by earlier releases of the storefront
LEGACY_STATUS_LABELS = {
    "Procesando": OrderStatus.PROCESSING,
    "Enviado": OrderStatus.SHIPPED,
    "Entregado": OrderStatus.DELIVERED,
    "Cancelado": OrderStatus.CANCELLED,
}


def parse_status(value: Optional[str]) -> OrderStatus:
    """Read a stored status label; raises ValueError for unknown labels"""
    if not value:
        return OrderStatus.PROCESSING
    if value in LEGACY_STATUS_LABELS:
        return LEGACY_STATUS_LABELS[value]
    return OrderStatus(value)


# Delivered and Cancelled are terminal
VALID_TRANSITIONS = {
    OrderStatus.PROCESSING: {OrderStatus.SHIPPED, OrderStatus.CANCELLED},
    OrderStatus.SHIPPED: {OrderStatus.DELIVERED},
    OrderStatus.DELIVERED: set(),
    OrderStatus.CANCELLED: set(),
}

_last_order_id = 0


def _next_order_id() -> int:
    # Millisecond timestamp, bumped when two orders land in the same millisecond
    global _last_order_id
    candidate = int(time.time() * 1000)
    if candidate <= _last_order_id:
        candidate = _last_order_id + 1
    _last_order_id = candidate
    return candidate


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


@dataclass(frozen=True)
class OrderItem:
    """Order item data model (flattened, no live product reference)"""
    product_id: int
    product_name: str
    price: float
    quantity: int

    @property
    def line_total(self) -> float:
        return self.price * self.quantity

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "productId": self.product_id,
            "productName": self.product_name,
            "price": self.price,
            "quantity": self.quantity
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "OrderItem":
        return cls(
            product_id=data["productId"],
            product_name=data.get("productName", ""),
            price=data.get("price", 0),
            quantity=data.get("quantity", 0)
        )


@dataclass
class Order:
    """Order data model.

    Items and money figures are fixed at construction; only ``status`` and
    ``updated_at`` change afterwards, through ``update_status``.
    """
    id: int
    user_id: str
    items: tuple
    subtotal: float
    discount: float
    total: float
    discount_code: Optional[str] = None
    status: OrderStatus = OrderStatus.PROCESSING
    created_at: str = field(default_factory=_now_iso)
    updated_at: str = field(default_factory=_now_iso)

    _FROZEN_FIELDS = ("id", "user_id", "items", "subtotal", "discount", "total", "discount_code", "created_at")

    def __setattr__(self, name, value):
        if name in self._FROZEN_FIELDS and name in self.__dict__:
            raise AttributeError(f"Order.{name} cannot be changed after creation")
        super().__setattr__(name, value)

    @classmethod
    def from_cart(cls, cart: "Cart", user_id: str) -> "Order":
        """Snapshot the cart into a new order in Processing state"""
        items = tuple(
            OrderItem(
                product_id=line.product.id,
                product_name=line.product.name,
                price=line.product.price,
                quantity=line.quantity
            )
            for line in cart.get_items()
        )
        return cls(
            id=_next_order_id(),
            user_id=user_id,
            items=items,
            subtotal=cart.subtotal,
            discount=cart.discount_amount,
            total=cart.total,
            discount_code=cart.discount_code
        )

    @classmethod
    def from_persisted(cls, data: Dict[str, Any]) -> "Order":
        """Rebuild an order from its stored record, trusting the stored figures"""
        now = _now_iso()
        return cls(
            id=data["id"],
            user_id=data.get("userId"),
            items=tuple(OrderItem.from_dict(item) for item in data.get("items") or []),
            subtotal=data.get("subtotal") or 0,
            discount=data.get("discount") or 0,
            total=data.get("total") or 0,
            discount_code=data.get("discountCode"),
            status=parse_status(data.get("status")),
            created_at=data.get("createdAt") or now,
            updated_at=data.get("updatedAt") or now
        )

    def update_status(self, new_status: OrderStatus):
        if new_status not in VALID_TRANSITIONS[self.status]:
            raise InvalidStatusTransitionError(self.id, self.status.value, new_status.value)
        self.status = new_status
        self.updated_at = _now_iso()

    def can_be_cancelled(self) -> bool:
        return self.status == OrderStatus.PROCESSING

    def is_completed(self) -> bool:
        return self.status == OrderStatus.DELIVERED

    def is_cancelled(self) -> bool:
        return self.status == OrderStatus.CANCELLED

    @property
    def total_items(self) -> int:
        return sum(item.quantity for item in self.items)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the persisted order record"""
        return {
            "id": self.id,
            "userId": self.user_id,
            "items": [item.to_dict() for item in self.items],
            "subtotal": self.subtotal,
            "discount": self.discount,
            "total": self.total,
            "status": self.status.value,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
            "discountCode": self.discount_code
        }
