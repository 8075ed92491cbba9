"""
Cart related data models
"""
from dataclasses import dataclass, field
from typing import List, Optional, Dict, Any

from .product import Product


@dataclass
class CartLine:
    """One product and its quantity inside a cart"""
    product: Product
    quantity: int = 1

    def __post_init__(self):
        if self.quantity < 1:
            raise ValueError("Cart line quantity must be at least 1")

    @property
    def product_id(self) -> int:
        return self.product.id

    @property
    def line_total(self) -> float:
        return self.product.price * self.quantity

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "productId": self.product.id,
            "product": self.product.to_dict(),
            "quantity": self.quantity
        }


@dataclass
class CartSummary:
    """Cart summary data model"""
    total_items: int
    total_quantity: int
    subtotal: float
    discount_code: Optional[str]
    discount_percentage: float
    discount_amount: float
    total: float

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "total_items": self.total_items,
            "total_quantity": self.total_quantity,
            "subtotal": self.subtotal,
            "discount_code": self.discount_code,
            "discount_percentage": self.discount_percentage,
            "discount_amount": self.discount_amount,
            "total": self.total
        }


@dataclass
class Cart:
    """Shopping cart: ordered lines plus the applied discount.

    Money figures are never stored; every getter recomputes them from the
    current lines so they cannot go stale after a mutation.
    """
    items: List[CartLine] = field(default_factory=list)
    discount_code: Optional[str] = None
    discount_percentage: float = 0

    def add_item(self, product: Product, quantity: int = 1):
        # Merge into the existing line for this product, else append
        existing = self.find_item(product.id)
        if existing:
            existing.quantity += quantity
        else:
            self.items.append(CartLine(product=product, quantity=quantity))

    def remove_item(self, product_id: int):
        self.items = [line for line in self.items if line.product.id != product_id]

    def update_quantity(self, product_id: int, quantity: int):
        if quantity <= 0:
            self.remove_item(product_id)
            return

        line = self.find_item(product_id)
        if line:
            line.quantity = quantity

    def find_item(self, product_id: int) -> Optional[CartLine]:
        for line in self.items:
            if line.product.id == product_id:
                return line
        return None

    def apply_discount(self, code: str, percentage: float):
        self.discount_code = code
        self.discount_percentage = percentage

    def remove_discount(self):
        self.discount_code = None
        self.discount_percentage = 0

    def clear(self):
        self.items = []
        self.remove_discount()

    def is_empty(self) -> bool:
        return len(self.items) == 0

    def get_items(self) -> List[CartLine]:
        return list(self.items)

    @property
    def subtotal(self) -> float:
        return sum(line.product.price * line.quantity for line in self.items)

    @property
    def discount_amount(self) -> float:
        if self.discount_percentage == 0:
            return 0
        return self.subtotal * self.discount_percentage / 100

    @property
    def total(self) -> float:
        return self.subtotal - self.discount_amount

    @property
    def total_items(self) -> int:
        return sum(line.quantity for line in self.items)

    def summary(self) -> CartSummary:
        return CartSummary(
            total_items=len(self.items),
            total_quantity=self.total_items,
            subtotal=self.subtotal,
            discount_code=self.discount_code,
            discount_percentage=self.discount_percentage,
            discount_amount=self.discount_amount,
            total=self.total
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the persisted cart snapshot"""
        return {
            "items": [line.to_dict() for line in self.items],
            "discountCode": self.discount_code,
            "discountPercentage": self.discount_percentage
        }
