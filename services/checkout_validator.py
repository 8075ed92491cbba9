"""
Checkout validation - decides whether a cart may be turned into an order
"""
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from models.cart import Cart

StockLookup = Callable[[int], Optional[int]]


@dataclass
class ValidationResult:
    """Outcome of a checkout validation"""
    is_valid: bool
    errors: List[str] = field(default_factory=list)

    def to_dict(self):
        return {"is_valid": self.is_valid, "errors": list(self.errors)}


def validate_checkout(cart: Cart, stock_lookup: Optional[StockLookup] = None) -> ValidationResult:
    """Check a cart against current stock.

    Errors come out in a fixed order: the empty-cart error first, then one
    error per line in cart order. A line whose product has no stock gets
    only the out-of-stock error; otherwise a quantity above the stock gets
    the insufficient-stock error. ``stock_lookup`` returns the catalog's
    live stock for a product id; when it is missing or returns None the
    stock on the line's own product is used.
    """
    errors = []

    if cart.is_empty():
        errors.append("Cart is empty")

    for line in cart.get_items():
        stock = stock_lookup(line.product.id) if stock_lookup else None
        if stock is None:
            stock = line.product.stock

        if stock <= 0:
            errors.append(f"{line.product.name} is out of stock")
        elif line.quantity > stock:
            errors.append(f"{line.product.name} has insufficient stock")

    return ValidationResult(is_valid=len(errors) == 0, errors=errors)
