"""
Cart service - every cart mutation goes through here so it is persisted and announced
"""
import logging
from typing import Dict, List, Any, Optional

from core.constants import EVENTS
from database.repository import CartRepository
from models.cart import Cart, CartLine, CartSummary
from models.product import Product
from .checkout_validator import ValidationResult, validate_checkout
from .discount_service import DiscountDescriptor, is_valid_percentage
from .event_bus import EventBus
from .notification_service import NotificationService
from .product_service import ProductService

log = logging.getLogger(__name__)


def format_money(amount: float) -> str:
    return f"${amount:,.2f}"


class CartService:
    # Business logic around the single cart of this storefront

    def __init__(self, cart_repository: CartRepository, event_bus: EventBus,
                 notifications: NotificationService, catalog: Optional[ProductService] = None):
        # Without a catalog persisted lines cannot be re-resolved, so only the discount is restored
        self.cart_repo = cart_repository
        self.event_bus = event_bus
        self.notifications = notifications
        self.catalog = catalog
        self.cart = Cart()
        self.load_cart_from_storage()

    def load_cart_from_storage(self):
        # Rebuild the cart from the last persisted snapshot
        data = self.cart_repo.get_cart()
        if not data:
            return

        code = data.get("discountCode")
        percentage = data.get("discountPercentage") or 0
        if code and is_valid_percentage(percentage):
            self.cart.apply_discount(code, percentage)

        records = data.get("items") or []
        if self.catalog is None:
            if records:
                log.info("Discarding %d persisted cart lines (no catalog to resolve them)", len(records))
            return

        dropped = 0
        for record in records:
            product_id = record.get("productId") if isinstance(record, dict) else None
            quantity = record.get("quantity") if isinstance(record, dict) else None
            product = self.catalog.find_by_id(product_id) if product_id is not None else None
            if product is None or not isinstance(quantity, int) or isinstance(quantity, bool) or quantity < 1:
                dropped += 1
                continue
            self.cart.add_item(product, quantity)

        if dropped:
            log.info("Dropped %d persisted cart lines that no longer resolve", dropped)

    def save_cart(self) -> bool:
        # Persist first, then announce, so listeners read what was stored
        saved = self.cart_repo.save_cart(self.cart)
        if not saved:
            log.error("Cart could not be persisted; keeping in-memory state")
        self.emit_cart_updated()
        return saved

    def emit_cart_updated(self):
        self.event_bus.emit(EVENTS["CART_UPDATED"], {
            "cart": self.cart,
            "total_items": self.cart.total_items,
            "total": self.cart.total
        })

    def add_product(self, product: Product, quantity: int = 1) -> Dict[str, Any]:
        # Add a product, merging with an existing line
        if not product.is_in_stock():
            self.notifications.error("Product out of stock")
            return {"success": False, "error": f"{product.name} is out of stock"}

        if quantity < 1:
            self.notifications.error("Quantity must be at least 1")
            return {"success": False, "error": "Quantity must be at least 1"}

        self.cart.add_item(product, quantity)
        log.debug("Added %s x%d to cart", product.id, quantity)
        saved = self.save_cart()
        self.notifications.success("Product added to cart")

        return {
            "success": True,
            "persisted": saved,
            "message": f"{product.name} added to cart",
            "quantity": self.get_product_quantity(product.id),
            "total_items": self.cart.total_items,
            "total": self.cart.total
        }

    def remove_product(self, product_id: int) -> Dict[str, Any]:
        self.cart.remove_item(product_id)
        saved = self.save_cart()
        self.notifications.info("Product removed from cart")
        return {"success": True, "persisted": saved, "message": "Product removed from cart"}

    def update_quantity(self, product_id: int, quantity: int) -> Dict[str, Any]:
        # Overwrite a line's quantity; zero removes the line
        if quantity < 0:
            return {"success": False, "error": "Quantity cannot be negative"}

        if not self.cart.find_item(product_id):
            return {"success": False, "error": "Product is not in the cart"}

        if quantity == 0:
            return self.remove_product(product_id)

        self.cart.update_quantity(product_id, quantity)
        saved = self.save_cart()
        return {
            "success": True,
            "persisted": saved,
            "message": f"Quantity set to {quantity}",
            "quantity": self.get_product_quantity(product_id)
        }

    def increment_quantity(self, product_id: int) -> Dict[str, Any]:
        line = self.cart.find_item(product_id)
        if not line:
            return {"success": False, "error": "Product is not in the cart"}
        return self.update_quantity(product_id, line.quantity + 1)

    def decrement_quantity(self, product_id: int) -> Dict[str, Any]:
        line = self.cart.find_item(product_id)
        if not line:
            return {"success": False, "error": "Product is not in the cart"}
        return self.update_quantity(product_id, line.quantity - 1)

    def apply_discount_code(self, code: str, discount: Optional[DiscountDescriptor]) -> Dict[str, Any]:
        # The code must already be resolved; an absent descriptor leaves the cart untouched
        if not discount:
            self.notifications.error("Invalid discount code")
            return {"success": False, "error": "Invalid discount code"}

        self.cart.apply_discount(code, discount.percentage)
        saved = self.save_cart()

        savings = self.cart.discount_amount
        self.notifications.success(f"Discount applied! You save {format_money(savings)}")
        return {
            "success": True,
            "persisted": saved,
            "message": f"Discount {code} applied",
            "savings": savings,
            "total": self.cart.total
        }

    def remove_discount(self) -> Dict[str, Any]:
        self.cart.remove_discount()
        saved = self.save_cart()
        self.notifications.info("Discount removed")
        return {"success": True, "persisted": saved, "message": "Discount removed"}

    def clear_cart(self) -> Dict[str, Any]:
        self.cart.clear()
        saved = self.save_cart()
        self.notifications.info("Cart emptied")
        return {"success": True, "persisted": saved, "message": "Cart emptied"}

    def validate_checkout(self) -> ValidationResult:
        stock_lookup = self.catalog.get_stock if self.catalog else None
        return validate_checkout(self.cart, stock_lookup)

    def get_cart(self) -> Cart:
        return self.cart

    def get_items(self) -> List[CartLine]:
        return self.cart.get_items()

    def get_subtotal(self) -> float:
        return self.cart.subtotal

    def get_discount_amount(self) -> float:
        return self.cart.discount_amount

    def get_total(self) -> float:
        return self.cart.total

    def get_total_items(self) -> int:
        return self.cart.total_items

    def is_empty(self) -> bool:
        return self.cart.is_empty()

    def has_product(self, product_id: int) -> bool:
        return self.cart.find_item(product_id) is not None

    def get_product_quantity(self, product_id: int) -> int:
        line = self.cart.find_item(product_id)
        return line.quantity if line else 0

    def get_summary(self) -> CartSummary:
        return self.cart.summary()

    def get_cart_details(self) -> Dict[str, Any]:
        # Lines plus summary, shaped for the display layer and the HTTP API
        lines = self.cart.get_items()
        return {
            "success": True,
            "cart_items": [
                {
                    "product_id": line.product.id,
                    "product_name": line.product.name,
                    "price": line.product.price,
                    "quantity": line.quantity,
                    "line_total": line.line_total
                }
                for line in lines
            ],
            "summary": self.cart.summary().to_dict(),
            "message": f"{len(lines)} products in the cart" if lines else "Your cart is empty"
        }
