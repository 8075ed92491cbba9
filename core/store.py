"""
Main VioletStore class - orchestrates all services
"""
import logging
from typing import Dict, List, Any, Optional

from database.connection import DatabaseConnection
from database.repository import StorageRepository, CartRepository, OrderRepository, UserRepository
from models.navigation import View
from models.order import Order
from services.auth_service import AuthService
from services.cart_service import CartService
from services.data_service import DataService
from services.discount_service import DiscountService
from services.event_bus import EventBus
from services.navigation_service import NavigationService, ViewDisplay
from services.notification_service import NotificationService
from services.order_service import OrderService
from services.product_service import ProductService
from .config import StoreSettings
from .constants import EVENTS

log = logging.getLogger(__name__)


class VioletStore:
    # Composition root: builds every collaborator once and wires them to one event bus

    def __init__(self, settings: Optional[StoreSettings] = None, display: Optional[ViewDisplay] = None):
        self.settings = settings or StoreSettings()

        # Shared event bus and user-facing messages
        self.event_bus = EventBus()
        self.notifications = NotificationService(self.event_bus)

        # Repository layer (persistence)
        self.db_connection = DatabaseConnection(self.settings.db_path)
        self.storage = StorageRepository(self.db_connection, self.settings.storage_prefix)
        self.cart_repo = CartRepository(self.storage)
        self.order_repo = OrderRepository(self.storage)
        self.user_repo = UserRepository(self.storage)

        # Static data: catalog, discount table, blog posts
        self.data_service = DataService(self.settings.data_path)
        data = self.data_service.load_data()
        self.product_service = ProductService(data["products"])
        self.discount_service = DiscountService(data["discount_codes"])
        self.blog_posts = data["blog_posts"]

        # Service layer (business logic)
        self.navigation = NavigationService(self.event_bus, display, self.settings.history_limit)
        self.auth_service = AuthService(self.user_repo, self.event_bus)
        self.cart_service = CartService(self.cart_repo, self.event_bus, self.notifications, self.product_service)
        self.order_service = OrderService(self.order_repo, self.event_bus, self.notifications)

        self.event_bus.subscribe(EVENTS["VIEW_CHANGED"], self.handle_view_change)
        self.navigation.navigate_to(View.HOME)

    def handle_view_change(self, payload: Dict[str, Any]):
        # The profile view needs a signed-in user
        if payload["view"] == View.PROFILE and not self.auth_service.is_authenticated():
            self.navigation.navigate_to(View.LOGIN)

    # === Catalog ===
    def get_products(self) -> List[Dict[str, Any]]:
        return [product.to_dict() for product in self.product_service.get_filtered_products()]

    def find_product(self, query: str, limit: int = 5) -> Dict[str, Any]:
        return self.product_service.find_product(query, limit)

    def get_product_by_id(self, product_id: int) -> Optional[Dict[str, Any]]:
        product = self.product_service.find_by_id(product_id)
        return product.to_dict() if product else None

    # === Cart ===
    def add_to_cart(self, product_id: int, quantity: int = 1) -> Dict[str, Any]:
        product = self.product_service.find_by_id(product_id)
        if not product:
            return {"success": False, "error": "Product not found"}
        return self.cart_service.add_product(product, quantity)

    def remove_from_cart(self, product_id: int) -> Dict[str, Any]:
        return self.cart_service.remove_product(product_id)

    def update_cart_item(self, product_id: int, quantity: int) -> Dict[str, Any]:
        return self.cart_service.update_quantity(product_id, quantity)

    def increment_cart_item(self, product_id: int) -> Dict[str, Any]:
        return self.cart_service.increment_quantity(product_id)

    def decrement_cart_item(self, product_id: int) -> Dict[str, Any]:
        return self.cart_service.decrement_quantity(product_id)

    def get_cart_details(self) -> Dict[str, Any]:
        return self.cart_service.get_cart_details()

    def clear_cart(self) -> Dict[str, Any]:
        return self.cart_service.clear_cart()

    def apply_discount(self, code: str) -> Dict[str, Any]:
        # Blank input is rejected before the code table is consulted
        normalized = (code or "").strip().upper()
        if not normalized:
            self.notifications.warning("Enter a discount code")
            return {"success": False, "error": "Enter a discount code"}

        discount = self.discount_service.validate_code(normalized)
        return self.cart_service.apply_discount_code(normalized, discount)

    def remove_discount(self) -> Dict[str, Any]:
        return self.cart_service.remove_discount()

    # === Checkout ===
    def process_checkout(self) -> Dict[str, Any]:
        """Turn the cart into an order.

        Order of steps: require a signed-in user (else go to login), validate
        the cart against live stock, build and persist the order, then
        empty the cart and show the profile view. The cart is only emptied
        after the order has been written.
        """
        if not self.auth_service.is_authenticated():
            self.notifications.warning("Please sign in to complete your purchase")
            self.navigation.navigate_to(View.LOGIN)
            return {"success": False, "error": "Authentication required", "redirect": View.LOGIN.value}

        validation = self.cart_service.validate_checkout()
        if not validation.is_valid:
            for error in validation.errors:
                self.notifications.error(error)
            return {"success": False, "error": validation.errors[0], "errors": validation.errors}

        user = self.auth_service.get_current_user()
        result = self.order_service.place_order(self.cart_service.get_cart(), user.id)
        if not result["success"]:
            self.notifications.error(result["error"])
            return result

        order: Order = result["order"]
        self.cart_service.clear_cart()
        self.notifications.success("Order placed successfully!")
        self.navigation.navigate_to(View.PROFILE)

        log.info("Checkout completed: order %s", order.id)
        return {
            "success": True,
            "order_id": order.id,
            "total": order.total,
            "order": order.to_dict(),
            "message": result["message"]
        }

    # === Account and orders ===
    def login(self, email: str, password: str) -> Dict[str, Any]:
        result = self.auth_service.login(email, password)
        self._report_auth(result)
        return result

    def register(self, name: str, email: str, password: str) -> Dict[str, Any]:
        result = self.auth_service.register(name, email, password)
        self._report_auth(result)
        return result

    def _report_auth(self, result: Dict[str, Any]):
        if result["success"]:
            self.notifications.success(result["message"])
            self.navigation.navigate_to(View.HOME)
        else:
            for error in result.get("errors", [result["error"]]):
                self.notifications.error(error)

    def logout(self) -> Dict[str, Any]:
        result = self.auth_service.logout()
        self.notifications.info(result["message"])
        self.navigation.navigate_to(View.HOME)
        return result

    def get_order_history(self) -> List[Dict[str, Any]]:
        user = self.auth_service.get_current_user()
        if not user:
            return []
        return [order.to_dict() for order in self.order_service.get_order_history(user.id)]

    def cancel_order(self, order_id: int) -> Dict[str, Any]:
        return self.order_service.cancel_order(order_id)

    # === Navigation ===
    def navigate_to(self, view: Any, data: Optional[Dict[str, Any]] = None) -> bool:
        return self.navigation.navigate_to(view, data)

    def go_back(self) -> View:
        return self.navigation.go_back()

    def get_blog_posts(self) -> List[Dict[str, Any]]:
        return list(self.blog_posts)
