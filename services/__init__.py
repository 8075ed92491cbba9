"""
Services package for VioletStore
Contains business logic services
"""

from .event_bus import EventBus
from .notification_service import NotificationService, Notification
from .discount_service import DiscountService, DiscountDescriptor, resolve_discount
from .checkout_validator import ValidationResult, validate_checkout
from .data_service import DataService
from .product_service import ProductService
from .auth_service import AuthService
from .cart_service import CartService
from .order_service import OrderService
from .navigation_service import NavigationService

__all__ = [
    'EventBus', 'NotificationService', 'Notification',
    'DiscountService', 'DiscountDescriptor', 'resolve_discount',
    'ValidationResult', 'validate_checkout',
    'DataService', 'ProductService', 'AuthService',
    'CartService', 'OrderService', 'NavigationService'
]
