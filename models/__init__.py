"""
Models package for VioletStore
Contains data models and type definitions
"""

from .product import Product
from .cart import Cart, CartLine, CartSummary
from .order import Order, OrderItem, OrderStatus, VALID_TRANSITIONS
from .user import User
from .navigation import View, SingleRegion, CompositeRegion, NavigationState, VIEW_REGIONS
from .errors import StoreError, InvalidStatusTransitionError, OrderNotFoundError

__all__ = [
    'Product',
    'Cart', 'CartLine', 'CartSummary',
    'Order', 'OrderItem', 'OrderStatus', 'VALID_TRANSITIONS',
    'User',
    'View', 'SingleRegion', 'CompositeRegion', 'NavigationState', 'VIEW_REGIONS',
    'StoreError', 'InvalidStatusTransitionError', 'OrderNotFoundError'
]
