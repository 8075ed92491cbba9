"""
Application-wide constants for VioletStore
"""

STORAGE_KEYS = {
    "USER": "user",
    "CART": "cart",
    "ORDER_HISTORY": "order_history",
}

EVENTS = {
    "CART_UPDATED": "cart:updated",
    "USER_LOGGED_IN": "user:loggedIn",
    "USER_LOGGED_OUT": "user:loggedOut",
    "VIEW_CHANGED": "view:changed",
    "ORDER_CREATED": "order:created",
    "NOTIFICATION": "notification",
}

NOTIFICATION_TYPES = {
    "SUCCESS": "success",
    "ERROR": "error",
    "WARNING": "warning",
    "INFO": "info",
}

DEFAULT_STORAGE_PREFIX = "violetstore_"
DEFAULT_HISTORY_LIMIT = 10
LOW_STOCK_THRESHOLD = 5
MIN_PASSWORD_LENGTH = 6
MIN_NAME_LENGTH = 2
