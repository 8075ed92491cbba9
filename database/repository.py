"""
Database repository classes
"""
import sqlite3
import json
import logging
from typing import List, Optional, Any, Dict

from core.constants import STORAGE_KEYS, DEFAULT_STORAGE_PREFIX
from models.cart import Cart
from models.order import Order
from models.user import User
from .connection import DatabaseConnection

log = logging.getLogger(__name__)


class StorageRepository:
    # Prefixed JSON key/value store; failures are logged and reported, never raised

    def __init__(self, db_connection: DatabaseConnection, prefix: str = DEFAULT_STORAGE_PREFIX):
        # DatabaseConnection instance injection
        self.db = db_connection
        self.prefix = prefix

    def get_key(self, key: str) -> str:
        return f"{self.prefix}{key}"

    def set(self, key: str, value: Any) -> bool:
        # Serialize and upsert a value
        try:
            serialized = json.dumps(value)
            with self.db.get_connection() as conn:
                cursor = conn.cursor()
                cursor.execute("""
                INSERT INTO Storage (key, value, updated_at) VALUES (?, ?, CURRENT_TIMESTAMP)
                ON CONFLICT(key) DO UPDATE SET value = excluded.value, updated_at = excluded.updated_at
                """, (self.get_key(key), serialized))
                conn.commit()
            return True
        except (sqlite3.Error, TypeError, ValueError) as e:
            log.error("Failed to save %s: %s", key, e)
            return False

    def get(self, key: str) -> Optional[Any]:
        # Read and deserialize a value, None when absent or unreadable
        try:
            with self.db.get_connection() as conn:
                cursor = conn.cursor()
                cursor.execute("SELECT value FROM Storage WHERE key = ?", (self.get_key(key),))
                row = cursor.fetchone()
            return json.loads(row[0]) if row else None
        except (sqlite3.Error, ValueError) as e:
            log.error("Failed to read %s: %s", key, e)
            return None

    def remove(self, key: str) -> bool:
        try:
            with self.db.get_connection() as conn:
                cursor = conn.cursor()
                cursor.execute("DELETE FROM Storage WHERE key = ?", (self.get_key(key),))
                conn.commit()
            return True
        except sqlite3.Error as e:
            log.error("Failed to remove %s: %s", key, e)
            return False

    def has(self, key: str) -> bool:
        try:
            with self.db.get_connection() as conn:
                cursor = conn.cursor()
                cursor.execute("SELECT 1 FROM Storage WHERE key = ?", (self.get_key(key),))
                return cursor.fetchone() is not None
        except sqlite3.Error as e:
            log.error("Failed to look up %s: %s", key, e)
            return False

    def clear(self) -> bool:
        # Remove every key the application owns
        results = [self.remove(key) for key in STORAGE_KEYS.values()]
        return all(results)


class CartRepository:
    # Cart snapshot persistence; CartService is the only writer of this key

    def __init__(self, storage: StorageRepository):
        self.storage = storage

    def save_cart(self, cart: Cart) -> bool:
        return self.storage.set(STORAGE_KEYS["CART"], cart.to_dict())

    def get_cart(self) -> Optional[Dict[str, Any]]:
        data = self.storage.get(STORAGE_KEYS["CART"])
        return data if isinstance(data, dict) else None

    def remove_cart(self) -> bool:
        return self.storage.remove(STORAGE_KEYS["CART"])


class OrderRepository:
    # Order history persistence (one list of order records for the device)

    def __init__(self, storage: StorageRepository):
        self.storage = storage

    def get_order_history(self) -> List[Dict[str, Any]]:
        data = self.storage.get(STORAGE_KEYS["ORDER_HISTORY"])
        return data if isinstance(data, list) else []

    def add_order(self, order: Order) -> bool:
        # Append one order record to the stored history
        history = self.get_order_history()
        history.append(order.to_dict())
        return self.storage.set(STORAGE_KEYS["ORDER_HISTORY"], history)

    def update_order(self, order: Order) -> bool:
        # Replace the stored record with this id; every other record is written back untouched
        history = self.get_order_history()
        for index, record in enumerate(history):
            if isinstance(record, dict) and record.get("id") == order.id:
                history[index] = order.to_dict()
                return self.storage.set(STORAGE_KEYS["ORDER_HISTORY"], history)
        log.warning("Order %s is not in the stored history", order.id)
        return False


class UserRepository:
    # Signed-in user persistence

    def __init__(self, storage: StorageRepository):
        self.storage = storage

    def save_user(self, user: User) -> bool:
        return self.storage.set(STORAGE_KEYS["USER"], user.to_dict())

    def get_user(self) -> Optional[User]:
        data = self.storage.get(STORAGE_KEYS["USER"])
        if not isinstance(data, dict) or not data.get("email"):
            return None
        return User.from_dict(data)

    def remove_user(self) -> bool:
        return self.storage.remove(STORAGE_KEYS["USER"])
