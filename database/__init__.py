"""
Database package for VioletStore
Contains the sqlite connection and the key/value repositories built on it
"""

from .connection import DatabaseConnection
from .repository import StorageRepository, CartRepository, OrderRepository, UserRepository

__all__ = [
    'DatabaseConnection',
    'StorageRepository', 'CartRepository', 'OrderRepository', 'UserRepository'
]
