"""
Core package for VioletStore
Contains configuration, shared constants and the store composition root
(import ``VioletStore`` from ``core.store``)
"""

from .constants import STORAGE_KEYS, EVENTS, NOTIFICATION_TYPES
from .config import StoreSettings, load_settings

__all__ = [
    'STORAGE_KEYS', 'EVENTS', 'NOTIFICATION_TYPES',
    'StoreSettings', 'load_settings'
]
