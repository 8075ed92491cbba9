"""
UI package for VioletStore
Contains the display collaborator and the text storefront
"""

from .display import RegionDisplay
from .simple_ui import SimpleStoreUI

__all__ = [
    'RegionDisplay', 'SimpleStoreUI'
]
