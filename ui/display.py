"""
Region display - remembers which page regions are visible
"""
from typing import Set

from models.navigation import ViewRegion


class RegionDisplay:
    # Display collaborator for NavigationService; front ends read it to decide what to draw

    def __init__(self):
        self.visible: Set[str] = set()
        self.scroll_resets = 0
        self.mobile_menu_open = False

    def hide(self, region: ViewRegion):
        self.visible.difference_update(region.refs)

    def show(self, region: ViewRegion):
        self.visible.update(region.refs)

    def is_visible(self, ref: str) -> bool:
        return ref in self.visible

    def scroll_to_top(self):
        self.scroll_resets += 1

    def toggle_mobile_menu(self):
        self.mobile_menu_open = not self.mobile_menu_open

    def close_mobile_menu(self):
        self.mobile_menu_open = False
