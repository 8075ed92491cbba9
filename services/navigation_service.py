"""
Navigation service - which view is current and how the user got there
"""
import logging
import time
from typing import Any, Dict, List, Optional, Protocol

from core.constants import EVENTS, DEFAULT_HISTORY_LIMIT
from models.navigation import View, NavigationState, VIEW_REGIONS, ViewRegion
from .event_bus import EventBus

log = logging.getLogger(__name__)


class ViewDisplay(Protocol):
    def hide(self, region: ViewRegion) -> None: ...

    def show(self, region: ViewRegion) -> None: ...

    def scroll_to_top(self) -> None: ...

    def close_mobile_menu(self) -> None: ...


class NavigationService:
    """View state machine.

    The current view is always one of ``View``. Every accepted transition
    hides all regions, shows the target's regions, records the view in a
    bounded history (consecutive duplicates collapse) and emits
    ``view:changed``. Unknown views are logged and ignored.
    """

    def __init__(self, event_bus: EventBus, display: Optional[ViewDisplay] = None,
                 history_limit: int = DEFAULT_HISTORY_LIMIT):
        self.event_bus = event_bus
        self.display = display
        self.history_limit = history_limit
        self.state = NavigationState()
        self.view_regions = dict(VIEW_REGIONS)

    @property
    def current_view(self) -> View:
        return self.state.current_view

    @property
    def history(self) -> List[View]:
        return self.state.history

    def is_valid_view(self, view: Any) -> bool:
        try:
            View.parse(view)
        except ValueError:
            return False
        return True

    def navigate_to(self, view: Any, data: Optional[Dict[str, Any]] = None) -> bool:
        try:
            target = View.parse(view)
        except ValueError:
            log.warning("Invalid view: %r", view)
            return False

        self.hide_all_views()
        self.state.current_view = target
        self.show_view(target)
        self.add_to_history(target)

        if self.display:
            self.display.scroll_to_top()
            self.display.close_mobile_menu()

        self.emit_view_change(target, data)
        return True

    def hide_all_views(self):
        if not self.display:
            return
        for region in self.view_regions.values():
            self.display.hide(region)

    def show_view(self, view: View):
        if self.display:
            self.display.show(self.view_regions[view])

    def add_to_history(self, view: View):
        if not self.state.history or self.state.history[-1] != view:
            self.state.history.append(view)

        if len(self.state.history) > self.history_limit:
            del self.state.history[:len(self.state.history) - self.history_limit]

    def go_back(self) -> View:
        # Drops the current entry and the one before it; navigating re-records the earlier view
        if len(self.state.history) > 1:
            self.state.history.pop()
            previous = self.state.history.pop()
            self.navigate_to(previous)
        else:
            self.navigate_to(View.HOME)
        return self.state.current_view

    def can_go_back(self) -> bool:
        return len(self.state.history) > 1

    def get_current_view(self) -> View:
        return self.state.current_view

    def is_current_view(self, view: Any) -> bool:
        return self.is_valid_view(view) and View.parse(view) == self.state.current_view

    def get_history(self) -> List[View]:
        return list(self.state.history)

    def clear_history(self):
        self.state.history = [self.state.current_view]

    def emit_view_change(self, view: View, data: Optional[Dict[str, Any]]):
        self.event_bus.emit(EVENTS["VIEW_CHANGED"], {
            "view": view,
            "data": data,
            "timestamp": int(time.time() * 1000)
        })
