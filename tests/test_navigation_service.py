"""
Tests for the view state machine
"""
import unittest

from core.constants import EVENTS
from models.navigation import View
from services.event_bus import EventBus
from services.navigation_service import NavigationService
from ui.display import RegionDisplay


class TestNavigationService(unittest.TestCase):
    """Test cases for NavigationService"""

    def setUp(self):
        self.bus = EventBus()
        self.events = []
        self.bus.subscribe(EVENTS["VIEW_CHANGED"], self.events.append)
        self.display = RegionDisplay()
        self.nav = NavigationService(self.bus, self.display)

    def test_initial_state(self):
        self.assertEqual(self.nav.current_view, View.HOME)
        self.assertEqual(self.nav.get_history(), [View.HOME])
        self.assertFalse(self.nav.can_go_back())

    def test_navigate_accepts_string_ids(self):
        self.assertTrue(self.nav.navigate_to("cart"))
        self.assertEqual(self.nav.current_view, View.CART)
        self.assertTrue(self.nav.is_current_view("cart"))

    def test_invalid_view_is_ignored(self):
        self.nav.navigate_to(View.CART)
        self.events.clear()

        self.assertFalse(self.nav.navigate_to("checkout"))

        self.assertEqual(self.nav.current_view, View.CART)
        self.assertEqual(self.nav.get_history(), [View.HOME, View.CART])
        self.assertEqual(self.events, [])

    def test_history_ends_with_current_view(self):
        for view in (View.CART, View.BLOG, View.ADVISOR, View.LOGIN):
            self.nav.navigate_to(view)
            self.assertEqual(self.nav.get_history()[-1], self.nav.current_view)

    def test_consecutive_duplicates_are_suppressed(self):
        self.nav.navigate_to(View.CART)
        self.nav.navigate_to(View.CART)
        self.assertEqual(self.nav.get_history(), [View.HOME, View.CART])
        self.assertEqual(len(self.events), 2)

    def test_history_is_capped_at_ten(self):
        for i in range(15):
            self.nav.navigate_to(View.CART if i % 2 == 0 else View.BLOG)

        history = self.nav.get_history()
        self.assertEqual(len(history), 10)
        self.assertEqual(history[-1], View.CART)

    def test_go_back_returns_previous_view(self):
        """home -> cart -> profile, back gives cart, back again gives home"""
        self.nav.navigate_to(View.CART)
        self.nav.navigate_to(View.PROFILE)

        self.assertEqual(self.nav.go_back(), View.CART)
        self.assertEqual(self.nav.get_history(), [View.HOME, View.CART])

        self.assertEqual(self.nav.go_back(), View.HOME)
        self.assertEqual(self.nav.get_history(), [View.HOME])

    def test_go_back_from_single_entry_goes_home(self):
        self.nav.navigate_to(View.BLOG)
        self.nav.clear_history()
        self.assertEqual(self.nav.get_history(), [View.BLOG])

        self.assertEqual(self.nav.go_back(), View.HOME)

    def test_regions_follow_current_view(self):
        self.nav.navigate_to(View.HOME)
        self.assertEqual(self.display.visible, {"heroSection", "searchSection", "productsGrid"})

        self.nav.navigate_to(View.CART)
        self.assertEqual(self.display.visible, {"cartView"})

    def test_scroll_and_mobile_menu_reset(self):
        self.display.toggle_mobile_menu()
        self.nav.navigate_to(View.BLOG)

        self.assertFalse(self.display.mobile_menu_open)
        self.assertEqual(self.display.scroll_resets, 1)

    def test_view_changed_payload(self):
        self.nav.navigate_to(View.PROFILE, {"tab": "orders"})

        payload = self.events[-1]
        self.assertEqual(payload["view"], View.PROFILE)
        self.assertEqual(payload["data"], {"tab": "orders"})
        self.assertIsInstance(payload["timestamp"], int)

    def test_works_without_display(self):
        nav = NavigationService(self.bus)
        self.assertTrue(nav.navigate_to(View.ADVISOR))
        self.assertEqual(nav.current_view, View.ADVISOR)


class TestEventBus(unittest.TestCase):
    """Test cases for EventBus"""

    def test_dispatch_in_subscription_order(self):
        bus = EventBus()
        calls = []
        bus.subscribe("evt", lambda payload: calls.append(("a", payload["n"])))
        bus.subscribe("evt", lambda payload: calls.append(("b", payload["n"])))

        self.assertEqual(bus.emit("evt", {"n": 1}), 2)
        self.assertEqual(calls, [("a", 1), ("b", 1)])

    def test_failing_listener_does_not_block_others(self):
        bus = EventBus()
        calls = []

        def broken(payload):
            raise RuntimeError("boom")

        bus.subscribe("evt", broken)
        bus.subscribe("evt", calls.append)

        with self.assertLogs("services.event_bus", level="ERROR"):
            delivered = bus.emit("evt", {"n": 1})
        self.assertEqual(delivered, 1)
        self.assertEqual(calls, [{"n": 1}])

    def test_unsubscribe(self):
        bus = EventBus()
        calls = []
        unsubscribe = bus.subscribe("evt", calls.append)
        unsubscribe()

        self.assertEqual(bus.emit("evt", {}), 0)
        self.assertEqual(bus.listener_count("evt"), 0)


if __name__ == '__main__':
    unittest.main()
