"""
Simple text-based UI for the storefront
"""
import logging
import shlex
from typing import Dict, Any, List

from core.config import load_settings
from core.store import VioletStore
from models.navigation import View
from .display import RegionDisplay

HELP_TEXT = """Commands:
  products [term]        list products (optionally matching a term)
  add <id> [qty]         add a product to the cart
  remove <id>            remove a product from the cart
  qty <id> <n>           set a quantity (0 removes)
  + <id> / - <id>        increase / decrease a quantity
  discount <code>        apply a discount code
  nodiscount             remove the discount
  cart                   show the cart
  clear                  empty the cart
  checkout               place the order
  login <email> <pw>     sign in
  register <name> <email> <pw>
  logout                 sign out
  orders                 show your orders
  cancel <order id>      cancel a processing order
  go <view>              switch view (home, cart, login, profile, blog, advisor)
  back                   previous view
  quit                   leave"""


class SimpleStoreUI:
    """Simple text-based storefront"""

    def __init__(self, store: VioletStore):
        self.store = store

    def run(self):
        """Run the command loop until the user quits"""
        print("VioletStore")
        print("Type 'help' for the list of commands.")
        self._flush_notifications()

        while True:
            try:
                user_input = input(f"\n[{self.store.navigation.current_view.value}] > ").strip()
            except EOFError:
                break

            if not user_input:
                continue
            if user_input in ["quit", "exit"]:
                print("Thanks for visiting!")
                break

            self.handle_command(user_input)
            self._flush_notifications()

    def handle_command(self, user_input: str):
        """Dispatch one command line"""
        try:
            parts = shlex.split(user_input)
        except ValueError:
            print("Could not parse that command.")
            return

        command, args = parts[0].lower(), parts[1:]
        try:
            if command == "help":
                print(HELP_TEXT)
            elif command == "products":
                self._show_products(" ".join(args))
            elif command == "add" and args:
                quantity = int(args[1]) if len(args) > 1 else 1
                self._show_result(self.store.add_to_cart(int(args[0]), quantity))
            elif command == "remove" and args:
                self._show_result(self.store.remove_from_cart(int(args[0])))
            elif command == "qty" and len(args) == 2:
                self._show_result(self.store.update_cart_item(int(args[0]), int(args[1])))
            elif command == "+" and args:
                self._show_result(self.store.increment_cart_item(int(args[0])))
            elif command == "-" and args:
                self._show_result(self.store.decrement_cart_item(int(args[0])))
            elif command == "discount":
                self._show_result(self.store.apply_discount(" ".join(args)))
            elif command == "nodiscount":
                self._show_result(self.store.remove_discount())
            elif command == "cart":
                self.store.navigate_to(View.CART)
                self._show_cart()
            elif command == "clear":
                self._show_result(self.store.clear_cart())
            elif command == "checkout":
                self._process_checkout()
            elif command == "login" and len(args) == 2:
                self._show_result(self.store.login(args[0], args[1]))
            elif command == "register" and len(args) == 3:
                self._show_result(self.store.register(args[0], args[1], args[2]))
            elif command == "logout":
                self._show_result(self.store.logout())
            elif command == "orders":
                self.store.navigate_to(View.PROFILE)
                self._show_orders()
            elif command == "cancel" and args:
                self._show_result(self.store.cancel_order(int(args[0])))
            elif command == "go" and args:
                if not self.store.navigate_to(args[0]):
                    print(f"Unknown view: {args[0]}")
            elif command == "back":
                print(f"Now on {self.store.go_back().value}")
            else:
                print("Unknown command. Type 'help' for the list of commands.")
        except ValueError:
            print("Ids and quantities must be whole numbers.")

    def _show_products(self, term: str):
        """List products, fuzzy-matched when a term is given"""
        if term:
            products = self.store.find_product(term, limit=10)["matches"]
        else:
            products = self.store.get_products()

        if not products:
            print("No products found.")
            return

        for product in products:
            stock = "out of stock" if product["stock"] <= 0 else f"{product['stock']} left"
            print(f"{product['id']:>3}  {product['name']} ({product['price']:,.2f}) - {stock}")

    def _show_cart(self):
        """Show cart contents"""
        cart = self.store.get_cart_details()
        print(f"\n{cart['message']}")
        for item in cart["cart_items"]:
            print(f"- [{item['product_id']}] {item['product_name']} x{item['quantity']}: {item['line_total']:,.2f}")

        summary = cart["summary"]
        if cart["cart_items"]:
            print(f"Subtotal: {summary['subtotal']:,.2f}")
            if summary["discount_amount"]:
                print(f"Discount ({summary['discount_code']}): -{summary['discount_amount']:,.2f}")
            print(f"Total: {summary['total']:,.2f}")

    def _show_orders(self):
        orders: List[Dict[str, Any]] = self.store.get_order_history()
        if not orders:
            print("No orders yet.")
            return
        for order in orders:
            print(f"#{order['id']}  {order['status']}  {order['total']:,.2f}  ({len(order['items'])} lines)")

    def _process_checkout(self):
        """Process final order"""
        result = self.store.process_checkout()
        if result["success"]:
            print(f"Order complete! {result['message']}")
        elif result.get("redirect"):
            print("Please sign in first: login <email> <password>")
        else:
            for error in result.get("errors", [result["error"]]):
                print(f"- {error}")

    def _show_result(self, result: Dict[str, Any]):
        if result["success"]:
            print(result.get("message", "Done"))
        else:
            print(f"Error: {result['error']}")

    def _flush_notifications(self):
        # Notifications are logged; the kiosk only needs to discard the backlog
        self.store.notifications.drain()


def main():
    settings = load_settings()
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")
    store = VioletStore(settings, display=RegionDisplay())
    SimpleStoreUI(store).run()


if __name__ == "__main__":
    main()
