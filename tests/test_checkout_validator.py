"""
Tests for checkout validation
"""
import unittest

from models.cart import Cart
from models.product import Product
from services.checkout_validator import validate_checkout


class TestValidateCheckout(unittest.TestCase):
    """Test cases for validate_checkout"""

    def setUp(self):
        self.cart = Cart()

    def test_empty_cart_has_exactly_one_error(self):
        result = validate_checkout(self.cart)

        self.assertFalse(result.is_valid)
        self.assertEqual(result.errors, ["Cart is empty"])

    def test_insufficient_stock(self):
        """Quantity 3 against stock 1 is insufficient, not out of stock"""
        self.cart.add_item(Product(id=1, name="Serum", price=100, stock=1), 3)

        result = validate_checkout(self.cart)

        self.assertFalse(result.is_valid)
        self.assertEqual(result.errors, ["Serum has insufficient stock"])

    def test_out_of_stock_excludes_insufficient(self):
        product = Product(id=1, name="Serum", price=100, stock=5)
        self.cart.add_item(product, 3)
        product.stock = 0

        result = validate_checkout(self.cart)

        self.assertEqual(result.errors, ["Serum is out of stock"])

    def test_valid_cart(self):
        self.cart.add_item(Product(id=1, name="Serum", price=100, stock=3), 3)
        result = validate_checkout(self.cart)
        self.assertTrue(result.is_valid)
        self.assertEqual(result.errors, [])

    def test_errors_follow_line_order(self):
        self.cart.add_item(Product(id=1, name="Serum", price=100, stock=1), 2)
        self.cart.add_item(Product(id=2, name="Balm", price=100, stock=1), 1)
        self.cart.add_item(Product(id=3, name="Mask", price=100, stock=1), 4)

        result = validate_checkout(self.cart, stock_lookup={1: 1, 2: 0, 3: 1}.get)

        self.assertEqual(result.errors, [
            "Serum has insufficient stock",
            "Balm is out of stock",
            "Mask has insufficient stock",
        ])

    def test_live_stock_lookup_wins(self):
        self.cart.add_item(Product(id=1, name="Serum", price=100, stock=10), 2)

        result = validate_checkout(self.cart, stock_lookup=lambda product_id: 1)

        self.assertEqual(result.errors, ["Serum has insufficient stock"])

    def test_lookup_miss_falls_back_to_line_product(self):
        self.cart.add_item(Product(id=1, name="Serum", price=100, stock=2), 2)
        result = validate_checkout(self.cart, stock_lookup=lambda product_id: None)
        self.assertTrue(result.is_valid)


if __name__ == '__main__':
    unittest.main()
