"""
Tests for the Cart data model
"""
import unittest

from models.cart import Cart, CartLine
from models.product import Product


def make_product(product_id=1, price=1000, stock=10, name=None):
    return Product(id=product_id, name=name or f"Product {product_id}", price=price, stock=stock)


class TestCart(unittest.TestCase):
    """Test cases for Cart"""

    def setUp(self):
        self.cart = Cart()
        self.serum = make_product(1, price=1000)
        self.balm = make_product(2, price=500)

    def test_new_cart_is_empty(self):
        """A new cart has no lines and no discount"""
        self.assertTrue(self.cart.is_empty())
        self.assertEqual(self.cart.subtotal, 0)
        self.assertEqual(self.cart.total, 0)
        self.assertIsNone(self.cart.discount_code)
        self.assertEqual(self.cart.discount_percentage, 0)

    def test_repeated_add_merges_into_one_line(self):
        """Adding the same product keeps a single line with the summed quantity"""
        for quantity in (1, 3, 2):
            self.cart.add_item(self.serum, quantity)

        self.assertEqual(len(self.cart.get_items()), 1)
        self.assertEqual(self.cart.find_item(1).quantity, 6)

    def test_add_preserves_insertion_order(self):
        self.cart.add_item(self.balm)
        self.cart.add_item(self.serum)
        self.cart.add_item(self.balm)

        self.assertEqual([line.product_id for line in self.cart.get_items()], [2, 1])

    def test_update_quantity_overwrites(self):
        self.cart.add_item(self.serum, 2)
        self.cart.update_quantity(1, 5)
        self.assertEqual(self.cart.find_item(1).quantity, 5)

    def test_update_quantity_zero_equals_remove(self):
        """update_quantity(id, 0) and remove_item(id) leave the same cart"""
        other = Cart()
        for cart in (self.cart, other):
            cart.add_item(self.serum, 2)
            cart.add_item(self.balm, 1)

        self.cart.update_quantity(1, 0)
        other.remove_item(1)

        self.assertIsNone(self.cart.find_item(1))
        self.assertEqual(self.cart.to_dict(), other.to_dict())

    def test_remove_missing_item_is_noop(self):
        self.cart.add_item(self.serum)
        self.cart.remove_item(99)
        self.assertEqual(len(self.cart.get_items()), 1)

    def test_update_missing_item_is_noop(self):
        self.cart.update_quantity(99, 4)
        self.assertTrue(self.cart.is_empty())

    def test_derived_totals(self):
        self.cart.add_item(self.serum, 2)
        self.cart.add_item(self.balm, 3)

        self.assertEqual(self.cart.subtotal, 3500)
        self.assertEqual(self.cart.total_items, 5)
        self.assertEqual(self.cart.total, 3500)

    def test_totals_follow_mutations(self):
        self.cart.add_item(self.serum, 2)
        self.assertEqual(self.cart.subtotal, 2000)
        self.cart.update_quantity(1, 1)
        self.assertEqual(self.cart.subtotal, 1000)
        self.serum.price = 1200
        self.assertEqual(self.cart.subtotal, 1200)

    def test_discount_identity_for_all_percentages(self):
        """total == subtotal - subtotal * pct / 100 for every pct in [0, 100]"""
        self.cart.add_item(self.serum, 3)
        self.cart.add_item(self.balm, 1)

        for percentage in range(0, 101, 5):
            self.cart.apply_discount("CODE", percentage)
            subtotal = self.cart.subtotal
            self.assertAlmostEqual(self.cart.total, subtotal - subtotal * percentage / 100)

    def test_save10_on_100000(self):
        self.cart.add_item(make_product(7, price=50000), 2)
        self.cart.apply_discount("SAVE10", 10)

        self.assertEqual(self.cart.subtotal, 100000)
        self.assertEqual(self.cart.discount_amount, 10000)
        self.assertEqual(self.cart.total, 90000)

    def test_remove_discount_resets_both_fields(self):
        self.cart.apply_discount("SAVE10", 10)
        self.cart.remove_discount()
        self.assertIsNone(self.cart.discount_code)
        self.assertEqual(self.cart.discount_percentage, 0)

    def test_clear_removes_lines_and_discount(self):
        self.cart.add_item(self.serum, 2)
        self.cart.apply_discount("SAVE10", 10)

        self.cart.clear()

        self.assertTrue(self.cart.is_empty())
        self.assertEqual(self.cart.discount_percentage, 0)
        self.assertIsNone(self.cart.discount_code)

    def test_get_items_returns_copy(self):
        self.cart.add_item(self.serum)
        items = self.cart.get_items()
        items.clear()
        self.assertFalse(self.cart.is_empty())

    def test_to_dict_shape(self):
        self.cart.add_item(self.serum, 2)
        self.cart.apply_discount("SAVE10", 10)

        data = self.cart.to_dict()

        self.assertEqual(data["discountCode"], "SAVE10")
        self.assertEqual(data["discountPercentage"], 10)
        self.assertEqual(data["items"][0]["productId"], 1)
        self.assertEqual(data["items"][0]["quantity"], 2)
        self.assertEqual(data["items"][0]["product"]["price"], 1000)

    def test_line_quantity_must_be_positive(self):
        with self.assertRaises(ValueError):
            CartLine(product=self.serum, quantity=0)

    def test_product_rejects_negative_values(self):
        with self.assertRaises(ValueError):
            make_product(price=-1)
        with self.assertRaises(ValueError):
            make_product(stock=-1)


class TestProduct(unittest.TestCase):
    """Test cases for Product helpers"""

    def setUp(self):
        self.product = Product(
            id=1, name="Lavender Serum", price=100, stock=3,
            certifications=["vegan", "organic"], category="Skincare",
            ingredients=["lavender oil", "aloe vera"]
        )

    def test_matches_search(self):
        self.assertTrue(self.product.matches_search("serum"))
        self.assertTrue(self.product.matches_search("SKIN"))
        self.assertTrue(self.product.matches_search("aloe"))
        self.assertFalse(self.product.matches_search("shampoo"))

    def test_matches_filters(self):
        self.assertTrue(self.product.matches_filters([]))
        self.assertTrue(self.product.matches_filters(["vegan", "organic"]))
        self.assertFalse(self.product.matches_filters(["vegan", "cruelty-free"]))

    def test_stock_helpers(self):
        self.assertTrue(self.product.is_low_stock())
        self.product.reduce_stock(5)
        self.assertEqual(self.product.stock, 3)
        self.product.reduce_stock(3)
        self.assertFalse(self.product.is_in_stock())
        self.product.increase_stock(10)
        self.assertFalse(self.product.is_low_stock())

    def test_from_dict_round_trip(self):
        self.assertEqual(Product.from_dict(self.product.to_dict()), self.product)


if __name__ == '__main__':
    unittest.main()
