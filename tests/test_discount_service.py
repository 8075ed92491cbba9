"""
Tests for discount code resolution
"""
import unittest

from services.discount_service import DiscountService, DiscountDescriptor, resolve_discount


class TestResolveDiscount(unittest.TestCase):
    """Test cases for resolve_discount"""

    def test_mapping_table(self):
        result = resolve_discount("SAVE10", {"SAVE10": 10})
        self.assertEqual(result, DiscountDescriptor("SAVE10", 10))

    def test_code_is_trimmed_and_upper_cased(self):
        result = resolve_discount("  save10 ", {"SAVE10": 10})
        self.assertIsNotNone(result)
        self.assertEqual(result.percentage, 10)

    def test_list_table_from_data_file(self):
        table = [
            {"code": "SAVE10", "discount": 10, "description": "10% off"},
            {"code": "WELCOME20", "discount": 20},
        ]
        result = resolve_discount("welcome20", table)
        self.assertEqual(result.code, "WELCOME20")
        self.assertEqual(result.percentage, 20)

    def test_mapping_of_records(self):
        result = resolve_discount("vip", {"VIP": {"discount": 30, "description": "VIP"}})
        self.assertEqual(result.percentage, 30)
        self.assertEqual(result.description, "VIP")

    def test_unknown_code(self):
        self.assertIsNone(resolve_discount("NOPE", {"SAVE10": 10}))
        self.assertIsNone(resolve_discount("NOPE", []))

    def test_out_of_range_percentages_do_not_resolve(self):
        """Zero, negative and above-100 entries are not usable discounts"""
        table = {"FREE": 0, "NEG": -20, "BIG": 150}
        self.assertIsNone(resolve_discount("FREE", table))
        self.assertIsNone(resolve_discount("NEG", table))
        self.assertIsNone(resolve_discount("BIG", table))

    def test_full_discount_resolves(self):
        self.assertEqual(resolve_discount("ALL", {"ALL": 100}).percentage, 100)

    def test_non_numeric_percentages_do_not_resolve(self):
        table = [
            {"code": "TEXT", "discount": "10"},
            {"code": "FLAG", "discount": True},
            {"code": "MISSING"},
        ]
        self.assertIsNone(resolve_discount("TEXT", table))
        self.assertIsNone(resolve_discount("FLAG", table))
        self.assertIsNone(resolve_discount("MISSING", table))
        self.assertIsNone(resolve_discount("VIP", {"VIP": {"discount": None}}))

    def test_deterministic(self):
        table = {"SAVE10": 10}
        self.assertEqual(resolve_discount("SAVE10", table), resolve_discount("SAVE10", table))


class TestDiscountService(unittest.TestCase):
    """Test cases for DiscountService"""

    def test_validate_code(self):
        service = DiscountService([{"code": "VIOLET15", "discount": 15}])
        self.assertEqual(service.validate_code("violet15").percentage, 15)
        self.assertIsNone(service.validate_code("VIOLET16"))


if __name__ == '__main__':
    unittest.main()
