"""
tests/warehouse_core/ds/test_product.py
Registro de Producto: identidad fija y contadores mutables.
"""
import unittest
from warehouse_core.ds.product import Product

class TestProduct(unittest.TestCase):

    def setUp(self):
        self.p = Product(42, "tornillo", 10, 3, 7)

    def test_initial_state(self):
        self.assertEqual(self.p.id, 42)
        self.assertEqual(self.p.name, "tornillo")
        self.assertEqual(self.p.stock, 10)
        self.assertEqual(self.p.day, 3)
        self.assertEqual(self.p.demand, 7)
        self.assertIsNone(self.p.last_purchase_day)

    def test_name_and_day_are_read_only(self):
        with self.assertRaises(AttributeError):
            self.p.name = "otro"
        with self.assertRaises(AttributeError):
            self.p.day = 99

    def test_signed_updates(self):
        self.p.update_stock(5)
        self.p.update_stock(-12)
        self.assertEqual(self.p.stock, 3)
        self.p.update_demand(4)
        self.assertEqual(self.p.demand, 11)

    def test_last_purchase_day(self):
        self.p.set_last_purchase_day(8)
        self.assertEqual(self.p.as_dict()["last_purchase_day"], 8)

    def test_repr_contains_identity(self):
        text = repr(self.p)
        self.assertIn("42", text)
        self.assertIn("tornillo", text)

if __name__ == '__main__':
    unittest.main()
