"""
tests/warehouse_core/test_limits.py
Geometría por defecto y validación de configuración.
"""
import unittest
import warehouse_core.limits as limits

class TestLimits(unittest.TestCase):

    def test_default_geometry(self):
        self.assertEqual(limits.SECTOR_COUNT, 10)
        self.assertEqual(limits.SECTOR_CAPACITY, 5)
        self.assertEqual(limits.ROOT, 1)
        self.assertEqual(limits.WAREHOUSE_CONFIG["sector_count"], limits.SECTOR_COUNT)
        self.assertEqual(limits.WAREHOUSE_CONFIG["capacity"], limits.SECTOR_CAPACITY)

    def test_validate_rejects_non_positive(self):
        with self.assertRaises(ValueError):
            limits.validate_config(0, 5, 100)
        with self.assertRaises(ValueError):
            limits.validate_config(10, -1, 100)

    def test_validate_rejects_non_integers(self):
        with self.assertRaises(ValueError):
            limits.validate_config(10, 5.0, 100)
        with self.assertRaises(ValueError):
            limits.validate_config(True, 5, 100)

    def test_validate_accepts_defaults(self):
        self.assertIsNone(limits.validate_config(**limits.WAREHOUSE_CONFIG))

if __name__ == '__main__':
    unittest.main()
