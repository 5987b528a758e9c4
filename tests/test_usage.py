import sys
import os
import json
import shutil
import tempfile
import unittest
from datetime import date, datetime

# Ensure project root is in path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
sys.path.append(project_root)

from packages.ais_usage.clock import FixedClock, SystemClock
from packages.ais_usage.infrastructure.memory_repo import MemoryUsageCounterStore
from packages.ais_usage.infrastructure.file_repo import FileUsageCounterStore
from packages.ais_session.policy import FreeTierPolicy, PremiumPolicy, PlanTier, get_policy

class TestClock(unittest.TestCase):
    def test_fixed_clock_day_key(self):
        clock = FixedClock(datetime(2024, 3, 9, 23, 59))
        self.assertEqual(clock.today_key(), "2024-03-09")
        clock.advance(minutes=2)
        self.assertEqual(clock.today_key(), "2024-03-10")
        clock.set_date(date(2025, 1, 1))
        self.assertEqual(clock.today_key(), "2025-01-01")

    def test_system_clock_uses_iso_date(self):
        self.assertEqual(SystemClock().today_key(), SystemClock().now().date().isoformat())

class TestMemoryUsageCounterStore(unittest.TestCase):
    def test_counts_per_date(self):
        store = MemoryUsageCounterStore()
        self.assertEqual(store.get("2024-01-01"), 0)
        self.assertEqual(store.increment("2024-01-01"), 1)
        self.assertEqual(store.increment("2024-01-01"), 2)
        self.assertEqual(store.get("2024-01-02"), 0)
        store.clear()
        self.assertEqual(store.get("2024-01-01"), 0)

class TestFileUsageCounterStore(unittest.TestCase):
    def setUp(self):
        self.temp_dir = tempfile.mkdtemp()
        self.path = os.path.join(self.temp_dir, "nested", "usage.json")
        self.store = FileUsageCounterStore(self.path)

    def tearDown(self):
        shutil.rmtree(self.temp_dir)

    def test_missing_file_reads_zero(self):
        self.assertEqual(self.store.get("2024-01-01"), 0)

    def test_increment_persists(self):
        self.store.increment("2024-01-01")
        self.store.increment("2024-01-01")
        reopened = FileUsageCounterStore(self.path)
        self.assertEqual(reopened.get("2024-01-01"), 2)
        with open(self.path, encoding="utf-8") as f:
            self.assertEqual(json.load(f), {"date": "2024-01-01", "count": 2})

    def test_new_date_starts_from_zero(self):
        self.store.increment("2024-01-01")
        self.assertEqual(self.store.get("2024-01-02"), 0)
        self.assertEqual(self.store.increment("2024-01-02"), 1)
        self.assertEqual(self.store.get("2024-01-01"), 0)

    def test_corrupt_file_reads_zero(self):
        os.makedirs(os.path.dirname(self.path), exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            f.write("{not json")
        self.assertEqual(self.store.get("2024-01-01"), 0)
        self.assertEqual(self.store.increment("2024-01-01"), 1)

    def test_clear(self):
        self.store.increment("2024-01-01")
        self.store.clear()
        self.assertFalse(os.path.exists(self.path))
        self.store.clear()

class TestUsagePolicy(unittest.TestCase):
    def test_free_tier(self):
        policy = FreeTierPolicy(3)
        self.assertFalse(policy.has_reached_limit(2))
        self.assertTrue(policy.has_reached_limit(3))
        self.assertEqual(policy.remaining(1), 2)
        self.assertEqual(policy.remaining(7), 0)

    def test_premium_is_unlimited(self):
        policy = PremiumPolicy()
        self.assertFalse(policy.has_reached_limit(1000))
        self.assertIsNone(policy.remaining(1000))

    def test_factory(self):
        self.assertEqual(get_policy(PlanTier.FREE, 5).daily_limit, 5)
        self.assertEqual(get_policy(PlanTier.PREMIUM).tier, PlanTier.PREMIUM)
        with self.assertRaises(ValueError):
            FreeTierPolicy(-1)

if __name__ == '__main__':
    unittest.main()
