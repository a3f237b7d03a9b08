import random
import unittest
from unittest.mock import MagicMock
import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from resq_triage.models import Category
from resq_triage.workflows.seed import DEFAULT_CENTER, SCENARIOS, seed_incidents


class TestSeed(unittest.TestCase):

    def setUp(self):
        self.store = MagicMock()
        self.store.create.side_effect = lambda description, location, result: (location, result)

    def test_seed_replaces_store_contents(self):
        created = seed_incidents(self.store, count=20, rng=random.Random(7))

        self.store.delete_all.assert_called_once()
        self.assertEqual(self.store.create.call_count, 20)
        self.assertEqual(len(created), 20)

    def test_seeded_locations_within_offset(self):
        created = seed_incidents(self.store, count=50, max_offset=0.05, rng=random.Random(1))

        for location, _ in created:
            self.assertLessEqual(abs(location.lat - DEFAULT_CENTER.lat), 0.05)
            self.assertLessEqual(abs(location.lng - DEFAULT_CENTER.lng), 0.05)

    def test_scenarios_use_closed_categories(self):
        for scenario in SCENARIOS:
            self.assertIsInstance(scenario["category"], Category)
            self.assertLessEqual(len(scenario["summary"]), 50)


if __name__ == '__main__':
    unittest.main()
