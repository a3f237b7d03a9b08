import unittest
from unittest.mock import patch
import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from resq_triage.config import Settings, load_settings


class TestConfig(unittest.TestCase):

    def tearDown(self):
        load_settings.cache_clear()

    def test_has_credentials(self):
        self.assertTrue(Settings(openai_api_key="sk-test").has_credentials)
        self.assertFalse(Settings(openai_api_key=None).has_credentials)
        self.assertFalse(Settings(openai_api_key="  ").has_credentials)

    @patch.dict(os.environ, {
        "OPENAI_API_KEY": "sk-env",
        "OPENAI_TIMEOUT_SECONDS": "12.5",
        "CLASSIFIER_MAX_WORKERS": "3",
        "MONGODB_COLLECTION": "requests",
    })
    def test_load_settings_from_environment(self):
        load_settings.cache_clear()
        settings = load_settings()

        self.assertEqual(settings.openai_api_key, "sk-env")
        self.assertEqual(settings.openai_timeout_seconds, 12.5)
        self.assertEqual(settings.classifier_max_workers, 3)
        self.assertEqual(settings.mongodb_collection, "requests")
        self.assertIs(load_settings(), settings)

    @patch.dict(os.environ, {"OPENAI_TIMEOUT_SECONDS": "soon", "CLASSIFIER_MAX_WORKERS": "many"})
    def test_malformed_numbers_fall_back_to_defaults(self):
        load_settings.cache_clear()
        settings = load_settings()

        self.assertEqual(settings.openai_timeout_seconds, 30.0)
        self.assertEqual(settings.classifier_max_workers, 8)

    def test_settings_are_immutable(self):
        settings = Settings(openai_api_key="sk-test")
        with self.assertRaises(AttributeError):
            settings.openai_api_key = "other"


if __name__ == '__main__':
    unittest.main()
