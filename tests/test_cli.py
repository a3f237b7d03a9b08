import io
import json
import unittest
from unittest.mock import patch
from contextlib import redirect_stdout
import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from resq_triage.__main__ import SAMPLE_MESSAGE, main
from resq_triage.config import Settings
from resq_triage.models import Category, ClassificationResult


class TestCli(unittest.TestCase):

    @patch('resq_triage.__main__.load_settings')
    @patch('resq_triage.__main__.analyze_request')
    def test_prints_result_as_json(self, mock_analyze, mock_settings):
        mock_settings.return_value = Settings(openai_api_key="sk-test")
        mock_analyze.return_value = ClassificationResult(Category.MEDICAL, 8, "Chest pain")

        out = io.StringIO()
        with redirect_stdout(out):
            code = main(["Grandma has chest pain"])

        self.assertEqual(code, 0)
        self.assertEqual(mock_analyze.call_args[0][0], "Grandma has chest pain")
        self.assertEqual(
            json.loads(out.getvalue()),
            {"category": "MEDICAL", "urgency": 8, "summary": "Chest pain"},
        )

    @patch('resq_triage.__main__.load_settings')
    def test_without_credentials_prints_fallback(self, mock_settings):
        mock_settings.return_value = Settings(openai_api_key=None)

        out = io.StringIO()
        with redirect_stdout(out):
            code = main([])

        self.assertEqual(code, 0)
        self.assertEqual(
            json.loads(out.getvalue()),
            {"category": "OTHER", "urgency": 5, "summary": "Uncategorized Incident"},
        )
        self.assertTrue(SAMPLE_MESSAGE)


if __name__ == '__main__':
    unittest.main()
