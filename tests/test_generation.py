import unittest
from unittest.mock import MagicMock
import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import httpx
from openai import APITimeoutError

from resq_triage.config import Settings
from resq_triage.errors import UpstreamFormatError, UpstreamTransportError
from resq_triage.services.classification import FALLBACK_RESULT, Classifier, analyze_request
from resq_triage.services.generation import OpenAIGenerator


def _completion(content):
    message = MagicMock(content=content)
    return MagicMock(choices=[MagicMock(message=message)])


class TestOpenAIGenerator(unittest.TestCase):

    def setUp(self):
        self.settings = Settings(openai_api_key="test-key", openai_model="gpt-test",
                                 openai_timeout_seconds=5.0)
        self.client = MagicMock()
        self.generator = OpenAIGenerator(self.settings, client=self.client)

    def test_generate_returns_content(self):
        self.client.chat.completions.create.return_value = _completion('{"a": 1}')

        self.assertEqual(self.generator.generate("prompt"), '{"a": 1}')

        kwargs = self.client.chat.completions.create.call_args[1]
        self.assertEqual(kwargs["model"], "gpt-test")
        self.assertEqual(kwargs["timeout"], 5.0)
        self.assertEqual(kwargs["messages"], [{"role": "user", "content": "prompt"}])

    def test_empty_completion_is_format_error(self):
        self.client.chat.completions.create.return_value = _completion(None)
        with self.assertRaises(UpstreamFormatError):
            self.generator.generate("prompt")

    def test_timeout_is_transport_error(self):
        request = httpx.Request("POST", "https://api.openai.com/v1/chat/completions")
        self.client.chat.completions.create.side_effect = APITimeoutError(request=request)
        with self.assertRaises(UpstreamTransportError):
            self.generator.generate("prompt")

    def test_timeout_routes_to_fallback(self):
        request = httpx.Request("POST", "https://api.openai.com/v1/chat/completions")
        self.client.chat.completions.create.side_effect = APITimeoutError(request=request)
        classifier = Classifier(self.generator, self.settings)
        self.assertEqual(analyze_request("Need rescue now", classifier), FALLBACK_RESULT)


if __name__ == '__main__':
    unittest.main()
