import unittest
import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from resq_triage.utils import is_blank, parse_json_object, strip_code_fences


class TestTextUtils(unittest.TestCase):

    def test_strip_code_fences(self):
        cases = {
            '```json\n{"a": 1}\n```': '{"a": 1}',
            '```JSON{"a": 1}```': '{"a": 1}',
            '```\n{"a": 1}\n```\n': '{"a": 1}',
            '  {"a": 1}  ': '{"a": 1}',
            '': '',
        }
        for raw, expected in cases.items():
            with self.subTest(raw=raw):
                self.assertEqual(strip_code_fences(raw), expected)

    def test_parse_json_object(self):
        self.assertEqual(parse_json_object('```json\n{"a": 1}\n```'), {"a": 1})

    def test_parse_json_object_rejects_non_objects(self):
        for raw in ("", "   ", "[1, 2]", "42", "text {\"a\": 1}", '{"a": '):
            with self.subTest(raw=raw):
                with self.assertRaises(ValueError):
                    parse_json_object(raw)

    def test_is_blank(self):
        self.assertTrue(is_blank(None))
        self.assertTrue(is_blank(" \t\n"))
        self.assertTrue(is_blank(42))
        self.assertFalse(is_blank(" x "))


if __name__ == '__main__':
    unittest.main()
