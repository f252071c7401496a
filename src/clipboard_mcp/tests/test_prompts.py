#!/usr/bin/env python3
"""
Unit tests for core/prompts.py
"""

import unittest

from clipboard_mcp.core.prompts import (
    DESCRIBE_PROMPT,
    TRANSCRIBE_PROMPT,
    describe_prompt,
    transcribe_prompt,
)


class TestPrompts(unittest.TestCase):
    """Test cases for prompt construction"""

    def test_transcribe_prompt_is_fixed(self):
        self.assertEqual(transcribe_prompt(), TRANSCRIBE_PROMPT)
        self.assertIn("[No text found]", TRANSCRIBE_PROMPT)
        self.assertIn("preserve the line breaks", TRANSCRIBE_PROMPT)

    def test_describe_without_focus(self):
        """Absent and empty focus both give the general prompt"""
        self.assertEqual(describe_prompt(), DESCRIBE_PROMPT)
        self.assertEqual(describe_prompt(None), DESCRIBE_PROMPT)
        self.assertEqual(describe_prompt(""), DESCRIBE_PROMPT)

    def test_describe_with_focus(self):
        """Focus is inserted verbatim into the template"""
        self.assertEqual(
            describe_prompt("the error dialog"),
            "Describe this image, focusing specifically on: the error dialog\n\n"
            "Provide a clear, detailed response.",
        )

    def test_focus_with_braces_is_literal(self):
        prompt = describe_prompt("the {json} block")
        self.assertIn("focusing specifically on: the {json} block", prompt)

    def test_general_prompt_covers_layout_and_text(self):
        lowered = DESCRIBE_PROMPT.lower()
        self.assertIn("layout", lowered)
        self.assertIn("colors", lowered)
        self.assertIn("do not transcribe", lowered)


if __name__ == "__main__":
    unittest.main()
