#!/usr/bin/env python3
"""
Unit tests for core/config.py
"""

import dataclasses
import unittest
from unittest.mock import patch

from clipboard_mcp.core.config import ServerConfig
from clipboard_mcp.core.errors import ConfigError


@patch("clipboard_mcp.core.config.load_dotenv", lambda *args, **kwargs: None)
class TestServerConfig(unittest.TestCase):
    """Test cases for configuration loading"""

    def test_from_env_success(self):
        with patch.dict("os.environ", {"GEMINI_API_KEY": "abc123"}, clear=True):
            config = ServerConfig.from_env()

        self.assertEqual(config.gemini_api_key, "abc123")
        self.assertEqual(config.gemini_model, "gemini-3-flash-preview")
        self.assertEqual(config.log_level, "INFO")
        self.assertEqual(config.log_file, "logs/clipboard_mcp.log")

    def test_missing_key_fails(self):
        with patch.dict("os.environ", {}, clear=True):
            with self.assertRaisesRegex(ConfigError, "GEMINI_API_KEY"):
                ServerConfig.from_env()

    def test_blank_key_fails(self):
        with patch.dict("os.environ", {"GEMINI_API_KEY": "   "}, clear=True):
            with self.assertRaises(ConfigError):
                ServerConfig.from_env()

    def test_optional_overrides(self):
        env = {
            "GEMINI_API_KEY": "k",
            "GEMINI_MODEL": "gemini-2.5-flash",
            "CLIPBOARD_MCP_LOG_LEVEL": "debug",
            "CLIPBOARD_MCP_LOG_FILE": "",
        }
        with patch.dict("os.environ", env, clear=True):
            config = ServerConfig.from_env()

        self.assertEqual(config.gemini_model, "gemini-2.5-flash")
        self.assertEqual(config.log_level, "DEBUG")
        self.assertIsNone(config.log_file)

    def test_endpoint_follows_model(self):
        config = ServerConfig(gemini_api_key="k", gemini_model="gemini-x")
        self.assertEqual(
            config.gemini_endpoint,
            "https://generativelanguage.googleapis.com/v1beta/models/gemini-x:generateContent",
        )

    def test_config_immutable(self):
        config = ServerConfig(gemini_api_key="k")
        with self.assertRaises(dataclasses.FrozenInstanceError):
            config.gemini_api_key = "other"

    def test_repr_hides_key(self):
        config = ServerConfig(gemini_api_key="super-secret")
        self.assertNotIn("super-secret", repr(config))


if __name__ == "__main__":
    unittest.main()
