#!/usr/bin/env python3
"""
Configuration for Clipboard Vision Module

Loads settings from environment variables (and a local .env file, via
python-dotenv) into an immutable ServerConfig built once at startup.

Links:
- python-dotenv: https://github.com/theskumar/python-dotenv

Sample input:
- GEMINI_API_KEY=... (required)
- GEMINI_MODEL=gemini-3-flash-preview (optional)
- CLIPBOARD_MCP_LOG_LEVEL=DEBUG (optional)

Expected output:
- ServerConfig instance, or ConfigError when GEMINI_API_KEY is missing
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from clipboard_mcp.core.constants import (
    DEFAULT_LOG_FILE,
    DEFAULT_LOG_LEVEL,
    DEFAULT_MODEL,
    ENV_API_KEY,
    ENV_LOG_FILE,
    ENV_LOG_LEVEL,
    ENV_MODEL,
    GEMINI_API_BASE,
)
from clipboard_mcp.core.errors import ConfigError


@dataclass(frozen=True)
class ServerConfig:
    gemini_api_key: str
    gemini_model: str = DEFAULT_MODEL
    log_level: str = DEFAULT_LOG_LEVEL
    log_file: Optional[str] = DEFAULT_LOG_FILE

    @property
    def gemini_endpoint(self) -> str:
        return f"{GEMINI_API_BASE}/{self.gemini_model}:generateContent"

    @classmethod
    def from_env(cls) -> "ServerConfig":
        """
        Build the configuration from the process environment.

        Raises:
            ConfigError: if GEMINI_API_KEY is unset or blank
        """
        load_dotenv()

        api_key = os.getenv(ENV_API_KEY, "").strip()
        if not api_key:
            raise ConfigError(f"{ENV_API_KEY} environment variable must be set")

        model = os.getenv(ENV_MODEL, "").strip() or DEFAULT_MODEL
        log_level = os.getenv(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL).upper()
        # An empty value turns the file sink off
        log_file = os.getenv(ENV_LOG_FILE, DEFAULT_LOG_FILE) or None

        return cls(
            gemini_api_key=api_key,
            gemini_model=model,
            log_level=log_level,
            log_file=log_file,
        )

    def __repr__(self) -> str:
        return (
            f"ServerConfig(gemini_api_key='***', gemini_model={self.gemini_model!r}, "
            f"log_level={self.log_level!r}, log_file={self.log_file!r})"
        )


if __name__ == "__main__":
    """Validate configuration loading from the current environment"""
    import sys

    try:
        config = ServerConfig.from_env()
    except ConfigError as e:
        print(f"❌ VALIDATION FAILED - {e}")
        sys.exit(1)

    print(f"✅ VALIDATION PASSED - {config!r}")
    print(f"Endpoint: {config.gemini_endpoint}")
    sys.exit(0)
