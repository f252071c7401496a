"""
Core Layer for Clipboard Vision Module

This package contains the core logic: reading the clipboard image, building
prompts, and calling Gemini. It knows nothing about MCP or the CLI.

Usage:
    from clipboard_mcp.core import ServerConfig, GeminiVisionClient, read_clipboard_image
    client = GeminiVisionClient(ServerConfig.from_env())
    text = await client.analyze(read_clipboard_image(), transcribe_prompt())
"""

from clipboard_mcp.core.constants import DEFAULT_MODEL, NO_RESPONSE_TEXT, XCLIP_COMMAND
from clipboard_mcp.core.config import ServerConfig
from clipboard_mcp.core.errors import (
    ClipboardVisionError,
    ConfigError,
    ClipboardError,
    ClipboardExecutionError,
    ClipboardEmptyError,
    GeminiError,
    GeminiRequestError,
    GeminiApiError,
    GeminiParseError,
)
from clipboard_mcp.core.clipboard import read_clipboard_image
from clipboard_mcp.core.prompts import (
    TRANSCRIBE_PROMPT,
    DESCRIBE_PROMPT,
    transcribe_prompt,
    describe_prompt,
)
from clipboard_mcp.core.gemini import GeminiVisionClient, encode_image, build_request
from clipboard_mcp.core.schemas import AnalysisRequest, AnalysisResponse

__all__ = [
    # Constants
    'DEFAULT_MODEL',
    'NO_RESPONSE_TEXT',
    'XCLIP_COMMAND',

    # Configuration
    'ServerConfig',

    # Errors
    'ClipboardVisionError',
    'ConfigError',
    'ClipboardError',
    'ClipboardExecutionError',
    'ClipboardEmptyError',
    'GeminiError',
    'GeminiRequestError',
    'GeminiApiError',
    'GeminiParseError',

    # Clipboard
    'read_clipboard_image',

    # Prompts
    'TRANSCRIBE_PROMPT',
    'DESCRIBE_PROMPT',
    'transcribe_prompt',
    'describe_prompt',

    # Gemini
    'GeminiVisionClient',
    'encode_image',
    'build_request',
    'AnalysisRequest',
    'AnalysisResponse',
]
