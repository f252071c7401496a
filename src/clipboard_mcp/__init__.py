"""
Clipboard Vision MCP Tool

An MCP server that reads the image on the X11 clipboard and sends it to
Gemini, either to transcribe its text or to describe it.

The package keeps the same three layers as the other MCP tools:

1. Core Layer: clipboard reading, prompts, Gemini client
2. Presentation Layer: CLI interface with rich formatting
3. Integration Layer: MCP wrappers and stdio server

Usage:
    # MCP server usage (Integration Layer)
    # python -m clipboard_mcp.mcp.mcp_server start

    # CLI usage (Presentation Layer)
    # python -m clipboard_mcp.cli.cli describe --focus "the chart"
"""

from clipboard_mcp.core import (
    ServerConfig,
    GeminiVisionClient,
    read_clipboard_image,
)

from clipboard_mcp.mcp import create_mcp_server

__version__ = "0.1.0"

__all__ = [
    'ServerConfig',
    'GeminiVisionClient',
    'read_clipboard_image',
    'create_mcp_server',
    '__version__',
]
