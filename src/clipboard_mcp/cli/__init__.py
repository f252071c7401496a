"""
CLI Layer for Clipboard Vision Module

Typer application mirroring the MCP tools for terminal use.

Usage:
    clipboard-vision transcribe
    clipboard-vision describe --focus "the table header"
"""

from clipboard_mcp.cli.cli import app

__all__ = ['app']
