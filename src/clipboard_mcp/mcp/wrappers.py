#!/usr/bin/env python3
"""
MCP Wrappers for Clipboard Vision Module

This module provides the tool-level operations behind the MCP tools: read
the clipboard, build the prompt, ask Gemini, and wrap the outcome. Every
failure from the core layer is turned into an error ToolResult with a
context prefix, so nothing below this layer surfaces as a protocol fault.

This module is part of the Integration Layer and can depend on both
Core Layer and Presentation Layer components.

Sample input:
- transcribe_clipboard_wrapper(client)
- describe_clipboard_wrapper(client, focus="the chart legend")

Expected output:
- ToolResult(text="HELLO", is_error=False)
- ToolResult(text="Error reading clipboard: ...", is_error=True)
"""

import asyncio
from dataclasses import dataclass
from typing import Any, Dict, Optional

from loguru import logger

from clipboard_mcp.core.clipboard import read_clipboard_image
from clipboard_mcp.core.constants import MSG_ERR_CLIPBOARD, MSG_ERR_DESCRIBE, MSG_ERR_TRANSCRIBE
from clipboard_mcp.core.errors import ClipboardError, GeminiError
from clipboard_mcp.core.gemini import GeminiVisionClient
from clipboard_mcp.core.prompts import describe_prompt, transcribe_prompt
from clipboard_mcp.core.utils import truncate_large_value


@dataclass(frozen=True)
class ToolResult:
    """Outcome of one tool call: plain text plus a failure flag."""

    text: str
    is_error: bool = False

    @classmethod
    def success(cls, text: str) -> "ToolResult":
        return cls(text=text, is_error=False)

    @classmethod
    def error(cls, text: str) -> "ToolResult":
        return cls(text=text, is_error=True)


def format_mcp_response(result: ToolResult) -> Dict[str, Any]:
    """
    Format a tool result as a plain dictionary.

    Args:
        result: Tool result to format

    Returns:
        Dict[str, Any]: {"success": True, "result": text} or {"success": False, "error": text}
    """
    if result.is_error:
        return {"success": False, "error": result.text}
    return {"success": True, "result": result.text}


async def _analyze_clipboard(
    client: GeminiVisionClient,
    prompt: str,
    gemini_error_template: str,
) -> ToolResult:
    try:
        # xclip blocks, keep it off the event loop
        image = await asyncio.to_thread(read_clipboard_image)
    except ClipboardError as e:
        logger.error(f"Clipboard read failed: {e}")
        return ToolResult.error(MSG_ERR_CLIPBOARD.format(e))
    except Exception as e:
        logger.exception(f"Unexpected clipboard failure: {e}")
        return ToolResult.error(MSG_ERR_CLIPBOARD.format(e))

    try:
        text = await client.analyze(image, prompt)
    except GeminiError as e:
        logger.error(f"Gemini call failed: {truncate_large_value(str(e))}")
        return ToolResult.error(gemini_error_template.format(e))
    except Exception as e:
        logger.exception(f"Unexpected Gemini failure: {e}")
        return ToolResult.error(gemini_error_template.format(e))

    return ToolResult.success(text)


async def transcribe_clipboard_wrapper(client: GeminiVisionClient) -> ToolResult:
    """
    Transcribe the text of the clipboard image.

    Args:
        client: Gemini client holding the server configuration

    Returns:
        ToolResult: transcript, or an error prefixed with its context
    """
    logger.info("Clipboard transcription requested")
    return await _analyze_clipboard(client, transcribe_prompt(), MSG_ERR_TRANSCRIBE)


async def describe_clipboard_wrapper(
    client: GeminiVisionClient,
    focus: Optional[str] = None,
) -> ToolResult:
    """
    Describe the clipboard image, optionally focusing on one aspect.

    Args:
        client: Gemini client holding the server configuration
        focus: What to concentrate on; None or "" asks for a general description

    Returns:
        ToolResult: description, or an error prefixed with its context
    """
    logger.info(f"Clipboard description requested, focus={focus!r}")
    return await _analyze_clipboard(client, describe_prompt(focus), MSG_ERR_DESCRIBE)
