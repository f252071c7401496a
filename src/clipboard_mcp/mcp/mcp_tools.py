#!/usr/bin/env python3
"""
MCP Tools for Clipboard Vision Module

This module provides MCP tool definitions for clipboard image transcription
and description to be used with Claude MCP.

This module is part of the Integration Layer and can depend on both
Core Layer and Presentation Layer components.

Sample input:
- ServerConfig with the Gemini API key

Expected output:
- Configured FastMCP server with both tools registered
"""

from typing import Annotated, Optional

from loguru import logger
from mcp.server.fastmcp import FastMCP
from mcp.types import CallToolResult, TextContent
from pydantic import Field

from clipboard_mcp.core.config import ServerConfig
from clipboard_mcp.core.constants import (
    DESCRIBE_TOOL_DESCRIPTION,
    DESCRIBE_TOOL_NAME,
    SERVER_INSTRUCTIONS,
    SERVER_NAME,
    TRANSCRIBE_TOOL_DESCRIPTION,
    TRANSCRIBE_TOOL_NAME,
)
from clipboard_mcp.core.gemini import GeminiVisionClient
from clipboard_mcp.mcp.wrappers import (
    ToolResult,
    describe_clipboard_wrapper,
    transcribe_clipboard_wrapper,
)


def to_call_tool_result(result: ToolResult) -> CallToolResult:
    # Failures go back as isError tool results, not protocol errors
    return CallToolResult(
        content=[TextContent(type="text", text=result.text)],
        isError=result.is_error,
    )


def create_mcp_server(
    config: ServerConfig,
    name: str = SERVER_NAME,
    client: Optional[GeminiVisionClient] = None,
) -> FastMCP:
    """
    Create and configure MCP server with clipboard vision tools

    Args:
        config: Server configuration, built once at startup
        name: Name for the MCP server
        client: Gemini client to use, one is built from config when omitted

    Returns:
        FastMCP: Configured MCP server instance
    """
    mcp = FastMCP(name, instructions=SERVER_INSTRUCTIONS)
    client = client or GeminiVisionClient(config)

    logger.info(f"Initialized FastMCP server: {name} (model={config.gemini_model})")

    register_transcribe_tool(mcp, client)
    register_describe_tool(mcp, client)

    return mcp


def register_transcribe_tool(mcp: FastMCP, client: GeminiVisionClient) -> None:
    """
    Register transcribe_clipboard_image tool with the MCP server

    Args:
        mcp: MCP server instance
        client: Gemini client shared by the tools
    """
    @mcp.tool(name=TRANSCRIBE_TOOL_NAME, description=TRANSCRIBE_TOOL_DESCRIPTION)
    async def transcribe_clipboard_image() -> CallToolResult:
        return to_call_tool_result(await transcribe_clipboard_wrapper(client))


def register_describe_tool(mcp: FastMCP, client: GeminiVisionClient) -> None:
    """
    Register describe_clipboard_image tool with the MCP server

    Args:
        mcp: MCP server instance
        client: Gemini client shared by the tools
    """
    @mcp.tool(name=DESCRIBE_TOOL_NAME, description=DESCRIBE_TOOL_DESCRIPTION)
    async def describe_clipboard_image(
        focus: Annotated[
            Optional[str],
            Field(description="Optional aspect of the image to focus the description on"),
        ] = None,
    ) -> CallToolResult:
        return to_call_tool_result(await describe_clipboard_wrapper(client, focus))
