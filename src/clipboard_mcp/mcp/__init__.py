"""
MCP Layer for Clipboard Vision Module

This package exposes the core clipboard vision operations as MCP tools over
stdio.

Usage:
    # Start the MCP server
    python -m clipboard_mcp.mcp.mcp_server start

    # Use the MCP server in Python
    from clipboard_mcp.core import ServerConfig
    from clipboard_mcp.mcp import create_mcp_server
    mcp = create_mcp_server(ServerConfig.from_env())
    mcp.run()
"""

from clipboard_mcp.mcp.mcp_tools import create_mcp_server

from clipboard_mcp.mcp.mcp_server import (
    main,
    health_check,
    get_server_info,
    get_tool_schema,
    configure_logging,
)

from clipboard_mcp.mcp.wrappers import (
    ToolResult,
    transcribe_clipboard_wrapper,
    describe_clipboard_wrapper,
    format_mcp_response,
)

__all__ = [
    # MCP server
    'create_mcp_server',
    'main',
    'health_check',
    'get_server_info',
    'get_tool_schema',
    'configure_logging',

    # MCP wrappers
    'ToolResult',
    'transcribe_clipboard_wrapper',
    'describe_clipboard_wrapper',
    'format_mcp_response',
]

# Example configuration for .mcp.json
EXAMPLE_MCP_CONFIG = """
{
  "mcpServers": {
    "clipboard-vision": {
      "command": "clipboard-mcp",
      "args": ["start"],
      "env": {"GEMINI_API_KEY": "<your key>"}
    }
  }
}
"""
