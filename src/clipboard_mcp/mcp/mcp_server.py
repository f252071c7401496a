#!/usr/bin/env python3
"""
MCP Server Entry Point for Clipboard Vision Tools

This is the main entry point for the clipboard vision MCP server, designed to
be directly referenced in the .mcp.json configuration. The server speaks MCP
over stdin/stdout, so all logging goes to stderr and the log file.

This module is part of the Integration Layer and connects the MCP functionality
to the application core.
"""

import argparse
import asyncio
import json
import os
import sys
from typing import Any, Dict, List, Optional

from loguru import logger
from mcp.server.fastmcp import FastMCP

from clipboard_mcp.core.config import ServerConfig
from clipboard_mcp.core.constants import ENV_API_KEY, SERVER_NAME, SERVER_VERSION
from clipboard_mcp.core.errors import ConfigError
from clipboard_mcp.core.utils import find_clipboard_tool, get_system_info
from clipboard_mcp.mcp.mcp_tools import create_mcp_server


def configure_logging(level: str = "INFO", log_file: Optional[str] = None) -> None:
    """
    Configure logging with proper format and level.

    stdout carries the MCP protocol, so nothing is ever logged there.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_file: Optional rotating log file path
    """
    # Remove default handlers
    logger.remove()

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        logger.add(
            log_file,
            rotation="10 MB",
            retention="1 week",
            level=level,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {message}"
        )

    # Add stderr logger for visible output
    logger.add(
        sys.stderr,
        format="<level>{level: <8}</level> | {message}",
        level=level,
        colorize=True
    )


def get_server_info() -> Dict[str, Any]:
    """
    Get server information.

    Returns:
        Dict[str, Any]: Server information
    """
    return {
        "name": SERVER_NAME,
        "version": SERVER_VERSION,
        "description": "Transcribe or describe the X11 clipboard image with Gemini over MCP",
        "transport": "stdio",
    }


def health_check() -> Dict[str, Any]:
    """
    Perform a health check.

    Checks that xclip is on PATH and that the Gemini API key is configured.
    No clipboard read or API call is made.

    Returns:
        Dict[str, Any]: Health check results
    """
    xclip_path = find_clipboard_tool()
    try:
        config = ServerConfig.from_env()
        api_key_error = None
    except ConfigError as e:
        config = None
        api_key_error = str(e)

    result: Dict[str, Any] = {
        "status": "healthy" if xclip_path and config else "unhealthy",
        "xclip": xclip_path or "not found",
        "api_key_configured": config is not None,
        **get_system_info(),
    }
    if config is not None:
        result["model"] = config.gemini_model
    if api_key_error:
        result["error"] = api_key_error
    return result


def get_tool_schema(mcp: FastMCP) -> List[Dict[str, Any]]:
    """
    List the registered tools with their descriptions and input schemas.

    Args:
        mcp: MCP server instance

    Returns:
        List[Dict[str, Any]]: One entry per tool
    """
    tools = asyncio.run(mcp.list_tools())
    return [
        {"name": tool.name, "description": tool.description, "inputSchema": tool.inputSchema}
        for tool in tools
    ]


def start_server(debug: bool = False) -> int:
    """
    Load configuration and serve MCP over stdio until the client disconnects.

    Returns:
        int: Exit code, 1 when the configuration is missing
    """
    try:
        config = ServerConfig.from_env()
    except ConfigError as e:
        configure_logging("INFO")
        logger.error(f"Cannot start server: {e}")
        return 1

    log_level = "DEBUG" if debug else config.log_level
    configure_logging(log_level, config.log_file)

    logger.info(f"Starting MCP server for clipboard vision tools ({config!r})")

    try:
        mcp = create_mcp_server(config)
        mcp.run()
    except KeyboardInterrupt:
        logger.info("Server stopped by user")
        return 0
    except Exception as e:
        logger.exception(f"Server failed: {e}")
        return 1

    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the MCP server.

    Returns:
        int: Exit code
    """
    parser = argparse.ArgumentParser(description="Clipboard Vision MCP Server")
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Start server command
    start_parser = subparsers.add_parser("start", help="Start the MCP server on stdio")
    start_parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    subparsers.add_parser("health", help="Check server health")
    subparsers.add_parser("info", help="Display server information")

    schema_parser = subparsers.add_parser("schema", help="Display tool schema")
    schema_parser.add_argument("--json", action="store_true", help="Output as JSON")

    args = parser.parse_args(argv)

    # Bare invocation is how MCP clients launch the server
    if args.command is None or args.command == "start":
        return start_server(debug=getattr(args, "debug", False))

    if args.command == "health":
        result = health_check()
        print(json.dumps(result, indent=2))
        return 0 if result["status"] == "healthy" else 1

    if args.command == "info":
        print(json.dumps(get_server_info(), indent=2))
        return 0

    if args.command == "schema":
        # Listing tools never calls Gemini, so the key may be absent
        mcp = create_mcp_server(ServerConfig(gemini_api_key=os.getenv(ENV_API_KEY, "")))
        schema = get_tool_schema(mcp)

        if args.json:
            print(json.dumps(schema, indent=2))
        else:
            for tool in schema:
                print(f"Tool: {tool['name']}")
                print(f"  Description: {tool['description']}")
                print("  Parameters:")
                properties = tool["inputSchema"].get("properties", {})
                if not properties:
                    print("    (none)")
                for param_name, param_info in properties.items():
                    print(f"    {param_name}: {param_info.get('description', 'No description')}")
                print()
        return 0

    return 0


if __name__ == "__main__":
    """
    Direct entry point for the clipboard vision MCP server.
    This file is designed to be referenced in .mcp.json.

    Usage:
      python -m clipboard_mcp.mcp.mcp_server start [--debug]
      python -m clipboard_mcp.mcp.mcp_server health
      python -m clipboard_mcp.mcp.mcp_server info
      python -m clipboard_mcp.mcp.mcp_server schema [--json]
    """
    sys.exit(main())
