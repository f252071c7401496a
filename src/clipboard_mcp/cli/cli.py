#!/usr/bin/env python3
"""
Command Line Interface for Clipboard Vision Module

This module provides a CLI for the clipboard vision functionality using Typer
and Rich, so the same transcription and description can be run from a
terminal without an MCP client.

This module is part of the Presentation Layer.

Sample input:
- clipboard-vision transcribe
- clipboard-vision describe --focus "the error dialog"
- clipboard-vision --json transcribe

Expected output:
- Formatted console output of the Gemini answer
- Structured JSON output for machine consumption
- Exit code 1 when the tool call fails
"""

import asyncio
from contextlib import nullcontext
from typing import Optional

import typer

from clipboard_mcp.core.config import ServerConfig
from clipboard_mcp.core.errors import ConfigError
from clipboard_mcp.core.gemini import GeminiVisionClient
from clipboard_mcp.cli.formatters import (
    create_progress,
    print_error,
    print_json,
    print_result,
)
from clipboard_mcp.mcp.mcp_server import configure_logging
from clipboard_mcp.mcp.wrappers import (
    ToolResult,
    describe_clipboard_wrapper,
    format_mcp_response,
    transcribe_clipboard_wrapper,
)


app = typer.Typer(
    help="Transcribe or describe the clipboard image with Gemini",
    rich_markup_mode="rich",
    add_completion=False
)


@app.callback()
def main(
    ctx: typer.Context,
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Output results as JSON"
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose", "-v",
        help="Show debug logging on stderr"
    ),
):
    """
    Clipboard Vision - reads the X11 clipboard image and asks Gemini about it
    """
    ctx.ensure_object(dict)
    ctx.obj["json_output"] = json_output
    configure_logging("DEBUG" if verbose else "WARNING")


def _load_client() -> GeminiVisionClient:
    try:
        return GeminiVisionClient(ServerConfig.from_env())
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1)


def _spinner(ctx: typer.Context, description: str):
    # JSON output stays free of terminal decoration
    if ctx.obj.get("json_output", False):
        return nullcontext()
    return create_progress(description)


def _emit(ctx: typer.Context, title: str, result: ToolResult) -> None:
    if ctx.obj.get("json_output", False):
        print_json(format_mcp_response(result))
    elif result.is_error:
        print_error(result.text)
    else:
        print_result(title, result.text)

    if result.is_error:
        raise typer.Exit(code=1)


@app.command("transcribe")
def transcribe_command(ctx: typer.Context):
    """
    Transcribe the text of the image on the clipboard.
    """
    client = _load_client()
    with _spinner(ctx, "Transcribing clipboard image"):
        result = asyncio.run(transcribe_clipboard_wrapper(client))
    _emit(ctx, "Transcription", result)


@app.command("describe")
def describe_command(
    ctx: typer.Context,
    focus: Optional[str] = typer.Option(
        None,
        "--focus", "-f",
        help="What to concentrate on in the description"
    ),
):
    """
    Describe the image on the clipboard.
    """
    client = _load_client()
    with _spinner(ctx, "Describing clipboard image"):
        result = asyncio.run(describe_clipboard_wrapper(client, focus))
    _emit(ctx, "Description", result)


if __name__ == "__main__":
    app()
