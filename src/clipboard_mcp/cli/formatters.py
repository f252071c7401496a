#!/usr/bin/env python3
"""
Formatters for Clipboard Vision CLI

Rich formatting for the CLI presentation layer: result panels, errors and
JSON output.

This module is part of the Presentation Layer and should only depend on
Core Layer components, not on Integration Layer.
"""

import json
from typing import Any, Dict

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.text import Text


# Initialize console
console = Console()
error_console = Console(stderr=True)


# Color scheme
COLORS = {
    "success": "green",
    "error": "red",
}


def print_result(title: str, text: str) -> None:
    """
    Print a successful tool result in a panel.

    Args:
        title: Panel title, usually the command name
        text: Text returned by Gemini
    """
    console.print(
        Panel(
            Text(text),
            title=f"[bold {COLORS['success']}]{title}[/]",
            border_style=COLORS["success"],
            expand=False,
        )
    )


def print_error(message: str) -> None:
    # Messages carry remote text, which may contain markup-like brackets
    error_console.print(f"[bold {COLORS['error']}]Error:[/] {escape(message)}")


def print_json(data: Dict[str, Any]) -> None:
    # Plain print keeps the output machine readable
    print(json.dumps(data, indent=2))


def create_progress(description: str) -> Progress:
    """
    Create a transient spinner for a long-running call.

    Args:
        description: Text shown next to the spinner

    Returns:
        Progress: Rich progress instance with one task already added
    """
    progress = Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=error_console,
        transient=True,
    )
    progress.add_task(description, total=None)
    return progress
