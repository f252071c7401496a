#!/usr/bin/env python3
"""
Utility Functions for Clipboard Vision Module

Helpers shared by the core modules: log truncation and environment checks
used by the health command.

This module is part of the Core Layer and should have no dependencies on
Presentation or Integration layers.
"""

import platform
import shutil
from typing import Any, Dict, Optional

from clipboard_mcp.core.constants import LOG_MAX_STR_LEN, XCLIP_COMMAND


def truncate_large_value(value: Any, max_str_len: int = LOG_MAX_STR_LEN) -> Any:
    """
    Truncates large string values for logging purposes.

    Args:
        value: The value to truncate, non-strings are returned unchanged
        max_str_len: Maximum string length to allow

    Returns:
        Truncated string or the original value
    """
    if isinstance(value, str) and len(value) > max_str_len:
        return f"{value[:max_str_len]}... [truncated, {len(value)} chars total]"
    return value


def find_clipboard_tool() -> Optional[str]:
    """Path of the clipboard utility on PATH, or None."""
    return shutil.which(XCLIP_COMMAND[0])


def get_system_info() -> Dict[str, str]:
    return {
        "platform": platform.system(),
        "platform_version": platform.version(),
        "python_version": platform.python_version(),
    }
