#!/usr/bin/env python3
"""
Clipboard Reader Module

This module reads the image currently held in the X11 clipboard by running
xclip and asking for the image/png target.

This module is part of the Core Layer and should have no dependencies on
Presentation or Integration layers.

Sample input:
- None (reads the system clipboard)

Expected output:
- bytes: PNG-encoded image data exactly as xclip printed it
- On error: ClipboardExecutionError or ClipboardEmptyError
"""

import subprocess
from typing import List, Optional

from loguru import logger

from clipboard_mcp.core.constants import (
    MSG_CLIPBOARD_EMPTY,
    MSG_CLIPBOARD_EXEC_FAILED,
    XCLIP_COMMAND,
)
from clipboard_mcp.core.errors import ClipboardEmptyError, ClipboardExecutionError


def read_clipboard_image(command: Optional[List[str]] = None) -> bytes:
    """
    Reads the clipboard image as PNG bytes.

    The call blocks until xclip exits. The bytes are returned verbatim; no
    check is made that they form a valid PNG.

    Args:
        command: Command line to run, defaults to XCLIP_COMMAND

    Returns:
        bytes: Raw stdout of the clipboard utility

    Raises:
        ClipboardExecutionError: xclip could not be launched
        ClipboardEmptyError: xclip exited non-zero (usually no image on the clipboard)
    """
    args = list(command or XCLIP_COMMAND)
    logger.debug(f"Reading clipboard image with: {' '.join(args)}")

    try:
        result = subprocess.run(args, capture_output=True, check=False)
    except OSError as e:
        logger.error(f"Could not launch {args[0]}: {e}")
        raise ClipboardExecutionError(MSG_CLIPBOARD_EXEC_FAILED.format(e)) from e

    if result.returncode != 0:
        stderr = result.stderr.decode(errors="replace").strip() if result.stderr else ""
        logger.warning(f"{args[0]} exited with status {result.returncode}: {stderr}")
        raise ClipboardEmptyError(MSG_CLIPBOARD_EMPTY)

    logger.info(f"Read {len(result.stdout)} bytes from clipboard")
    return result.stdout


if __name__ == "__main__":
    """Validate clipboard reading against the live X11 clipboard"""
    import sys

    try:
        data = read_clipboard_image()
    except (ClipboardExecutionError, ClipboardEmptyError) as e:
        print(f"❌ VALIDATION FAILED - {e}")
        sys.exit(1)

    is_png = data.startswith(b"\x89PNG\r\n\x1a\n")
    print(f"✅ VALIDATION PASSED - read {len(data)} bytes, PNG signature: {is_png}")
    sys.exit(0)
