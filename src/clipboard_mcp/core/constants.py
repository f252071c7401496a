#!/usr/bin/env python3
"""
Constants for Clipboard Vision Module

This module defines constants used throughout the clipboard vision functionality,
ensuring consistent configuration across the application.

This module is part of the Core Layer and should have no dependencies on
Presentation or Integration layers.

Sample input:
- None (module contains only constants)

Expected output:
- None (module contains only constants)
"""

from typing import List

# Clipboard utility invocation (X11, PNG only)
XCLIP_COMMAND: List[str] = ["xclip", "-selection", "clipboard", "-t", "image/png", "-o"]
IMAGE_MIME_TYPE = "image/png"

# Gemini endpoint
DEFAULT_MODEL = "gemini-3-flash-preview"
GEMINI_API_BASE = "https://generativelanguage.googleapis.com/v1beta/models"
GEMINI_API_KEY_HEADER = "x-goog-api-key"

# Environment variables
ENV_API_KEY = "GEMINI_API_KEY"
ENV_MODEL = "GEMINI_MODEL"
ENV_LOG_LEVEL = "CLIPBOARD_MCP_LOG_LEVEL"
ENV_LOG_FILE = "CLIPBOARD_MCP_LOG_FILE"

# Logging settings
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_FILE = "logs/clipboard_mcp.log"
LOG_MAX_STR_LEN: int = 100  # Maximum string length for truncated logging

# Fallback text when the response carries no candidate text
NO_RESPONSE_TEXT = "[No response from Gemini]"
UNKNOWN_ERROR_TEXT = "Unknown error"

# Clipboard messages
MSG_CLIPBOARD_EMPTY = "Failed to read image from clipboard. Is there an image in the clipboard?"
MSG_CLIPBOARD_EXEC_FAILED = "Failed to execute xclip: {}"

# Gemini messages
MSG_GEMINI_SEND_FAILED = "Failed to send request to Gemini: {}"
MSG_GEMINI_API_ERROR = "Gemini API error: {}"
MSG_GEMINI_PARSE_FAILED = "Failed to parse Gemini response: {}"

# Tool-level error prefixes
MSG_ERR_CLIPBOARD = "Error reading clipboard: {}"
MSG_ERR_TRANSCRIBE = "Error transcribing with Gemini: {}"
MSG_ERR_DESCRIBE = "Error describing with Gemini: {}"

# MCP server metadata
SERVER_NAME = "clipboard-vision"
SERVER_VERSION = "0.1.0"
SERVER_INSTRUCTIONS = (
    "Clipboard image transcription server. Use the transcribe_clipboard_image tool "
    "to extract text from images in your clipboard, or describe_clipboard_image to "
    "get a description of the image."
)
TRANSCRIBE_TOOL_NAME = "transcribe_clipboard_image"
DESCRIBE_TOOL_NAME = "describe_clipboard_image"
TRANSCRIBE_TOOL_DESCRIPTION = (
    "Transcribe text from an image in the clipboard using Gemini AI. The image must be "
    "in the X11 clipboard (copied with Ctrl+C or similar). Returns the transcribed text."
)
DESCRIBE_TOOL_DESCRIPTION = (
    "Describe an image in the clipboard using Gemini AI. The image must be in the X11 "
    "clipboard. Optionally pass 'focus' to ask about something specific in the image. "
    "Returns the description."
)
