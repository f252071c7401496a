"""
Exception types for the clipboard vision core.

Every failure below the tool layer is raised as one of these and turned into
a tool-level error message by the MCP wrappers. Only ConfigError is allowed
to stop the server, and only at startup.
"""

from typing import Optional


class ClipboardVisionError(Exception):
    """Base class for all clipboard vision errors."""


class ConfigError(ClipboardVisionError):
    """Required configuration is missing or invalid."""


class ClipboardError(ClipboardVisionError):
    """The clipboard image could not be read."""


class ClipboardExecutionError(ClipboardError):
    """The clipboard utility could not be launched."""


class ClipboardEmptyError(ClipboardError):
    """The clipboard utility ran but returned no image."""


class GeminiError(ClipboardVisionError):
    """The Gemini API call did not produce an answer."""


class GeminiRequestError(GeminiError):
    """The request never reached Gemini or the connection failed."""


class GeminiApiError(GeminiError):
    """Gemini answered with a non-success HTTP status."""

    def __init__(self, message: str, status_code: Optional[int] = None, body: str = ""):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class GeminiParseError(GeminiError):
    """Gemini answered with a body that is not a JSON object."""
