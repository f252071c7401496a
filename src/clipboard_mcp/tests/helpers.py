"""
Shared fixtures for the clipboard vision tests.
"""

import json
from typing import Any, Dict, List, Optional

import httpx

from clipboard_mcp.core.config import ServerConfig

TEST_API_KEY = "test-gemini-key"
PNG_STUB = b"\x89PNG\r\n\x1a\n\x00\x00"  # 10 bytes


def make_config(**overrides: Any) -> ServerConfig:
    values = {"gemini_api_key": TEST_API_KEY, "log_file": None}
    values.update(overrides)
    return ServerConfig(**values)


def gemini_answer(text: str) -> Dict[str, Any]:
    return {"candidates": [{"content": {"parts": [{"text": text}]}}]}


class FailingStream(httpx.AsyncByteStream):
    """Response body that breaks off while it is being read."""

    async def __aiter__(self):
        raise httpx.ReadError("connection reset while reading body")
        yield b""  # pragma: no cover


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it was handed."""

    def __init__(
        self,
        status_code: int = 200,
        json_body: Optional[Any] = None,
        content: Optional[bytes] = None,
        error: Optional[Exception] = None,
        stream: Optional[httpx.AsyncByteStream] = None,
    ):
        self.requests: List[httpx.Request] = []
        self._status_code = status_code
        self._json_body = json_body
        self._content = content
        self._error = error
        self._stream = stream
        super().__init__(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self._error is not None:
            raise self._error
        if self._stream is not None:
            return httpx.Response(self._status_code, stream=self._stream)
        if self._content is not None:
            return httpx.Response(self._status_code, content=self._content)
        return httpx.Response(self._status_code, json=self._json_body)

    @property
    def last_payload(self) -> Dict[str, Any]:
        return json.loads(self.requests[-1].content)
