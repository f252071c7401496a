#!/usr/bin/env python3
"""
Gemini Vision Client Module

This module sends a single image and a text prompt to the Gemini
generateContent endpoint and returns the text of the first candidate.

This module is part of the Core Layer and should have no dependencies on
Presentation or Integration layers. It is the only module that touches the
network.

Third-party package documentation:
- HTTPX: https://www.python-httpx.org/async/

Sample input:
- image: b"\\x89PNG..." (raw PNG bytes from the clipboard)
- prompt: "Transcribe all text from this image exactly as it appears. ..."

Expected output:
- str: the model's answer, or "[No response from Gemini]" when the response
  has no candidate text
- On error: GeminiRequestError, GeminiApiError or GeminiParseError
"""

import base64
from typing import Optional

import httpx
from loguru import logger
from pydantic import ValidationError

from clipboard_mcp.core.config import ServerConfig
from clipboard_mcp.core.constants import (
    GEMINI_API_KEY_HEADER,
    IMAGE_MIME_TYPE,
    MSG_GEMINI_API_ERROR,
    MSG_GEMINI_PARSE_FAILED,
    MSG_GEMINI_SEND_FAILED,
    NO_RESPONSE_TEXT,
    UNKNOWN_ERROR_TEXT,
)
from clipboard_mcp.core.errors import GeminiApiError, GeminiParseError, GeminiRequestError
from clipboard_mcp.core.schemas import AnalysisRequest, AnalysisResponse
from clipboard_mcp.core.utils import truncate_large_value


def encode_image(image: bytes) -> str:
    """Standard base64 (with padding) of the raw image bytes."""
    return base64.standard_b64encode(image).decode("ascii")


def build_request(image: bytes, prompt: str) -> AnalysisRequest:
    return AnalysisRequest.for_image(encode_image(image), prompt, mime_type=IMAGE_MIME_TYPE)


def extract_text(response: AnalysisResponse) -> str:
    text = response.first_text()
    if text is None:
        logger.warning("Gemini response carried no candidate text")
        return NO_RESPONSE_TEXT
    return text


class GeminiVisionClient:
    """
    Async client for one-shot image analysis with Gemini.

    The API key comes from the ServerConfig handed in at construction and is
    only ever sent in the x-goog-api-key header.
    """

    def __init__(self, config: ServerConfig, transport: Optional[httpx.AsyncBaseTransport] = None):
        self._config = config
        self._transport = transport

    @property
    def endpoint(self) -> str:
        return self._config.gemini_endpoint

    async def analyze(self, image: bytes, prompt: str) -> str:
        """
        Sends the image and prompt to Gemini and returns the answer text.

        Args:
            image: Raw PNG bytes
            prompt: Instruction sent after the image

        Returns:
            str: First candidate text, or NO_RESPONSE_TEXT

        Raises:
            GeminiRequestError: the request could not be sent
            GeminiApiError: non-success HTTP status, message carries the body
            GeminiParseError: success status but the body cannot be read or is not a valid response
        """
        payload = build_request(image, prompt).to_payload()
        headers = {GEMINI_API_KEY_HEADER: self._config.gemini_api_key}

        logger.info(
            f"Sending {len(image)} byte image to {self._config.gemini_model} "
            f"with prompt: {truncate_large_value(prompt)}"
        )

        # No client-side timeout: wait for the model as long as the connection lives
        async with httpx.AsyncClient(timeout=None, transport=self._transport) as client:
            request = client.build_request("POST", self.endpoint, json=payload, headers=headers)
            try:
                response = await client.send(request, stream=True)
            except httpx.HTTPError as e:
                logger.error(f"Gemini request failed: {e}")
                raise GeminiRequestError(MSG_GEMINI_SEND_FAILED.format(e)) from e

            try:
                if not response.is_success:
                    body = await self._read_error_body(response)
                    logger.error(f"Gemini returned HTTP {response.status_code}: {truncate_large_value(body)}")
                    raise GeminiApiError(
                        MSG_GEMINI_API_ERROR.format(body),
                        status_code=response.status_code,
                        body=body,
                    )

                try:
                    content = await response.aread()
                    parsed = AnalysisResponse.model_validate_json(content)
                except (httpx.HTTPError, ValidationError) as e:
                    logger.error(f"Could not parse Gemini response: {e}")
                    raise GeminiParseError(MSG_GEMINI_PARSE_FAILED.format(e)) from e
            finally:
                await response.aclose()

        text = extract_text(parsed)
        logger.info(f"Gemini answered: {truncate_large_value(text)}")
        return text

    @staticmethod
    async def _read_error_body(response: httpx.Response) -> str:
        # A body that cannot be read degrades to a placeholder
        try:
            await response.aread()
        except httpx.HTTPError as e:
            logger.warning(f"Could not read Gemini error body: {e}")
            return UNKNOWN_ERROR_TEXT
        return response.text
