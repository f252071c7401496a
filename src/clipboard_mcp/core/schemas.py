"""
Pydantic schemas for the Gemini generateContent request and response.

Request parts are a closed union of InlineDataPart and TextPart. Neither
carries a discriminator field; each serializes to the exact JSON shape the
API expects:

    {"inline_data": {"mime_type": "image/png", "data": "<base64>"}}
    {"text": "<prompt>"}

Links:
- Pydantic: https://docs.pydantic.dev/latest/
- Gemini API: https://ai.google.dev/api/generate-content

Sample input:
    request = AnalysisRequest.for_image("aGVsbG8=", "Transcribe this")

Expected output:
    request.model_dump()
    # {'contents': [{'parts': [{'inline_data': {...}}, {'text': 'Transcribe this'}]}]}
"""

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field

from clipboard_mcp.core.constants import IMAGE_MIME_TYPE


class InlineData(BaseModel):
    mime_type: str = Field(IMAGE_MIME_TYPE, description="MIME type of the embedded image")
    data: str = Field(..., description="Standard base64 encoding of the image bytes")


class InlineDataPart(BaseModel):
    inline_data: InlineData


class TextPart(BaseModel):
    text: str


Part = Union[InlineDataPart, TextPart]


class Content(BaseModel):
    parts: List[Part]


class AnalysisRequest(BaseModel):
    """Request body for a single image + prompt generateContent call."""

    contents: List[Content]

    @classmethod
    def for_image(cls, image_b64: str, prompt: str, mime_type: str = IMAGE_MIME_TYPE) -> "AnalysisRequest":
        # Image part first, then the prompt
        return cls(
            contents=[
                Content(
                    parts=[
                        InlineDataPart(inline_data=InlineData(mime_type=mime_type, data=image_b64)),
                        TextPart(text=prompt),
                    ]
                )
            ]
        )

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump()


class ResponsePart(BaseModel):
    text: Optional[str] = None


class ResponseContent(BaseModel):
    parts: Optional[List[Optional[ResponsePart]]] = None


class Candidate(BaseModel):
    content: Optional[ResponseContent] = None


class AnalysisResponse(BaseModel):
    """Subset of the generateContent response that carries the answer text."""

    candidates: Optional[List[Optional[Candidate]]] = None

    def first_text(self) -> Optional[str]:
        """
        Returns candidates[0].content.parts[0].text, or None when any level is
        missing or null.
        """
        if not self.candidates or self.candidates[0] is None:
            return None
        content = self.candidates[0].content
        if content is None or not content.parts or content.parts[0] is None:
            return None
        return content.parts[0].text
