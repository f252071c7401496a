"""
Prompt construction for the clipboard vision tools.

Sample input:
- focus=None or focus="the error message"

Expected output:
- Prompt string sent alongside the image
"""

from typing import Optional

TRANSCRIBE_PROMPT = (
    "Transcribe all text from this image exactly as it appears. "
    "If there are multiple lines, preserve the line breaks. "
    "If there is no text, respond with '[No text found]'."
)

DESCRIBE_PROMPT = (
    "Describe this image in detail. Cover the overall layout, the main visual "
    "elements, colors, and anything notable. If the image contains text, mention "
    "what kind of text is present and summarize it briefly, but do not transcribe "
    "it in full."
)

FOCUS_PROMPT_TEMPLATE = (
    "Describe this image, focusing specifically on: {focus}\n\n"
    "Provide a clear, detailed response."
)


def transcribe_prompt() -> str:
    return TRANSCRIBE_PROMPT


def describe_prompt(focus: Optional[str] = None) -> str:
    """
    Build the description prompt.

    An absent or empty focus yields the general description prompt; any other
    value is inserted verbatim into the focus template.
    """
    if focus:
        return FOCUS_PROMPT_TEMPLATE.format(focus=focus)
    return DESCRIBE_PROMPT
