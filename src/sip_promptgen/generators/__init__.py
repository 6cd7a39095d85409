"""Text, image, and video prompt synthesis."""

from __future__ import annotations

from sip_promptgen.generators.image_prompt import generate_image_prompt
from sip_promptgen.generators.text_prompt import generate_text_prompt
from sip_promptgen.generators.video_prompt import generate_video_prompt
from sip_promptgen.models.request import (
    ImagePromptRequest,
    PromptRequest,
    TextPromptRequest,
    VideoPromptRequest,
)
from sip_promptgen.models.template import Template


def synthesize(request: PromptRequest, matched_template: Template | None = None) -> str:
    """Synthesize the prompt for a validated request.

    Args:
        request: Text, image or video request.
        matched_template: Template chosen by the matcher, if any.

    Returns:
        The generated prompt.

    Raises:
        TypeError: If the request is not a text, image or video request.
    """
    if isinstance(request, TextPromptRequest):
        return generate_text_prompt(
            request.query,
            request.target_model,
            request.style_flags,
            tone=request.tone,
            matched_template=matched_template,
        )
    if isinstance(request, ImagePromptRequest):
        return generate_image_prompt(
            request.query, request.target_model, request.style_flags, matched_template
        )
    if isinstance(request, VideoPromptRequest):
        return generate_video_prompt(
            request.query, request.target_model, request.style_flags, matched_template
        )
    raise TypeError(f"Unsupported request type: {type(request).__name__}")


__all__ = [
    "generate_image_prompt",
    "generate_text_prompt",
    "generate_video_prompt",
    "synthesize",
]
