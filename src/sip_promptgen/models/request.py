"""Validated generation requests.

Requests are the boundary where free-form user input becomes typed
parameters: empty queries, unknown tones and style flags outside a
generator's vocabulary are rejected here. Synthesis itself stays lenient.
"""

from __future__ import annotations

from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

from sip_promptgen.models.options import GeneratorType, ImageStyle, TextStyle, Tone, VideoStyle


class PromptRequest(BaseModel):
    """Fields shared by every generation request.

    ``query`` is kept exactly as submitted. Cycling compares raw queries,
    and synthesis trims only the final output. The generator type is fixed
    by the subclass and cannot be passed in.
    """

    model_config = ConfigDict(extra="forbid")

    generator_type: ClassVar[GeneratorType]
    query: str = Field(description="Free-text user input")
    target_model: str = Field(description="Target model label, e.g. 'GPT-4' or 'Midjourney'")

    @field_validator("query")
    @classmethod
    def _query_not_blank(cls, value: str) -> str:
        if not value or not value.strip():
            raise ValueError("Query cannot be empty")
        return value

    @field_validator("target_model")
    @classmethod
    def _model_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Target model cannot be empty")
        return value

    @field_validator("style_flags", mode="after", check_fields=False)
    @classmethod
    def _dedupe_flags(cls, value: list) -> list:
        seen: list = []
        for flag in value:
            if flag not in seen:
                seen.append(flag)
        return seen


class TextPromptRequest(PromptRequest):
    """Request for an LLM text prompt."""

    generator_type: ClassVar[GeneratorType] = GeneratorType.TEXT
    tone: Tone | None = None
    style_flags: list[TextStyle] = Field(default_factory=list)


class ImagePromptRequest(PromptRequest):
    """Request for an image-generation prompt."""

    generator_type: ClassVar[GeneratorType] = GeneratorType.IMAGE
    style_flags: list[ImageStyle] = Field(default_factory=list)


class VideoPromptRequest(PromptRequest):
    """Request for a video concept prompt."""

    generator_type: ClassVar[GeneratorType] = GeneratorType.VIDEO
    style_flags: list[VideoStyle] = Field(default_factory=list)


REQUEST_TYPES: dict[GeneratorType, type[PromptRequest]] = {
    GeneratorType.TEXT: TextPromptRequest,
    GeneratorType.IMAGE: ImagePromptRequest,
    GeneratorType.VIDEO: VideoPromptRequest,
}


def build_request(
    generator_type: GeneratorType | str,
    query: str,
    target_model: str,
    style_flags: list[str] | None = None,
    tone: str | None = None,
) -> PromptRequest:
    """Build and validate the request model for a generator type.

    Args:
        generator_type: "text", "image" or "video".
        query: Raw user query.
        target_model: Target model label.
        style_flags: Style flag strings; each must belong to the type's vocabulary.
        tone: Tone name (text only; ignored for other types).

    Returns:
        The validated request.

    Raises:
        pydantic.ValidationError: If any field is invalid.
    """
    kind = GeneratorType(generator_type)
    fields: dict = {
        "query": query,
        "target_model": target_model,
        "style_flags": list(style_flags or []),
    }
    if kind is GeneratorType.TEXT:
        fields["tone"] = tone
    return REQUEST_TYPES[kind](**fields)
