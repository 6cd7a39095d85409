"""Generator types, model families, tones and style-flag vocabularies.

Target-model labels form an open set (any label may be submitted), but
synthesis only branches on a closed set of model families. Labels map to
families by exact match; anything unlisted falls into ``GENERIC``.
"""

from __future__ import annotations

from enum import Enum


class GeneratorType(str, Enum):
    """Output domain of a generation request. Each has its own catalog."""

    TEXT = "text"
    IMAGE = "image"
    VIDEO = "video"


class ModelFamily(str, Enum):
    """Platform family that decides per-model synthesis rules."""

    GPT4 = "gpt-4"
    CLAUDE = "claude"
    NATURAL_LANGUAGE = "natural-language"
    PARAMETER_SYNTAX = "parameter-syntax"
    KEYWORD_LIST = "keyword-list"
    GENERIC = "generic"


class Tone(str, Enum):
    """Tone options for text prompts."""

    PROFESSIONAL = "professional"
    CASUAL = "casual"
    CREATIVE = "creative"
    TECHNICAL = "technical"
    FRIENDLY = "friendly"
    FORMAL = "formal"


DEFAULT_TONE = Tone.PROFESSIONAL


class TextStyle(str, Enum):
    """Style flags for text prompts."""

    DETAILED = "detailed"
    CONCISE = "concise"
    STEP_BY_STEP = "step-by-step"
    WITH_EXAMPLES = "with-examples"
    EXPERT = "expert"
    STRUCTURED = "structured"
    FORMATTED = "formatted"


class ImageStyle(str, Enum):
    """Style flags for image prompts."""

    PHOTOREALISTIC = "photorealistic"
    ARTISTIC = "artistic"
    MINIMALIST = "minimalist"
    DETAILED = "detailed"
    VIBRANT = "vibrant"
    CINEMATIC = "cinematic"
    ABSTRACT = "abstract"
    CARTOON = "cartoon"
    RENDER_3D = "3d-render"


class VideoStyle(str, Enum):
    """Style flags for video prompts."""

    SHORT_FORM = "short-form"
    LONG_FORM = "long-form"
    TUTORIAL = "tutorial"
    CINEMATIC = "cinematic"
    ANIMATED = "animated"
    WITH_NARRATION = "with-narration"
    WITH_MUSIC = "with-music"
    WITH_TEXT_OVERLAYS = "with-text-overlays"
    PROFESSIONAL = "professional"
    CASUAL_VLOG = "casual-vlog"


STYLE_VOCABULARY: dict[GeneratorType, type[Enum]] = {
    GeneratorType.TEXT: TextStyle,
    GeneratorType.IMAGE: ImageStyle,
    GeneratorType.VIDEO: VideoStyle,
}

# Model labels offered per generator type
MODEL_OPTIONS: dict[GeneratorType, list[str]] = {
    GeneratorType.TEXT: ["GPT-4", "GPT-3.5 Turbo", "Claude", "Claude Instant", "Gemini Pro"],
    GeneratorType.IMAGE: ["DALL-E 3", "DALL-E 2", "Midjourney", "Stable Diffusion", "Ideogram"],
    GeneratorType.VIDEO: ["Runway Gen-2", "Pika", "Stable Video", "GPT-4 (Script)"],
}

MODEL_FAMILIES: dict[str, ModelFamily] = {
    "GPT-4": ModelFamily.GPT4,
    "Claude": ModelFamily.CLAUDE,
    "DALL-E 3": ModelFamily.NATURAL_LANGUAGE,
    "Midjourney": ModelFamily.PARAMETER_SYNTAX,
    "Stable Diffusion": ModelFamily.KEYWORD_LIST,
}


def resolve_model_family(target_model: str | ModelFamily) -> ModelFamily:
    """Map a target-model label to its family.

    Args:
        target_model: Model label (e.g. "Midjourney") or an already resolved family.

    Returns:
        The matching ModelFamily, ``GENERIC`` for unknown labels.
    """
    if isinstance(target_model, ModelFamily):
        return target_model
    return MODEL_FAMILIES.get(target_model, ModelFamily.GENERIC)


def style_options(generator_type: GeneratorType | str) -> list[str]:
    """List the style flag values accepted for a generator type."""
    vocabulary = STYLE_VOCABULARY[GeneratorType(generator_type)]
    return [member.value for member in vocabulary]


def tone_options() -> list[str]:
    """List the tone values accepted for text prompts."""
    return [tone.value for tone in Tone]


def flag_values(style_flags) -> set[str]:
    """Collapse style flags (enum members or raw strings) to their string values."""
    return {getattr(flag, "value", flag) for flag in style_flags or ()}
