"""Image prompt synthesis for DALL-E, Midjourney and Stable Diffusion."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from sip_promptgen.models.options import ImageStyle, ModelFamily, flag_values, resolve_model_family
from sip_promptgen.models.template import Template

# Enhancement phrases per style flag, appended in this order.
STYLE_ENHANCEMENTS: list[tuple[ImageStyle, list[str]]] = [
    (ImageStyle.PHOTOREALISTIC, ["photorealistic", "high quality", "8k resolution"]),
    (ImageStyle.ARTISTIC, ["artistic", "creative interpretation", "expressive"]),
    (ImageStyle.MINIMALIST, ["minimalist design", "clean", "simple composition"]),
    (ImageStyle.DETAILED, ["highly detailed", "intricate", "fine details"]),
    (ImageStyle.VIBRANT, ["vibrant colors", "saturated", "vivid"]),
    (ImageStyle.CINEMATIC, ["cinematic lighting", "dramatic", "film quality"]),
]

QUALITY_MARKERS = "high quality, detailed"
QUALITY_BOOSTERS = "masterpiece, best quality, sharp focus"
NEGATIVE_PROMPT = "Negative prompt: blurry, low quality, distorted, deformed"

# Midjourney parameters that are always appended
MIDJOURNEY_VERSION = "--v 6"
MIDJOURNEY_ASPECT_RATIO = "--ar 16:9"


def style_enhancements(flags: set[str]) -> list[str]:
    """Collect enhancement phrases for the selected style flags."""
    phrases: list[str] = []
    for style, style_phrases in STYLE_ENHANCEMENTS:
        if style.value in flags:
            phrases.extend(style_phrases)
    return phrases


def _with_enhancements(prompt: str, enhancements: list[str]) -> str:
    if enhancements:
        return f"{prompt}, {', '.join(enhancements)}"
    return prompt


def _natural_language(prompt: str, enhancements: list[str], flags: set[str]) -> str:
    """DALL-E 3: descriptive phrases plus generic quality markers."""
    prompt = _with_enhancements(prompt, enhancements)
    if ImageStyle.PHOTOREALISTIC.value not in flags:
        prompt += f", {QUALITY_MARKERS}"
    return prompt


def _parameter_syntax(prompt: str, enhancements: list[str], flags: set[str]) -> str:
    """Midjourney: phrases followed by --parameters."""
    prompt = _with_enhancements(prompt, enhancements)
    params: list[str] = []
    if ImageStyle.PHOTOREALISTIC.value in flags:
        params.append("--style raw")
    if ImageStyle.ARTISTIC.value in flags:
        params.append("--stylize 1000")
    params.append(MIDJOURNEY_VERSION)
    params.append(MIDJOURNEY_ASPECT_RATIO)
    return f"{prompt} {' '.join(params)}"


def _keyword_list(prompt: str, enhancements: list[str], flags: set[str]) -> str:
    """Stable Diffusion: keyword list, quality boosters and a negative prompt."""
    prompt = _with_enhancements(prompt, enhancements)
    prompt += f", {QUALITY_BOOSTERS}"
    prompt += f"\n\n{NEGATIVE_PROMPT}"
    return prompt


def _query_only(prompt: str, enhancements: list[str], flags: set[str]) -> str:
    return prompt


MODEL_RULES: dict[ModelFamily, Callable[[str, list[str], set[str]], str]] = {
    ModelFamily.NATURAL_LANGUAGE: _natural_language,
    ModelFamily.PARAMETER_SYNTAX: _parameter_syntax,
    ModelFamily.KEYWORD_LIST: _keyword_list,
    ModelFamily.GPT4: _query_only,
    ModelFamily.CLAUDE: _query_only,
    ModelFamily.GENERIC: _query_only,
}


def generate_image_prompt(
    query: str,
    target_model: str | ModelFamily,
    style_flags: Iterable[ImageStyle | str] = (),
    matched_template: Template | None = None,
) -> str:
    """Generate an optimized image-generation prompt.

    Models outside the three known image families get the query unchanged.

    Args:
        query: Description of the image.
        target_model: Model label such as "Midjourney", or a ModelFamily.
        style_flags: Image style flags. Unknown flags are ignored.
        matched_template: Template selected by the matcher. Does not change the output.

    Returns:
        The prompt with leading and trailing whitespace removed.
    """
    flags = flag_values(style_flags)
    enhancements = style_enhancements(flags)
    prompt = MODEL_RULES[resolve_model_family(target_model)](query, enhancements, flags)
    return prompt.strip()
