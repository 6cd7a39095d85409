"""Video concept prompt synthesis."""

from __future__ import annotations

from collections.abc import Iterable

from sip_promptgen.models.options import ModelFamily, VideoStyle, flag_values, resolve_model_family
from sip_promptgen.models.template import Template

CONCEPT_PREFIX = "Create a detailed video concept for: "

# Format and style blocks: (flag, heading line, required elements line)
FORMAT_BLOCKS: list[tuple[VideoStyle, str, str]] = [
    (
        VideoStyle.SHORT_FORM,
        "Format: 15-60 second short-form video (TikTok/Reels/Shorts)",
        "Include: Hook (first 3 seconds), main content, and call-to-action",
    ),
    (
        VideoStyle.LONG_FORM,
        "Format: 5-15 minute long-form video (YouTube)",
        "Include: Introduction, main content sections with timestamps, and conclusion",
    ),
]

STYLE_BLOCKS: list[tuple[VideoStyle, str, str]] = [
    (
        VideoStyle.TUTORIAL,
        "Style: Educational tutorial",
        "Include: Clear step-by-step instructions, visual demonstrations, and key takeaways",
    ),
    (
        VideoStyle.CINEMATIC,
        "Style: Cinematic production",
        "Include: Shot descriptions, camera movements, lighting notes, and mood/atmosphere",
    ),
    (
        VideoStyle.ANIMATED,
        "Style: Animated video",
        "Include: Animation style, character descriptions, transitions, and visual effects",
    ),
]

INCLUDE_ELEMENTS: list[tuple[VideoStyle, str]] = [
    (VideoStyle.WITH_NARRATION, "Voiceover script with timing"),
    (VideoStyle.WITH_MUSIC, "Music/audio suggestions"),
    (VideoStyle.WITH_TEXT_OVERLAYS, "On-screen text overlays and captions"),
]

MODEL_CLOSINGS: dict[ModelFamily, str | None] = {
    ModelFamily.GPT4: "Provide the output in a structured format with clear sections.",
    ModelFamily.CLAUDE: (
        "Organize the response with clear headings and detailed descriptions "
        "for each scene/section."
    ),
    ModelFamily.NATURAL_LANGUAGE: None,
    ModelFamily.PARAMETER_SYNTAX: None,
    ModelFamily.KEYWORD_LIST: None,
    ModelFamily.GENERIC: None,
}

TECHNICAL_SPECS = (
    "Include: Technical specifications (resolution, aspect ratio, frame rate recommendations)"
)


def _blocks(flags: set[str], blocks: list[tuple[VideoStyle, str, str]]) -> str:
    text = ""
    for style, heading, elements in blocks:
        if style.value in flags:
            text += f"\n\n{heading}\n{elements}"
    return text


def generate_video_prompt(
    query: str,
    target_model: str | ModelFamily,
    style_flags: Iterable[VideoStyle | str] = (),
    matched_template: Template | None = None,
) -> str:
    """Generate a video concept prompt or script outline.

    Short-form and long-form are meant to be exclusive but both blocks are
    emitted if both flags are set.

    Args:
        query: What the video is about.
        target_model: Model label, or a ModelFamily. GPT-4 and Claude get a closing instruction.
        style_flags: Video style flags. Unknown flags are ignored.
        matched_template: Template selected by the matcher. Does not change the output.

    Returns:
        The prompt with leading and trailing whitespace removed.
    """
    flags = flag_values(style_flags)

    prompt = CONCEPT_PREFIX + query
    prompt += _blocks(flags, FORMAT_BLOCKS)
    prompt += _blocks(flags, STYLE_BLOCKS)

    includes = [element for style, element in INCLUDE_ELEMENTS if style.value in flags]
    if includes:
        prompt += "\n\nInclude: " + ", ".join(includes)

    closing = MODEL_CLOSINGS[resolve_model_family(target_model)]
    if closing:
        prompt += f"\n\n{closing}"

    if VideoStyle.PROFESSIONAL.value in flags:
        prompt += f"\n\n{TECHNICAL_SPECS}"

    return prompt.strip()
