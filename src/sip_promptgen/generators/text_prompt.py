"""Text prompt synthesis for LLMs (GPT, Claude, Gemini, ...)."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from sip_promptgen.models.options import (
    DEFAULT_TONE,
    ModelFamily,
    TextStyle,
    Tone,
    flag_values,
    resolve_model_family,
)
from sip_promptgen.models.template import Template

EXPERT_ROLE = "You are an expert in this field. "

TONE_INSTRUCTIONS: dict[Tone, str] = {
    Tone.PROFESSIONAL: "Maintain a professional and informative tone.",
    Tone.CASUAL: "Use a casual, conversational tone.",
    Tone.CREATIVE: "Be creative and imaginative in your response.",
    Tone.TECHNICAL: "Provide detailed technical information with precision.",
    Tone.FRIENDLY: "Be warm, friendly, and approachable.",
    Tone.FORMAL: "Use formal language and proper business etiquette.",
}

# Checked in this order; every present flag appends its sentence.
STYLE_INSTRUCTIONS: list[tuple[TextStyle, str]] = [
    (TextStyle.DETAILED, "Provide a comprehensive and detailed response with examples."),
    (TextStyle.CONCISE, "Keep the response concise and to the point."),
    (TextStyle.STEP_BY_STEP, "Break down your response into clear, numbered steps."),
    (TextStyle.WITH_EXAMPLES, "Include relevant examples to illustrate your points."),
]

FORMAT_INSTRUCTION = "Format your response with clear headings and bullet points where appropriate."
STRUCTURED_SUFFIX = "Provide a well-structured response."


def resolve_tone(tone: Tone | str | None) -> Tone:
    """Pick the tone to apply. Absent or unknown values fall back to professional."""
    try:
        return Tone(getattr(tone, "value", tone))
    except ValueError:
        return DEFAULT_TONE


def _claude_rules(prompt: str, flags: set[str]) -> str:
    # Claude responds well to tag-delimited tasks
    if TextStyle.STRUCTURED.value in flags:
        return f"<task>\n{prompt}\n</task>\n\n{STRUCTURED_SUFFIX}"
    return prompt


def _gpt4_rules(prompt: str, flags: set[str]) -> str:
    if TextStyle.FORMATTED.value in flags:
        return f"{prompt}\n\n{FORMAT_INSTRUCTION}"
    return prompt


def _no_rules(prompt: str, flags: set[str]) -> str:
    return prompt


MODEL_RULES: dict[ModelFamily, Callable[[str, set[str]], str]] = {
    ModelFamily.GPT4: _gpt4_rules,
    ModelFamily.CLAUDE: _claude_rules,
    ModelFamily.NATURAL_LANGUAGE: _no_rules,
    ModelFamily.PARAMETER_SYNTAX: _no_rules,
    ModelFamily.KEYWORD_LIST: _no_rules,
    ModelFamily.GENERIC: _no_rules,
}


def generate_text_prompt(
    query: str,
    target_model: str | ModelFamily,
    style_flags: Iterable[TextStyle | str] = (),
    tone: Tone | str | None = None,
    matched_template: Template | None = None,
) -> str:
    """Generate an optimized text prompt.

    Args:
        query: The user's request, used verbatim.
        target_model: Model label such as "GPT-4" or "Claude", or a ModelFamily.
        style_flags: Text style flags. Unknown flags are ignored.
        tone: Tone name. Absent or unknown tones fall back to professional.
        matched_template: Template selected by the matcher. Does not change the output.

    Returns:
        The prompt with leading and trailing whitespace removed.
    """
    flags = flag_values(style_flags)
    prompt = ""

    if TextStyle.EXPERT.value in flags:
        prompt += EXPERT_ROLE

    prompt += TONE_INSTRUCTIONS[resolve_tone(tone)] + " "
    prompt += query

    for style, instruction in STYLE_INSTRUCTIONS:
        if style.value in flags:
            prompt += f"\n\n{instruction}"

    prompt = MODEL_RULES[resolve_model_family(target_model)](prompt, flags)
    return prompt.strip()
