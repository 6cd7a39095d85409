"""Placeholder handling for template prompts.

Templates mark fill-in spots as ``[TOPIC]`` or ``{TOPIC}``. The key is the
marker without its brackets; the same key may appear several times.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass

_PLACEHOLDER = re.compile(r"\[([^\]]+)\]|\{([^}]+)\}")


@dataclass(frozen=True)
class PromptSegment:
    """A run of plain text or a single placeholder marker."""

    content: str
    is_placeholder: bool = False

    @property
    def key(self) -> str | None:
        if not self.is_placeholder:
            return None
        return self.content[1:-1]


def parse_segments(text: str) -> list[PromptSegment]:
    """Split template text into ordered text and placeholder segments."""
    segments: list[PromptSegment] = []
    last = 0
    for match in _PLACEHOLDER.finditer(text):
        if match.start() > last:
            segments.append(PromptSegment(text[last : match.start()]))
        segments.append(PromptSegment(match.group(0), is_placeholder=True))
        last = match.end()
    if last < len(text):
        segments.append(PromptSegment(text[last:]))
    return segments


def extract_placeholders(text: str) -> list[str]:
    """Return unique placeholder keys in first-seen order."""
    keys: list[str] = []
    for segment in parse_segments(text):
        if segment.is_placeholder and segment.key not in keys:
            keys.append(segment.key)
    return keys


def fill_placeholders(text: str, values: Mapping[str, str]) -> str:
    """Substitute placeholder values into template text.

    Blank values leave the original marker in place, as do keys with no value.

    Args:
        text: Template text.
        values: Mapping of placeholder key (without brackets) to replacement.

    Returns:
        The filled text.
    """
    parts: list[str] = []
    for segment in parse_segments(text):
        value = values.get(segment.key) if segment.is_placeholder else None
        if value is not None and value.strip():
            parts.append(value)
        else:
            parts.append(segment.content)
    return "".join(parts)
