"""Query normalization for keyword matching."""

from __future__ import annotations

import re

from sip_promptgen.config.constants import Limits

# ASCII word characters only; accented letters act as separators
_NON_WORD = re.compile(r"[^A-Za-z0-9_\s]")


def normalize(text: str) -> list[str]:
    """Turn free text into comparable tokens.

    Lower-cases the text, replaces punctuation with spaces (so "blog-post"
    becomes two words rather than one), splits on whitespace and drops
    tokens shorter than three characters.

    Args:
        text: Raw user text.

    Returns:
        Token list, possibly empty. An empty list means no match is possible.
    """
    if not text:
        return []
    cleaned = _NON_WORD.sub(" ", text.lower())
    return [word for word in cleaned.split() if len(word) >= Limits.MIN_TOKEN_LENGTH]
