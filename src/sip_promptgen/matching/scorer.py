"""Keyword overlap scoring between a query and a template."""

from __future__ import annotations

from collections.abc import Sequence

from sip_promptgen.config.constants import ScoreWeights


def score(query_tokens: Sequence[str], template_keywords: Sequence[str] | None) -> int:
    """Score how well normalized query tokens match a template's keywords.

    Points are additive:

    - +10 per token equal to any keyword.
    - +5 per keyword that strictly contains the token.
    - +5 per keyword strictly contained in the token.
    - +15 per multi-word keyword found in the space-joined token phrase.

    Partial bonuses are not deduplicated, so one token can collect several.

    Args:
        query_tokens: Output of ``normalize``.
        template_keywords: The template's keywords, any case. ``None`` counts as empty.

    Returns:
        Non-negative score, 0 when nothing overlaps.
    """
    keywords = [keyword.lower() for keyword in template_keywords or ()]
    if not keywords:
        return 0

    total = 0
    for token in query_tokens:
        if token in keywords:
            total += ScoreWeights.EXACT

        for keyword in keywords:
            if len(keyword) > len(token) and token in keyword:
                total += ScoreWeights.PARTIAL
            elif len(token) > len(keyword) and keyword in token:
                total += ScoreWeights.PARTIAL

    phrase = " ".join(query_tokens)
    for keyword in keywords:
        if " " in keyword and keyword in phrase:
            total += ScoreWeights.PHRASE

    return total
