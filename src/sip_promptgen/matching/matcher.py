"""Template matching: rank a catalog against a free-text query."""

from __future__ import annotations

from collections.abc import Sequence

from sip_promptgen.config.constants import Limits
from sip_promptgen.config.logging import get_logger
from sip_promptgen.matching.normalizer import normalize
from sip_promptgen.matching.scorer import score
from sip_promptgen.models.template import Template, TemplateMatch

logger = get_logger(__name__)


def find_best_match(
    query: str,
    templates: Sequence[Template],
    threshold: int = Limits.BEST_MATCH_THRESHOLD,
) -> TemplateMatch | None:
    """Find the single best template for a query.

    A template replaces the current best only when its score is strictly
    higher and reaches ``threshold``, so on ties the earliest catalog entry wins.

    Args:
        query: Raw user query.
        templates: Catalog to search.
        threshold: Minimum score required for a match.

    Returns:
        The best match, or None for a blank query or when nothing clears the threshold.
    """
    if not query or not query.strip():
        return None

    tokens = normalize(query)
    if not tokens:
        return None

    best: TemplateMatch | None = None
    highest = 0
    for template in templates:
        current = score(tokens, template.keywords)
        if current > highest and current >= threshold:
            highest = current
            best = TemplateMatch.from_template(template, current)

    if best is not None:
        logger.debug("Best match for %r: %s (score=%d)", query, best.id, best.score)
    return best


def find_top_matches(
    query: str,
    templates: Sequence[Template],
    limit: int = Limits.TOP_MATCHES,
) -> list[TemplateMatch]:
    """Rank templates by score for a query.

    Templates scoring 0 are dropped. Equal scores keep catalog order.

    Args:
        query: Raw user query.
        templates: Catalog to rank.
        limit: Maximum number of matches to return.

    Returns:
        Matches sorted by descending score, empty for a blank query.
    """
    if not query or not query.strip():
        return []

    tokens = normalize(query)
    if not tokens:
        return []

    scored = [TemplateMatch.from_template(template, score(tokens, template.keywords)) for template in templates]
    ranked = sorted((match for match in scored if match.score > 0), key=lambda m: m.score, reverse=True)
    top = ranked[: max(limit, 0)]
    logger.debug(
        "Ranked %d/%d templates for %r: %s",
        len(top),
        len(templates),
        query,
        ", ".join(f"{m.id}={m.score}" for m in top),
    )
    return top
