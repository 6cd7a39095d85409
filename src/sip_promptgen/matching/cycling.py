"""Match cycling for repeated generation requests.

Submitting the same query again surfaces the next-ranked template instead
of repeating the top one, wrapping back to the first after the last.

``advance`` is a pure transition: it takes a ``CyclingState`` and returns
a new one alongside the ranked matches. ``CyclingSession`` holds one state
per interactive session and serializes access with a lock.
"""

from __future__ import annotations

import threading
from collections.abc import Sequence
from dataclasses import dataclass

from sip_promptgen.config.constants import Limits
from sip_promptgen.config.logging import get_logger
from sip_promptgen.matching.matcher import find_top_matches
from sip_promptgen.models.template import Template, TemplateMatch

logger = get_logger(__name__)


@dataclass(frozen=True)
class CyclingState:
    """Last submitted query and the offset into its ranked matches."""

    last_query: str | None = None
    match_index: int = 0

    def selected(self, matches: Sequence[TemplateMatch]) -> TemplateMatch | None:
        """Return the match this state points at, or None if there are none."""
        if not matches or self.match_index >= len(matches):
            return None
        return matches[self.match_index]


def advance(
    state: CyclingState,
    query: str,
    templates: Sequence[Template],
    limit: int = Limits.CYCLE_MATCHES,
) -> tuple[CyclingState, list[TemplateMatch]]:
    """Advance the cycling state for a new generation request.

    A query that differs from the last one (exact comparison, before
    trimming) resets the index to 0; the same query moves it forward by one.
    The index wraps to 0 once it runs past the ranked list.

    Args:
        state: Current state.
        query: Raw query of this request.
        templates: Catalog to rank.
        limit: Ranked list length.

    Returns:
        Tuple of (new state, ranked matches). Use ``new_state.selected(matches)``
        for the chosen match.
    """
    if query != state.last_query:
        index = 0
    else:
        index = state.match_index + 1

    matches = find_top_matches(query, templates, limit=limit)
    if matches and index >= len(matches):
        index = 0

    logger.debug("Cycling %r -> index %d of %d", query, index, len(matches))
    return CyclingState(last_query=query, match_index=index), matches


class CyclingSession:
    """Owns the cycling state of one interactive session.

    Safe to call from several threads; each ``next_match`` call runs under
    the session lock so concurrent requests never skip or repeat an index.
    """

    def __init__(self, limit: int = Limits.CYCLE_MATCHES):
        self._limit = limit
        self._state = CyclingState()
        self._lock = threading.Lock()

    @property
    def state(self) -> CyclingState:
        with self._lock:
            return self._state

    def next_match(
        self, query: str, templates: Sequence[Template]
    ) -> tuple[TemplateMatch | None, list[TemplateMatch], int]:
        """Advance the session and return (selected match, ranked matches, index)."""
        with self._lock:
            self._state, matches = advance(self._state, query, templates, limit=self._limit)
            return self._state.selected(matches), matches, self._state.match_index

    def reset(self) -> None:
        """Forget the last query so the next request starts at the top match."""
        with self._lock:
            self._state = CyclingState()
