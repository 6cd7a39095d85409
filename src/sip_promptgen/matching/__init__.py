"""Keyword matching of user queries against template catalogs."""

from sip_promptgen.matching.cycling import CyclingSession, CyclingState, advance
from sip_promptgen.matching.matcher import find_best_match, find_top_matches
from sip_promptgen.matching.normalizer import normalize
from sip_promptgen.matching.scorer import score

__all__ = [
    "CyclingSession",
    "CyclingState",
    "advance",
    "find_best_match",
    "find_top_matches",
    "normalize",
    "score",
]
