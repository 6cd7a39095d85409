"""Centralized constants for sip-promptgen."""


# Keyword scoring weights
class ScoreWeights:
    EXACT = 10
    PARTIAL = 5
    PHRASE = 15


# Matching limits
class Limits:
    MIN_TOKEN_LENGTH = 3
    TOP_MATCHES = 3
    CYCLE_MATCHES = 10
    BEST_MATCH_THRESHOLD = 10


# Catalog file names, one per generator type
CATALOG_FILE_STEM = "{generator_type}-templates"
CATALOG_EXTENSIONS = (".json", ".yaml", ".yml")
