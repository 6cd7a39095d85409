"""Configuration and settings management."""

from sip_promptgen.config.constants import Limits, ScoreWeights
from sip_promptgen.config.logging import get_logger, setup_logging
from sip_promptgen.config.settings import Settings, clear_settings_cache, get_settings

__all__ = [
    "Settings",
    "get_settings",
    "clear_settings_cache",
    "setup_logging",
    "get_logger",
    "Limits",
    "ScoreWeights",
]
