"""Template catalogs and placeholder utilities."""

from sip_promptgen.catalog.loader import (
    clear_catalog_cache,
    get_all_templates,
    get_template_by_id,
    get_templates_by_type,
    load_catalog,
    require_template,
)
from sip_promptgen.catalog.placeholders import (
    PromptSegment,
    extract_placeholders,
    fill_placeholders,
    parse_segments,
)

__all__ = [
    "clear_catalog_cache",
    "get_all_templates",
    "get_template_by_id",
    "get_templates_by_type",
    "load_catalog",
    "require_template",
    "PromptSegment",
    "extract_placeholders",
    "fill_placeholders",
    "parse_segments",
]
