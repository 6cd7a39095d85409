"""Template catalog loading.

Three catalogs ship with the package (text, image, video), one flat list of
templates each. A directory set via ``SIP_CATALOG_DIR`` (or passed
explicitly) can replace any of them with a JSON or YAML file named
``<type>-templates.json`` / ``.yaml`` / ``.yml``.
"""

from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path

import yaml
from pydantic import ValidationError

from sip_promptgen.config.constants import CATALOG_EXTENSIONS, CATALOG_FILE_STEM
from sip_promptgen.config.logging import get_logger
from sip_promptgen.config.settings import get_settings
from sip_promptgen.exceptions import CatalogError, TemplateNotFoundError
from sip_promptgen.models.options import GeneratorType
from sip_promptgen.models.template import Template

logger = get_logger(__name__)

# Bundled catalogs (shipped with package)
DATA_DIR = Path(__file__).parent / "data"


def _find_catalog_file(directory: Path, generator_type: GeneratorType) -> Path | None:
    stem = CATALOG_FILE_STEM.format(generator_type=generator_type.value)
    for ext in CATALOG_EXTENSIONS:
        candidate = directory / f"{stem}{ext}"
        if candidate.is_file():
            return candidate
    return None


def _read_catalog_file(path: Path) -> list[Template]:
    """Parse one catalog file into templates.

    Raises:
        CatalogError: If the file can't be read, isn't a list, or holds invalid entries.
    """
    try:
        text = path.read_text(encoding="utf-8")
        if path.suffix == ".json":
            raw = json.loads(text)
        else:
            raw = yaml.safe_load(text)
    except (OSError, UnicodeDecodeError) as e:
        raise CatalogError(f"Cannot read catalog {path.name}", details=str(e)) from e
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise CatalogError(f"Invalid catalog format in {path.name}", details=str(e)) from e

    if raw is None:
        return []
    if not isinstance(raw, list):
        raise CatalogError(f"Catalog {path.name} must be a list of templates")

    try:
        templates = [Template.model_validate(entry) for entry in raw]
    except ValidationError as e:
        raise CatalogError(f"Invalid template entry in {path.name}", details=str(e)) from e

    seen: set[str] = set()
    for template in templates:
        if template.id in seen:
            raise CatalogError(f"Duplicate template id '{template.id}' in {path.name}")
        seen.add(template.id)
    return templates


@lru_cache(maxsize=None)
def _load_cached(generator_type: GeneratorType, catalog_dir: Path | None) -> tuple[Template, ...]:
    path = None
    if catalog_dir is not None:
        if catalog_dir.is_dir():
            path = _find_catalog_file(catalog_dir, generator_type)
        else:
            logger.warning("Catalog directory not found: %s, using bundled catalogs", catalog_dir)
    if path is None:
        path = _find_catalog_file(DATA_DIR, generator_type)
    if path is None:
        raise CatalogError(f"No catalog found for '{generator_type.value}' templates")

    templates = _read_catalog_file(path)
    logger.info("Loaded %d %s templates from %s", len(templates), generator_type.value, path)
    return tuple(templates)


def load_catalog(
    generator_type: GeneratorType | str, catalog_dir: Path | None = None
) -> list[Template]:
    """Load the template catalog for a generator type.

    Args:
        generator_type: "text", "image" or "video".
        catalog_dir: Override directory. Defaults to ``SIP_CATALOG_DIR``; bundled
            data is used for any type the directory doesn't provide.

    Returns:
        Templates in catalog order.

    Raises:
        CatalogError: If the catalog file is malformed.
    """
    kind = GeneratorType(generator_type)
    if catalog_dir is None:
        catalog_dir = get_settings().sip_catalog_dir
    return list(_load_cached(kind, Path(catalog_dir) if catalog_dir is not None else None))


def get_templates_by_type(generator_type: GeneratorType | str) -> list[Template]:
    """Get the configured catalog for a generator type."""
    return load_catalog(generator_type)


def get_template_by_id(template_id: str, generator_type: GeneratorType | str) -> Template | None:
    """Find a template by id within one catalog.

    Returns:
        The template, or None if the id is unknown.
    """
    for template in get_templates_by_type(generator_type):
        if template.id == template_id:
            return template
    return None


def require_template(template_id: str, generator_type: GeneratorType | str) -> Template:
    """Like ``get_template_by_id`` but raises when missing.

    Raises:
        TemplateNotFoundError: If the id is unknown.
    """
    template = get_template_by_id(template_id, generator_type)
    if template is None:
        raise TemplateNotFoundError(
            f"Template '{template_id}' not found in {GeneratorType(generator_type).value} catalog"
        )
    return template


def get_all_templates() -> dict[GeneratorType, list[Template]]:
    """Get every catalog keyed by generator type."""
    return {kind: get_templates_by_type(kind) for kind in GeneratorType}


def clear_catalog_cache() -> None:
    """Drop cached catalogs so the next load re-reads files."""
    _load_cached.cache_clear()
