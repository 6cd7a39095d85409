"""Prompt generation service.

Ties the pieces together for one generation surface (e.g. one form
session): rank the catalog, pick the cycled match, synthesize the prompt.
Saving or displaying the result is up to the caller.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from sip_promptgen.catalog.loader import get_templates_by_type
from sip_promptgen.config.logging import get_logger
from sip_promptgen.config.settings import get_settings
from sip_promptgen.generators import synthesize
from sip_promptgen.matching.cycling import CyclingSession
from sip_promptgen.models.options import GeneratorType
from sip_promptgen.models.request import REQUEST_TYPES, PromptRequest
from sip_promptgen.models.template import Template, TemplateMatch

logger = get_logger(__name__)


@dataclass
class GenerationResult:
    """Output of one generation request."""

    prompt: str
    match: TemplateMatch | None = None
    matches: list[TemplateMatch] = field(default_factory=list)
    match_index: int = 0

    @property
    def has_match(self) -> bool:
        return self.match is not None


class PromptGenerationService:
    """Generates prompts for one generator type and one session."""

    def __init__(
        self,
        generator_type: GeneratorType | str,
        templates: Sequence[Template] | None = None,
        match_limit: int | None = None,
    ):
        """Initialize the service.

        Args:
            generator_type: "text", "image" or "video".
            templates: Catalog to match against. Defaults to the configured catalog.
            match_limit: Ranked list length for cycling. Defaults to ``SIP_MATCH_LIMIT``.
        """
        self.generator_type = GeneratorType(generator_type)
        self._templates = list(templates) if templates is not None else None
        limit = match_limit if match_limit is not None else get_settings().sip_match_limit
        self._session = CyclingSession(limit=limit)

    @property
    def templates(self) -> list[Template]:
        if self._templates is None:
            self._templates = get_templates_by_type(self.generator_type)
        return self._templates

    def generate(self, request: PromptRequest) -> GenerationResult:
        """Generate a prompt, cycling matches for repeated queries.

        Args:
            request: Validated request for this service's generator type.

        Returns:
            GenerationResult with the prompt and the ranked matches.

        Raises:
            ValueError: If the request is for a different generator type.
        """
        if not isinstance(request, REQUEST_TYPES[self.generator_type]):
            raise ValueError(f"{type(request).__name__} sent to {self.generator_type.value} service")

        match, matches, index = self._session.next_match(request.query, self.templates)
        prompt = synthesize(request, matched_template=match)
        logger.debug(
            "Generated %s prompt (match=%s, index=%d/%d)",
            self.generator_type.value,
            match.id if match else None,
            index,
            len(matches),
        )
        return GenerationResult(prompt=prompt, match=match, matches=matches, match_index=index)

    def reset(self) -> None:
        """Start the next request from the top-ranked match."""
        self._session.reset()
