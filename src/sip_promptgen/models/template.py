"""Template catalog records and scored matches.

Templates are read-only catalog entries. The catalogs use camelCase keys
(``defaultLLM``, ``defaultTone``) and either ``template`` or ``prompt``
for the fragment text; both spellings are accepted here.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class Template(BaseModel):
    """A catalog entry pairing a keyword set with a reusable prompt fragment."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    id: str = Field(description="Stable unique identifier, e.g. 'blog-post'")
    name: str = Field(description="Human-readable label")
    description: str = Field(default="", description="Human-readable summary")
    template: str = Field(
        default="",
        description="Fragment or full prompt text; may contain [KEY] or {KEY} placeholders",
    )
    keywords: list[str] = Field(
        default_factory=list,
        description="Keywords used for scoring; duplicates allowed, may be empty",
    )
    default_llm: str | None = Field(default=None, alias="defaultLLM")
    default_tone: str | None = Field(default=None, alias="defaultTone")

    @model_validator(mode="before")
    @classmethod
    def _accept_prompt_key(cls, data: Any) -> Any:
        if isinstance(data, dict) and "template" not in data and "prompt" in data:
            data = {**data, "template": data["prompt"]}
        return data

    @field_validator("keywords", mode="before")
    @classmethod
    def _none_keywords_to_empty(cls, value: Any) -> Any:
        return [] if value is None else value

    @property
    def prompt(self) -> str:
        """Alias for ``template``."""
        return self.template


class TemplateMatch(Template):
    """A template annotated with its relevance score for one query."""

    score: int = Field(ge=0, description="Keyword overlap score")

    @classmethod
    def from_template(cls, template: Template, score: int) -> "TemplateMatch":
        """Attach a score to a catalog template.

        Args:
            template: The catalog entry.
            score: Score computed for the current query.

        Returns:
            A new TemplateMatch carrying all template fields plus the score.
        """
        return cls(**template.model_dump(), score=score)
