"""Shared pytest fixtures for sip-promptgen tests."""

import pytest

from sip_promptgen.catalog import clear_catalog_cache
from sip_promptgen.config.settings import clear_settings_cache
from sip_promptgen.models import Template


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Keep every test independent of the caller's environment and caches."""
    for var in (
        "SIP_LOG_LEVEL",
        "SIP_CATALOG_DIR",
        "SIP_MATCH_LIMIT",
        "SIP_MATCH_THRESHOLD",
        "SIP_DEFAULT_TEXT_MODEL",
        "SIP_DEFAULT_IMAGE_MODEL",
        "SIP_DEFAULT_VIDEO_MODEL",
    ):
        monkeypatch.delenv(var, raising=False)
    clear_settings_cache()
    clear_catalog_cache()
    yield
    clear_settings_cache()
    clear_catalog_cache()


@pytest.fixture
def blog_template() -> Template:
    """Template that strongly matches blog-writing queries."""
    return Template(
        id="blog-post",
        name="Blog Post Generator",
        description="Create engaging blog posts on any topic",
        template="Write a blog post about [TOPIC] for [AUDIENCE].",
        keywords=["blog", "post", "writing", "blog post"],
        defaultLLM="GPT-4",
        defaultTone="casual",
    )


@pytest.fixture
def sample_templates(blog_template: Template) -> list[Template]:
    """Small catalog with known scores for the query 'write a blog post'.

    blog-post scores 45, social-media and article-writer tie at 10,
    code-review and no-keywords score 0.
    """
    return [
        blog_template,
        Template(
            id="social-media",
            name="Social Media Post",
            template="Create posts about [TOPIC] for [PLATFORM].",
            keywords=["social", "media", "post", "social media"],
        ),
        Template(
            id="code-review",
            name="Code Review",
            template="Review the following [LANGUAGE] code.",
            keywords=["code", "review", "python"],
            defaultTone="technical",
        ),
        Template.model_validate({"id": "no-keywords", "name": "No Keywords", "prompt": "Anything"}),
        Template(
            id="article-writer",
            name="Article Writer",
            template="Write an article about [TOPIC].",
            keywords=["blog", "article"],
        ),
    ]
