"""Tests for Pydantic models and option vocabularies in sip-promptgen."""

import pytest
from pydantic import ValidationError

from sip_promptgen.models import (
    DEFAULT_TONE,
    GeneratorType,
    ImagePromptRequest,
    ImageStyle,
    ModelFamily,
    Template,
    TemplateMatch,
    TextPromptRequest,
    TextStyle,
    Tone,
    VideoPromptRequest,
    VideoStyle,
    build_request,
    resolve_model_family,
    style_options,
    tone_options,
)


class TestGeneratorType:
    """Tests for GeneratorType enum."""

    def test_values(self) -> None:
        assert GeneratorType.TEXT.value == "text"
        assert GeneratorType.IMAGE.value == "image"
        assert GeneratorType.VIDEO.value == "video"

    def test_from_string(self) -> None:
        assert GeneratorType("image") is GeneratorType.IMAGE

    def test_invalid_value(self) -> None:
        with pytest.raises(ValueError):
            GeneratorType("audio")


class TestResolveModelFamily:
    """Tests for label to family mapping."""

    @pytest.mark.parametrize(
        ("label", "family"),
        [
            ("GPT-4", ModelFamily.GPT4),
            ("Claude", ModelFamily.CLAUDE),
            ("DALL-E 3", ModelFamily.NATURAL_LANGUAGE),
            ("Midjourney", ModelFamily.PARAMETER_SYNTAX),
            ("Stable Diffusion", ModelFamily.KEYWORD_LIST),
        ],
    )
    def test_known_labels(self, label: str, family: ModelFamily) -> None:
        assert resolve_model_family(label) is family

    @pytest.mark.parametrize(
        "label", ["Claude Instant", "GPT-4 (Script)", "gpt-4", "GPT-3.5 Turbo", "Runway Gen-2", ""]
    )
    def test_matching_is_exact(self, label: str) -> None:
        assert resolve_model_family(label) is ModelFamily.GENERIC

    def test_family_passes_through(self) -> None:
        assert resolve_model_family(ModelFamily.CLAUDE) is ModelFamily.CLAUDE


class TestOptions:
    """Tests for option listings."""

    def test_style_options_per_type(self) -> None:
        assert style_options("text") == [s.value for s in TextStyle]
        assert "3d-render" in style_options(GeneratorType.IMAGE)
        assert "casual-vlog" in style_options("video")
        assert "step-by-step" not in style_options("image")

    def test_tone_options(self) -> None:
        assert tone_options() == ["professional", "casual", "creative", "technical", "friendly", "formal"]

    def test_default_tone(self) -> None:
        assert DEFAULT_TONE is Tone.PROFESSIONAL


class TestTemplate:
    """Tests for the Template model."""

    def test_camel_case_aliases(self) -> None:
        template = Template.model_validate(
            {
                "id": "blog-post",
                "name": "Blog Post",
                "template": "Write about [TOPIC]",
                "keywords": ["blog"],
                "defaultLLM": "GPT-4",
                "defaultTone": "casual",
            }
        )
        assert template.default_llm == "GPT-4"
        assert template.default_tone == "casual"

    def test_snake_case_names_also_accepted(self) -> None:
        template = Template(id="t", name="T", default_llm="Claude", default_tone="formal")
        assert template.default_llm == "Claude"
        assert template.default_tone == "formal"

    def test_prompt_key_fills_template(self) -> None:
        template = Template.model_validate({"id": "t", "name": "T", "prompt": "Draw a [SUBJECT]"})
        assert template.template == "Draw a [SUBJECT]"
        assert template.prompt == "Draw a [SUBJECT]"

    def test_template_key_wins_over_prompt(self) -> None:
        template = Template.model_validate({"id": "t", "name": "T", "template": "A", "prompt": "B"})
        assert template.template == "A"

    def test_defaults(self) -> None:
        template = Template(id="t", name="T")
        assert template.description == ""
        assert template.template == ""
        assert template.keywords == []
        assert template.default_llm is None
        assert template.default_tone is None

    def test_null_keywords_become_empty(self) -> None:
        assert Template.model_validate({"id": "t", "name": "T", "keywords": None}).keywords == []

    def test_duplicate_keywords_kept(self) -> None:
        assert Template(id="t", name="T", keywords=["a", "a"]).keywords == ["a", "a"]

    def test_missing_id_fails(self) -> None:
        with pytest.raises(ValidationError):
            Template.model_validate({"name": "T"})

    def test_frozen(self) -> None:
        template = Template(id="t", name="T")
        with pytest.raises(ValidationError):
            template.name = "Other"

    def test_unknown_keys_ignored(self) -> None:
        template = Template.model_validate({"id": "t", "name": "T", "category": "writing"})
        assert template.id == "t"


class TestTemplateMatch:
    """Tests for TemplateMatch."""

    def test_from_template_copies_fields(self, blog_template: Template) -> None:
        match = TemplateMatch.from_template(blog_template, 45)
        assert match.score == 45
        assert match.id == blog_template.id
        assert match.template == blog_template.template
        assert match.keywords == blog_template.keywords
        assert match.default_tone == "casual"
        assert match.default_llm == "GPT-4"
        assert isinstance(match, Template)

    def test_negative_score_rejected(self, blog_template: Template) -> None:
        with pytest.raises(ValidationError):
            TemplateMatch.from_template(blog_template, -1)


class TestBuildRequest:
    """Tests for request validation."""

    def test_text_request(self) -> None:
        request = build_request("text", "explain recursion", "GPT-4", ["concise"], tone="casual")
        assert isinstance(request, TextPromptRequest)
        assert request.generator_type is GeneratorType.TEXT
        assert request.style_flags == [TextStyle.CONCISE]
        assert request.tone is Tone.CASUAL

    def test_tone_optional(self) -> None:
        assert build_request("text", "q", "GPT-4").tone is None

    def test_image_and_video_types(self) -> None:
        image = build_request(GeneratorType.IMAGE, "a fox", "Midjourney", ["3d-render"])
        video = build_request("video", "a show", "Pika", ["with-music"])
        assert isinstance(image, ImagePromptRequest)
        assert image.style_flags == [ImageStyle.RENDER_3D]
        assert isinstance(video, VideoPromptRequest)
        assert video.style_flags == [VideoStyle.WITH_MUSIC]

    def test_tone_ignored_for_image(self) -> None:
        request = build_request("image", "a fox", "DALL-E 3", tone="casual")
        assert not hasattr(request, "tone")

    def test_raw_query_preserved(self) -> None:
        assert build_request("text", "  spaced query  ", "GPT-4").query == "  spaced query  "

    def test_target_model_trimmed(self) -> None:
        assert build_request("text", "q", "  Claude ").target_model == "Claude"

    @pytest.mark.parametrize("query", ["", "   ", "\n\t"])
    def test_blank_query_rejected(self, query: str) -> None:
        with pytest.raises(ValidationError, match="Query cannot be empty"):
            build_request("text", query, "GPT-4")

    def test_blank_model_rejected(self) -> None:
        with pytest.raises(ValidationError, match="Target model cannot be empty"):
            build_request("text", "q", "  ")

    def test_unknown_flag_rejected(self) -> None:
        with pytest.raises(ValidationError):
            build_request("text", "q", "GPT-4", ["sparkly"])

    def test_flag_from_other_vocabulary_rejected(self) -> None:
        with pytest.raises(ValidationError):
            build_request("text", "q", "GPT-4", ["photorealistic"])
        with pytest.raises(ValidationError):
            build_request("image", "q", "Midjourney", ["step-by-step"])

    def test_unknown_tone_rejected(self) -> None:
        with pytest.raises(ValidationError):
            build_request("text", "q", "GPT-4", tone="sarcastic")

    def test_duplicate_flags_collapsed(self) -> None:
        request = build_request("video", "q", "Pika", ["tutorial", "with-music", "tutorial"])
        assert request.style_flags == [VideoStyle.TUTORIAL, VideoStyle.WITH_MUSIC]

    def test_unknown_generator_type(self) -> None:
        with pytest.raises(ValueError):
            build_request("audio", "q", "GPT-4")
