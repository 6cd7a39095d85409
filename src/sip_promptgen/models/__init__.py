"""Pydantic data models and option vocabularies."""
from sip_promptgen.models.options import (
    DEFAULT_TONE,
    MODEL_FAMILIES,
    MODEL_OPTIONS,
    STYLE_VOCABULARY,
    GeneratorType,
    ImageStyle,
    ModelFamily,
    TextStyle,
    Tone,
    VideoStyle,
    resolve_model_family,
    style_options,
    tone_options,
)
from sip_promptgen.models.request import (
    ImagePromptRequest,
    PromptRequest,
    TextPromptRequest,
    VideoPromptRequest,
    build_request,
)
from sip_promptgen.models.template import Template, TemplateMatch

__all__ = [
    #Options
    "DEFAULT_TONE",
    "MODEL_FAMILIES",
    "MODEL_OPTIONS",
    "STYLE_VOCABULARY",
    "GeneratorType",
    "ImageStyle",
    "ModelFamily",
    "TextStyle",
    "Tone",
    "VideoStyle",
    "resolve_model_family",
    "style_options",
    "tone_options",
    #Requests
    "ImagePromptRequest",
    "PromptRequest",
    "TextPromptRequest",
    "VideoPromptRequest",
    "build_request",
    #Templates
    "Template",
    "TemplateMatch",
]
