"""SIP PromptGen: keyword template matching and prompt synthesis for text, image and video models."""

__version__ = "0.1.0"

from sip_promptgen.generators import (
    generate_image_prompt,
    generate_text_prompt,
    generate_video_prompt,
    synthesize,
)
from sip_promptgen.matching import (
    CyclingSession,
    CyclingState,
    advance,
    find_best_match,
    find_top_matches,
    normalize,
    score,
)
from sip_promptgen.models import GeneratorType, ModelFamily, Template, TemplateMatch, build_request
from sip_promptgen.services import GenerationResult, PromptGenerationService

__all__ = [
    "__version__",
    "generate_image_prompt",
    "generate_text_prompt",
    "generate_video_prompt",
    "synthesize",
    "CyclingSession",
    "CyclingState",
    "advance",
    "find_best_match",
    "find_top_matches",
    "normalize",
    "score",
    "GeneratorType",
    "ModelFamily",
    "Template",
    "TemplateMatch",
    "build_request",
    "GenerationResult",
    "PromptGenerationService",
]
