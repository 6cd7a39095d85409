"""Generation services."""
from .generation_service import GenerationResult, PromptGenerationService

__all__ = ["GenerationResult", "PromptGenerationService"]
