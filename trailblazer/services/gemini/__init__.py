"""Gemini request building and answer parsing for trail suggestions."""
from .llm_client import GeminiTrailClient, ModelAnswer
from .prompts import build_trail_prompt
from .response_parser import ParsedTrail, TrailResponseParser

__all__ = [
    "GeminiTrailClient",
    "ModelAnswer",
    "ParsedTrail",
    "TrailResponseParser",
    "build_trail_prompt",
]
