# Trail service package
from .grounding_resolver import (
    GroundingResolver,
    fallback_navigation_uri,
    name_in_citation_title,
)
from .ranking_service import TrailRankingService
from .response_builder import ResponseBuilderService


__all__ = [
    "GroundingResolver",
    "ResponseBuilderService",
    "TrailRankingService",
    "fallback_navigation_uri",
    "name_in_citation_title",
]
