"""
Response builder service - wraps ranked trails in the API envelope
"""
from typing import Sequence

from trailblazer.models.response import SuggestionResponse, TrailRecommendation

NO_RESULTS_MESSAGE = (
    "No trails found matching your specific criteria nearby. "
    "Try expanding your search range or being less specific with features."
)


class ResponseBuilderService:
    """Response builder service - converts ranked trails to API response format"""

    def build_response(self, trails: Sequence[TrailRecommendation]) -> SuggestionResponse:
        if not trails:
            return SuggestionResponse(
                success=True,
                message=NO_RESULTS_MESSAGE,
                trails=[],
                total_count=0,
            )

        return SuggestionResponse(
            success=True,
            message=f"Found {len(trails)} trails",
            trails=list(trails),
            total_count=len(trails),
        )
