"""
Main trail suggestion service
Build prompt → Gemini call → parse → ground → rank, one model call per search.
"""
import logging
from typing import List, Optional

from trailblazer.config import settings
from trailblazer.models.request import Coordinates, UserPreferences
from trailblazer.models.response import SuggestionResponse, TrailRecommendation
from trailblazer.services.gemini import (
    GeminiTrailClient,
    TrailResponseParser,
    build_trail_prompt,
)
from trailblazer.services.trail import (
    GroundingResolver,
    ResponseBuilderService,
    TrailRankingService,
)

logger = logging.getLogger(__name__)


class SuggestionService:
    """
    Stateless orchestrator for trail suggestions

    Nothing is cached between searches; an identical search calls the model again.
    Errors from the model call are not retried or wrapped.
    """

    def __init__(
        self,
        *,
        llm_client: Optional[GeminiTrailClient] = None,
        parser: Optional[TrailResponseParser] = None,
        resolver: Optional[GroundingResolver] = None,
        ranking_service: Optional[TrailRankingService] = None,
        response_builder: Optional[ResponseBuilderService] = None,
        suggestion_count: Optional[int] = None,
    ):
        self.llm_client = llm_client or GeminiTrailClient()
        self.parser = parser or TrailResponseParser()
        self.resolver = resolver or GroundingResolver()
        self.ranking_service = ranking_service or TrailRankingService()
        self.response_builder = response_builder or ResponseBuilderService()
        self.suggestion_count = suggestion_count or settings.suggestion_count

    async def get_trail_suggestions(
        self, preferences: UserPreferences, coordinates: Coordinates
    ) -> List[TrailRecommendation]:
        prompt = build_trail_prompt(
            preferences, coordinates, count=self.suggestion_count
        )

        answer = await self.llm_client.generate(prompt, coordinates)

        parsed = self.parser.parse(answer.text)
        if not parsed:
            logger.info("Model answer contained no recognizable trail entries")
            return []

        resolved = self.resolver.resolve_all(parsed, answer.grounding_chunks)
        return self.ranking_service.rank_trails(resolved)

    async def suggest(
        self, preferences: UserPreferences, coordinates: Coordinates
    ) -> SuggestionResponse:
        """Same as get_trail_suggestions, wrapped in the API response envelope."""
        trails = await self.get_trail_suggestions(preferences, coordinates)
        return self.response_builder.build_response(trails)
