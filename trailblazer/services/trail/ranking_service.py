"""Trail ranking by the rating the model reported."""
from __future__ import annotations

from typing import List, Sequence

from trailblazer.models.response import TrailRecommendation


class TrailRankingService:
    """Order trails from highest to lowest rating.

    Trails without a rating sort as if rated 0 and keep their parse order
    relative to each other; the rating itself stays ``None``.
    """

    @staticmethod
    def sort_key(trail: TrailRecommendation) -> float:
        return trail.rating if trail.rating is not None else 0.0

    def rank_trails(self, trails: Sequence[TrailRecommendation]) -> List[TrailRecommendation]:
        if not trails:
            return []
        # sorted() is stable, so equal ratings keep their original order
        return sorted(trails, key=self.sort_key, reverse=True)
