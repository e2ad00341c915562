"""
Grounding resolver - matches parsed trails to citation chunks
Recovers a navigation link and a real photo for each trail when a citation names it.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Optional, Sequence
from urllib.parse import quote

from trailblazer.models.grounding import GroundingChunk
from trailblazer.models.response import TrailRecommendation
from trailblazer.services.gemini.response_parser import ParsedTrail

MAPS_SEARCH_URL = "https://www.google.com/maps/search/?api=1&query="

# Characters encodeURIComponent leaves unescaped
_URI_COMPONENT_SAFE = "-_.!~*'()"

NameMatcher = Callable[[str, GroundingChunk], bool]


def name_in_citation_title(trail_name: str, chunk: GroundingChunk) -> bool:
    """Case-insensitive containment of the trail name in a web or maps title."""
    needle = trail_name.lower()
    return any(needle in title.lower() for title in chunk.titles)


def fallback_navigation_uri(trail_name: str) -> str:
    """Maps search link for a trail no citation could be matched to."""
    return MAPS_SEARCH_URL + quote(trail_name, safe=_URI_COMPONENT_SAFE)


@dataclass(frozen=True)
class ResolvedLinks:
    navigation_uri: str
    image_url: Optional[str] = None


class GroundingResolver:
    """Attach navigation links and photos to parsed trails"""

    def __init__(self, matcher: NameMatcher = name_in_citation_title) -> None:
        self._matcher = matcher

    def find_chunk(
        self, trail_name: str, chunks: Iterable[GroundingChunk]
    ) -> Optional[GroundingChunk]:
        for chunk in chunks:
            if self._matcher(trail_name, chunk):
                return chunk
        return None

    def resolve_links(
        self, trail_name: str, chunks: Sequence[GroundingChunk]
    ) -> ResolvedLinks:
        chunk = self.find_chunk(trail_name, chunks)
        navigation_uri = None
        image_url = None
        if chunk is not None:
            navigation_uri = chunk.uri
            # Only a citation photo is used; none is better than a wrong one
            image_url = chunk.photo_uri

        return ResolvedLinks(
            navigation_uri=navigation_uri or fallback_navigation_uri(trail_name),
            image_url=image_url,
        )

    def resolve(
        self, trail: ParsedTrail, chunks: Sequence[GroundingChunk]
    ) -> TrailRecommendation:
        links = self.resolve_links(trail.name, chunks)
        return TrailRecommendation(
            id=trail.id,
            name=trail.name,
            distance=trail.distance,
            elevation=trail.elevation,
            travel_time=trail.travel_time,
            description=trail.description,
            features=list(trail.features),
            navigation_uri=links.navigation_uri,
            image_url=links.image_url,
            rating=trail.rating,
            review_count=trail.review_count,
        )

    def resolve_all(
        self, trails: Iterable[ParsedTrail], chunks: Sequence[GroundingChunk]
    ) -> list[TrailRecommendation]:
        return [self.resolve(trail, chunks) for trail in trails]
