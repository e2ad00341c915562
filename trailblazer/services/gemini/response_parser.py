"""Parse the model's delimited text answer into provisional trail records."""
from __future__ import annotations

import logging
import re
import time
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Pattern

from .wire_format import (
    ENTRY_DELIMITER,
    FEATURE_SEPARATOR,
    FIELD_LABELS,
    NAME_MARKER,
    bold_label,
)

logger = logging.getLogger(__name__)

UNKNOWN = "Unknown"
NO_DESCRIPTION = "No description available."


@dataclass(frozen=True)
class ParsedTrail:
    """Fields extracted from one entry, before grounding resolution."""

    id: str
    name: str
    distance: str = UNKNOWN
    elevation: str = UNKNOWN
    travel_time: str = UNKNOWN
    description: str = NO_DESCRIPTION
    features: List[str] = field(default_factory=list)
    rating: Optional[float] = None
    review_count: Optional[str] = None


class TrailResponseParser:
    """Line-oriented parser for the entry format requested in the prompt.

    Each field is located by its own label, so field order inside an entry does
    not matter. Entries without a name are dropped; anything else missing falls
    back to a default.
    """

    _NAME_PATTERN = re.compile(re.escape(NAME_MARKER) + r"\s*([^\n]*)")
    _FIELD_PATTERNS: Dict[str, Pattern[str]] = {
        key: re.compile(re.escape(bold_label(key)) + r"[ \t]*([^\n]*)")
        for key in FIELD_LABELS
    }
    _NUMBER_PATTERN = re.compile(r"\d+(?:\.\d+)?")

    def __init__(self, *, clock: Callable[[], float] = time.time) -> None:
        self._clock = clock

    def parse(self, text: str) -> List[ParsedTrail]:
        if not text:
            return []

        stamp = int(self._clock() * 1000)
        trails: List[ParsedTrail] = []
        for index, entry in enumerate(self.split_entries(text)):
            try:
                trail = self.parse_entry(entry, trail_id=f"trail-{index}-{stamp}")
            except Exception:
                logger.warning("Skipping unparseable entry %d", index, exc_info=True)
                continue
            if trail is None:
                logger.debug("Entry %d has no trail name, skipped", index)
                continue
            trails.append(trail)
        return trails

    @staticmethod
    def split_entries(text: str) -> List[str]:
        return [entry for entry in text.split(ENTRY_DELIMITER) if entry.strip()]

    def parse_entry(self, entry: str, *, trail_id: str) -> Optional[ParsedTrail]:
        name = self._search(self._NAME_PATTERN, entry)
        if not name:
            return None

        fields = {key: self._search(pattern, entry) for key, pattern in self._FIELD_PATTERNS.items()}
        return ParsedTrail(
            id=trail_id,
            name=name,
            distance=fields["distance"] or UNKNOWN,
            elevation=fields["elevation"] or UNKNOWN,
            travel_time=fields["travel_time"] or UNKNOWN,
            description=fields["description"] or NO_DESCRIPTION,
            features=self._split_features(fields["features"]),
            rating=self._parse_rating(fields["rating"]),
            review_count=fields["review_count"],
        )

    @staticmethod
    def _search(pattern: Pattern[str], entry: str) -> Optional[str]:
        match = pattern.search(entry)
        if match is None:
            return None
        value = match.group(1).strip()
        return value or None

    @staticmethod
    def _split_features(value: Optional[str]) -> List[str]:
        if not value:
            return []
        features: List[str] = []
        for piece in value.split(FEATURE_SEPARATOR):
            piece = piece.strip()
            if piece and piece not in features:
                features.append(piece)
        return features

    @classmethod
    def _parse_rating(cls, value: Optional[str]) -> Optional[float]:
        if not value:
            return None
        match = cls._NUMBER_PATTERN.search(value)
        if match is None:
            return None
        return float(match.group(0))
