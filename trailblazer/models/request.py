from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from trailblazer.config.trail_options import MIN_RATING_BOUNDS, normalize_difficulty


ActivityType = Literal["hike", "run"]
Difficulty = Literal["easy", "moderate", "hard"]


class Coordinates(BaseModel):
    model_config = ConfigDict(frozen=True)

    latitude: float
    longitude: float


class UserPreferences(BaseModel):
    """Search preferences for a single request"""

    model_config = ConfigDict(frozen=True)

    activity_type: ActivityType = "hike"
    distance: float = Field(default=5.0, gt=0)  # miles
    travel_time: int = Field(default=30, gt=0)  # minutes to the trailhead
    difficulty: List[Difficulty] = ["moderate"]
    features: List[str] = []
    min_rating: float = Field(default=4.0, ge=MIN_RATING_BOUNDS[0], le=MIN_RATING_BOUNDS[1])

    @field_validator("difficulty")
    @classmethod
    def _all_levels_when_empty(cls, value: List[str]) -> List[str]:
        return normalize_difficulty(value)

    @field_validator("features")
    @classmethod
    def _strip_features(cls, value: List[str]) -> List[str]:
        cleaned: List[str] = []
        for feature in value:
            feature = feature.strip()
            if feature and feature not in cleaned:
                cleaned.append(feature)
        return cleaned


class SuggestionRequest(BaseModel):
    preferences: UserPreferences = UserPreferences()
    # Absent when the client could not obtain a location
    coordinates: Optional[Coordinates] = None
