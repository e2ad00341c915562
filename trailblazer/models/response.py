"""
Response models for trail suggestions
"""
from typing import List, Optional
from pydantic import BaseModel, ConfigDict


class TrailRecommendation(BaseModel):
    """A single suggested trail as returned to clients"""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    # Descriptive strings are kept as the model phrased them (e.g. "4.2 miles")
    distance: str = "Unknown"
    elevation: str = "Unknown"
    travel_time: str = "Unknown"
    description: str = "No description available."
    features: List[str] = []
    navigation_uri: str
    image_url: Optional[str] = None
    rating: Optional[float] = None
    review_count: Optional[str] = None


class SuggestionResponse(BaseModel):
    """Trail suggestion response model"""
    success: bool = True
    message: str = "success"
    trails: List[TrailRecommendation] = []
    total_count: int = 0
