"""
Trail search vocabulary
Closed option sets and form defaults shared by the API and the prompt builder.
"""

from typing import Dict, List


ACTIVITY_TYPES: List[str] = ["hike", "run"]

DIFFICULTY_LEVELS: List[str] = ["easy", "moderate", "hard"]

# Features offered by the search form; free text is accepted as well
FEATURE_OPTIONS: List[str] = [
    "Lake",
    "River",
    "Waterfall",
    "Forest",
    "Views",
    "Wildflowers",
    "Dog friendly",
    "Loop",
]

DEFAULT_FEATURE = "Scenic views"


MIN_RATING_BOUNDS = (1.0, 5.0)


def normalize_difficulty(levels: List[str]) -> List[str]:
    """Return the accepted levels in canonical order; empty means all levels."""
    wanted = {level.strip().lower() for level in levels if level and level.strip()}
    if not wanted:
        return list(DIFFICULTY_LEVELS)
    return [level for level in DIFFICULTY_LEVELS if level in wanted]


def get_search_options() -> Dict[str, object]:
    """Describe the vocabulary for clients building a search form."""
    from trailblazer.models.request import UserPreferences

    return {
        "activity_types": list(ACTIVITY_TYPES),
        "difficulty_levels": list(DIFFICULTY_LEVELS),
        "feature_options": list(FEATURE_OPTIONS),
        "min_rating_bounds": list(MIN_RATING_BOUNDS),
        "defaults": UserPreferences().model_dump(),
    }
