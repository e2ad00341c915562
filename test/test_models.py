from types import SimpleNamespace

import pytest
from pydantic import ValidationError

from trailblazer.config.trail_options import get_search_options
from trailblazer.models.grounding import GroundingChunk
from trailblazer.models.request import UserPreferences


def test_empty_difficulty_normalized_to_all_levels():
    prefs = UserPreferences(difficulty=[])
    assert prefs.difficulty == ["easy", "moderate", "hard"]


def test_difficulty_kept_in_canonical_order():
    prefs = UserPreferences(difficulty=["hard", "easy", "hard"])
    assert prefs.difficulty == ["easy", "hard"]


def test_features_are_trimmed():
    prefs = UserPreferences(features=[" Lake ", "", "Lake", "Forest"])
    assert prefs.features == ["Lake", "Forest"]


@pytest.mark.parametrize(
    "overrides",
    [
        {"activity_type": "swim"},
        {"distance": 0},
        {"travel_time": -5},
        {"min_rating": 0.5},
        {"min_rating": 5.5},
        {"difficulty": ["extreme"]},
    ],
)
def test_invalid_preferences_rejected(overrides):
    with pytest.raises(ValidationError):
        UserPreferences(**overrides)


def test_preferences_are_immutable():
    prefs = UserPreferences()
    with pytest.raises(ValidationError):
        prefs.distance = 10


def test_grounding_chunk_tolerates_missing_fields_and_extras():
    chunk = GroundingChunk.from_raw({"maps": {"placeId": "x", "text": "about"}, "retrievedContext": {}})

    assert chunk.titles == []
    assert chunk.uri is None
    assert chunk.photo_uri is None


def test_grounding_chunk_from_attributes():
    raw = SimpleNamespace(
        web=None,
        maps=SimpleNamespace(title="Lake Trail", uri="https://maps.example/l", photos=[]),
    )
    chunk = GroundingChunk.from_raw(raw)

    assert chunk.titles == ["Lake Trail"]
    assert chunk.uri == "https://maps.example/l"


def test_search_options_expose_vocabulary():
    options = get_search_options()

    assert options["activity_types"] == ["hike", "run"]
    assert options["difficulty_levels"] == ["easy", "moderate", "hard"]
    assert "Waterfall" in options["feature_options"]
    assert options["defaults"]["min_rating"] == 4.0


def test_null_photos_treated_as_empty():
    chunk = GroundingChunk.from_raw({"maps": {"title": "A", "uri": "u", "photos": None}})

    assert chunk.maps.photos == []
    assert chunk.photo_uri is None
    assert chunk.uri == "u"


def test_option_defaults_follow_preference_model():
    assert get_search_options()["defaults"] == UserPreferences().model_dump()
