"""Prompt templates for the trail suggestion request."""
from __future__ import annotations

from textwrap import dedent
from typing import Sequence

from trailblazer.config.trail_options import DEFAULT_FEATURE
from trailblazer.models.request import Coordinates, UserPreferences

from .wire_format import ENTRY_DELIMITER, NAME_MARKER, bold_label

SUGGESTION_COUNT = 3

_FIELD_PLACEHOLDERS = (
    ("distance", "Approximate distance in miles"),
    ("elevation", "Elevation gain in feet/meters"),
    ("travel_time", "Approximate driving time from my location"),
    ("rating", "Google Maps numeric rating, e.g. 4.7"),
    ("review_count", "Approximate number of reviews, e.g. 350"),
    ("description", "A short, engaging description of the trail and why it fits my request"),
    ("features", "Comma separated list of key features"),
)

OUTPUT_FORMAT = "\n".join(
    [ENTRY_DELIMITER, f"{NAME_MARKER} [Name of Trail]"]
    + [f"{bold_label(key)} [{hint}]" for key, hint in _FIELD_PLACEHOLDERS]
)

TRAIL_PROMPT_TEMPLATE = dedent(
    """
    I am currently at Latitude: {latitude}, Longitude: {longitude}.

    Please suggest {count} distinct {activity} options near me.

    My preferences are:
    - Preferred Trail Length: Around {distance} miles.
    - Max Travel Time to Trailhead: {travel_time} minutes.
    - Difficulty/Elevation: {difficulty}.
    - Minimum Google Maps Rating: {min_rating} stars (Strictly enforce this).
    - Desired Features: {features}.

    Use Google Maps to verify these trails exist, are reachable, and check their ratings.
    Please sort the suggestions by the highest Google Maps rating.

    CRITICAL: You must format your response specifically for parsing. Use the separator "{delimiter}" between each trail.
    Follow this format exactly for each trail:

    {output_format}

    Do not add introductory text before the first entry.
    """
).strip()


def format_difficulty(levels: Sequence[str]) -> str:
    return " or ".join(levels) if levels else "any"


def format_features(features: Sequence[str]) -> str:
    return ", ".join(features) if features else DEFAULT_FEATURE


def _format_number(value: float) -> str:
    # 5.0 -> "5", 4.5 -> "4.5"
    return f"{value:g}"


def build_trail_prompt(
    preferences: UserPreferences,
    coordinates: Coordinates,
    *,
    count: int = SUGGESTION_COUNT,
) -> str:
    return TRAIL_PROMPT_TEMPLATE.format(
        latitude=coordinates.latitude,
        longitude=coordinates.longitude,
        count=count,
        activity=preferences.activity_type,
        distance=_format_number(preferences.distance),
        travel_time=preferences.travel_time,
        difficulty=format_difficulty(preferences.difficulty),
        min_rating=_format_number(preferences.min_rating),
        features=format_features(preferences.features),
        delimiter=ENTRY_DELIMITER,
        output_format=OUTPUT_FORMAT,
    )
