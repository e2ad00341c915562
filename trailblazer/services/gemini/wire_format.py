"""Literal tokens of the text format shared by the prompt and the parser.

Changing any of these requires changing both sides; tests pin the values.
"""
from __future__ import annotations

from typing import Dict

ENTRY_DELIMITER = "---ENTRY---"
NAME_MARKER = "##"

# Field key -> bold label, in the order the prompt asks for them
FIELD_LABELS: Dict[str, str] = {
    "distance": "Distance",
    "elevation": "Elevation",
    "travel_time": "Travel Time",
    "rating": "Rating",
    "review_count": "Review Count",
    "description": "Description",
    "features": "Features",
}

FEATURE_SEPARATOR = ","


def bold_label(key: str) -> str:
    return f"**{FIELD_LABELS[key]}:**"
