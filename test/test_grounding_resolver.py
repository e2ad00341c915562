from trailblazer.models.grounding import GroundingChunk
from trailblazer.services.gemini.response_parser import ParsedTrail
from trailblazer.services.trail.grounding_resolver import (
    GroundingResolver,
    fallback_navigation_uri,
    name_in_citation_title,
)


def _trail(name: str, **fields) -> ParsedTrail:
    return ParsedTrail(id=f"trail-0-{name}", name=name, **fields)


def _chunk(**raw) -> GroundingChunk:
    return GroundingChunk.from_raw(raw)


def test_fallback_uri_is_url_encoded_maps_search():
    assert (
        fallback_navigation_uri("Blue Ridge Loop")
        == "https://www.google.com/maps/search/?api=1&query=Blue%20Ridge%20Loop"
    )
    assert (
        fallback_navigation_uri("Mt. Tam & O'Rourke's (East)")
        == "https://www.google.com/maps/search/?api=1&query=Mt.%20Tam%20%26%20O'Rourke's%20(East)"
    )


def test_no_chunks_uses_fallback_and_no_photo():
    resolver = GroundingResolver()
    result = resolver.resolve(_trail("Blue Ridge Loop"), [])

    assert result.navigation_uri == fallback_navigation_uri("Blue Ridge Loop")
    assert result.image_url is None


def test_maps_title_containment_is_case_insensitive():
    chunk = _chunk(maps={"title": "Blue Ridge Loop Trailhead", "uri": "https://maps.example/x"})
    result = GroundingResolver().resolve(_trail("blue ridge LOOP"), [chunk])

    assert result.navigation_uri == "https://maps.example/x"


def test_maps_uri_preferred_over_web_uri():
    chunk = _chunk(
        web={"title": "Blue Ridge Loop - hiking guide", "uri": "https://web.example/guide"},
        maps={"title": "Somewhere else", "uri": "https://maps.example/x"},
    )
    result = GroundingResolver().resolve(_trail("Blue Ridge Loop"), [chunk])

    assert result.navigation_uri == "https://maps.example/x"


def test_web_uri_used_when_no_maps_uri():
    chunk = _chunk(web={"title": "Blue Ridge Loop review", "uri": "https://web.example/review"})
    result = GroundingResolver().resolve(_trail("Blue Ridge Loop"), [chunk])

    assert result.navigation_uri == "https://web.example/review"


def test_matched_chunk_without_uri_falls_back():
    chunk = _chunk(maps={"title": "Blue Ridge Loop"})
    result = GroundingResolver().resolve(_trail("Blue Ridge Loop"), [chunk])

    assert result.navigation_uri == fallback_navigation_uri("Blue Ridge Loop")


def test_first_matching_chunk_wins_and_adopts_first_photo():
    chunks = [
        _chunk(web={"title": "Unrelated Park", "uri": "https://web.example/other"}),
        _chunk(
            maps={
                "title": "Blue Ridge Loop",
                "uri": "https://maps.example/first",
                "photos": [{"uri": "https://photos.example/1"}, {"uri": "https://photos.example/2"}],
            }
        ),
        _chunk(maps={"title": "Blue Ridge Loop", "uri": "https://maps.example/second"}),
    ]
    result = GroundingResolver().resolve(_trail("Blue Ridge Loop"), chunks)

    assert result.navigation_uri == "https://maps.example/first"
    assert result.image_url == "https://photos.example/1"


def test_unmatched_chunk_photo_is_never_used():
    chunk = _chunk(
        maps={
            "title": "Other Trail",
            "uri": "https://maps.example/other",
            "photos": [{"uri": "https://photos.example/other"}],
        }
    )
    result = GroundingResolver().resolve(_trail("Blue Ridge Loop"), [chunk])

    assert result.image_url is None
    assert result.navigation_uri == fallback_navigation_uri("Blue Ridge Loop")


def test_parsed_fields_are_carried_over():
    trail = _trail("Blue Ridge Loop", distance="4.2 miles", rating=4.8, features=["Forest"])
    result = GroundingResolver().resolve(trail, [])

    assert result.id == trail.id
    assert result.distance == "4.2 miles"
    assert result.rating == 4.8
    assert result.features == ["Forest"]


def test_matcher_can_be_replaced():
    def exact_title(name, chunk):
        return name in chunk.titles

    chunks = [
        _chunk(maps={"title": "Blue Ridge Loop Trailhead", "uri": "https://maps.example/loose"}),
        _chunk(maps={"title": "Blue Ridge Loop", "uri": "https://maps.example/exact"}),
    ]

    assert GroundingResolver().resolve(_trail("Blue Ridge Loop"), chunks).navigation_uri == (
        "https://maps.example/loose"
    )
    assert GroundingResolver(exact_title).resolve(
        _trail("Blue Ridge Loop"), chunks
    ).navigation_uri == "https://maps.example/exact"


def test_name_in_citation_title_ignores_missing_titles():
    assert not name_in_citation_title("Blue Ridge Loop", GroundingChunk())
    assert name_in_citation_title("Ridge", _chunk(web={"title": "BLUE RIDGE"}))
