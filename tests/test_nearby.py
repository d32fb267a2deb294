from __future__ import annotations

from geopy.distance import geodesic

from parkstatus.models.geo import Position
from parkstatus.models.location import Location
from parkstatus.models.row import format_distance
from parkstatus.models.status import GLYPH_NEUTRAL, TEXT_LOADING, StatusState, Verdict
from parkstatus.nearby import merge_nearby, resolve_observer

OBSERVER = Position(latitude=50.2648919, longitude=19.0237815)


def _location(place_id: str, meters: float, bearing: float = 0.0) -> Location:
    point = geodesic(meters=meters).destination((OBSERVER.latitude, OBSERVER.longitude), bearing=bearing)
    return Location(
        id=place_id,
        display_name=f"Parking {place_id}",
        position=Position(latitude=point.latitude, longitude=point.longitude),
        external_map_uri=f"https://maps.example/?cid={place_id}",
    )


def test_rows_sorted_by_distance() -> None:
    locations = [_location("a", 50), _location("b", 5000), _location("c", 10)]

    rows = merge_nearby(locations, OBSERVER)

    assert [row.distance_meters for row in rows] == [10, 50, 5000]
    assert [row.location_id for row in rows] == ["c", "a", "b"]


def test_rows_start_with_loading_placeholder() -> None:
    rows = merge_nearby([_location("a", 120)], OBSERVER)

    row = rows[0]
    assert row.status_glyph == GLYPH_NEUTRAL
    assert row.status_text == TEXT_LOADING
    assert row.status_state == StatusState.LOADING
    assert row.verdict == Verdict.NONE
    assert row.display_name == "Parking a"
    assert row.external_map_uri == "https://maps.example/?cid=a"


def test_location_without_position_is_excluded() -> None:
    broken = Location.model_construct(id="broken", display_name="Broken", position=None, external_map_uri=None)

    rows = merge_nearby([_location("a", 50), broken, None], OBSERVER)

    assert [row.location_id for row in rows] == ["a"]


def test_ties_keep_provider_order() -> None:
    locations = [_location("first", 300, bearing=0.0), _location("second", 300, bearing=180.0)]

    rows = merge_nearby(locations, OBSERVER)

    assert [row.location_id for row in rows] == ["first", "second"]


def test_empty_input() -> None:
    assert merge_nearby([], OBSERVER) == []


def test_limit_applies_after_sorting() -> None:
    locations = [_location(str(i), 100 * (30 - i)) for i in range(25)]

    rows = merge_nearby(locations, OBSERVER, limit=20)

    assert len(rows) == 20
    assert rows[0].location_id == "24"


def test_resolve_observer_falls_back() -> None:
    fallback = Position(latitude=1.0, longitude=2.0)

    assert resolve_observer(None, fallback) == fallback
    assert resolve_observer(OBSERVER, fallback) == OBSERVER


def test_format_distance() -> None:
    assert format_distance(0) == "0 m"
    assert format_distance(999) == "999 m"
    assert format_distance(1000) == "1.0 km"
    assert format_distance(1549) == "1.5 km"
    assert format_distance(12_345) == "12.3 km"
