"""Tests for pydantic model parsing and display helpers."""

from __future__ import annotations

from datetime import UTC, datetime

import pytest
from pydantic import ValidationError

from parkstatus.models.geo import Position
from parkstatus.models.location import Location
from parkstatus.models.requests import NearbySearchRequest, VoteSubmission
from parkstatus.models.row import DisplayRow
from parkstatus.models.status import (
    GLYPH_NEUTRAL,
    TEXT_LOADING,
    TEXT_NO_DATA,
    TEXT_UNAVAILABLE,
    AggregationResult,
    StatusState,
    Verdict,
    display_for,
    vote_option_label,
)
from parkstatus.models.vote import Vote, VoteStatus

# ------------------------------------------------------------------
# VoteStatus
# ------------------------------------------------------------------


class TestVoteStatus:
    @pytest.mark.parametrize(
        ("wire", "expected"),
        [("GREEN", VoteStatus.LOW), ("YELLOW", VoteStatus.MEDIUM), ("RED", VoteStatus.HIGH)],
    )
    def test_known_wire_values(self, wire: str, expected: VoteStatus) -> None:
        assert VoteStatus.from_wire(wire) == expected

    @pytest.mark.parametrize("wire", ["BLUE", "red", " RED ", "HIGH", "LOW", "", None, 3])
    def test_unknown_wire_values_are_not_defaulted(self, wire: object) -> None:
        assert VoteStatus.from_wire(wire) is None

    def test_wire_mapping(self) -> None:
        assert [status.wire for status in VoteStatus] == ["GREEN", "YELLOW", "RED"]


# ------------------------------------------------------------------
# Vote
# ------------------------------------------------------------------


class TestVote:
    def test_parses_wire_payload(self) -> None:
        vote = Vote.model_validate(
            {
                "locationId": "p1",
                "voterKey": "abc",
                "status": "RED",
                "timestamp": "2026-02-01T10:00:00.123456789Z",
            }
        )

        assert vote.status == VoteStatus.HIGH
        assert vote.submitted_at == datetime(2026, 2, 1, 10, 0, 0, 123456, tzinfo=UTC)

    def test_accepts_status_members(self) -> None:
        vote = Vote(location_id="p1", status=VoteStatus.MEDIUM, submitted_at=1_700_000_000_000)

        assert vote.status == VoteStatus.MEDIUM
        assert vote.voter_key == ""

    @pytest.mark.parametrize("status", ["MEDIUM", "yellow"])
    def test_rejects_level_names_and_lowercase_wire_values(self, status: str) -> None:
        with pytest.raises(ValidationError):
            Vote(location_id="p1", status=status, submitted_at=1_700_000_000_000)

    def test_rejects_unknown_status(self) -> None:
        with pytest.raises(ValidationError):
            Vote(location_id="p1", status="PURPLE", submitted_at=1_700_000_000)

    def test_rejects_missing_timestamp(self) -> None:
        with pytest.raises(ValidationError):
            Vote.model_validate({"locationId": "p1", "status": "GREEN", "timestamp": ""})


# ------------------------------------------------------------------
# Location
# ------------------------------------------------------------------


class TestLocation:
    def test_places_payload(self) -> None:
        location = Location.model_validate(
            {
                "id": "ChIJ123",
                "displayName": {"text": "Parking Rynek", "languageCode": "pl"},
                "location": {"latitude": 50.259, "longitude": 19.021},
                "googleMapsUri": "https://maps.google.com/?cid=1",
            }
        )

        assert location.id == "ChIJ123"
        assert location.display_name == "Parking Rynek"
        assert location.position == Position(latitude=50.259, longitude=19.021)
        assert location.external_map_uri == "https://maps.google.com/?cid=1"

    def test_missing_name_defaults(self) -> None:
        location = Location.model_validate({"id": "x", "location": {"lat": 1.0, "lng": 2.0}})

        assert location.display_name == "Parking"

    def test_blank_id_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Location.model_validate({"id": "   ", "location": {"lat": 1.0, "lng": 2.0}})

    def test_position_out_of_range_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Location.model_validate({"id": "x", "location": {"lat": 95.0, "lng": 2.0}})


# ------------------------------------------------------------------
# Status display
# ------------------------------------------------------------------


class TestStatusDisplay:
    def test_verdict_display(self) -> None:
        assert display_for(Verdict.LOW) == ("🟢", "Dużo wolnych miejsc")
        assert display_for(Verdict.MEDIUM) == ("🟡", "Średnie obłożenie")
        assert display_for(Verdict.HIGH) == ("🔴", "Prawie pełny")
        assert display_for(Verdict.NONE) == (GLYPH_NEUTRAL, TEXT_NO_DATA)

    def test_vote_option_label(self) -> None:
        assert vote_option_label(VoteStatus.HIGH) == "🔴  Prawie pełny"

    def test_unavailable_is_distinct_from_no_data(self) -> None:
        unavailable = AggregationResult.unavailable()
        no_data = AggregationResult.for_verdict(Verdict.NONE)

        assert unavailable.verdict == no_data.verdict == Verdict.NONE
        assert unavailable.text == TEXT_UNAVAILABLE
        assert no_data.text == TEXT_NO_DATA
        assert unavailable.state == StatusState.UNAVAILABLE
        assert no_data.state == StatusState.READY


# ------------------------------------------------------------------
# DisplayRow
# ------------------------------------------------------------------


class TestDisplayRow:
    def _row(self, distance: int = 420) -> DisplayRow:
        return DisplayRow(
            location_id="p1",
            display_name="Parking",
            position=Position(latitude=50.0, longitude=19.0),
            distance_meters=distance,
        )

    def test_starts_as_loading_placeholder(self) -> None:
        row = self._row()

        assert row.status_text == TEXT_LOADING
        assert row.status_state == StatusState.LOADING

    def test_with_status_keeps_other_fields(self) -> None:
        row = self._row()
        updated = row.with_status(AggregationResult.for_verdict(Verdict.LOW))

        assert updated.status_glyph == "🟢"
        assert updated.verdict == Verdict.LOW
        assert updated.status_state == StatusState.READY
        assert updated.model_dump(exclude={"status_glyph", "status_text", "verdict", "status_state"}) == row.model_dump(
            exclude={"status_glyph", "status_text", "verdict", "status_state"}
        )
        assert row.status_text == TEXT_LOADING

    def test_rows_are_frozen(self) -> None:
        with pytest.raises(ValidationError):
            self._row().distance_meters = 5  # type: ignore[misc]

    @pytest.mark.parametrize(("distance", "expected"), [(420, "420 m"), (999, "999 m"), (1000, "1.0 km"), (4567, "4.6 km")])
    def test_display_distance(self, distance: int, expected: str) -> None:
        assert self._row(distance).display_distance == expected


# ------------------------------------------------------------------
# Requests
# ------------------------------------------------------------------


class TestRequests:
    def test_vote_submission_normalizes(self) -> None:
        submission = VoteSubmission(location_id=" p1 ", voter_key=" me ", status=VoteStatus.LOW)

        assert submission.location_id == "p1"
        assert submission.voter_key == "me"

    @pytest.mark.parametrize("voter_key", ["", "a/b"])
    def test_vote_submission_rejects_bad_voter_key(self, voter_key: str) -> None:
        with pytest.raises(ValidationError):
            VoteSubmission(location_id="p1", voter_key=voter_key, status=VoteStatus.LOW)

    def test_nearby_search_limits(self) -> None:
        center = Position(latitude=50.0, longitude=19.0)

        with pytest.raises(ValidationError):
            NearbySearchRequest(center=center, radius_meters=0)
        with pytest.raises(ValidationError):
            NearbySearchRequest(center=center, radius_meters=100, max_results=21)
