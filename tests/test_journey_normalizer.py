"""Tests for normalizing journeys into departure records."""

from datetime import UTC, datetime
from zoneinfo import ZoneInfo

import pytest

from tests.journey_builders import (
    BUS,
    METRO,
    TRAIN,
    WALK,
    arrives,
    departs,
    journey,
    leg,
    simple_rail_journey,
)
from which_platform.application.services import JourneyNormalizer
from which_platform.domain.models import InterchangeDetail, Journey

NOW = datetime(2025, 3, 9, 22, 55, tzinfo=UTC)  # 09:55 Sydney


@pytest.fixture
def normalizer() -> JourneyNormalizer:
    return JourneyNormalizer(timezone=ZoneInfo("Australia/Sydney"))


def test_walk_then_delayed_train_example(normalizer: JourneyNormalizer) -> None:
    """Given walk to Town Hall then a train 2 min late, when normalizing at 09:55, then the
    record shows delay 2, 5 minutes to go and is not catchable."""
    trip = journey(
        leg(
            WALK,
            origin=departs("2025-03-09T23:00:00Z", name="Wynyard Station", stop_id="200080"),
            destination=arrives("2025-03-09T23:04:00Z", name="Town Hall Station"),
        ),
        leg(
            TRAIN,
            line="T1",
            number="T1 North Shore & Western Line",
            train_destination="Emu Plains",
            origin=departs(
                "2025-03-09T23:00:00Z",
                "2025-03-09T23:02:00Z",
                name="Town Hall Station",
                stop_id="2000322",
                platform="Platform 4",
            ),
            destination=arrives(
                "2025-03-09T23:08:00Z", name="Redfern Station", platform="Platform 8"
            ),
            stops=3,
            realtime_status=("MONITORED",),
        ),
    )

    record = normalizer.normalize(trip, NOW)

    assert record is not None
    assert record.delay_minutes == 2
    assert record.minutes_until_departure == 5
    assert record.catchable is False
    assert record.line == "T1"
    assert record.line_number == "T1 North Shore & Western Line"
    assert record.train_destination == "Emu Plains"
    assert record.boarding_station == "Town Hall Station"
    assert record.platform == "Platform 4"
    assert record.arrival_platform == "Platform 8"
    assert record.departure_time_local == "10:00"
    assert record.arrival_time_local == "10:08"
    assert record.duration_minutes == 8
    assert record.number_of_stops == 2
    assert record.is_realtime is True


def test_bus_only_journey_is_rejected(normalizer: JourneyNormalizer) -> None:
    """Given a single bus leg, when normalizing, then the journey is rejected."""
    trip = journey(leg(BUS, line="333", origin=departs("2025-03-09T23:00:00Z")))

    assert normalizer.normalize(trip, NOW) is None


def test_journey_without_legs_is_rejected(normalizer: JourneyNormalizer) -> None:
    """Given no legs, when normalizing, then the journey is rejected."""
    assert normalizer.normalize(Journey(legs=()), NOW) is None


def test_missing_fields_fall_back_to_placeholders(normalizer: JourneyNormalizer) -> None:
    """Given a rail leg with no names, platforms or times, when normalizing, then placeholders
    are used instead of failing."""
    record = normalizer.normalize(journey(leg(TRAIN)), NOW)

    assert record is not None
    assert record.line == "?"
    assert record.line_number == ""
    assert record.train_destination == ""
    assert record.boarding_station == ""
    assert record.platform == "?"
    assert record.arrival_platform == "?"
    assert record.departure_time is None
    assert record.departure_time_local == "?"
    assert record.arrival_time_local == "?"
    assert record.minutes_until_departure is None
    assert record.duration_minutes is None
    assert record.delay_minutes == 0
    assert record.catchable is False
    assert record.is_realtime is False


def test_platform_falls_back_to_planned_stopping_point(normalizer: JourneyNormalizer) -> None:
    """Given no platform name, when normalizing, then the planned stopping point is used."""
    trip = journey(
        leg(
            TRAIN,
            origin=departs("2025-03-09T23:00:00Z", stopping_point="2"),
            destination=arrives("2025-03-09T23:10:00Z", stopping_point="Platform 1"),
        )
    )

    record = normalizer.normalize(trip, NOW)

    assert record is not None
    assert record.platform == "2"
    assert record.arrival_platform == "Platform 1"


def test_boarding_station_empty_when_boarding_at_origin(normalizer: JourneyNormalizer) -> None:
    """Given the first leg is the train, when normalizing, then no separate boarding station."""
    record = normalizer.normalize(simple_rail_journey("2025-03-09T23:10:00Z"), NOW)

    assert record is not None
    assert record.boarding_station == ""
    assert record.minutes_until_departure == 15
    assert record.catchable is True


def test_arrival_comes_from_final_walking_leg(normalizer: JourneyNormalizer) -> None:
    """Given a trailing walk, when normalizing, then arrival time and platform come from it."""
    trip = journey(
        leg(
            METRO,
            line="M1",
            origin=departs("2025-03-09T23:00:00Z", platform="Platform 1"),
            destination=arrives("2025-03-09T23:12:00Z", platform="Platform 2"),
        ),
        leg(WALK, destination=arrives("2025-03-09T23:20:00Z")),
    )

    record = normalizer.normalize(trip, NOW)

    assert record is not None
    assert record.arrival_time == "2025-03-09T23:20:00Z"
    assert record.arrival_time_local == "10:20"
    assert record.arrival_platform == "?"
    assert record.duration_minutes == 20


def test_departure_in_the_past_gives_negative_minutes(normalizer: JourneyNormalizer) -> None:
    """Given a departure before now, when normalizing, then minutes until is negative."""
    record = normalizer.normalize(simple_rail_journey("2025-03-09T22:50:00Z"), NOW)

    assert record is not None
    assert record.minutes_until_departure == -5


def test_interchanges_counted_verbatim_with_details(normalizer: JourneyNormalizer) -> None:
    """Given a train then metro change, when normalizing, then the interchange is described."""
    trip = journey(
        leg(TRAIN, line="T1", origin=departs("2025-03-09T23:00:00Z"), stops=3),
        leg(
            METRO,
            line="M1",
            origin=departs("2025-03-09T23:10:00Z", name="Central Station", platform="Platform 26"),
            stops=4,
        ),
        interchanges=1,
    )

    record = normalizer.normalize(trip, NOW)

    assert record is not None
    assert record.interchanges == 1
    assert record.interchange_details == [
        InterchangeDetail(line="M1", station="Central Station", platform="Platform 26")
    ]
    assert record.number_of_stops == 5


def test_normalizing_twice_gives_identical_records(normalizer: JourneyNormalizer) -> None:
    """Given the same journey and now, when normalizing twice, then records are equal."""
    trip = simple_rail_journey("2025-03-09T23:10:00Z", "2025-03-09T23:20:00Z", interchanges=0)

    assert normalizer.normalize(trip, NOW) == normalizer.normalize(trip, NOW)


def test_catchable_threshold_is_configurable() -> None:
    """Given a 10 minute threshold, when a train is 8 minutes away, then it is not catchable."""
    normalizer = JourneyNormalizer(ZoneInfo("Australia/Sydney"), catchable_threshold_minutes=10)

    record = normalizer.normalize(simple_rail_journey("2025-03-09T23:03:00Z"), NOW)

    assert record is not None
    assert record.minutes_until_departure == 8
    assert record.catchable is False


def test_record_serializes_with_camel_case_keys(normalizer: JourneyNormalizer) -> None:
    """Given a record, when dumping by alias, then the wire keys are camelCase without the
    internal sort key."""
    record = normalizer.normalize(simple_rail_journey("2025-03-09T23:10:00Z"), NOW)

    assert record is not None
    payload = record.model_dump(mode="json", by_alias=True)
    assert set(payload) == {
        "line",
        "lineNumber",
        "trainDestination",
        "boardingStation",
        "departureTime",
        "arrivalTime",
        "departureTimeLocal",
        "arrivalTimeLocal",
        "minutesUntilDeparture",
        "durationMinutes",
        "platform",
        "arrivalPlatform",
        "delayMinutes",
        "isRealtime",
        "interchanges",
        "interchangeDetails",
        "numberOfStops",
        "catchable",
    }
