"""Timing and delay calculations for departure records."""

import math
from datetime import datetime
from zoneinfo import ZoneInfo

from which_platform.domain.models.leg import LegLocation, parse_instant

MISSING_TIME = "?"
DEFAULT_CATCHABLE_THRESHOLD_MINUTES = 5


def round_minutes(seconds: float) -> int:
    """Round a span in seconds to whole minutes, halves rounding up."""
    return math.floor(seconds / 60 + 0.5)


def departure_instant(origin: LegLocation) -> datetime | None:
    """Estimated departure if present, else planned."""
    return parse_instant(origin.departure_time)


def arrival_instant(destination: LegLocation) -> datetime | None:
    """Estimated arrival if present, else planned."""
    return parse_instant(destination.arrival_time)


def delay_minutes(boarding_origin: LegLocation) -> int:
    """Delay of the boarding departure in minutes.

    Zero unless both planned and estimated times are known. Early departures
    give negative values.
    """
    planned = parse_instant(boarding_origin.departure_time_planned)
    estimated = parse_instant(boarding_origin.departure_time_estimated)
    if planned is None or estimated is None:
        return 0
    return round_minutes((estimated - planned).total_seconds())


def minutes_until(departure: datetime | None, now: datetime) -> int | None:
    if departure is None:
        return None
    return round_minutes((departure - now).total_seconds())


def duration_minutes(departure: datetime | None, arrival: datetime | None) -> int | None:
    if departure is None or arrival is None:
        return None
    return round_minutes((arrival - departure).total_seconds())


def format_local_time(instant: datetime | None, timezone: ZoneInfo) -> str:
    """Format an instant as 24-hour HH:MM in the operating timezone."""
    if instant is None:
        return MISSING_TIME
    return instant.astimezone(timezone).strftime("%H:%M")


def is_catchable(
    minutes_until_departure: int | None,
    threshold_minutes: int = DEFAULT_CATCHABLE_THRESHOLD_MINUTES,
) -> bool:
    """Whether a departure is far enough away to act on."""
    return minutes_until_departure is not None and minutes_until_departure > threshold_minutes
