"""Rail stop counting and interchange details."""

from collections.abc import Sequence

from which_platform.application.services.leg_classifier import is_rail_leg, is_transit_leg
from which_platform.domain.models.departure_record import InterchangeDetail
from which_platform.domain.models.journey import Journey
from which_platform.domain.models.leg import Leg

PLACEHOLDER = "?"


def count_rail_stops(legs: Sequence[Leg]) -> int:
    """Count stops travelled on rail legs, not counting each boarding station."""
    return sum(max(0, len(leg.stop_sequence) - 1) for leg in legs if is_rail_leg(leg))


def build_interchange_details(journey: Journey) -> list[InterchangeDetail]:
    """Describe each change of line after the first transit leg.

    Only built when the journey reports interchanges. Changes whose line is
    unknown are dropped, so the list may be shorter than the reported count.
    """
    if journey.interchanges <= 0:
        return []

    transit_legs = [leg for leg in journey.legs if is_transit_leg(leg)]
    details = []
    for leg in transit_legs[1:]:
        line = leg.transportation.disassembled_name or PLACEHOLDER
        if line == PLACEHOLDER:
            continue
        details.append(
            InterchangeDetail(
                line=line,
                station=leg.origin.disassembled_name or PLACEHOLDER,
                platform=leg.origin.platform_name or PLACEHOLDER,
            )
        )
    return details
