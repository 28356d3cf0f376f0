"""Selection of the boarding and final legs of a journey."""

from collections.abc import Sequence
from dataclasses import dataclass

from which_platform.application.services.leg_classifier import is_rail_leg
from which_platform.domain.models.leg import Leg


@dataclass(frozen=True)
class LegSelection:
    """Legs a departure record is built from."""

    first_leg: Leg  # journey start, possibly a walk to the boarding station
    boarding_leg: Leg  # first rail leg, source of line, platform and delay
    final_leg: Leg  # journey end, whatever its mode
    boarding_index: int


def select_legs(legs: Sequence[Leg]) -> LegSelection | None:
    """Pick the boarding and final legs.

    Returns None when there are no legs or none of them is a rail leg.
    """
    if not legs:
        return None

    for index, leg in enumerate(legs):
        if is_rail_leg(leg):
            return LegSelection(
                first_leg=legs[0],
                boarding_leg=leg,
                final_leg=legs[-1],
                boarding_index=index,
            )
    return None
