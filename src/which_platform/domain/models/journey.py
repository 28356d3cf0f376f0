"""Journey domain model."""

from dataclasses import dataclass

from which_platform.domain.models.leg import Leg


@dataclass(frozen=True)
class Journey:
    """An ordered sequence of legs as returned by the trip planner.

    Legs are trusted to be contiguous in time and space; this is not verified.
    """

    legs: tuple[Leg, ...] = ()
    interchanges: int = 0
