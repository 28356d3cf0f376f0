"""Journey leg domain models mirroring the trip planner's leg shape."""

from dataclasses import dataclass, field
from datetime import UTC, datetime


def parse_instant(value: str | None) -> datetime | None:
    """Parse an ISO 8601 timestamp into an aware datetime.

    Naive timestamps are treated as UTC. Unparseable values yield None.
    """
    if not value:
        return None

    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


@dataclass(frozen=True)
class LegLocation:
    """Origin, destination or intermediate stop of a leg."""

    id: str | None = None
    name: str | None = None
    disassembled_name: str | None = None
    departure_time_planned: str | None = None
    departure_time_estimated: str | None = None
    arrival_time_planned: str | None = None
    arrival_time_estimated: str | None = None
    platform_name: str | None = None
    stopping_point_planned: str | None = None

    @property
    def departure_time(self) -> str | None:
        """Raw departure timestamp, estimated preferred over planned."""
        return self.departure_time_estimated or self.departure_time_planned

    @property
    def arrival_time(self) -> str | None:
        """Raw arrival timestamp, estimated preferred over planned."""
        return self.arrival_time_estimated or self.arrival_time_planned

    @property
    def platform(self) -> str | None:
        """Platform label, falling back to the planned stopping point."""
        return self.platform_name or self.stopping_point_planned


@dataclass(frozen=True)
class Transportation:
    """Vehicle and line a leg travels on."""

    disassembled_name: str | None = None  # Line name, e.g. "T1"
    number: str | None = None
    destination_name: str | None = None
    product_class: int | None = None  # 1 train, 2 metro, 4 light rail, 5 bus, 99/100 walk


@dataclass(frozen=True)
class Leg:
    """One continuous segment of a journey on a single transport mode."""

    origin: LegLocation = field(default_factory=LegLocation)
    destination: LegLocation = field(default_factory=LegLocation)
    transportation: Transportation = field(default_factory=Transportation)
    stop_sequence: tuple[LegLocation, ...] = ()
    realtime_status: tuple[str, ...] = ()

    @property
    def product_class(self) -> int | None:
        """Numeric transport product class of this leg."""
        return self.transportation.product_class
