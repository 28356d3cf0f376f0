"""Assembly of the sorted departure list."""

from collections.abc import Iterable
from datetime import datetime

from which_platform.application.services.journey_normalizer import JourneyNormalizer
from which_platform.domain.models.departure_record import DepartureRecord
from which_platform.domain.models.journey import Journey


class DepartureListBuilder:
    """Maps journeys to departure records ordered by departure time."""

    def __init__(self, normalizer: JourneyNormalizer) -> None:
        self.normalizer = normalizer

    def build(self, journeys: Iterable[Journey], now: datetime) -> list[DepartureRecord]:
        """Normalize every journey, drop rejections, and sort by departure.

        The sort is stable and duplicates are kept. Records without a
        departure instant go last.
        """
        timed: list[tuple[datetime, DepartureRecord]] = []
        untimed: list[DepartureRecord] = []
        for journey in journeys:
            record = self.normalizer.normalize(journey, now)
            if record is None:
                continue
            if record.departure_instant is None:
                untimed.append(record)
            else:
                timed.append((record.departure_instant, record))

        timed.sort(key=lambda item: item[0])
        return [record for _, record in timed] + untimed
