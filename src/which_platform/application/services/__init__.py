"""Application services (use cases) and the journey normalization pipeline."""

from which_platform.application.services.boarding_leg_selector import LegSelection, select_legs
from which_platform.application.services.departure_list_builder import DepartureListBuilder
from which_platform.application.services.departure_service import (
    DepartureBoard,
    DepartureService,
    StopSearchService,
    format_utc_instant,
)
from which_platform.application.services.journey_normalizer import JourneyNormalizer
from which_platform.application.services.leg_classifier import (
    classify_leg,
    classify_product_class,
    is_rail_leg,
    is_transit_leg,
)

__all__ = [
    "DepartureBoard",
    "DepartureListBuilder",
    "DepartureService",
    "JourneyNormalizer",
    "LegSelection",
    "StopSearchService",
    "classify_leg",
    "classify_product_class",
    "format_utc_instant",
    "is_rail_leg",
    "is_transit_leg",
    "select_legs",
]
