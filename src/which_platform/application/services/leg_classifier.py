"""Classification of journey legs by transport product class."""

from which_platform.domain.models.leg import Leg
from which_platform.domain.models.transport_mode import TransportMode

WALK_CLASSES = frozenset({99, 100})  # footpath, walking
RAIL_CLASSES = frozenset({1, 2})  # heavy rail, metro


def classify_product_class(product_class: int | None) -> TransportMode:
    """Map a product class code to a transport mode.

    Unknown or missing codes (bus, light rail, coach, ferry, school bus, ...)
    map to OTHER.
    """
    if product_class in WALK_CLASSES:
        return TransportMode.WALK
    if product_class in RAIL_CLASSES:
        return TransportMode.RAIL
    return TransportMode.OTHER


def classify_leg(leg: Leg) -> TransportMode:
    """Classify a leg by its transportation product class."""
    return classify_product_class(leg.product_class)


def is_rail_leg(leg: Leg) -> bool:
    return classify_leg(leg) is TransportMode.RAIL


def is_transit_leg(leg: Leg) -> bool:
    """True for legs with a known product class that is not walking."""
    return leg.product_class is not None and classify_leg(leg) is not TransportMode.WALK
