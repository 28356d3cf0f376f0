"""Tests for leg classification."""

import pytest

from tests.journey_builders import BUS, FOOTPATH, LIGHT_RAIL, METRO, TRAIN, WALK, leg
from which_platform.application.services import (
    classify_leg,
    classify_product_class,
    is_rail_leg,
    is_transit_leg,
)
from which_platform.domain.models import TransportMode


@pytest.mark.parametrize("code", [FOOTPATH, WALK])
def test_walking_codes_classify_as_walk(code: int) -> None:
    """Given a footpath or walking code, when classifying, then mode is walk."""
    assert classify_product_class(code) is TransportMode.WALK


@pytest.mark.parametrize("code", [TRAIN, METRO])
def test_train_and_metro_classify_as_rail(code: int) -> None:
    """Given heavy rail or metro code, when classifying, then mode is rail."""
    assert classify_product_class(code) is TransportMode.RAIL


@pytest.mark.parametrize("code", [LIGHT_RAIL, BUS, 7, 9, 11, 0, -3, 12345, None])
def test_other_and_unknown_codes_classify_as_other(code: int | None) -> None:
    """Given any other or missing code, when classifying, then mode is other without error."""
    assert classify_product_class(code) is TransportMode.OTHER


def test_classify_leg_reads_product_class_from_transportation() -> None:
    """Given a metro leg, when classifying the leg, then it is rail."""
    assert classify_leg(leg(METRO)) is TransportMode.RAIL
    assert is_rail_leg(leg(METRO))
    assert not is_rail_leg(leg(BUS))


def test_transit_legs_exclude_walks_and_unknown_class() -> None:
    """Given walk, bus and class-less legs, when checking transit, then only the bus is transit."""
    assert is_transit_leg(leg(BUS))
    assert is_transit_leg(leg(TRAIN))
    assert not is_transit_leg(leg(WALK))
    assert not is_transit_leg(leg(None))
