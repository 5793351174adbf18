"""Tests for the Schwarzschild arithmetic service."""

from __future__ import annotations

import math

import pytest

from sutra.domain.models import CalculationInput
from sutra.services.schwarzschild import (
    C,
    G,
    INVALID_INPUT_MESSAGE,
    InvalidInputError,
    compute_metrics,
    l_factor,
    schwarzschild_radius,
)

EARTH_MASS = 5.972e24
EARTH_RADIUS = 6371000.0
SOLAR_MASS = 1.989e30


def test_schwarzschild_radius_formula():
    assert schwarzschild_radius(EARTH_MASS) == (2 * G * EARTH_MASS) / C**2


def test_earth_is_far_outside_its_horizon():
    result = compute_metrics(CalculationInput(mass=EARTH_MASS, radius=EARTH_RADIUS), 0)

    assert result.schwarzschild_radius == pytest.approx(8.87e-3, rel=1e-3)
    assert result.is_inside_horizon is False
    assert result.l_factor == math.sqrt(1 - result.schwarzschild_radius / EARTH_RADIUS)
    assert result.l_factor == pytest.approx(1.0, abs=1e-8)
    assert result.l_factor < 1.0


def test_solar_mass_at_one_kilometre_is_inside():
    result = compute_metrics(CalculationInput(mass=SOLAR_MASS, radius=1000), 0)

    assert result.schwarzschild_radius == pytest.approx(2954, rel=1e-3)
    assert result.is_inside_horizon is True
    assert result.l_factor == 0


def test_radius_equal_to_horizon_counts_as_inside():
    rs = schwarzschild_radius(SOLAR_MASS)

    assert l_factor(rs, rs) == (0.0, True)

    result = compute_metrics(CalculationInput(mass=SOLAR_MASS, radius=rs), 0)
    assert result.is_inside_horizon is True
    assert result.l_factor == 0


def test_just_outside_horizon_is_exterior():
    rs = schwarzschild_radius(SOLAR_MASS)
    factor, inside = l_factor(rs * 4, rs)

    assert inside is False
    assert factor == pytest.approx(math.sqrt(0.75))


def test_timestamp_is_passed_through():
    result = compute_metrics(CalculationInput(mass=1.0, radius=1.0), 1_700_000_000_000)
    assert result.timestamp == 1_700_000_000_000


@pytest.mark.parametrize(
    "mass, radius",
    [
        (0, 100),
        (-1, 100),
        (1e30, 0),
        (1e30, -5),
        (math.inf, 100),
        (1e30, math.nan),
    ],
)
def test_invalid_input_raises(mass, radius):
    with pytest.raises(InvalidInputError, match=INVALID_INPUT_MESSAGE):
        compute_metrics(CalculationInput(mass=mass, radius=radius), 0)


def test_invalid_input_error_is_a_value_error():
    assert issubclass(InvalidInputError, ValueError)
