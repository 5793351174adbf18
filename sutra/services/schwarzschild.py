"""Schwarzschild radius and L-factor arithmetic."""

from __future__ import annotations

import math

from sutra.domain.models import CalculationInput, CalculationResult

G = 6.67430e-11  # gravitational constant, m^3 kg^-1 s^-2
C = 299792458.0  # speed of light, m/s

INVALID_INPUT_MESSAGE = "Mass and radius must be greater than zero."


class InvalidInputError(ValueError):
    """Raised when mass or radius is not a finite positive number."""

    def __init__(self) -> None:
        super().__init__(INVALID_INPUT_MESSAGE)


def validate_input(mass: float, radius: float) -> None:
    for value in (mass, radius):
        if not math.isfinite(value) or value <= 0:
            raise InvalidInputError()


def schwarzschild_radius(mass: float) -> float:
    """rs = 2GM / c^2"""
    return (2 * G * mass) / C**2


def l_factor(radius: float, rs: float) -> tuple[float, bool]:
    """Return ``(l_factor, is_inside_horizon)`` for a point at *radius*.

    Outside the horizon the factor is ``sqrt(1 - rs/r)``. At or inside the
    horizon the value is undefined in this model and is reported as ``0``
    with ``is_inside_horizon=True``; ``radius == rs`` counts as inside.
    """
    if radius > rs:
        return math.sqrt(1 - rs / radius), False
    return 0.0, True


def compute_metrics(calc_input: CalculationInput, timestamp: int) -> CalculationResult:
    """Validate *calc_input* and build the result stamped with *timestamp*.

    Raises ``InvalidInputError`` for non-positive or non-finite values.
    """
    validate_input(calc_input.mass, calc_input.radius)

    rs = schwarzschild_radius(calc_input.mass)
    factor, inside = l_factor(calc_input.radius, rs)
    return CalculationResult(
        schwarzschild_radius=rs,
        l_factor=factor,
        is_inside_horizon=inside,
        timestamp=timestamp,
    )
