"""Library-mode surface for applications that embed the engine."""

from __future__ import annotations

from typing import Callable

from sutra.domain.bus import Disposer, EventBus
from sutra.domain.models import (
    CalculateSchwarzschild,
    CalculationInput,
    CalculationResult,
    ResetEngine,
)
from sutra.domain.topics import EventType


class HostApi:
    """Thin pass-through onto one bus; create one per embedding host."""

    def __init__(self, bus: EventBus) -> None:
        self.bus = bus

    def calculate(self, mass: float, radius: float) -> None:
        self.bus.send(
            CalculateSchwarzschild(payload=CalculationInput(mass=mass, radius=radius))
        )

    def subscribe_to_calculations(
        self, handler: Callable[[CalculationResult], None]
    ) -> Disposer:
        return self.bus.subscribe(EventType.CALCULATION_SUCCESS, handler)

    def reset(self) -> None:
        self.bus.send(ResetEngine())


def create_host_api(bus: EventBus) -> HostApi:
    return HostApi(bus)
