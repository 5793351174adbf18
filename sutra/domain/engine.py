"""Calculation engine — command handlers wired to the bus at construction."""

from __future__ import annotations

import logging
import time
from typing import Any, Callable

from pydantic import ValidationError

from sutra.domain.bus import Disposer, EventBus
from sutra.domain.models import (
    CalculationFailed,
    CalculationInput,
    CalculationSucceeded,
    LogMessage,
)
from sutra.domain.topics import Command
from sutra.services.schwarzschild import (
    INVALID_INPUT_MESSAGE,
    InvalidInputError,
    compute_metrics,
)

LOGGER = logging.getLogger(__name__)

RESET_MESSAGE = "Engine system reset."


def _now_millis() -> int:
    return int(time.time() * 1000)


class SchwarzschildEngine:
    """Subscribes to calculation commands and publishes results or errors.

    Holds no state between commands; every command is computed from its own
    payload.
    """

    def __init__(self, bus: EventBus, clock: Callable[[], int] = _now_millis) -> None:
        self.bus = bus
        self.clock = clock
        self._disposers: list[Disposer] = []
        self._register()

    def _register(self) -> None:
        self._disposers = [
            self.bus.subscribe(Command.CALCULATE_SCHWARZSCHILD, self.on_calculate),
            self.bus.subscribe(Command.RESET_ENGINE, self.on_reset),
        ]

    def close(self) -> None:
        for dispose in self._disposers:
            dispose()
        self._disposers = []

    # ------------------------------------------------------------------
    # Handlers
    # ------------------------------------------------------------------

    def on_calculate(self, payload: CalculationInput | dict[str, Any]) -> None:
        try:
            calc_input = CalculationInput.model_validate(payload)
            result = compute_metrics(calc_input, timestamp=self.clock())
        except (InvalidInputError, ValidationError):
            LOGGER.info("Rejected calculation input: %r", payload)
            self.bus.send(CalculationFailed(payload=INVALID_INPUT_MESSAGE))
            return

        # Result first, then the log line.
        self.bus.send(CalculationSucceeded(payload=result))
        self.bus.send(
            LogMessage(
                payload=f"Calculated Schwarzschild params for M={calc_input.mass:.2e}"
            )
        )

    def on_reset(self, payload: Any = None) -> None:
        self.bus.send(LogMessage(payload=RESET_MESSAGE))
