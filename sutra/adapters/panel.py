"""Result panel adapter: parses form input and keeps the latest calculation state."""

from __future__ import annotations

from pydantic import BaseModel

from sutra.domain.bus import Disposer, EventBus
from sutra.domain.models import (
    CalculateSchwarzschild,
    CalculationInput,
    CalculationResult,
    ExplainPhysics,
    ExplainRequest,
)
from sutra.domain.topics import EventType

PARSE_ERROR_MESSAGE = "Please enter valid numerical scientific notation (e.g., 5.97e24)"
INSIDE_BANNER = "WARNING: TARGET IS WITHIN EVENT HORIZON"
EXTERIOR_BANNER = "TARGET IS IN SCHWARZSCHILD EXTERIOR"


class PanelState(BaseModel):
    result: CalculationResult | None = None
    error: str | None = None
    explanation: str | None = None
    loading_explanation: bool = False
    schwarzschild_radius_display: str | None = None
    l_factor_display: str | None = None
    horizon_banner: str | None = None


def format_result(result: CalculationResult) -> tuple[str, str, str]:
    """Return the (rs, L-factor, banner) strings shown for *result*."""
    banner = INSIDE_BANNER if result.is_inside_horizon else EXTERIOR_BANNER
    return f"{result.schwarzschild_radius:.4e} m", f"{result.l_factor:.8f}", banner


class ResultPanel:
    """Keeps the latest result, error and explanation seen on the bus."""

    def __init__(self, bus: EventBus) -> None:
        self.bus = bus
        self.result: CalculationResult | None = None
        self.error: str | None = None
        self.explanation: str | None = None
        self.loading_explanation = False
        # Input behind self.result; None when the result came from another publisher.
        self._result_input: CalculationInput | None = None
        self._pending_input: CalculationInput | None = None
        self._disposers: list[Disposer] = [
            bus.subscribe(EventType.CALCULATION_SUCCESS, self.on_success),
            bus.subscribe(EventType.CALCULATION_ERROR, self.on_error),
            bus.subscribe(EventType.AI_EXPLANATION_READY, self.on_explanation),
        ]

    def close(self) -> None:
        for dispose in self._disposers:
            dispose()
        self._disposers = []

    # ------------------------------------------------------------------
    # Bus handlers
    # ------------------------------------------------------------------

    def on_success(self, result: CalculationResult) -> None:
        self.result = result
        self.error = None
        self._result_input = self._pending_input
        self._pending_input = None

    def on_error(self, message: str) -> None:
        self.error = message
        self.result = None
        self._result_input = None
        self._pending_input = None

    def on_explanation(self, text: str) -> None:
        self.explanation = text
        self.loading_explanation = False

    # ------------------------------------------------------------------
    # User actions
    # ------------------------------------------------------------------

    def submit(self, mass_text: str | float, radius_text: str | float) -> None:
        """Parse the form values and publish a calculation command."""
        try:
            calc_input = CalculationInput(
                mass=float(mass_text), radius=float(radius_text)
            )
        except (TypeError, ValueError):
            self.error = PARSE_ERROR_MESSAGE
            return

        self._pending_input = calc_input
        self.bus.send(CalculateSchwarzschild(payload=calc_input))
        self._pending_input = None
        self.explanation = None

    def request_explanation(self) -> bool:
        """Ask the AI consultant about the current result.

        Returns ``False`` without publishing when there is no result yet, or
        when the current result was not requested through this panel.
        """
        if self.result is None or self._result_input is None:
            return False
        self.loading_explanation = True
        self.bus.send(
            ExplainPhysics(
                payload=ExplainRequest(
                    mass=self._result_input.mass,
                    radius=self._result_input.radius,
                    result=self.result,
                )
            )
        )
        return True

    def snapshot(self) -> PanelState:
        state = PanelState(
            result=self.result,
            error=self.error,
            explanation=self.explanation,
            loading_explanation=self.loading_explanation,
        )
        if self.result is not None:
            rs, factor, banner = format_result(self.result)
            state.schwarzschild_radius_display = rs
            state.l_factor_display = factor
            state.horizon_banner = banner
        return state
