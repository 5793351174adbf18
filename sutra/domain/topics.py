"""Topic names shared by the engine and its adapters."""

from __future__ import annotations

from enum import StrEnum


class Command(StrEnum):
    """Intents an adapter asks the core to perform."""

    CALCULATE_SCHWARZSCHILD = "CALCULATE_SCHWARZSCHILD"
    EXPLAIN_PHYSICS = "EXPLAIN_PHYSICS"
    RESET_ENGINE = "RESET_ENGINE"


class EventType(StrEnum):
    """Facts announced by the engine and its collaborators."""

    CALCULATION_SUCCESS = "CALCULATION_SUCCESS"
    CALCULATION_ERROR = "CALCULATION_ERROR"
    AI_EXPLANATION_READY = "AI_EXPLANATION_READY"
    LOG_MESSAGE = "LOG_MESSAGE"


Topic = Command | EventType
