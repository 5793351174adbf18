"""Payloads and message envelopes carried on the bus."""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Payloads
# ---------------------------------------------------------------------------


class CalculationInput(BaseModel):
    """Mass in kilograms and distance from the centre in meters."""

    model_config = ConfigDict(frozen=True, strict=True)

    mass: float
    radius: float


class CalculationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    schwarzschild_radius: float = Field(ge=0)
    l_factor: float = Field(ge=0, le=1)
    is_inside_horizon: bool
    timestamp: int


class ExplainRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    mass: float
    radius: float
    result: CalculationResult


# ---------------------------------------------------------------------------
# Envelopes: one per topic, discriminated by ``topic``
# ---------------------------------------------------------------------------


class CalculateSchwarzschild(BaseModel):
    topic: Literal["CALCULATE_SCHWARZSCHILD"] = "CALCULATE_SCHWARZSCHILD"
    payload: CalculationInput


class ExplainPhysics(BaseModel):
    topic: Literal["EXPLAIN_PHYSICS"] = "EXPLAIN_PHYSICS"
    payload: ExplainRequest


class ResetEngine(BaseModel):
    topic: Literal["RESET_ENGINE"] = "RESET_ENGINE"
    payload: None = None


class CalculationSucceeded(BaseModel):
    topic: Literal["CALCULATION_SUCCESS"] = "CALCULATION_SUCCESS"
    payload: CalculationResult


class CalculationFailed(BaseModel):
    topic: Literal["CALCULATION_ERROR"] = "CALCULATION_ERROR"
    payload: str


class ExplanationReady(BaseModel):
    topic: Literal["AI_EXPLANATION_READY"] = "AI_EXPLANATION_READY"
    payload: str


class LogMessage(BaseModel):
    topic: Literal["LOG_MESSAGE"] = "LOG_MESSAGE"
    payload: str


CommandMessage = Annotated[
    Union[CalculateSchwarzschild, ExplainPhysics, ResetEngine],
    Field(discriminator="topic"),
]

Message = Annotated[
    Union[
        CalculateSchwarzschild,
        ExplainPhysics,
        ResetEngine,
        CalculationSucceeded,
        CalculationFailed,
        ExplanationReady,
        LogMessage,
    ],
    Field(discriminator="topic"),
]
