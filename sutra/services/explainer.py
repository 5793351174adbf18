"""AI physics consultant that answers EXPLAIN_PHYSICS commands with an LLM."""

from __future__ import annotations

import logging

from sutra.config import Settings
from sutra.domain.bus import Disposer, EventBus
from sutra.domain.models import ExplainRequest, ExplanationReady, LogMessage
from sutra.domain.topics import Command

LOGGER = logging.getLogger(__name__)

FAILURE_MESSAGE = "AI consultant failed to connect."

_SYSTEM_PROMPT = (
    "You are a world-class theoretical physicist specializing in General Relativity."
)


def build_prompt(request: ExplainRequest) -> str:
    return (
        f"Explain the Schwarzschild L-factor for a body with mass {request.mass} kg "
        f"and a measuring radius of {request.radius} meters.\n"
        f"The calculated Schwarzschild radius is {request.result.schwarzschild_radius} "
        f"and the L-factor is {request.result.l_factor}.\n"
        "Keep it concise and scientific."
    )


def _generate_with_llm(prompt: str, settings: Settings) -> str:
    """Call OpenAI to produce the explanation text."""
    if not settings.openai_api_key:
        raise RuntimeError("OPENAI_API_KEY is not set")

    from openai import OpenAI

    client = OpenAI(api_key=settings.openai_api_key)
    response = client.chat.completions.create(
        model=settings.explain_model,
        messages=[
            {"role": "system", "content": _SYSTEM_PROMPT},
            {"role": "user", "content": prompt},
        ],
    )
    text = response.choices[0].message.content
    if not text:
        raise RuntimeError("Empty response from model")
    return text


class PhysicsExplainer:
    """Bus collaborator that turns calculation results into prose.

    Failures never surface as a dedicated event: they are logged and
    announced on ``LOG_MESSAGE``.
    """

    def __init__(self, bus: EventBus, settings: Settings) -> None:
        self.bus = bus
        self.settings = settings
        self._dispose: Disposer = bus.subscribe(Command.EXPLAIN_PHYSICS, self.on_explain)

    def close(self) -> None:
        self._dispose()

    def on_explain(self, payload: ExplainRequest | dict) -> None:
        try:
            request = ExplainRequest.model_validate(payload)
            text = _generate_with_llm(build_prompt(request), self.settings)
        except Exception:
            LOGGER.exception("AI service error")
            self.bus.send(LogMessage(payload=FAILURE_MESSAGE))
            return

        self.bus.send(ExplanationReady(payload=text))
