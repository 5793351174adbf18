"""FastAPI application — HTTP adapter around the Schwarzschild engine."""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from sutra.adapters.panel import PanelState, ResultPanel
from sutra.adapters.terminal import TerminalFeed
from sutra.config import Settings, load_settings
from sutra.domain.bus import EventBus
from sutra.domain.engine import SchwarzschildEngine
from sutra.domain.models import CommandMessage
from sutra.host import HostApi, create_host_api
from sutra.logging_utils import configure_logging
from sutra.services.explainer import PhysicsExplainer


class CalculateRequest(BaseModel):
    mass: str | float
    radius: str | float


class CommandRequest(BaseModel):
    command: CommandMessage


class Runtime:
    """Every component of one engine instance, all sharing one bus."""

    def __init__(self, settings: Settings) -> None:
        self.settings = settings
        self.bus = EventBus()
        self.engine = SchwarzschildEngine(self.bus)
        self.explainer = PhysicsExplainer(self.bus, settings)
        self.panel = ResultPanel(self.bus)
        self.terminal = TerminalFeed(self.bus, capacity=settings.log_capacity)
        self.host: HostApi = create_host_api(self.bus)


def create_app(settings: Settings | None = None) -> FastAPI:
    if settings is None:
        settings = load_settings()
    runtime = Runtime(settings)

    @asynccontextmanager
    async def lifespan(_: FastAPI):
        configure_logging(settings)
        yield

    app = FastAPI(title="Sutra Math Engine", lifespan=lifespan)
    app.state.runtime = runtime

    # ── Routes ────────────────────────────────────────────────────────

    @app.post("/calculate", response_model=PanelState)
    def calculate(body: CalculateRequest) -> PanelState:
        """Submit mass/radius exactly as typed into the form."""
        runtime.panel.submit(body.mass, body.radius)
        return runtime.panel.snapshot()

    @app.post("/explain", response_model=PanelState)
    def explain() -> PanelState:
        """Ask the AI consultant about the current result."""
        if not runtime.panel.request_explanation():
            raise HTTPException(status_code=400, detail="No calculation result to explain")
        return runtime.panel.snapshot()

    @app.post("/reset")
    def reset() -> dict:
        runtime.host.reset()
        return {"status": "reset"}

    @app.post("/commands")
    def publish_command(body: CommandRequest) -> dict:
        """Publish a raw command envelope on the bus."""
        failures = runtime.bus.send(body.command)
        return {"topic": body.command.topic, "handler_failures": len(failures)}

    @app.get("/state", response_model=PanelState)
    def state() -> PanelState:
        return runtime.panel.snapshot()

    @app.get("/logs", response_model=list[str])
    def logs() -> list[str]:
        return runtime.terminal.lines

    return app


app = create_app()
