"""Terminal-style log feed fed by LOG_MESSAGE events."""

from __future__ import annotations

from collections import deque
from datetime import datetime
from typing import Callable

from sutra.domain.bus import EventBus
from sutra.domain.topics import EventType

BANNER = "[SYSTEM] Initializing Sutra-Math-Engine..."


class TerminalFeed:
    """Rolling buffer of the newest *capacity* log lines."""

    def __init__(
        self,
        bus: EventBus,
        capacity: int = 50,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.clock = clock
        self._lines: deque[str] = deque([BANNER], maxlen=capacity)
        self._dispose = bus.subscribe(EventType.LOG_MESSAGE, self.on_log)

    def close(self) -> None:
        self._dispose()

    def on_log(self, message: str) -> None:
        self._lines.append(f"[{self.clock().strftime('%H:%M:%S')}] {message}")

    @property
    def lines(self) -> list[str]:
        return list(self._lines)
