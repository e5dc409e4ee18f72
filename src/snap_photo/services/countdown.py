"""One-shot countdown that decides when a photo is taken."""

import asyncio
import logging
import math
from collections.abc import Callable
from enum import Enum

logger = logging.getLogger(__name__)


class TimerState(Enum):
    """Lifecycle of a countdown."""

    IDLE = "idle"
    RUNNING = "running"
    FIRED = "fired"


def initial_count(delay_ms: int) -> int:
    """Return the number of whole-second ticks for a capture delay."""
    if delay_ms < 0:
        raise ValueError("Capture delay must not be negative")
    return math.ceil(delay_ms / 1000)


class CountdownTimer:
    """Cooperatively scheduled countdown running on the event loop.

    At most one ``call_later`` handle is pending at any time. Once ``cancel``
    returns, ``on_fire`` is never invoked for the cancelled cycle.
    """

    def __init__(
        self,
        delay_ms: int,
        on_fire: Callable[[], None],
        on_tick: Callable[[int], None] | None = None,
        tick_seconds: float = 1.0,
    ) -> None:
        self.delay_ms = delay_ms
        self.on_fire = on_fire
        self.on_tick = on_tick
        self.tick_seconds = tick_seconds
        self.state = TimerState.IDLE
        self.remaining = 0
        self._loop: asyncio.AbstractEventLoop | None = None
        self._handle: asyncio.TimerHandle | None = None

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def start(self) -> None:
        """Begin a new countdown cycle from ``ceil(delay_ms / 1000)``."""
        if self.state is not TimerState.IDLE:
            raise RuntimeError(f"Countdown cannot start while {self.state.value}")
        self._loop = asyncio.get_running_loop()
        self.remaining = initial_count(self.delay_ms)
        self.state = TimerState.RUNNING
        logger.debug("Countdown started at %s", self.remaining)
        if self.remaining > 0:
            self._notify_tick()
            if self.state is TimerState.RUNNING:
                self._schedule(self.tick_seconds)
        else:
            self._schedule(0)

    def cancel(self) -> bool:
        """Stop the countdown. Returns true if a pending tick was dropped."""
        dropped = self._handle is not None
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
        if self.state is TimerState.RUNNING:
            logger.debug("Countdown cancelled at %s", self.remaining)
        self.state = TimerState.IDLE
        self.remaining = 0
        return dropped

    def _schedule(self, delay: float) -> None:
        if self._loop is None:
            raise RuntimeError("Countdown was never started")
        self._handle = self._loop.call_later(delay, self._advance)

    def _advance(self) -> None:
        self._handle = None
        if self.state is not TimerState.RUNNING:
            return
        if self.remaining > 0:
            self.remaining -= 1
        if self.remaining > 0:
            self._notify_tick()
            if self.state is TimerState.RUNNING:
                self._schedule(self.tick_seconds)
            return
        self._fire()

    def _fire(self) -> None:
        self.state = TimerState.FIRED
        try:
            self.on_fire()
        finally:
            self.state = TimerState.IDLE

    def _notify_tick(self) -> None:
        if self.on_tick is not None:
            self.on_tick(self.remaining)
