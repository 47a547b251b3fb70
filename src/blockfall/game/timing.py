from __future__ import annotations

from typing import Callable, Optional


class GravityTimer:
    """Decides when the next automatic tick is due.

    ``interval_ms`` is read on every check so a level change takes effect
    on the very next comparison. Times are plain milliseconds from any
    monotonic clock (``pygame.time.get_ticks`` in the front end).
    """

    def __init__(self, interval_ms: Callable[[], int], now_ms: int = 0) -> None:
        self._interval_ms = interval_ms
        self.last_tick_ms = now_ms
        self._paused_at: Optional[int] = None

    def reset(self, now_ms: int) -> None:
        self.last_tick_ms = now_ms
        self._paused_at = None

    def pause(self, now_ms: int) -> None:
        if self._paused_at is None:
            self._paused_at = now_ms

    def resume(self, now_ms: int) -> None:
        if self._paused_at is None:
            return
        # Time spent paused does not count towards the next tick
        self.last_tick_ms += now_ms - self._paused_at
        self._paused_at = None

    @property
    def paused(self) -> bool:
        return self._paused_at is not None

    def due(self, now_ms: int) -> bool:
        if self.paused:
            return False
        if now_ms - self.last_tick_ms >= self._interval_ms():
            self.last_tick_ms = now_ms
            return True
        return False
