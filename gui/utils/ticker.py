"""One-second tick source built on Tk's ``after`` scheduler.

Tk only offers one-shot timers, so the ticker re-arms itself after every
fire. Each arm carries a fresh token and only the latest token is honored,
which makes a late or duplicated fire harmless.
"""

from __future__ import annotations

from typing import Any, Callable, Optional, Protocol

from tracker.utils.logger import get_logger

logger = get_logger(__name__)

TICK_INTERVAL_MS = 1000


class Scheduler(Protocol):
    """The subset of ``tk.Misc`` the ticker relies on."""

    def after(self, ms: int, func: Callable[..., Any], *args: Any) -> str: ...

    def after_cancel(self, id: str) -> None: ...


class Ticker:
    def __init__(
        self,
        scheduler: Scheduler,
        callback: Callable[[], Any],
        interval_ms: int = TICK_INTERVAL_MS,
    ) -> None:
        self.scheduler = scheduler
        self.callback = callback
        self.interval_ms = interval_ms
        self._token = 0
        self._after_id: Optional[str] = None

    @property
    def armed(self) -> bool:
        return self._after_id is not None

    def start(self) -> None:
        """Arm the first tick. Does nothing if already running."""
        if self.armed:
            return
        self._arm()

    def stop(self) -> None:
        """Cancel the pending tick (window teardown)."""
        if self._after_id is not None:
            self.scheduler.after_cancel(self._after_id)
        self._after_id = None
        self._token += 1

    def _arm(self) -> None:
        self._token += 1
        self._after_id = self.scheduler.after(self.interval_ms, self._fire, self._token)

    def _fire(self, token: int) -> None:
        if token != self._token:
            return
        try:
            self.callback()
        except Exception:  # pylint: disable=broad-except
            logger.exception("Tick callback failed")
        finally:
            if token == self._token:
                self._arm()
