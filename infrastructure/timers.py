import asyncio
import logging
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class NotificationTimer:
    """One-shot timer on the asyncio loop; scheduling again replaces the pending call."""

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None):
        self._loop = loop
        self._handle: Optional[asyncio.TimerHandle] = None

    @property
    def pending(self) -> bool:
        return self._handle is not None and not self._handle.cancelled()

    def schedule(self, delay: float, callback: Callable[[], None]) -> None:
        self.cancel()
        loop = self._loop or asyncio.get_running_loop()
        self._handle = loop.call_later(delay, self._fire, callback)
        logger.debug(f"Notification clear scheduled in {delay}s")

    def cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            logger.debug("Pending notification clear cancelled")
        self._handle = None

    def _fire(self, callback: Callable[[], None]) -> None:
        self._handle = None
        callback()
