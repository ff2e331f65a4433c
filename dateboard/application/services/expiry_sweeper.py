import asyncio

import structlog

from dateboard.application.interfaces.listing_store import ListingStore

logger = structlog.get_logger(__name__)


class ExpirySweeper:
    """
    Background task that periodically drops expired listings.

    A failed tick is logged and skipped; the next tick picks up whatever was
    missed.
    """

    def __init__(self, store: ListingStore, interval_seconds: float = 5.0) -> None:
        if interval_seconds <= 0:
            raise ValueError("Sweep interval must be positive.")
        self._store = store
        self._interval = interval_seconds
        self._task: asyncio.Task[None] | None = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def run_once(self) -> int:
        removed = await self._store.sweep_expired()
        if removed:
            logger.info("expired_listings_swept", removed=removed)
        else:
            logger.debug("sweep_found_nothing")
        return removed

    async def _run(self) -> None:
        while True:
            await asyncio.sleep(self._interval)
            try:
                await self.run_once()
            except Exception:
                logger.exception("sweep_failed")

    def start(self) -> None:
        if self.running:
            return
        self._task = asyncio.create_task(self._run(), name="expiry-sweeper")
        logger.info("sweeper_started", interval_seconds=self._interval)

    async def stop(self) -> None:
        if self._task is None:
            return
        task, self._task = self._task, None
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            current = asyncio.current_task()
            if current is not None and current.cancelling():
                raise
        logger.info("sweeper_stopped")
