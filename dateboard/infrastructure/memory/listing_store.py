from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timezone

from dateboard.application.interfaces.id_generator import IdGenerator
from dateboard.application.interfaces.listing_store import ListingStore
from dateboard.domain.entities.date_listing import DateContent, DateListing
from dateboard.domain.errors import (
    ListingNotFoundError,
    ListingValidationError,
    UnauthorizedError,
)
from dateboard.domain.validation.content_rules import validate_content
from dateboard.domain.values.lifetime import InvalidLifetimeError, LifetimeDays
from dateboard.infrastructure.memory.rwlock import AsyncReadWriteLock

Clock = Callable[[], datetime]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class InMemoryListingStore(ListingStore):
    """
    Listings held in a single in-process list, in insertion order.

    One reader/writer lock covers the whole list. Nothing awaits anything
    but the lock while holding it.
    """

    def __init__(self, id_generator: IdGenerator, clock: Clock = _utcnow) -> None:
        self._id_generator = id_generator
        self._clock = clock
        self._lock = AsyncReadWriteLock()
        self._dates: list[DateListing] = []

    # -------------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------------

    async def get(self, listing_id: str) -> DateListing:
        async with self._lock.read():
            index = self._index_of(listing_id)
            if index is None:
                raise ListingNotFoundError(listing_id)
            return self._dates[index]

    async def list(self) -> list[DateListing]:
        async with self._lock.read():
            return list(self._dates)

    async def count(self) -> int:
        async with self._lock.read():
            return len(self._dates)

    async def get_next_after(self, listing_id: str | None = None) -> DateListing:
        async with self._lock.read():
            if not self._dates:
                return DateListing.placeholder(self._clock())
            if listing_id is None:
                return self._dates[0]

            index = self._index_of(listing_id)
            if index is None or index + 1 >= len(self._dates):
                return self._dates[0]
            return self._dates[index + 1]

    # -------------------------------------------------------------------------
    # Writes
    # -------------------------------------------------------------------------

    async def create(self, content: DateContent) -> str:
        lifetime, errors = validate_content(content)
        if errors or lifetime is None:
            raise ListingValidationError(errors, content)

        async with self._lock.write():
            listing_id = self._id_generator.next_id()
            now = self._clock()
            self._dates.append(
                DateListing(
                    id=listing_id,
                    created_at=now,
                    expires_at=now + lifetime.as_timedelta(),
                    content=content,
                )
            )
            return listing_id

    async def delete(self, listing_id: str, password: str) -> None:
        async with self._lock.write():
            index = self._authorize(listing_id, password)
            del self._dates[index]

    async def reset_timeout(
        self, listing_id: str, password: str, requested_days: str
    ) -> DateListing | None:
        try:
            lifetime = LifetimeDays.parse(requested_days)
        except InvalidLifetimeError as exc:
            raise ListingValidationError([exc.message]) from exc

        async with self._lock.write():
            index = self._authorize(listing_id, password)
            if lifetime.removes_listing:
                del self._dates[index]
                return None

            updated = self._dates[index].with_expiry(self._clock() + lifetime.as_timedelta())
            self._dates[index] = updated
            return updated

    async def sweep_expired(self) -> int:
        async with self._lock.write():
            now = self._clock()
            live = [date for date in self._dates if not date.is_expired(now)]
            removed = len(self._dates) - len(live)
            self._dates = live
            return removed

    # -------------------------------------------------------------------------
    # Helpers (caller holds the lock)
    # -------------------------------------------------------------------------

    def _index_of(self, listing_id: str) -> int | None:
        for index, date in enumerate(self._dates):
            if date.id == listing_id:
                return index
        return None

    def _authorize(self, listing_id: str, password: str) -> int:
        index = self._index_of(listing_id)
        if index is None:
            raise ListingNotFoundError(listing_id)
        if not self._dates[index].password_matches(password):
            raise UnauthorizedError(listing_id)
        return index
