from abc import ABC, abstractmethod

from dateboard.domain.entities.date_listing import DateContent, DateListing


class ListingStore(ABC):
    """
    Port for the board's listing collection.

    Every method is safe to call concurrently. Failures are raised as
    DateboardError subclasses; implementations do not log or retry.
    """

    @abstractmethod
    async def create(self, content: DateContent) -> str:
        """Validate and insert; return the new id or raise ListingValidationError."""
        ...

    @abstractmethod
    async def get(self, listing_id: str) -> DateListing:
        ...

    @abstractmethod
    async def list(self) -> list[DateListing]:
        """Snapshot of live listings in insertion order."""
        ...

    @abstractmethod
    async def count(self) -> int:
        ...

    @abstractmethod
    async def get_next_after(self, listing_id: str | None = None) -> DateListing:
        """Kiosk rotation; never raises."""
        ...

    @abstractmethod
    async def delete(self, listing_id: str, password: str) -> None:
        ...

    @abstractmethod
    async def reset_timeout(
        self, listing_id: str, password: str, requested_days: str
    ) -> DateListing | None:
        """Return the updated listing, or None when a zero lifetime removed it."""
        ...

    @abstractmethod
    async def sweep_expired(self) -> int:
        """Drop expired listings and return how many were removed."""
        ...
