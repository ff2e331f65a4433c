from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from dateboard.domain.entities.date_listing import DateContent


class DateboardError(Exception):
    """Base class for all listing store errors."""


class ListingValidationError(DateboardError):
    """
    Raised when create/reset input breaks one or more rules.

    Carries every violated rule and, for create, the rejected content so the
    caller can redisplay what the user typed.
    """

    def __init__(self, errors: list[str], content: DateContent | None = None) -> None:
        self.errors = list(errors)
        self.content = content
        super().__init__("; ".join(self.errors))


class ListingNotFoundError(DateboardError):
    def __init__(self, listing_id: str) -> None:
        self.listing_id = listing_id
        super().__init__(f"Date {listing_id} does not exist.")


class UnauthorizedError(DateboardError):
    def __init__(self, listing_id: str) -> None:
        self.listing_id = listing_id
        super().__init__(f"Incorrect password for date {listing_id}.")


class IdSpaceExhaustedError(DateboardError):
    """The id counter ran past its domain. Not recoverable without a restart."""
