from dataclasses import dataclass
from datetime import timedelta

DEFAULT_LIFETIME_DAYS = 7
MAX_LIFETIME_DAYS = 21

NOT_A_NUMBER_MESSAGE = "Lifetime is not a number."
EXCEEDS_MAXIMUM_MESSAGE = f"Lifetime exceeds the maximum of {MAX_LIFETIME_DAYS} days."


class InvalidLifetimeError(ValueError):
    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


@dataclass(frozen=True)
class LifetimeDays:
    """A requested listing lifetime, 0 to MAX_LIFETIME_DAYS days inclusive."""

    days: int

    def __post_init__(self) -> None:
        if self.days < 0:
            raise InvalidLifetimeError(NOT_A_NUMBER_MESSAGE)
        if self.days > MAX_LIFETIME_DAYS:
            raise InvalidLifetimeError(EXCEEDS_MAXIMUM_MESSAGE)

    @classmethod
    def parse(cls, raw: str) -> "LifetimeDays":
        """Parse the raw form value. Raises InvalidLifetimeError, never clamps."""
        if not (raw.isascii() and raw.isdigit()):
            raise InvalidLifetimeError(NOT_A_NUMBER_MESSAGE)
        # int() refuses very long digit strings, so check the length first.
        digits = raw.lstrip("0") or "0"
        if len(digits) > len(str(MAX_LIFETIME_DAYS)):
            raise InvalidLifetimeError(EXCEEDS_MAXIMUM_MESSAGE)
        return cls(int(digits))

    @property
    def removes_listing(self) -> bool:
        """A zero lifetime on edit means "take it down now"."""
        return self.days == 0

    def as_timedelta(self) -> timedelta:
        return timedelta(days=self.days)
