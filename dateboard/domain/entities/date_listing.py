from dataclasses import dataclass, replace
from datetime import datetime, timezone

from dateboard.domain.values.lifetime import DEFAULT_LIFETIME_DAYS

# Listings posted without a password can be edited or deleted by anyone who
# knows (or guesses) this value.
DEFAULT_PASSWORD = "public"

PLACEHOLDER_ID = "empty"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class DateContent:
    """What the poster typed into the form."""

    who: str = ""
    what: str = ""
    shortdesc: str = ""
    longdesc: str = ""
    contact: str = ""
    password: str = DEFAULT_PASSWORD
    lifetime: str = str(DEFAULT_LIFETIME_DAYS)


@dataclass(frozen=True)
class DateListing:
    """
    A posted date as held by the listing store.

    Frozen: the store swaps whole entries when the timeout changes, so a
    listing handed to a caller never changes underneath it.
    """

    id: str
    created_at: datetime
    expires_at: datetime
    content: DateContent

    def is_expired(self, now: datetime) -> bool:
        return self.expires_at < now

    def password_matches(self, password: str) -> bool:
        return self.content.password == password

    def with_expiry(self, expires_at: datetime) -> "DateListing":
        return replace(self, expires_at=expires_at)

    @classmethod
    def placeholder(cls, now: datetime | None = None) -> "DateListing":
        """Shown by the kiosk view while the board is empty."""
        now = now or _utcnow()
        return cls(
            id=PLACEHOLDER_ID,
            created_at=now,
            expires_at=now,
            content=DateContent(
                who="nobody",
                what="nothing",
                shortdesc="There are no dates on the board yet.",
                longdesc="Be the first one to post a date!",
                contact="",
                lifetime="0",
            ),
        )
