from datetime import datetime

from pydantic import BaseModel, field_validator

from dateboard.domain.entities.date_listing import DEFAULT_PASSWORD, DateContent, DateListing
from dateboard.domain.values.lifetime import DEFAULT_LIFETIME_DAYS


def _number_as_text(value: object) -> object:
    # Lifetimes are parsed by LifetimeDays; JSON clients may send a bare number.
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return value


class DateContentSchema(BaseModel):
    """Form fields of a date. Lifetime falls back to the default when omitted."""

    who: str = ""
    what: str = ""
    shortdesc: str = ""
    longdesc: str = ""
    contact: str = ""
    password: str = DEFAULT_PASSWORD
    lifetime: str | None = None

    @field_validator("lifetime", mode="before")
    @classmethod
    def lifetime_as_text(cls, v: object) -> object:
        return _number_as_text(v)

    def to_domain(self) -> DateContent:
        return DateContent(
            who=self.who,
            what=self.what,
            shortdesc=self.shortdesc,
            longdesc=self.longdesc,
            contact=self.contact,
            password=self.password,
            lifetime=self.lifetime if self.lifetime is not None else str(DEFAULT_LIFETIME_DAYS),
        )

    @classmethod
    def from_domain(cls, content: DateContent) -> "DateContentSchema":
        return cls(
            who=content.who,
            what=content.what,
            shortdesc=content.shortdesc,
            longdesc=content.longdesc,
            contact=content.contact,
            password=content.password,
            lifetime=content.lifetime,
        )


class DateResponse(BaseModel):
    id: str
    who: str
    what: str
    shortdesc: str
    longdesc: str
    contact: str
    created_at: datetime
    expires_at: datetime

    @classmethod
    def from_domain(cls, listing: DateListing) -> "DateResponse":
        content = listing.content
        return cls(
            id=listing.id,
            who=content.who,
            what=content.what,
            shortdesc=content.shortdesc,
            longdesc=content.longdesc,
            contact=content.contact,
            created_at=listing.created_at,
            expires_at=listing.expires_at,
        )


class DateCreatedResponse(BaseModel):
    id: str


class DeleteRequest(BaseModel):
    password: str = DEFAULT_PASSWORD


class DeleteResponse(BaseModel):
    deleted: bool = True


class TimeoutRequest(BaseModel):
    password: str = DEFAULT_PASSWORD
    days: str

    @field_validator("days", mode="before")
    @classmethod
    def days_as_text(cls, v: object) -> object:
        return _number_as_text(v)


class TimeoutResponse(BaseModel):
    deleted: bool
    date: DateResponse | None = None


class HealthResponse(BaseModel):
    status: str
    listings: int
    sweeper: str
