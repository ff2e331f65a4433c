from dataclasses import dataclass

from dateboard.domain.entities.date_listing import DateContent
from dateboard.domain.values.lifetime import InvalidLifetimeError, LifetimeDays


@dataclass(frozen=True)
class LengthRule:
    field: str
    label: str
    min_length: int
    max_length: int

    def check(self, value: str) -> list[str]:
        errors: list[str] = []
        if len(value) < self.min_length:
            errors.append(
                f"{self.label} is too short (minimum {self.min_length} characters)."
            )
        if len(value) > self.max_length:
            errors.append(
                f"{self.label} is too long (maximum {self.max_length} characters)."
            )
        return errors


# longdesc, contact and password are free text and not checked.
LENGTH_RULES: tuple[LengthRule, ...] = (
    LengthRule(field="who", label="Who", min_length=2, max_length=15),
    LengthRule(field="what", label="What", min_length=2, max_length=15),
    LengthRule(field="shortdesc", label="Short description", min_length=10, max_length=200),
)


def validate_content(content: DateContent) -> tuple[LifetimeDays | None, list[str]]:
    """
    Check every rule and collect all violations.

    Returns the parsed lifetime (None when it did not parse) and the list of
    messages; an empty list means the content is acceptable.
    """
    errors: list[str] = []
    for rule in LENGTH_RULES:
        errors.extend(rule.check(getattr(content, rule.field)))

    lifetime: LifetimeDays | None = None
    try:
        lifetime = LifetimeDays.parse(content.lifetime)
    except InvalidLifetimeError as exc:
        errors.append(exc.message)

    return lifetime, errors
