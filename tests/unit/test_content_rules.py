"""Unit tests for date content validation."""
from dateboard.domain.entities.date_listing import DateContent
from dateboard.domain.validation.content_rules import validate_content


def _make_content(**overrides) -> DateContent:  # type: ignore[no-untyped-def]
    defaults = dict(
        who="hacker",
        what="pizza",
        shortdesc="Looking for somebody to share a pizza with",
        longdesc="Anything but pineapple.",
        contact="intern@lists.metalab.at",
        password="secret",
        lifetime="7",
    )
    defaults.update(overrides)
    return DateContent(**defaults)


class TestValidContent:
    def test_no_errors(self) -> None:
        lifetime, errors = validate_content(_make_content())
        assert errors == []
        assert lifetime is not None
        assert lifetime.days == 7

    def test_boundaries_are_inclusive(self) -> None:
        _, errors = validate_content(
            _make_content(who="ab", what="x" * 15, shortdesc="y" * 10, lifetime="21")
        )
        assert errors == []

    def test_free_text_fields_are_unchecked(self) -> None:
        _, errors = validate_content(_make_content(longdesc="", contact="", password=""))
        assert errors == []


class TestInvalidContent:
    def test_each_rule_message(self) -> None:
        cases = [
            ("who", "a", "Who is too short (minimum 2 characters)."),
            ("who", "w" * 16, "Who is too long (maximum 15 characters)."),
            ("what", "w", "What is too short (minimum 2 characters)."),
            ("what", "w" * 16, "What is too long (maximum 15 characters)."),
            ("shortdesc", "too short", "Short description is too short (minimum 10 characters)."),
            ("lifetime", "soon", "Lifetime is not a number."),
            ("lifetime", "22", "Lifetime exceeds the maximum of 21 days."),
        ]
        for field, value, message in cases:
            _, errors = validate_content(_make_content(**{field: value}))
            assert errors == [message], (field, value)

    def test_long_shortdesc(self) -> None:
        _, errors = validate_content(_make_content(shortdesc="z" * 201))
        assert errors == ["Short description is too long (maximum 200 characters)."]

    def test_collects_all_violations(self) -> None:
        lifetime, errors = validate_content(
            DateContent(who="", what="", shortdesc="", lifetime="22")
        )
        assert lifetime is None
        assert errors == [
            "Who is too short (minimum 2 characters).",
            "What is too short (minimum 2 characters).",
            "Short description is too short (minimum 10 characters).",
            "Lifetime exceeds the maximum of 21 days.",
        ]
