"""Unit tests for the LifetimeDays value type."""
from datetime import timedelta

import pytest

from dateboard.domain.values.lifetime import (
    EXCEEDS_MAXIMUM_MESSAGE,
    MAX_LIFETIME_DAYS,
    NOT_A_NUMBER_MESSAGE,
    InvalidLifetimeError,
    LifetimeDays,
)


class TestParse:
    def test_parses_plain_number(self) -> None:
        assert LifetimeDays.parse("7").days == 7

    def test_rejects_surrounding_whitespace(self) -> None:
        with pytest.raises(InvalidLifetimeError) as exc_info:
            LifetimeDays.parse(" 3 ")
        assert exc_info.value.message == NOT_A_NUMBER_MESSAGE

    def test_leading_zeros(self) -> None:
        assert LifetimeDays.parse("007").days == 7
        assert LifetimeDays.parse("000").days == 0

    def test_accepts_bounds(self) -> None:
        assert LifetimeDays.parse("0").days == 0
        assert LifetimeDays.parse(str(MAX_LIFETIME_DAYS)).days == MAX_LIFETIME_DAYS

    @pytest.mark.parametrize("raw", ["", "abc", "1.5", "-1", "7d", "²"])
    def test_rejects_non_numbers(self, raw: str) -> None:
        with pytest.raises(InvalidLifetimeError) as exc_info:
            LifetimeDays.parse(raw)
        assert exc_info.value.message == NOT_A_NUMBER_MESSAGE

    def test_rejects_above_maximum(self) -> None:
        with pytest.raises(InvalidLifetimeError) as exc_info:
            LifetimeDays.parse("22")
        assert exc_info.value.message == EXCEEDS_MAXIMUM_MESSAGE

    def test_does_not_clamp_huge_values(self) -> None:
        with pytest.raises(InvalidLifetimeError) as exc_info:
            LifetimeDays.parse("99999999999999999999")
        assert exc_info.value.message == EXCEEDS_MAXIMUM_MESSAGE

    def test_digit_strings_past_int_conversion_limit(self) -> None:
        with pytest.raises(InvalidLifetimeError) as exc_info:
            LifetimeDays.parse("1" * 5000)
        assert exc_info.value.message == EXCEEDS_MAXIMUM_MESSAGE

    def test_many_leading_zeros_still_parse(self) -> None:
        assert LifetimeDays.parse("0" * 5000 + "5").days == 5


class TestBehaviour:
    def test_zero_removes_listing(self) -> None:
        assert LifetimeDays(0).removes_listing is True
        assert LifetimeDays(1).removes_listing is False

    def test_as_timedelta(self) -> None:
        assert LifetimeDays(5).as_timedelta() == timedelta(days=5)

    def test_constructor_enforces_range(self) -> None:
        with pytest.raises(InvalidLifetimeError):
            LifetimeDays(MAX_LIFETIME_DAYS + 1)
