"""Unit tests for the scrambled counter id generator."""
import pytest

from dateboard.domain.errors import IdSpaceExhaustedError
from dateboard.infrastructure.ids.scrambled_id_generator import (
    MAX_COUNTER,
    ScrambledIdGenerator,
)

ALPHABET = "23456789abcdefghijkmnpqrstuvwxyz"


@pytest.fixture()
def generator() -> ScrambledIdGenerator:
    return ScrambledIdGenerator(key="test-key", alphabet=ALPHABET)


class TestNextId:
    def test_ids_are_unique(self, generator: ScrambledIdGenerator) -> None:
        ids = [generator.next_id() for _ in range(5000)]
        assert len(set(ids)) == len(ids)

    def test_ids_have_fixed_width_and_alphabet(self, generator: ScrambledIdGenerator) -> None:
        for _ in range(100):
            listing_id = generator.next_id()
            assert len(listing_id) == generator.width == 7
            assert set(listing_id) <= set(ALPHABET)

    def test_ids_do_not_follow_counter_order(self, generator: ScrambledIdGenerator) -> None:
        ids = [generator.next_id() for _ in range(20)]
        assert ids != sorted(ids)

    def test_same_key_is_deterministic(self) -> None:
        first = ScrambledIdGenerator(key="k", alphabet=ALPHABET)
        second = ScrambledIdGenerator(key="k", alphabet=ALPHABET)
        assert [first.next_id() for _ in range(10)] == [second.next_id() for _ in range(10)]

    def test_key_changes_ids(self) -> None:
        first = ScrambledIdGenerator(key="one", alphabet=ALPHABET)
        second = ScrambledIdGenerator(key="two", alphabet=ALPHABET)
        assert [first.next_id() for _ in range(10)] != [second.next_id() for _ in range(10)]

    def test_exhaustion_is_fatal(self) -> None:
        generator = ScrambledIdGenerator(key="k", alphabet=ALPHABET, start=MAX_COUNTER)
        generator.next_id()
        with pytest.raises(IdSpaceExhaustedError):
            generator.next_id()


class TestDecode:
    def test_decode_inverts_encode(self, generator: ScrambledIdGenerator) -> None:
        for value in (0, 1, 65535, 65536, MAX_COUNTER):
            assert generator.decode(generator.encode(value)) == value

    def test_rejects_wrong_length(self, generator: ScrambledIdGenerator) -> None:
        with pytest.raises(ValueError):
            generator.decode("abc")

    def test_rejects_foreign_characters(self, generator: ScrambledIdGenerator) -> None:
        with pytest.raises(ValueError):
            generator.decode("0000000")


class TestConfiguration:
    @pytest.mark.parametrize("alphabet", ["a", "aab", "ab/c"])
    def test_rejects_bad_alphabets(self, alphabet: str) -> None:
        with pytest.raises(ValueError):
            ScrambledIdGenerator(key="k", alphabet=alphabet)

    def test_wider_ids_for_small_alphabets(self) -> None:
        assert ScrambledIdGenerator(key="k", alphabet="01").width == 32
