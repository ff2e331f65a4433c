"""
Counter-based id generator.

A plain counter gives uniqueness; a keyed Feistel permutation over the
32-bit counter domain hides the creation order; a fixed alphabet and width
keep the result short and URL-safe. The permutation is a bijection, so
distinct counter values always yield distinct ids.
"""
import hashlib
import string

from dateboard.application.interfaces.id_generator import IdGenerator
from dateboard.domain.errors import IdSpaceExhaustedError

DOMAIN_BITS = 32
HALF_BITS = DOMAIN_BITS // 2
HALF_MASK = (1 << HALF_BITS) - 1
MAX_COUNTER = (1 << DOMAIN_BITS) - 1
ROUNDS = 4

URL_SAFE_CHARS = frozenset(string.ascii_letters + string.digits + "-_.~")


def _width_for(base: int) -> int:
    width = 1
    while base**width <= MAX_COUNTER:
        width += 1
    return width


class ScrambledIdGenerator(IdGenerator):
    """
    Issues ids by scrambling a monotonically increasing counter.

    Not thread-safe on its own: the listing store calls next_id() inside its
    write section.
    """

    def __init__(self, key: str, alphabet: str, start: int = 0) -> None:
        if len(alphabet) < 2:
            raise ValueError("Id alphabet needs at least two characters.")
        if len(set(alphabet)) != len(alphabet):
            raise ValueError("Id alphabet must not repeat characters.")
        if not set(alphabet) <= URL_SAFE_CHARS:
            raise ValueError("Id alphabet must only contain URL-safe characters.")
        if not 0 <= start <= MAX_COUNTER + 1:
            raise ValueError(f"Counter start must be within 0..{MAX_COUNTER + 1}.")

        self._key = hashlib.blake2b(key.encode("utf-8"), digest_size=32).digest()
        self._alphabet = alphabet
        self._base = len(alphabet)
        self._width = _width_for(self._base)
        self._counter = start

    @property
    def width(self) -> int:
        return self._width

    def next_id(self) -> str:
        if self._counter > MAX_COUNTER:
            raise IdSpaceExhaustedError(
                f"Listing id counter exhausted after {MAX_COUNTER + 1} ids."
            )
        value = self._counter
        self._counter += 1
        return self.encode(value)

    def encode(self, value: int) -> str:
        """Scramble a counter value into its fixed-width id."""
        if not 0 <= value <= MAX_COUNTER:
            raise ValueError(f"Counter value {value} outside 0..{MAX_COUNTER}.")
        scrambled = self._permute(value)

        chars: list[str] = []
        for _ in range(self._width):
            scrambled, digit = divmod(scrambled, self._base)
            chars.append(self._alphabet[digit])
        return "".join(reversed(chars))

    def decode(self, listing_id: str) -> int:
        """Recover the counter value an id was issued for."""
        if len(listing_id) != self._width:
            raise ValueError(f"Id {listing_id!r} is not {self._width} characters long.")

        scrambled = 0
        for char in listing_id:
            digit = self._alphabet.find(char)
            if digit < 0:
                raise ValueError(f"Id {listing_id!r} contains {char!r}.")
            scrambled = scrambled * self._base + digit
        if scrambled > MAX_COUNTER:
            raise ValueError(f"Id {listing_id!r} is outside the id space.")
        return self._unpermute(scrambled)

    # -------------------------------------------------------------------------
    # Feistel network
    # -------------------------------------------------------------------------

    def _round(self, index: int, half: int) -> int:
        digest = hashlib.blake2b(
            bytes([index]) + half.to_bytes(2, "big"),
            key=self._key,
            digest_size=2,
        ).digest()
        return int.from_bytes(digest, "big")

    def _permute(self, value: int) -> int:
        left, right = value >> HALF_BITS, value & HALF_MASK
        for index in range(ROUNDS):
            left, right = right, left ^ self._round(index, right)
        return (left << HALF_BITS) | right

    def _unpermute(self, value: int) -> int:
        left, right = value >> HALF_BITS, value & HALF_MASK
        for index in reversed(range(ROUNDS)):
            left, right = right ^ self._round(index, left), left
        return (left << HALF_BITS) | right
