"""Arithmetic in a prime field, with multiplication done the Montgomery way.

Elements are plain Python ints in ``[0, modulus)``.  A product is formed as
two Montgomery multiplications, the second one by ``R**2 mod p``.  The
Montgomery factors cancel, so the result is the ordinary product modulo p.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property

from atomicecc import bigint

P256_PRIME = 0xFFFFFFFF00000001000000000000000000000000FFFFFFFFFFFFFFFFFFFFFFFF
P256_R_SQUARED = 0x4FFFFFFFDFFFFFFFFFFFFFFFEFFFFFFFBFFFFFFFF0000000000000003


@dataclass(frozen=True)
class PrimeField:
    """The integers modulo an odd prime, stored in words of ``word_bits`` bits."""

    modulus: int
    word_bits: int = bigint.DEFAULT_WORD_BITS

    def __post_init__(self) -> None:
        if self.modulus < 3 or self.modulus % 2 == 0:
            raise ValueError(f"modulus must be an odd prime, got {self.modulus}")
        if self.word_bits <= 0 or self.word_bits % 4:
            raise ValueError(f"word size must be a positive multiple of 4, got {self.word_bits}")

    @cached_property
    def words(self) -> int:
        """Number of words that hold one element."""
        return -(-self.modulus.bit_length() // self.word_bits)

    @cached_property
    def montgomery_radix(self) -> int:
        """The Montgomery radix R, a power of two covering every word."""
        return 1 << (self.words * self.word_bits)

    @cached_property
    def r_squared(self) -> int:
        """R squared modulo the prime, used to undo the Montgomery factor."""
        return self.montgomery_radix**2 % self.modulus

    @cached_property
    def _r_inverse(self) -> int:
        return pow(self.montgomery_radix, -1, self.modulus)

    def _montgomery(self, a: int, b: int) -> int:
        return a * b * self._r_inverse % self.modulus

    def add(self, a: int, b: int) -> int:
        """Return ``a + b`` modulo the prime."""
        return (a + b) % self.modulus

    def negate(self, a: int) -> int:
        """Return ``-a`` modulo the prime."""
        return -a % self.modulus

    def multiply(self, a: int, b: int) -> int:
        """Return ``a * b`` modulo the prime."""
        return self._montgomery(self._montgomery(a, b), self.r_squared)

    def inverse(self, a: int) -> int:
        """Return the multiplicative inverse of ``a``."""
        if a % self.modulus == 0:
            raise ZeroDivisionError("zero has no inverse in a prime field")
        return pow(a, -1, self.modulus)

    def parse(self, text: str) -> int:
        """Read a hex string, skipping non-hex characters, into one element's words."""
        words = bigint.parse_hex(text, self.words, self.word_bits)
        return bigint.to_int(words, self.word_bits)


def p256_field() -> PrimeField:
    """Return the field underlying the secp256r1 curve."""
    return PrimeField(P256_PRIME)