"""Branch-free operations on word lists that depend on a secret condition.

The work done per word is the same whatever the condition or the values,
so these helpers are suited to code that must not leak through timing.
"""

from __future__ import annotations

from collections.abc import Sequence

DEFAULT_WORD_BITS = 32


def _full_mask(word_bits: int) -> int:
    if word_bits <= 0:
        raise ValueError(f"word size must be positive, got {word_bits}")
    return (1 << word_bits) - 1


def _check_words(a: Sequence[int], word_bits: int) -> None:
    if not a:
        raise ValueError("a big integer needs at least one word")
    limit = 1 << word_bits
    if any(not 0 <= word < limit for word in a):
        raise ValueError(f"word does not fit in {word_bits} bits")


def _check_pair(a: Sequence[int], b: Sequence[int], word_bits: int) -> None:
    _check_words(a, word_bits)
    _check_words(b, word_bits)
    if len(a) != len(b):
        raise ValueError(f"operands differ in length: {len(a)} and {len(b)} words")


def _condition_mask(condition: int, word_bits: int) -> int:
    if condition not in (0, 1):
        raise ValueError(f"condition must be 0 or 1, got {condition}")
    return -int(condition) & _full_mask(word_bits)


def _all_bits_set(word: int, word_bits: int) -> int:
    """Fold every bit of ``word`` into its lowest bit with AND."""
    shift = 1
    while shift < word_bits:
        word &= word >> shift
        shift <<= 1
    return word & 1


def swap(
    a: Sequence[int], b: Sequence[int], condition: int, word_bits: int = DEFAULT_WORD_BITS
) -> tuple[list[int], list[int]]:
    """Return ``(b, a)`` if ``condition`` is 1 and ``(a, b)`` if it is 0."""
    _check_pair(a, b, word_bits)
    take_other = _condition_mask(condition, word_bits)
    keep = ~take_other & _full_mask(word_bits)
    first = [(x & keep) | (y & take_other) for x, y in zip(a, b)]
    second = [(x & take_other) | (y & keep) for x, y in zip(a, b)]
    return first, second


def select(
    var0: Sequence[int], var1: Sequence[int], condition: int, word_bits: int = DEFAULT_WORD_BITS
) -> list[int]:
    """Return a copy of ``var1`` if ``condition`` is 1, else of ``var0``."""
    _check_pair(var0, var1, word_bits)
    pick_one = _condition_mask(condition, word_bits)
    pick_zero = ~pick_one & _full_mask(word_bits)
    return [(x & pick_zero) | (y & pick_one) for x, y in zip(var0, var1)]


def is_equal(a: Sequence[int], b: Sequence[int], word_bits: int = DEFAULT_WORD_BITS) -> bool:
    """Return whether ``a`` and ``b`` hold the same words."""
    _check_pair(a, b, word_bits)
    difference = 0
    for x, y in zip(a, b):
        difference |= x ^ y
    return bool(_all_bits_set(~difference & _full_mask(word_bits), word_bits))


def is_zero(a: Sequence[int], word_bits: int = DEFAULT_WORD_BITS) -> bool:
    """Return whether every word of ``a`` is zero."""
    _check_words(a, word_bits)
    combined = 0
    for word in a:
        combined |= word
    return bool(_all_bits_set(~combined & _full_mask(word_bits), word_bits))