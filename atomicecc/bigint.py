"""Unsigned multi-precision integers held as little-endian lists of machine words.

Every big integer is a list of non-negative ints, least significant word
first, each smaller than ``2 ** word_bits``.  Functions never modify their
arguments; they return new word lists.
"""

from __future__ import annotations

import string
from collections.abc import Sequence

DEFAULT_WORD_BITS = 32

_HEX_DIGITS = frozenset(string.hexdigits)
_PRINTABLE_WORD_BITS = frozenset({8, 16, 32, 64})
_HEX_GROUP = 8


def _check_word_bits(word_bits: int) -> None:
    if word_bits <= 0:
        raise ValueError(f"word size must be positive, got {word_bits}")


def _require_words(a: Sequence[int]) -> None:
    if not a:
        raise ValueError("a big integer needs at least one word")


def _same_length(a: Sequence[int], b: Sequence[int]) -> None:
    _require_words(a)
    if len(a) != len(b):
        raise ValueError(f"operands differ in length: {len(a)} and {len(b)} words")


def _split(value: int, length: int, word_bits: int) -> list[int]:
    """Cut ``value`` into ``length`` words, dropping anything above them."""
    mask = (1 << word_bits) - 1
    return [(value >> (i * word_bits)) & mask for i in range(length)]


def _check_bit_index(a: Sequence[int], bit: int, word_bits: int) -> None:
    if not 0 <= bit < len(a) * word_bits:
        raise IndexError(f"bit {bit} outside a {len(a) * word_bits}-bit integer")


def _check_shift(a: Sequence[int], bits: int, word_bits: int) -> None:
    if not 0 <= bits < len(a) * word_bits:
        raise ValueError(f"shift of {bits} outside a {len(a) * word_bits}-bit integer")


def _check_byte_index(a: Sequence[int], index: int, word_bits: int) -> None:
    if word_bits % 8:
        raise ValueError(f"word size {word_bits} is not a whole number of bytes")
    if not 0 <= index < len(a) * word_bits // 8:
        raise IndexError(f"byte {index} outside a {len(a) * word_bits // 8}-byte integer")


def to_int(a: Sequence[int], word_bits: int = DEFAULT_WORD_BITS) -> int:
    """Return the value of the word list ``a``."""
    _check_word_bits(word_bits)
    _require_words(a)
    limit = 1 << word_bits
    value = 0
    for word in reversed(a):
        if not 0 <= word < limit:
            raise ValueError(f"word {word} does not fit in {word_bits} bits")
        value = (value << word_bits) | word
    return value


def from_int(value: int, length: int, word_bits: int = DEFAULT_WORD_BITS) -> list[int]:
    """Return ``value`` as a list of ``length`` words."""
    _check_word_bits(word_bits)
    if length <= 0:
        raise ValueError("a big integer needs at least one word")
    if value < 0:
        raise ValueError("big integers are unsigned")
    if value >> (length * word_bits):
        raise ValueError(f"{value} does not fit in {length} words of {word_bits} bits")
    return _split(value, length, word_bits)


def add(
    a: Sequence[int], b: Sequence[int], word_bits: int = DEFAULT_WORD_BITS, carry: int = 0
) -> tuple[list[int], int]:
    """Return ``(a + b + carry)`` as words together with the outgoing carry."""
    _same_length(a, b)
    if carry not in (0, 1):
        raise ValueError(f"carry must be 0 or 1, got {carry}")
    total = to_int(a, word_bits) + to_int(b, word_bits) + carry
    width = len(a) * word_bits
    return _split(total, len(a), word_bits), total >> width


def subtract(
    a: Sequence[int], b: Sequence[int], word_bits: int = DEFAULT_WORD_BITS, borrow: int = 0
) -> tuple[list[int], int]:
    """Return ``(a - b - borrow)`` modulo the word width and the outgoing borrow."""
    _same_length(a, b)
    if borrow not in (0, 1):
        raise ValueError(f"borrow must be 0 or 1, got {borrow}")
    difference = to_int(a, word_bits) - to_int(b, word_bits) - borrow
    return _split(difference, len(a), word_bits), int(difference < 0)


def xor(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Return the word-wise exclusive or of ``a`` and ``b``."""
    _same_length(a, b)
    return [x ^ y for x, y in zip(a, b)]


def shift_left(a: Sequence[int], bits: int, word_bits: int = DEFAULT_WORD_BITS) -> list[int]:
    """Shift ``a`` left by ``bits``, discarding bits pushed past the top word."""
    _require_words(a)
    _check_shift(a, bits, word_bits)
    return _split(to_int(a, word_bits) << bits, len(a), word_bits)


def shift_right(a: Sequence[int], bits: int, word_bits: int = DEFAULT_WORD_BITS) -> list[int]:
    """Shift ``a`` right by ``bits``, filling with zeros."""
    _require_words(a)
    _check_shift(a, bits, word_bits)
    return _split(to_int(a, word_bits) >> bits, len(a), word_bits)


def compare(a: Sequence[int], b: Sequence[int]) -> int:
    """Return 1, 0 or -1 as ``a`` is greater than, equal to or less than ``b``."""
    _same_length(a, b)
    for x, y in zip(reversed(a), reversed(b)):
        if x != y:
            return 1 if x > y else -1
    return 0


def is_zero(a: Sequence[int]) -> bool:
    """Return whether every word of ``a`` is zero."""
    _require_words(a)
    return all(word == 0 for word in a)


def is_one(a: Sequence[int]) -> bool:
    """Return whether ``a`` equals one."""
    _require_words(a)
    return a[0] == 1 and all(word == 0 for word in a[1:])


def multiply(a: Sequence[int], b: Sequence[int], word_bits: int = DEFAULT_WORD_BITS) -> list[int]:
    """Return the full product of ``a`` and ``b`` in ``len(a) + len(b)`` words."""
    _require_words(a)
    _require_words(b)
    product = to_int(a, word_bits) * to_int(b, word_bits)
    return _split(product, len(a) + len(b), word_bits)


def to_hex(a: Sequence[int], word_bits: int = DEFAULT_WORD_BITS) -> str:
    """Render ``a`` as upper-case hex, most significant first, in 32-bit groups."""
    if word_bits not in _PRINTABLE_WORD_BITS:
        raise ValueError(f"cannot print {word_bits}-bit words")
    value = to_int(a, word_bits)
    digits = format(value, f"0{len(a) * word_bits // 4}X")
    head = len(digits) % _HEX_GROUP
    groups = [digits[:head]] if head else []
    groups.extend(digits[start:start + _HEX_GROUP] for start in range(head, len(digits), _HEX_GROUP))
    return " ".join(groups)


def set_bit(a: Sequence[int], bit: int, value: int, word_bits: int = DEFAULT_WORD_BITS) -> list[int]:
    """Return a copy of ``a`` with ``bit`` set to ``value`` (0 or 1)."""
    _require_words(a)
    _check_bit_index(a, bit, word_bits)
    if value not in (0, 1):
        raise ValueError(f"bit value must be 0 or 1, got {value}")
    word_index, offset = divmod(bit, word_bits)
    result = list(a)
    result[word_index] = (result[word_index] & ~(1 << offset)) | (value << offset)
    return result


def test_bit(a: Sequence[int], bit: int, word_bits: int = DEFAULT_WORD_BITS) -> int:
    """Return bit number ``bit`` of ``a``."""
    _require_words(a)
    _check_bit_index(a, bit, word_bits)
    word_index, offset = divmod(bit, word_bits)
    return (a[word_index] >> offset) & 1


def msb(a: Sequence[int], word_bits: int = DEFAULT_WORD_BITS) -> int:
    """Return the index of the highest set bit of ``a``, or -1 if it is zero."""
    return to_int(a, word_bits).bit_length() - 1


def get_byte(a: Sequence[int], index: int, word_bits: int = DEFAULT_WORD_BITS) -> int:
    """Return byte number ``index`` of ``a``, counting from the least significant."""
    _require_words(a)
    _check_byte_index(a, index, word_bits)
    word_index, byte_offset = divmod(index, word_bits // 8)
    return (a[word_index] >> (8 * byte_offset)) & 0xFF


def set_byte(a: Sequence[int], index: int, value: int, word_bits: int = DEFAULT_WORD_BITS) -> list[int]:
    """Return a copy of ``a`` with byte number ``index`` replaced by ``value``."""
    _require_words(a)
    _check_byte_index(a, index, word_bits)
    if not 0 <= value <= 0xFF:
        raise ValueError(f"byte value out of range: {value}")
    word_index, byte_offset = divmod(index, word_bits // 8)
    shift = 8 * byte_offset
    result = list(a)
    result[word_index] = (result[word_index] & ~(0xFF << shift)) | (value << shift)
    return result


def parse_hex(text: str, length: int, word_bits: int = DEFAULT_WORD_BITS) -> list[int]:
    """Read hex digits from ``text`` into ``length`` words.

    Characters that are not hex digits are skipped, so prefixes such as
    ``0x`` and separating spaces are harmless.  Digits beyond the capacity
    of ``length`` words are dropped from the most significant end.
    """
    _check_word_bits(word_bits)
    if length <= 0:
        raise ValueError("a big integer needs at least one word")
    if not text:
        raise ValueError("cannot parse an empty string")
    if word_bits % 4:
        raise ValueError(f"word size {word_bits} is not a whole number of hex digits")
    capacity = length * word_bits // 4
    digits = [char for char in reversed(text) if char in _HEX_DIGITS][:capacity]
    value = int("".join(reversed(digits)), 16) if digits else 0
    return _split(value, length, word_bits)


def hamming_weight(a: Sequence[int], word_bits: int = DEFAULT_WORD_BITS) -> int:
    """Return the number of set bits in ``a``."""
    return bin(to_int(a, word_bits)).count("1")


def divide(
    n: Sequence[int], d: Sequence[int], word_bits: int = DEFAULT_WORD_BITS
) -> tuple[list[int], list[int]]:
    """Return the quotient and remainder of ``n`` divided by ``d``."""
    _same_length(n, d)
    divisor = to_int(d, word_bits)
    if divisor == 0:
        raise ZeroDivisionError("big integer division by zero")
    quotient, remainder = divmod(to_int(n, word_bits), divisor)
    return _split(quotient, len(n), word_bits), _split(remainder, len(n), word_bits)