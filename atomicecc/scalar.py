"""Scalar multiplication built from the atomic doubling and addition formulas.

Keys are given as strings of binary digits, most significant first.
"""

from __future__ import annotations

import secrets

from atomicecc.atomic import AtomicEngine, JacobianPoint
from atomicecc.field import PrimeField

_BINARY_DIGITS = frozenset("01")


def _check_key(key_bits: str) -> None:
    if not key_bits:
        raise ValueError("the key has no bits")
    stray = set(key_bits) - _BINARY_DIGITS
    if stray:
        raise ValueError(f"the key holds characters other than 0 and 1: {sorted(stray)}")


def _random_nonzero(field: PrimeField) -> int:
    while True:
        candidate = secrets.randbelow(field.modulus)
        if candidate:
            return candidate


def randomize(field: PrimeField, point: JacobianPoint, r: int | None = None) -> JacobianPoint:
    """Return ``point`` with its projective coordinates scaled by ``r``.

    The result is (X*r^2, Y*r^3, Z*r), which stands for the same affine
    point.  When ``r`` is not given a random nonzero field element is used.
    """
    if r is None:
        r = _random_nonzero(field)
    r %= field.modulus
    if r == 0:
        raise ValueError("the randomizing factor must be nonzero")
    r_squared = field.multiply(r, r)
    r_cubed = field.multiply(r, r_squared)
    return JacobianPoint(
        field.multiply(point.x, r_squared),
        field.multiply(point.y, r_cubed),
        field.multiply(point.z, r),
    )


def left_to_right(engine: AtomicEngine, key_bits: str, base: JacobianPoint) -> JacobianPoint:
    """Return [key] * ``base`` by double-and-add from the most significant bit.

    The accumulator starts at ``base``, so the leading bit must be 1.
    """
    _check_key(key_bits)
    if key_bits[0] != "1":
        raise ValueError("the first bit of the key must be '1' for this algorithm to work")
    q = base
    for bit in key_bits[1:]:
        q = engine.double(q)
        if bit == "1":
            q = engine.add(q, base)
    return q


def right_to_left(engine: AtomicEngine, key_bits: str, base: JacobianPoint) -> JacobianPoint:
    """Return [key] * ``base`` by scanning the key from the least significant bit.

    The running multiple of ``base`` is doubled after every bit, the last
    one included.
    """
    _check_key(key_bits)
    q: JacobianPoint | None = None
    r = base
    for bit in reversed(key_bits):
        if bit == "1":
            q = r if q is None else engine.add(q, r)
        r = engine.double(r)
    if q is None:
        raise ValueError("scalar was zero; the result is the point at infinity")
    return q