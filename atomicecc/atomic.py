"""Side-channel atomic point doubling and addition in Jacobian coordinates.

Every formula is a fixed run of atomic blocks, each one a multiplication, an
addition, a negation and an addition, in that order.  Where a formula needs
no addition or negation at that place, a dummy one is done whose result is
thrown away, so all blocks look the same from outside.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

from atomicecc.field import PrimeField

DUMMY = "dummy"


@dataclass(frozen=True)
class JacobianPoint:
    """A point (X, Y, Z) standing for the affine point (X/Z^2, Y/Z^3)."""

    x: int
    y: int
    z: int


P256_GENERATOR = JacobianPoint(
    int("6b17d1f2e12c4247f8bce6e563a440f277037d812deb33a0f4a13945d898c296", 16),
    int("4fe342e2fe1a7f9b8ee7eb4a7c0f9e162bce33576b315ececbb6406837bf51f5", 16),
    1,
)


class OpKind(enum.Enum):
    """The field operations an atomic block is made of."""

    MULTIPLY = "M"
    ADD = "A"
    NEGATE = "N"


@dataclass(frozen=True)
class Operation:
    """One field operation on named registers."""

    kind: OpKind
    target: str
    operands: tuple[str, ...]

    @property
    def dummy(self) -> bool:
        """Whether the result is discarded."""
        return self.target == DUMMY


def _block(mul, add1, neg, add2) -> list[Operation]:
    return [
        Operation(OpKind.MULTIPLY, mul[0], mul[1:]),
        Operation(OpKind.ADD, add1[0], add1[1:]),
        Operation(OpKind.NEGATE, neg[0], neg[1:]),
        Operation(OpKind.ADD, add2[0], add2[1:]),
    ]


def _program(*blocks) -> tuple[Operation, ...]:
    return tuple(op for block in blocks for op in _block(*block))


D = DUMMY

# Registers: T0 = curve coefficient a, (T1, T2, T3) = the point.
_DOUBLING = _program(
    (("T4", "T1", "T1"), ("T5", "T4", "T4"), (D, "T4"), ("T4", "T4", "T5")),
    (("T5", "T3", "T3"), ("T1", "T1", "T1"), (D, "T3"), (D, "T2", "T3")),
    (("T5", "T5", "T5"), (D, "T1", "T3"), (D, "T5"), (D, "T2", "T3")),
    (("T5", "T0", "T5"), ("T4", "T4", "T5"), (D, "T0"), ("T5", "T2", "T2")),
    (("T3", "T3", "T5"), (D, "T1", "T3"), (D, "T4"), (D, "T2", "T3")),
    (("T2", "T2", "T2"), ("T2", "T2", "T2"), (D, "T4"), (D, "T2", "T3")),
    (("T5", "T1", "T2"), (D, "T1", "T3"), ("T5", "T5"), (D, "T2", "T3")),
    (("T1", "T4", "T4"), ("T1", "T1", "T5"), (D, "T4"), ("T1", "T1", "T5")),
    (("T2", "T2", "T2"), ("T2", "T2", "T2"), (D, "T4"), ("T5", "T1", "T5")),
    (("T4", "T4", "T5"), ("T2", "T2", "T4"), ("T2", "T2"), (D, "T2", "T3")),
)

# Registers: (T1, T2, T3) = Q, (T7, T8, T9) = P.
_FILLER_ADD1 = (D, "T3", "T1")
_FILLER_NEG = (D, "T7")
_FILLER_ADD2 = (D, "T8", "T9")
_ADDITION = _program(
    (("T4", "T9", "T9"), _FILLER_ADD1, _FILLER_NEG, _FILLER_ADD2),
    (("T1", "T1", "T4"), _FILLER_ADD1, _FILLER_NEG, _FILLER_ADD2),
    (("T4", "T4", "T9"), _FILLER_ADD1, _FILLER_NEG, _FILLER_ADD2),
    (("T2", "T2", "T4"), _FILLER_ADD1, _FILLER_NEG, _FILLER_ADD2),
    (("T4", "T3", "T3"), _FILLER_ADD1, _FILLER_NEG, _FILLER_ADD2),
    (("T5", "T4", "T7"), _FILLER_ADD1, ("T5", "T5"), ("T5", "T1", "T5")),
    (("T4", "T3", "T4"), _FILLER_ADD1, _FILLER_NEG, _FILLER_ADD2),
    (("T4", "T4", "T8"), _FILLER_ADD1, ("T4", "T4"), ("T4", "T2", "T4")),
    (("T3", "T3", "T9"), _FILLER_ADD1, _FILLER_NEG, _FILLER_ADD2),
    (("T3", "T3", "T5"), _FILLER_ADD1, _FILLER_NEG, _FILLER_ADD2),
    (("T6", "T5", "T5"), _FILLER_ADD1, _FILLER_NEG, _FILLER_ADD2),
    (("T1", "T1", "T6"), _FILLER_ADD1, ("T4", "T4"), _FILLER_ADD2),
    (("T5", "T5", "T6"), ("T6", "T1", "T2"), ("T2", "T2"), ("T6", "T2", "T6")),
    (("T1", "T4", "T4"), ("T1", "T1", "T5"), ("T6", "T6"), ("T1", "T1", "T6")),
    (("T2", "T2", "T5"), ("T1", "T1", "T6"), _FILLER_NEG, ("T6", "T1", "T6")),
    (("T4", "T4", "T6"), ("T2", "T2", "T4"), _FILLER_NEG, _FILLER_ADD2),
)


class AtomicEngine:
    """Runs the atomic formulas over a prime field and keeps a trace of every operation."""

    def __init__(self, field: PrimeField, a: int | None = None) -> None:
        self.field = field
        self.a = field.modulus - 3 if a is None else a % field.modulus
        self.trace: list[Operation] = []

    def _run(self, program: tuple[Operation, ...], registers: dict[str, int]) -> dict[str, int]:
        field = self.field
        for op in program:
            values = [registers[name] for name in op.operands]
            if op.kind is OpKind.MULTIPLY:
                result = field.multiply(*values)
            elif op.kind is OpKind.ADD:
                result = field.add(*values)
            else:
                result = field.negate(*values)
            if not op.dummy:
                registers[op.target] = result
            self.trace.append(op)
        return registers

    def double(self, point: JacobianPoint) -> JacobianPoint:
        """Return 2 * ``point`` in ten atomic blocks."""
        registers = self._run(
            _DOUBLING, {"T0": self.a, "T1": point.x, "T2": point.y, "T3": point.z}
        )
        return JacobianPoint(registers["T1"], registers["T2"], registers["T3"])

    def add(self, q: JacobianPoint, p: JacobianPoint) -> JacobianPoint:
        """Return ``q + p`` in sixteen atomic blocks; the points must differ."""
        registers = self._run(
            _ADDITION,
            {"T1": q.x, "T2": q.y, "T3": q.z, "T7": p.x, "T8": p.y, "T9": p.z},
        )
        return JacobianPoint(registers["T1"], registers["T2"], registers["T3"])


def to_affine(field: PrimeField, point: JacobianPoint) -> tuple[int, int]:
    """Return the affine coordinates (X/Z^2, Y/Z^3) of ``point``."""
    z_squared = field.multiply(point.z, point.z)
    x = field.multiply(point.x, field.inverse(z_squared))
    z_cubed = field.multiply(point.z, z_squared)
    y = field.multiply(point.y, field.inverse(z_cubed))
    return x, y