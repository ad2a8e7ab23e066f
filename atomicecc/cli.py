"""Command line entry point: multiply the secp256r1 base point by a binary key."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from atomicecc import bigint
from atomicecc.atomic import P256_GENERATOR, AtomicEngine, JacobianPoint, to_affine
from atomicecc.field import p256_field
from atomicecc.scalar import left_to_right, randomize, right_to_left

DEFAULT_KEY = "11111"
_COORDINATE_WORDS = p256_field().words


def _hex(value: int) -> str:
    return bigint.to_hex(bigint.from_int(value, _COORDINATE_WORDS))


def format_point(point: JacobianPoint) -> str:
    """Render the Jacobian coordinates of ``point``, one per line."""
    return "\n".join(
        f" {name}: {_hex(value)}"
        for name, value in (("Qx", point.x), ("Qy", point.y), ("Qz", point.z))
    )


def _format_affine(x: int, y: int) -> str:
    return f" X_A: {_hex(x)}\n Y_A: {_hex(y)}"


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="atomicecc",
        description="Compute [K]P on secp256r1 with side-channel atomic formulas.",
    )
    parser.add_argument(
        "--key",
        default=DEFAULT_KEY,
        help=f"scalar K as binary digits, most significant first (default {DEFAULT_KEY})",
    )
    parser.add_argument(
        "--method",
        choices=("r2l", "l2r"),
        default="r2l",
        help="scan the key right to left or left to right (default r2l)",
    )
    parser.add_argument(
        "--randomize",
        action="store_true",
        help="randomize the projective coordinates of P before the scan",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the scalar multiplication and print Q in Jacobian and affine form."""
    args = _parser().parse_args(argv)
    field = p256_field()
    engine = AtomicEngine(field)
    base = randomize(field, P256_GENERATOR) if args.randomize else P256_GENERATOR
    scan = right_to_left if args.method == "r2l" else left_to_right

    try:
        q = scan(engine, args.key, base)
    except ValueError as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1

    print("\nJacobian coordinates of Q = [K]P:")
    print(format_point(q))

    try:
        x, y = to_affine(field, q)
    except ZeroDivisionError:
        print("Error: Q is the point at infinity and has no affine form", file=sys.stderr)
        return 1

    print("\nAffine coordinates of Q = [K]P:")
    print(_format_affine(x, y))
    return 0


if __name__ == "__main__":
    sys.exit(main())