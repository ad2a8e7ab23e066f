# atomicecc

Elliptic-curve scalar multiplication on NIST P-256 (secp256r1), built from
side-channel *atomic* blocks. Every point doubling and point addition is a
fixed run of identical blocks, each one a Multiply, an Add, a Negate and an
Add, in that order. Where a formula has no real work for a slot, a dummy
operation fills it and its result is thrown away, so the sequence of
operations looks the same for a doubling as for an addition.

The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command line

```
atomicecc
```

This multiplies the P-256 base point P by a scalar K and prints Q = [K]P,
first in Jacobian coordinates (`Qx`, `Qy`, `Qz`), then in affine coordinates
(`X_A`, `Y_A`). Coordinates are printed as upper-case hex in groups of eight
digits.

Options:

- `--key BITS` – the scalar K as binary digits, most significant first
  (default `11111`).
- `--method {r2l,l2r}` – scan the key right to left (default) or left to
  right.
- `--randomize` – scale the projective coordinates of P by a random nonzero
  field element before the scan.

On a bad key (empty, characters other than `0` and `1`, a zero scalar, or a
leading `0` with `--method l2r`) the command prints an error to standard error
and exits with status 1.

## Library overview

- `atomicecc.bigint` – unsigned multi-word integers held as little-endian
  lists of words of `word_bits` bits (32 by default). Functions return new
  lists: `add` and `subtract` with carry/borrow in and out, `xor`,
  `shift_left`, `shift_right`, `compare`, `is_zero`, `is_one`, `multiply`
  (full product in `len(a) + len(b)` words), `set_bit`, `test_bit`, `msb`,
  `get_byte`, `set_byte`, `hamming_weight`, `divide` (quotient and
  remainder), `parse_hex` (skips non-hex characters, drops digits that do not
  fit), `to_hex`, and `from_int` / `to_int`.
- `atomicecc.constant_time` – branch-free helpers on word lists: `swap`,
  `select`, `is_equal` and `is_zero`, each doing the same work per word
  whatever the condition or the values.
- `atomicecc.field` – `PrimeField`, with `add`, `negate`, `multiply` (two
  Montgomery multiplications, the second by R² mod p), `inverse` and `parse`
  for hex text. `p256_field()` returns the P-256 prime field.
- `atomicecc.atomic` – `JacobianPoint`, `P256_GENERATOR`, and
  `AtomicEngine(field, a=None)` (curve coefficient `a` defaults to p − 3).
  Its `double(point)` runs ten atomic blocks and `add(q, p)` sixteen; `add`
  needs two different points. Each executed field operation is appended to
  `engine.trace` as an `Operation` with an `OpKind` (`MULTIPLY`, `ADD`,
  `NEGATE`) and a `dummy` flag. `to_affine(field, point)` returns
  (X/Z², Y/Z³).
- `atomicecc.scalar` – `left_to_right(engine, key_bits, base)`
  (double-and-add from the most significant bit, which must be `1`),
  `right_to_left(engine, key_bits, base)` (scans from the least significant
  bit; raises `ValueError` for a zero scalar), and
  `randomize(field, point, r=None)`, which returns (r²X, r³Y, rZ), the same
  affine point.
- `atomicecc.cli` – `format_point` and the `main` entry point of the
  `atomicecc` command.

```python
from atomicecc.atomic import P256_GENERATOR, AtomicEngine, to_affine
from atomicecc.field import p256_field
from atomicecc.scalar import right_to_left

field = p256_field()
engine = AtomicEngine(field)
q = right_to_left(engine, "101", P256_GENERATOR)
x, y = to_affine(field, q)
```

## What it does not do

- It offers no key generation, signatures or key exchange; it only computes
  [K]P for a scalar given as binary digits.
- It does not check that points lie on the curve, and it has no
  representation of the point at infinity.
- Field arithmetic uses Python integers, so the atomic structure shows in the
  order of operations recorded in `trace`, not as a timing guarantee.