import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from atomicecc.atomic import (
    DUMMY,
    P256_GENERATOR,
    AtomicEngine,
    JacobianPoint,
    OpKind,
    to_affine,
)
from atomicecc.field import P256_PRIME, p256_field

FIELD = p256_field()
P256_B = 0x5AC635D8AA3A93E7B3EBBD55769886BC651D06B0CC53B0F63BCE3C3E27D2604B
BLOCK = [OpKind.MULTIPLY, OpKind.ADD, OpKind.NEGATE, OpKind.ADD]


def on_curve(point):
    x, y = to_affine(FIELD, point)
    return (y * y - (x * x * x - 3 * x + P256_B)) % P256_PRIME == 0


def randomize(point, r):
    r2 = FIELD.multiply(r, r)
    r3 = FIELD.multiply(r2, r)
    return JacobianPoint(
        FIELD.multiply(point.x, r2), FIELD.multiply(point.y, r3), FIELD.multiply(point.z, r)
    )


def test_generator_is_on_curve():
    assert on_curve(P256_GENERATOR)


def test_double_stays_on_curve():
    engine = AtomicEngine(FIELD)
    assert on_curve(engine.double(P256_GENERATOR))


def test_double_of_generator_known_x():
    engine = AtomicEngine(FIELD)
    x, _ = to_affine(FIELD, engine.double(P256_GENERATOR))
    assert x == 0x7CF27B188D034F7E8A52380304B51AC3C08969E277F21B35A60B48FC47669978


def test_add_stays_on_curve_and_commutes():
    engine = AtomicEngine(FIELD)
    two = engine.double(P256_GENERATOR)
    left = engine.add(two, P256_GENERATOR)
    right = engine.add(P256_GENERATOR, two)
    assert on_curve(left)
    assert to_affine(FIELD, left) == to_affine(FIELD, right)


def test_double_twice_equals_repeated_addition():
    engine = AtomicEngine(FIELD)
    two = engine.double(P256_GENERATOR)
    four_by_doubling = engine.double(two)
    four_by_adding = engine.add(engine.add(two, P256_GENERATOR), P256_GENERATOR)
    assert to_affine(FIELD, four_by_doubling) == to_affine(FIELD, four_by_adding)


@settings(max_examples=20, deadline=None)
@given(st.integers(min_value=1, max_value=P256_PRIME - 1))
def test_results_do_not_depend_on_projective_representation(r):
    engine = AtomicEngine(FIELD)
    randomized = randomize(P256_GENERATOR, r)
    assert to_affine(FIELD, engine.double(randomized)) == to_affine(
        FIELD, engine.double(P256_GENERATOR)
    )
    two = engine.double(P256_GENERATOR)
    assert to_affine(FIELD, engine.add(two, randomized)) == to_affine(
        FIELD, engine.add(two, P256_GENERATOR)
    )


def test_doubling_trace_is_ten_uniform_blocks():
    engine = AtomicEngine(FIELD)
    engine.double(P256_GENERATOR)
    assert [op.kind for op in engine.trace] == BLOCK * 10


def test_addition_trace_is_sixteen_uniform_blocks():
    engine = AtomicEngine(FIELD)
    engine.add(engine.double(P256_GENERATOR), P256_GENERATOR)
    assert [op.kind for op in engine.trace[40:]] == BLOCK * 16


def test_multiplications_are_never_dummy():
    engine = AtomicEngine(FIELD)
    engine.add(engine.double(P256_GENERATOR), P256_GENERATOR)
    multiplies = [op for op in engine.trace if op.kind is OpKind.MULTIPLY]
    assert multiplies and not any(op.dummy for op in multiplies)
    assert any(op.target == DUMMY for op in engine.trace)


def test_default_coefficient_is_minus_three():
    assert AtomicEngine(FIELD).a == P256_PRIME - 3


def test_to_affine_of_generator():
    assert to_affine(FIELD, P256_GENERATOR) == (P256_GENERATOR.x, P256_GENERATOR.y)


def test_to_affine_of_infinity_raises():
    with pytest.raises(ZeroDivisionError):
        to_affine(FIELD, JacobianPoint(0, 0, 0))