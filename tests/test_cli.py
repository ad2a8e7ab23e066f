import pytest

from atomicecc.atomic import P256_GENERATOR, JacobianPoint
from atomicecc.cli import format_point, main

GX_HEX = "6B17D1F2 E12C4247 F8BCE6E5 63A440F2 77037D81 2DEB33A0 F4A13945 D898C296"
GY_HEX = "4FE342E2 FE1A7F9B 8EE7EB4A 7C0F9E16 2BCE3357 6B315ECE CBB64068 37BF51F5"
ONE_HEX = "00000000 00000000 00000000 00000000 00000000 00000000 00000000 00000001"


def _affine(output: str) -> tuple[str, str]:
    lines = [line.strip() for line in output.splitlines()]
    x = next(line for line in lines if line.startswith("X_A:"))
    y = next(line for line in lines if line.startswith("Y_A:"))
    return x, y


def _run(capsys, argv):
    code = main(argv)
    captured = capsys.readouterr()
    return code, captured.out, captured.err


def test_format_point_of_generator():
    text = format_point(P256_GENERATOR)
    assert text.splitlines() == [f" Qx: {GX_HEX}", f" Qy: {GY_HEX}", f" Qz: {ONE_HEX}"]


def test_format_point_pads_small_values():
    text = format_point(JacobianPoint(0, 1, 0))
    lines = text.splitlines()
    assert lines[1] == f" Qy: {ONE_HEX}"
    assert lines[0].replace(" Qx: ", "").replace(" ", "") == "0" * 64


def test_format_point_rejects_oversized_coordinate():
    with pytest.raises(ValueError):
        format_point(JacobianPoint(1 << 256, 0, 1))


def test_key_one_gives_generator(capsys):
    code, out, _ = _run(capsys, ["--key", "1"])
    assert code == 0
    assert _affine(out) == (f"X_A: {GX_HEX}", f"Y_A: {GY_HEX}")
    assert "Jacobian coordinates of Q = [K]P:" in out


@pytest.mark.parametrize("key", ["11111", "10110", "1"])
def test_methods_agree_on_affine_result(capsys, key):
    code_r, out_r, _ = _run(capsys, ["--key", key, "--method", "r2l"])
    code_l, out_l, _ = _run(capsys, ["--key", key, "--method", "l2r"])
    assert code_r == code_l == 0
    assert _affine(out_r) == _affine(out_l)


def test_randomization_keeps_affine_result(capsys):
    _, plain, _ = _run(capsys, ["--key", "11111", "--method", "l2r"])
    code, randomized, _ = _run(capsys, ["--key", "11111", "--method", "l2r", "--randomize"])
    assert code == 0
    assert _affine(plain) == _affine(randomized)


def test_default_key_matches_explicit(capsys):
    _, default_out, _ = _run(capsys, [])
    _, explicit_out, _ = _run(capsys, ["--key", "11111"])
    assert _affine(default_out) == _affine(explicit_out)


def test_zero_key_is_an_error(capsys):
    code, out, err = _run(capsys, ["--key", "000"])
    assert code == 1
    assert "Error" in err
    assert "X_A" not in out


def test_left_to_right_needs_leading_one(capsys):
    code, _, err = _run(capsys, ["--key", "011", "--method", "l2r"])
    assert code == 1
    assert "first bit" in err


def test_non_binary_key_is_an_error(capsys):
    code, _, err = _run(capsys, ["--key", "10a1"])
    assert code == 1
    assert "Error" in err


def test_unknown_method_exits():
    with pytest.raises(SystemExit) as info:
        main(["--method", "sideways"])
    assert info.value.code == 2