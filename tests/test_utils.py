import pytest

from mandelbrot.utils import parse_bounds, parse_complex, parse_pair


@pytest.mark.parametrize("s", ["", "10,", ",10", "10,20xy", "1020", "10 ,20", "10, 20"])
def test_parse_pair_rejects(s):
    assert parse_pair(s, ",") is None


def test_parse_pair_ints():
    assert parse_pair("10,20", ",") == (10, 20)
    assert parse_pair("-3x7", "x") == (-3, 7)


def test_parse_pair_splits_on_first_separator():
    # the right half "2,3" is not an int, so the whole pair fails
    assert parse_pair("1,2,3", ",") is None
    assert parse_pair("0.5x1.5", "x", float) == (0.5, 1.5)


def test_parse_complex():
    assert parse_complex("1.25,-0.0625") == complex(1.25, -0.0625)
    assert parse_complex("-1,0.20") == complex(-1.0, 0.2)
    assert parse_complex(",-0.0625") is None
    assert parse_complex("1.25") is None


def test_parse_bounds():
    assert parse_bounds("1000x750") == (1000, 750)
    assert parse_bounds("1x1") == (1, 1)
    assert parse_bounds("0x10") is None
    assert parse_bounds("10x-1") is None
    assert parse_bounds("10.5x10") is None
    assert parse_bounds("10,10") is None


@pytest.mark.parametrize("s,parse", [("1_000,2", int), ("10,2_0", int), ("١٠,2", int), ("1.5,٢", float), ("1_0.5,2", float)])
def test_parse_pair_rejects_lenient_number_forms(s, parse):
    assert parse_pair(s, ",", parse) is None


def test_parse_bounds_rejects_underscores():
    assert parse_bounds("1_000x750") is None
