import numpy as np
import pytest

from mandelbrot.iterators import ESCAPE_LIMIT, escape_time


def test_origin_never_escapes():
    for limit in (1, 10, ESCAPE_LIMIT, 1000):
        assert escape_time(0j, limit) is None


def test_period_two_orbit_never_escapes():
    # c = -1 cycles 0, -1, 0, -1, ...
    assert escape_time(-1 + 0j, ESCAPE_LIMIT) is None


def test_far_point_escapes_after_first_update():
    # z_0 = 0 passes the check, z_1 = c is already outside the disc
    assert escape_time(5 + 5j, ESCAPE_LIMIT) == 1


def test_check_happens_before_update():
    # c = 2: z = 0, 2, 6. |2|^2 == 4 is not an escape, |6|^2 is.
    assert escape_time(2 + 0j, ESCAPE_LIMIT) == 2
    assert escape_time(2 + 0j, 3) == 2
    assert escape_time(2 + 0j, 2) is None
    # c = 1: z = 0, 1, 2, 5
    assert escape_time(1 + 0j, ESCAPE_LIMIT) == 3


def test_zero_limit_never_escapes():
    assert escape_time(5 + 5j, 0) is None


@pytest.mark.parametrize("c", [0.3 + 0.5j, -0.75 + 0.1j, 0.26 + 0j, -2.1 + 0j, 0.4 - 0.3j, -1.25 + 0.02j])
def test_raising_limit_keeps_escape_index(c):
    small = escape_time(c, 20)
    large = escape_time(c, 500)
    if small is not None:
        assert large == small
    else:
        assert large is None or large >= 20


def test_escape_index_within_limit():
    rng = np.random.default_rng(42)
    points = rng.uniform(-2.5, 1.5, 200) + 1j * rng.uniform(-1.5, 1.5, 200)
    for c in points:
        n = escape_time(complex(c), 50)
        assert n is None or 0 <= n < 50
