ESCAPE_LIMIT = 255
BAILOUT_NORM_SQR = 4.0  # |z| > 2


def escape_time(c: complex, limit: int = ESCAPE_LIMIT):
    """
    Iterate z_{n+1} = z_n^2 + c from z_0 = 0 and report when the orbit escapes.

    Returns the index i (0 <= i < limit) of the first iteration at which
    |z|^2 > 4, checked before z is updated, or None if the orbit stays
    bounded for all `limit` iterations.
    """
    z = 0j
    for i in range(limit):
        if z.real * z.real + z.imag * z.imag > BAILOUT_NORM_SQR:
            return i
        z = z * z + c
    return None
