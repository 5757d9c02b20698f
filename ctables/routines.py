import logging
import numpy as np
from ctables.sampling import NUM_SAMPLES, OMEGA, SampleGrid, normalize, sample_points

# Branch range of the real part of asin and atan
HALF_PI_LOW = -np.pi / 2


def _tabulate(name, funcs):
    """Evaluate each function of `funcs` at every sample point.
    Column 0 is the sample itself."""
    logger = logging.getLogger(__name__)
    z = sample_points()
    columns = [z] + [f(z) for f in funcs]
    grid = SampleGrid(np.column_stack(columns), name=name)
    logger.info(f"{name}: {grid.num_rows} rows x {grid.num_cols} columns")
    return grid


def _normalized(func, low_end=HALF_PI_LOW):
    def wrapped(z):
        return np.array([normalize(w, low_end) for w in func(z)])

    wrapped.__name__ = f"normalized_{func.__name__}"
    return wrapped


def test_exp():
    """Columns: z, exp(z)"""
    return _tabulate("testExp", [np.exp])


def test_log():
    """Columns: z, log(z), log10(z)"""
    return _tabulate("testLog", [np.log, np.log10])


def test_sqrt():
    """Columns: z, sqrt(z)"""
    return _tabulate("testSqrt", [np.sqrt])


def test_trig():
    """Columns: z, sin(z), cos(z), tan(z)"""
    return _tabulate("testTrig", [np.sin, np.cos, np.tan])


def test_inverse_trig():
    """
    Columns: z, asin(z), acos(z), atan(z)

    The real parts of asin and atan are folded back into [-pi/2, pi/2),
    since rounding near the branch cuts can leave them just outside.
    """
    return _tabulate(
        "testInverseTrig",
        [_normalized(np.arcsin), np.arccos, _normalized(np.arctan)],
    )


def test_angle():
    """Rows of cos(theta), sin(theta), theta on the unit circle."""
    logger = logging.getLogger(__name__)
    theta = np.arange(NUM_SAMPLES) * OMEGA
    table = np.column_stack([np.cos(theta), np.sin(theta), theta])
    logger.info(f"testAngle: {table.shape[0]} rows x {table.shape[1]} columns")
    return table


# Output order of the generator
ROUTINES = {
    "testInverseTrig": test_inverse_trig,
    "testTrig": test_trig,
    "testLog": test_log,
    "testSqrt": test_sqrt,
    "testExp": test_exp,
    "testAngle": test_angle,
}


def get_routine(name):
    if name not in ROUTINES:
        raise ValueError(
            f"Unknown routine {name!r}, choose from {', '.join(ROUTINES)}"
        )
    return ROUTINES[name]
