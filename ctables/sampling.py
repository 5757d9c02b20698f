import logging
import numpy as np

NUM_SAMPLES = 100
START_REAL = -5.0
REAL_STEP = 0.1
OMEGA = 2 * np.pi / NUM_SAMPLES


def real_view(values):
    return np.real(values)


def imag_view(values):
    return np.imag(values)


def magnitude_view(values):
    """Euclidean norm of each value."""
    return np.abs(values)


def angle_view(values):
    """Signed angle from the positive real axis, in degrees, in (-180, 180]."""
    angle = np.angle(values, deg=True)
    # Half-open range: the lower end is the same direction as 180
    return np.where(angle <= -180.0, angle + 360.0, angle)


class SampleGrid:
    """
    Rectangular table of complex values.

    Column 0 holds the input sample of each row, the remaining columns hold
    function outputs evaluated at that sample.

    Args:
        rows: 2D array or nested sequence of complex numbers. Every row
            must have the same number of columns.
        name (str): Routine name, used in log messages.
    """

    def __init__(self, rows, name: str = ""):
        logger = logging.getLogger(__name__)
        if isinstance(rows, np.ndarray):
            data = rows
        else:
            rows = [list(row) for row in rows]
            widths = {len(row) for row in rows}
            if len(widths) > 1:
                raise ValueError(
                    f"Ragged grid {name!r}: rows have {sorted(widths)} columns"
                )
            data = np.array(rows)
        if data.ndim != 2:
            raise ValueError(f"Grid {name!r} must be 2D, got shape {data.shape}")
        self.values = np.array(data, dtype=np.complex128)
        self.values.flags.writeable = False
        self.name = name
        logger.debug(f"Grid {name} has shape {self.values.shape}")

    @property
    def num_rows(self):
        return self.values.shape[0]

    @property
    def num_cols(self):
        return self.values.shape[1]

    def views(self, polar=False):
        """Return the (real or magnitude, imaginary or angle) float arrays."""
        if polar:
            return magnitude_view(self.values), angle_view(self.values)
        return real_view(self.values), imag_view(self.values)

    def __getitem__(self, index):
        return self.values[index]

    def __len__(self):
        return self.num_rows


def sample_points(num_samples=NUM_SAMPLES, start=START_REAL, step=REAL_STEP):
    """
    Sample points z_i = re_i + i * OMEGA * 1j, for i in range(num_samples).

    The real offset is accumulated by repeated addition of `step`, so the
    rounding of re_i is that of a running sum, not of start + i * step.
    """
    points = np.empty(num_samples, dtype=np.complex128)
    real_part = start
    for i in range(num_samples):
        points[i] = complex(real_part, i * OMEGA)
        real_part += step
    return points


def normalize(z, low_end):
    """
    Fold the real part of z into [low_end, low_end + pi) by reflecting it
    about the interval ends. The imaginary part is kept.

    An even number of reflections is a shift by a multiple of 2 pi, so the
    real part is first reduced modulo 2 pi and then reflected at most once
    about the upper end. Non-finite real parts are returned as is. A real
    part exactly at low_end + pi is its own reflection and maps to low_end.
    """
    z = complex(z)
    r = z.real
    if not np.isfinite(r):
        return z
    high_end = low_end + np.pi
    if not high_end > low_end:
        raise ValueError(f"Empty interval starting at {low_end}")
    if low_end <= r < high_end:
        return z
    period = 2 * np.pi
    r = low_end + float(np.fmod(r - low_end, period))
    if r < low_end:
        r += period
    if r >= high_end:
        r = 2 * high_end - r
    # Rounding can leave r on the upper end
    if not low_end <= r < high_end:
        r = low_end
    logger = logging.getLogger(__name__)
    logger.debug(f"normalize: {z.real!r} reflected to {r!r}")
    return complex(r, z.imag)
