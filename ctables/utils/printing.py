import logging
import sys
import numpy as np
from ctables.sampling import SampleGrid

PRECISION = 12
ANGLE_PRECISION = 16
# Between the two fields of one complex value, and between columns
PAIR_SEP = " "
COLUMN_SEP = "  "
ALIGN_SCOPES = ("table", "row")


def format_number(x, width=0, precision=PRECISION):
    """Fixed point with `precision` fractional digits, right-justified to
    `width` characters. nan and inf keep their short spelling."""
    return f"{float(x):>{width}.{precision}f}"


class ColumnFormat:
    """
    Field widths of one column: the widest rendered real part (or magnitude)
    and the widest rendered imaginary part (or angle).
    """

    def __init__(self, real_width=0, imag_width=0):
        self.real_width = real_width
        self.imag_width = imag_width

    def update(self, re, im):
        self.real_width = max(self.real_width, len(format_number(re)))
        self.imag_width = max(self.imag_width, len(format_number(im)))

    def render(self, re, im):
        return (
            format_number(re, self.real_width)
            + PAIR_SEP
            + format_number(im, self.imag_width)
        )

    def __eq__(self, other):
        if not isinstance(other, ColumnFormat):
            return NotImplemented
        return (self.real_width, self.imag_width) == (
            other.real_width,
            other.imag_width,
        )

    def __repr__(self):
        return f"ColumnFormat(real_width={self.real_width}, imag_width={self.imag_width})"


def _as_grid(grid):
    if isinstance(grid, SampleGrid):
        return grid
    return SampleGrid(grid)


def measure_columns(grid, polar=False, rows=None):
    """
    Measure pass: one ColumnFormat per column of `grid`.

    Args:
        grid: SampleGrid or 2D array-like of complex values.
        polar (bool): Measure magnitude and angle instead of real and
            imaginary parts.
        rows: Optional row indices to measure. All rows by default.
    """
    grid = _as_grid(grid)
    first, second = grid.views(polar=polar)
    if rows is None:
        rows = range(grid.num_rows)
    formats = []
    for col in range(grid.num_cols):
        fmt = ColumnFormat()
        for row in rows:
            fmt.update(first[row, col], second[row, col])
        formats.append(fmt)
    return formats


def _render_row(formats, first, second, row):
    return COLUMN_SEP.join(
        fmt.render(first[row, col], second[row, col])
        for col, fmt in enumerate(formats)
    )


def format_grid(grid, polar=False, align="table"):
    """
    Render `grid` as aligned text lines, without line terminators.

    Args:
        grid: SampleGrid or 2D array-like of complex values.
        polar (bool): Print magnitude and angle (degrees) instead of real
            and imaginary parts.
        align (str): "table" measures field widths over all rows, so every
            column starts at the same offset on every line. "row" measures
            each row on its own.
    """
    if align not in ALIGN_SCOPES:
        raise ValueError(f"align should be one of {ALIGN_SCOPES}, got {align!r}")
    grid = _as_grid(grid)
    first, second = grid.views(polar=polar)
    if align == "table":
        formats = measure_columns(grid, polar=polar)
        return [
            _render_row(formats, first, second, row) for row in range(grid.num_rows)
        ]
    lines = []
    for row in range(grid.num_rows):
        formats = measure_columns(grid, polar=polar, rows=[row])
        lines.append(_render_row(formats, first, second, row))
    return lines


def print_grid(grid, polar=False, align="table", out=None):
    """Write the aligned table of `grid` to `out` (stdout by default)."""
    logger = logging.getLogger(__name__)
    if out is None:
        out = sys.stdout
    lines = format_grid(grid, polar=polar, align=align)
    for line in lines:
        out.write(line + "\n")
    logger.debug(f"Printed {len(lines)} lines (polar={polar}, align={align})")


def print_angle_table(table, out=None):
    """Write real rows at 16 fractional digits, single-space separated,
    without any width alignment."""
    if out is None:
        out = sys.stdout
    table = np.asarray(table, dtype=float)
    if table.ndim != 2:
        raise ValueError(f"Angle table must be 2D, got shape {table.shape}")
    np.savetxt(out, table, fmt=f"%.{ANGLE_PRECISION}f", delimiter=" ")
