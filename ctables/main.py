import logging
import sys
from ctables.interface import TableInterface
from ctables.routines import get_routine
from ctables.utils.printing import print_angle_table, print_grid


def run_tables(names, polar=False, align="table", out=None):
    """Generate the named tables in order and print each to `out`."""
    logger = logging.getLogger(__name__)
    if out is None:
        out = sys.stdout
    for name in names:
        result = get_routine(name)()
        if name == "testAngle":
            print_angle_table(result, out=out)
        else:
            print_grid(result, polar=polar, align=align, out=out)
        out.flush()
        logger.info(f"{name} done")


def main(argv=None):
    si = TableInterface(argv)
    run_tables(si.routines, polar=si.polar, align=si.align)
    return 0


if __name__ == "__main__":
    sys.exit(main())
