import argparse
import logging
from ctables.routines import ROUTINES
from ctables.utils.printing import ALIGN_SCOPES

LOG_FORMAT = "{asctime} {levelname} {filename}:{lineno}: {message}"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


class CustomHelpFormatter(argparse.HelpFormatter):
    def _get_help_string(self, action):
        help = action.help
        if action.default is not argparse.SUPPRESS and action.default is not None:
            help += f" (default: {action.default})"
        return help


class TableInterface:
    """Command line options of the table generator. Every option is
    optional; with no arguments all six tables are printed."""

    def __init__(self, argv=None):
        self.cli_init(argv)
        return

    def cli_init(self, argv=None):
        """Initialize by parsing the command line arguments"""
        parser = argparse.ArgumentParser(
            prog="complex-tables",
            description="Print reference tables of complex functions.",
            formatter_class=CustomHelpFormatter,
        )
        parser.add_argument(
            "-r",
            "--routine",
            action="append",
            choices=list(ROUTINES),
            help="Only print this table, may be repeated",
        )
        parser.add_argument(
            "--polar",
            action="store_true",
            default=False,
            help="Print magnitude and angle instead of real and imaginary parts",
        )
        parser.add_argument(
            "--align",
            choices=ALIGN_SCOPES,
            default="table",
            help="Measure column widths over the whole table or per row",
        )
        parser.add_argument(
            "--log-file",
            help="Append log records to this file",
        )
        parser.add_argument(
            "-v",
            "--verbose",
            action="store_true",
            default=False,
            help="Log progress to stderr",
        )
        args = parser.parse_args(argv)

        # Keep the fixed output order whatever the order on the command line
        if args.routine:
            self.routines = [name for name in ROUTINES if name in args.routine]
        else:
            self.routines = list(ROUTINES)
        self.polar = args.polar
        self.align = args.align
        self.log_file = args.log_file
        self.verbose = args.verbose

        self.init_logging()
        logger = logging.getLogger(__name__)
        logger.info(f"routines = {self.routines}")
        logger.info(f"polar = {self.polar}, align = {self.align}")
        return

    def init_logging(self):
        # stdout carries the tables, so records go to stderr or a file
        if self.log_file:
            logging.basicConfig(
                filename=self.log_file,
                filemode="a",
                format=LOG_FORMAT,
                datefmt=LOG_DATEFMT,
                style="{",
                level=logging.INFO,
                encoding="utf-8",
            )
        else:
            logging.basicConfig(
                format=LOG_FORMAT,
                datefmt=LOG_DATEFMT,
                style="{",
                level=logging.INFO if self.verbose else logging.WARNING,
            )


if __name__ == "__main__":
    TableInterface()
