#!/usr/bin/env python3

import argparse

from gostats.errors import GostError
from gostats.options import Options
from gostats.report import print_summary
from gostats.scan import eprint, load_values
from gostats.stats import summarize


def parse_args(argv=None):
    parser = argparse.ArgumentParser(prog="gost",
                                     description="simple statistics from command line")

    parser.add_argument("-n", "--no-header",
                        action="store_true",
                        help="don't display header",
                        required=False)

    parser.add_argument("--complete",
                        action="store_true",
                        help="show quartiles and sum as well",
                        required=False)

    parser.add_argument("--strict",
                        action="store_true",
                        help="throw an error for invalid input",
                        required=False)

    parser.add_argument("files",
                        nargs="*",
                        help="files to read numbers from (default is stdin)")

    return parser.parse_args(argv)


def main(argv=None, stdin=None):
    args = parse_args(argv)
    options = Options.from_args(args)

    try:
        numbers = load_values(args.files, options, stdin)
    except (GostError, OSError) as err:
        eprint(f"gost: error: {err}")
        return 1

    print_summary(summarize(numbers), options)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
