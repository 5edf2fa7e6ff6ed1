import sys

import tabulate as T


COMPACT_FIELDS = ("N", "min", "max", "avg", "stddev", "stderr")
COMPLETE_FIELDS = ("N", "min", "q1", "med", "q3", "max", "sum", "avg", "stddev", "stderr")


def format_value(value):
    """
    Format a number with the fewest digits that round-trip, so whole floats
    print as integers ("4" rather than "4.0").

    Large whole numbers stay in positional form ("1000000", not "1e+06");
    exponents appear only where repr() uses them (from 1e16 up).
    """
    text = repr(value)
    if text.endswith(".0"):
        text = text[:-2]
    return text


def row(summary, complete=False):
    if complete:
        stats = [
            summary.count,
            summary.min,
            summary.q1,
            summary.median,
            summary.q3,
            summary.max,
            summary.sum,
            summary.mean,
            summary.stddev,
            summary.stderr,
        ]
    else:
        stats = [
            summary.count,
            summary.min,
            summary.max,
            summary.mean,
            summary.stddev,
            summary.stderr,
        ]
    return [format_value(stat) for stat in stats]


def render(summary, options):
    headers = COMPLETE_FIELDS if options.complete else COMPACT_FIELDS
    if options.no_header:
        headers = ()
    # Cells are preformatted; keep tabulate from reformatting or right-aligning them
    return T.tabulate([row(summary, options.complete)], headers=headers,
                      tablefmt="plain", disable_numparse=True)


def print_summary(summary, options, file=None):
    print(render(summary, options), file=file or sys.stdout)
