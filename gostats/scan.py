import math
import sys
from contextlib import contextmanager

from gostats.errors import EmptyInputError, InvalidTokenError, SourceOpenError


def eprint(*args, **kwargs):
    print(*args, file=sys.stderr, **kwargs)


def tokens(stream):
    """
    Yield whitespace-delimited tokens from a text stream, one pass
    """
    for line in stream:
        yield from line.split()


def parse_number(token):
    # float() also accepts digit grouping ("1_000") and non-ASCII digits
    if "_" in token or not token.isascii():
        raise InvalidTokenError(token)
    try:
        value = float(token)
    except ValueError:
        raise InvalidTokenError(token) from None
    if math.isnan(value):
        raise InvalidTokenError(token)
    # out of range, e.g. 1e400
    if math.isinf(value) and token.lstrip("+-").lower() not in ("inf", "infinity"):
        raise InvalidTokenError(token)
    return value


def scan_numbers(stream, values, options):
    """
    Append every number found in `stream` to `values`.

    Invalid tokens are fatal in strict mode, otherwise reported on stderr
    and skipped.
    """
    for token in tokens(stream):
        try:
            values.append(parse_number(token))
        except InvalidTokenError:
            if options.strict:
                raise
            eprint(f"warning: invalid input {token}")


@contextmanager
def open_source(path):
    try:
        file = open(path, errors="replace")
    except OSError as err:
        raise SourceOpenError(path, err.strerror) from err
    with file:
        yield file


def load_values(paths, options, stdin=None):
    """
    Read numbers from the named files in order, or from stdin if there are none
    """
    values = []
    if paths:
        for path in paths:
            with open_source(path) as file:
                scan_numbers(file, values, options)
    else:
        if stdin is None:
            stdin = sys.stdin
            stdin.reconfigure(errors="replace")
        scan_numbers(stdin, values, options)

    if not values:
        raise EmptyInputError()
    return values
