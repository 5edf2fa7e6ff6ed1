from typing import NamedTuple


class Options(NamedTuple):
    """
    Display and parsing switches, built once from the command line
    """
    no_header: bool = False
    complete: bool = False
    strict: bool = False

    @classmethod
    def from_args(cls, args):
        return cls(no_header=args.no_header,
                   complete=args.complete,
                   strict=args.strict)
