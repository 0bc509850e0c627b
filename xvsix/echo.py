"""Print arguments separated by spaces."""

import sys


def echo(args):
    """Return the arguments joined by spaces and ended by a newline, or '' for none."""
    return " ".join(args) + "\n" if args else ""


def main(argv=None):
    """Write the arguments to standard output."""
    if argv is None:
        argv = sys.argv[1:]
    sys.stdout.write(echo(argv))
    return 0