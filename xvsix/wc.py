"""Count lines, words and bytes."""

import sys
from dataclasses import dataclass

from .printf import printf

_WHITESPACE = frozenset(b" \r\t\n\v\0")
_CHUNK = 512


@dataclass(frozen=True)
class Counts:
    """Line, word and byte counts of a stream."""

    lines: int = 0
    words: int = 0
    chars: int = 0


def count(stream):
    """Count the lines, words and bytes of a binary stream."""
    lines = words = chars = 0
    inword = False
    for chunk in iter(lambda: stream.read(_CHUNK), b""):
        for byte in chunk:
            chars += 1
            if byte == 0x0A:
                lines += 1
            if byte in _WHITESPACE:
                inword = False
            elif not inword:
                words += 1
                inword = True
    return Counts(lines, words, chars)


def _report(stream, name):
    try:
        counts = count(stream)
    except OSError:
        printf("wc: read error\n")
        return False
    printf("%d %d %d %s\n", counts.lines, counts.words, counts.chars, name)
    return True


def main(argv=None):
    """Print counts for each named file, or for standard input."""
    if argv is None:
        argv = sys.argv[1:]
    if not argv:
        return 0 if _report(sys.stdin.buffer, "") else 1
    for path in argv:
        try:
            stream = open(path, "rb")
        except OSError:
            printf("wc: cannot open %s\n", path)
            return 1
        with stream:
            if not _report(stream, path):
                return 1
    return 0