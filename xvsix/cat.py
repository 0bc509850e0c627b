"""Concatenate files to standard output."""

import sys

from .printf import fprintf

_CHUNK = 512


def cat(src, out):
    """Copy a binary stream to another; raises OSError on read or write failure."""
    while True:
        try:
            chunk = src.read(_CHUNK)
        except OSError as exc:
            raise OSError("read error") from exc
        if not chunk:
            break
        try:
            written = out.write(chunk)
        except OSError as exc:
            raise OSError("write error") from exc
        if written is not None and written != len(chunk):
            raise OSError("write error")


def main(argv=None):
    """Copy each named file, or standard input, to standard output."""
    if argv is None:
        argv = sys.argv[1:]
    sys.stdout.flush()
    out = sys.stdout.buffer
    try:
        if not argv:
            cat(sys.stdin.buffer, out)
            return 0
        for path in argv:
            try:
                src = open(path, "rb")
            except OSError:
                fprintf(sys.stderr, "cat: cannot open %s\n", path)
                return 1
            with src:
                cat(src, out)
    except OSError as exc:
        fprintf(sys.stderr, "cat: %s\n", exc)
        return 1
    finally:
        out.flush()
    return 0