"""A simple grep supporting only the ^ . * $ operators."""

import sys

from .printf import fprintf, printf

_CHUNK = 1024


def _matchhere(re, ri, text, ti):
    """Search for re[ri:] at text[ti:]."""
    while True:
        if ri == len(re):
            return True
        if ri + 1 < len(re) and re[ri + 1] == "*":
            return _matchstar(re[ri], re, ri + 2, text, ti)
        if re[ri] == "$" and ri + 1 == len(re):
            return ti == len(text)
        if ti < len(text) and (re[ri] == "." or re[ri] == text[ti]):
            ri += 1
            ti += 1
            continue
        return False


def _matchstar(c, re, ri, text, ti):
    """Search for c* followed by re[ri:] at text[ti:]."""
    while True:
        if _matchhere(re, ri, text, ti):
            return True
        if ti < len(text) and (text[ti] == c or c == "."):
            ti += 1
        else:
            return False


def match(re, text):
    """True if the pattern re matches anywhere in text."""
    if re.startswith("^"):
        return _matchhere(re, 1, text, 0)
    return any(_matchhere(re, 0, text, ti) for ti in range(len(text) + 1))


def grep(pattern, stream, out):
    """Copy to out every newline-terminated line of stream that matches pattern."""
    pending = ""
    for chunk in iter(lambda: stream.read(_CHUNK), ""):
        pending += chunk
        *lines, pending = pending.split("\n")
        for line in lines:
            if match(pattern, line):
                out.write(line + "\n")


def main(argv=None):
    """Run grep over the named files, or standard input when none are given."""
    if argv is None:
        argv = sys.argv[1:]
    if not argv:
        fprintf(sys.stderr, "usage: grep pattern [file ...]\n")
        return 1
    pattern, *paths = argv
    if not paths:
        grep(pattern, sys.stdin, sys.stdout)
        return 0
    for path in paths:
        try:
            stream = open(path, encoding="utf-8", errors="replace", newline="")
        except OSError:
            printf("grep: cannot open %s\n", path)
            return 1
        with stream:
            grep(pattern, stream, sys.stdout)
    return 0