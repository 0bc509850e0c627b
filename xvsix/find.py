"""Find files with a given name in a directory tree."""

import os
import stat
import sys

from .printf import fprintf, printf

_DIRSIZ = 14  # longest directory entry name
_PATHBUF = 512


def fmtname(path):
    """Return the part of path after its last slash."""
    return path.rsplit("/", 1)[-1]


def find(path, name):
    """Yield every non-directory under path whose last component equals name."""
    try:
        st = os.stat(path)
    except OSError:
        fprintf(sys.stderr, "find: cannot open %s\n", path)
        return
    if not stat.S_ISDIR(st.st_mode):
        if fmtname(path) == name:
            yield path
        return
    if len(path) + 1 + _DIRSIZ + 1 > _PATHBUF:
        printf("find: path too long\n")
        return
    try:
        entries = sorted(os.listdir(path))
    except OSError:
        fprintf(sys.stderr, "find: cannot open %s\n", path)
        return
    for entry in entries:
        if entry in (".", ".."):
            continue
        child = f"{path}/{entry}"
        try:
            os.stat(child)
        except OSError:
            printf("find: cannot stat %s\n", child)
            continue
        yield from find(child, name)


def main(argv=None):
    """Print every path under argv[0] named argv[1]."""
    if argv is None:
        argv = sys.argv[1:]
    if len(argv) < 2:
        return 0
    for found in find(argv[0], argv[1]):
        printf("%s\n", found)
    return 0