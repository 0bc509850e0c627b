"""A list of integers that doubles its capacity when it fills up."""

import sys

from .printf import printf
from .rhtest import (
    RhAssertionError,
    rhassert,
    rhassert_int_equals,
)

DEF_ARRAY_LIST_CAPACITY = 4


class ArrayList:
    """An integer list with an explicit, doubling capacity."""

    def __init__(self):
        self.capacity = DEF_ARRAY_LIST_CAPACITY
        self._values = []

    @property
    def size(self):
        """Number of elements held."""
        return len(self._values)

    def get_at(self, pos):
        """Return the element at pos; raises IndexError when pos is out of range."""
        if not 0 <= pos < len(self._values):
            raise IndexError(f"position {pos} out of range")
        return self._values[pos]

    def resize(self):
        """Double the capacity, keeping every element."""
        self.capacity *= 2

    def append(self, val):
        """Add val at the end, doubling the capacity if the list is full."""
        if len(self._values) == self.capacity:
            self.resize()
        self._values.append(val)

    def __len__(self):
        return len(self._values)

    def __iter__(self):
        return iter(self._values)

    def __str__(self):
        return "[" + "".join(f"{v}, " for v in self._values) + "]"


def _self_test():
    al = ArrayList()
    rhassert(al is not None)
    rhassert_int_equals(al.size, 0)
    rhassert_int_equals(al.capacity, DEF_ARRAY_LIST_CAPACITY)

    al.append(1)
    al.append(2)
    rhassert_int_equals(al.size, 2)
    rhassert_int_equals(al.capacity, DEF_ARRAY_LIST_CAPACITY)

    rhassert_int_equals(al.get_at(0), 1)
    rhassert_int_equals(al.get_at(1), 2)
    try:
        al.get_at(5)
        out_of_range = False
    except IndexError:
        out_of_range = True
    rhassert(out_of_range)

    al.append(3)
    al.append(4)
    rhassert_int_equals(al.size, 4)
    rhassert_int_equals(al.capacity, DEF_ARRAY_LIST_CAPACITY)

    al.append(5)
    rhassert_int_equals(al.size, 5)
    rhassert_int_equals(al.capacity, 2 * DEF_ARRAY_LIST_CAPACITY)

    for pos, expected in enumerate((1, 2, 3, 4, 5)):
        rhassert_int_equals(al.get_at(pos), expected)


def main(argv=None):
    """Run the array list self-test; returns 0 on success, 1 on failure."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        _self_test()
    except RhAssertionError:
        return 1
    printf("")
    return 0