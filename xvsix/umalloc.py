"""A first-fit free-list memory allocator over a simulated growing heap."""

from __future__ import annotations

from typing import Dict, Optional, Set

HEADER_SIZE = 16  # bytes per block header, and the allocation unit
MIN_MORECORE = 4096  # fewest units requested from the heap at once


class Allocator:
    """Hands out and takes back blocks of a heap that grows up to limit bytes.

    Addresses are byte offsets into the simulated memory; unit 0 holds the
    empty sentinel block and the heap starts right after it.
    """

    def __init__(self, limit=None):
        if limit is not None and limit < 0:
            raise ValueError("limit must not be negative")
        self._top = None if limit is None else 1 + limit // HEADER_SIZE
        self._brk = 1
        self._size: Dict[int, int] = {}
        self._next: Dict[int, int] = {}
        self._allocated: Set[int] = set()
        self._freep: Optional[int] = None

    def _release(self, bp):
        p = self._freep
        nxt = self._next
        size = self._size
        while not (p < bp < nxt[p]):
            if p >= nxt[p] and (bp > p or bp < nxt[p]):
                break
            p = nxt[p]
        q = nxt[p]
        if bp + size[bp] == q:
            size[bp] += size[q]
            nxt[bp] = nxt[q]
            del size[q], nxt[q]
        else:
            nxt[bp] = q
        if p + size[p] == bp:
            size[p] += size[bp]
            nxt[p] = nxt[bp]
            del size[bp], nxt[bp]
        else:
            nxt[p] = bp
        self._freep = p

    def _morecore(self, nu):
        nu = max(nu, MIN_MORECORE)
        if self._top is not None and self._brk + nu > self._top:
            return None
        hp = self._brk
        self._brk += nu
        self._size[hp] = nu
        self._release(hp)
        return self._freep

    def malloc(self, nbytes):
        """Return the address of a new block of at least nbytes bytes."""
        if nbytes < 0:
            raise ValueError("size must not be negative")
        nunits = (nbytes + HEADER_SIZE - 1) // HEADER_SIZE + 1
        if self._freep is None:
            self._next[0] = 0
            self._size[0] = 0
            self._freep = 0
        prevp = self._freep
        p = self._next[prevp]
        while True:
            if self._size[p] >= nunits:
                if self._size[p] == nunits:
                    self._next[prevp] = self._next[p]
                    del self._next[p]
                else:
                    self._size[p] -= nunits
                    p += self._size[p]
                    self._size[p] = nunits
                self._freep = prevp
                self._allocated.add(p)
                return (p + 1) * HEADER_SIZE
            if p == self._freep:
                p = self._morecore(nunits)
                if p is None:
                    raise MemoryError(f"cannot allocate {nbytes} bytes")
            prevp = p
            p = self._next[p]

    def free(self, addr):
        """Return a block obtained from malloc to the free list."""
        if addr % HEADER_SIZE:
            raise ValueError(f"address {addr} was not returned by malloc")
        bp = addr // HEADER_SIZE - 1
        if bp not in self._allocated:
            raise ValueError(f"address {addr} was not returned by malloc")
        self._allocated.remove(bp)
        self._release(bp)

    def free_units(self):
        """Total number of header-sized units on the free list."""
        return sum(size for block, size in self._size.items() if block in self._next)