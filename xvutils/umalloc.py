"""First-fit free-list allocator over a simulated program break."""

from __future__ import annotations

import bisect

HEADER_SIZE = 8
MIN_UNITS = 4096

_BASE = -1  # unit index of the zero-sized sentinel block


class OutOfMemory(MemoryError):
    """Raised when the program break cannot grow any further."""


class Heap:
    """Address-ordered circular free list with a roving start pointer.

    Addresses returned by :meth:`malloc` are byte addresses of the usable
    area, just past the block header.
    """

    def __init__(self, base_address: int = 0, capacity: int | None = None) -> None:
        self._base_address = base_address
        self._capacity_units = None if capacity is None else capacity // HEADER_SIZE
        self._brk = 0
        self._order: list[int] = []
        self._sizes: dict[int, int] = {}
        self._allocated: dict[int, int] = {}
        self._freep: int | None = None

    def _next(self, unit: int) -> int:
        i = bisect.bisect_left(self._order, unit)
        return self._order[(i + 1) % len(self._order)]

    def _remove(self, unit: int) -> None:
        self._order.remove(unit)
        del self._sizes[unit]

    def _insert(self, unit: int, size: int) -> None:
        bisect.insort(self._order, unit)
        self._sizes[unit] = size

    def _release(self, bp: int) -> None:
        size = self._allocated.pop(bp)
        p = self._order[bisect.bisect_left(self._order, bp) - 1]
        nxt = self._next(p)
        if bp + size == nxt:
            size += self._sizes[nxt]
            self._remove(nxt)
        if p + self._sizes[p] == bp:
            self._sizes[p] += size
        else:
            self._insert(bp, size)
        self._freep = p

    def _morecore(self, nunits: int) -> int | None:
        nunits = max(nunits, MIN_UNITS)
        if self._capacity_units is not None and self._brk + nunits > self._capacity_units:
            return None
        hp = self._brk
        self._brk += nunits
        self._allocated[hp] = nunits
        self._release(hp)
        return self._freep

    def malloc(self, nbytes: int) -> int:
        """Allocate ``nbytes`` bytes and return the address of the area."""
        if nbytes < 0:
            raise ValueError("size must not be negative")
        nunits = (nbytes + HEADER_SIZE - 1) // HEADER_SIZE + 1
        if self._freep is None:
            self._insert(_BASE, 0)
            self._freep = _BASE
        prevp = self._freep
        p = self._next(prevp)
        while True:
            size = self._sizes[p]
            if size >= nunits:
                if size == nunits:
                    self._remove(p)
                else:
                    self._sizes[p] = size - nunits
                    p += size - nunits
                self._allocated[p] = nunits
                self._freep = prevp
                return self._base_address + (p + 1) * HEADER_SIZE
            if p == self._freep:
                grown = self._morecore(nunits)
                if grown is None:
                    raise OutOfMemory(f"cannot allocate {nbytes} bytes")
                p = grown
            prevp = p
            p = self._next(p)

    def free(self, address: int) -> None:
        """Return an area obtained from :meth:`malloc` to the free list."""
        offset = address - self._base_address
        bp = offset // HEADER_SIZE - 1
        if offset % HEADER_SIZE or bp not in self._allocated:
            raise ValueError(f"address {address:#x} was not allocated")
        self._release(bp)

    def free_blocks(self) -> list[tuple[int, int]]:
        """Free blocks in address order as (header address, size in bytes)."""
        return [
            (self._base_address + unit * HEADER_SIZE, self._sizes[unit] * HEADER_SIZE)
            for unit in self._order
            if unit != _BASE
        ]