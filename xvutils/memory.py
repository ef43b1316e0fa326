"""User address space with lazily allocated heap pages.

Growing the program break only raises the recorded size; physical pages
are attached on the first page fault that touches them.  Shrinking the
break releases the pages above the new size.
"""

from __future__ import annotations

from enum import Enum

from xvutils.constants import KERNBASE

PGSIZE = 4096
PTE_P = 0x001

_UINT_MASK = 0xFFFFFFFF


def _pg_round_down(address: int) -> int:
    return address & ~(PGSIZE - 1)


def _pg_round_up(address: int) -> int:
    return (address + PGSIZE - 1) & ~(PGSIZE - 1)


class FaultKind(Enum):
    """Outcome of a page fault; the value is the reason the kernel reports."""

    MAP_IN_SZ = "map in sz"
    PERMISSION_DENIED = "permission denied"
    GUARD_PAGE = "map in guardpage"
    KERNEL = "map in kernel"
    OUT_OF_MEMORY = "out of memory"
    ASSIGNED = "memory assigned"

    @property
    def kills(self) -> bool:
        """True if a fault of this kind kills the faulting process."""
        return self is not FaultKind.ASSIGNED


class SbrkError(MemoryError):
    """Raised when the program break cannot be moved as asked."""


class _FramePool:
    """Budget of physical pages shared by address spaces copied from one another."""

    def __init__(self, limit: int | None) -> None:
        self.limit = limit
        self.used = 0

    def take(self) -> bool:
        if self.limit is not None and self.used >= self.limit:
            return False
        self.used += 1
        return True

    def give(self) -> None:
        self.used -= 1


class AddressSpace:
    """The user part of a process's memory.

    ``size`` is the program break, ``guard_page`` the inaccessible page
    below the user stack, and ``max_pages`` an optional limit on physical
    pages, shared with every copy made by :meth:`copy`.
    """

    def __init__(
        self,
        size: int = 0,
        guard_page: int | None = None,
        max_pages: int | None = None,
    ) -> None:
        if not 0 <= size < KERNBASE:
            raise ValueError(f"size {size:#x} outside user memory")
        self.size = size
        self.guard_page = None if guard_page is None else _pg_round_down(guard_page)
        self.killed = False
        self._pool = _FramePool(max_pages)
        self._pages: dict[int, bytearray] = {}

    def _free_page(self, page: int) -> None:
        del self._pages[page]
        self._pool.give()

    def sbrk(self, n: int) -> int:
        """Move the program break by ``n`` bytes and return the old break."""
        addr = self.size
        if n > 0:
            if addr + n >= KERNBASE:
                raise SbrkError(f"cannot grow by {n} bytes past the kernel base")
            self.size += n
        elif n < 0:
            new_size = addr + n
            if new_size < 0:
                raise SbrkError(f"cannot shrink by {-n} bytes below zero")
            low = _pg_round_up(new_size)
            for page in [p for p in self._pages if low <= p < addr]:
                self._free_page(page)
            self.size = new_size
        return addr

    def handle_fault(self, address: int, err: int = 0) -> FaultKind:
        """Resolve a page fault at ``address`` with hardware error code ``err``.

        On success a zeroed page is mapped; otherwise the process is marked
        killed.  The checks run in the kernel's order.
        """
        addr = _pg_round_down(address & _UINT_MASK)
        if addr == self.size:
            kind = FaultKind.MAP_IN_SZ
        elif err & PTE_P:
            kind = FaultKind.PERMISSION_DENIED
        elif addr == self.guard_page:
            kind = FaultKind.GUARD_PAGE
        elif addr >= KERNBASE:
            kind = FaultKind.KERNEL
        elif not self._pool.take():
            kind = FaultKind.OUT_OF_MEMORY
        else:
            if addr in self._pages:
                self._pool.give()
                raise RuntimeError("remap")
            self._pages[addr] = bytearray(PGSIZE)
            return FaultKind.ASSIGNED
        self.killed = True
        return kind

    def is_mapped(self, address: int) -> bool:
        """True if the page holding ``address`` has physical memory."""
        return _pg_round_down(address & _UINT_MASK) in self._pages

    def copy(self) -> AddressSpace:
        """A child copy: every mapped page below the break, duplicated."""
        child = AddressSpace(self.size, self.guard_page)
        child._pool = self._pool
        for page in sorted(p for p in self._pages if p < self.size):
            if not self._pool.take():
                for owned in list(child._pages):
                    child._free_page(owned)
                raise MemoryError("out of physical pages while copying")
            child._pages[page] = bytearray(self._pages[page])
        return child

    def _page_for(self, address: int) -> bytearray:
        page = self._pages.get(_pg_round_down(address & _UINT_MASK))
        if page is None:
            raise KeyError(f"address {address:#x} is not mapped")
        return page

    def __getitem__(self, address: int) -> int:
        return self._page_for(address)[address % PGSIZE]

    def __setitem__(self, address: int, value: int) -> None:
        self._page_for(address)[address % PGSIZE] = value & 0xFF