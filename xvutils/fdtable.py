"""Per-process table of open file descriptors with dup and dup2 semantics."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from xvutils.constants import NOFILE


class BadDescriptor(OSError):
    """Raised for a descriptor that is out of range or not open."""


class TableFull(OSError):
    """Raised when no free descriptor slot is left."""


@dataclass(eq=False)
class OpenFile:
    """An open file shared by every descriptor that refers to it.

    ``refs`` counts the descriptors holding the file; the file is closed
    once the last of them lets go.
    """

    name: str
    readable: bool = True
    writable: bool = True
    refs: int = 0

    @property
    def is_open(self) -> bool:
        """True while at least one descriptor refers to the file."""
        return self.refs > 0

    def _acquire(self) -> None:
        self.refs += 1

    def _release(self) -> None:
        if self.refs < 1:
            raise RuntimeError(f"file {self.name!r} released more often than held")
        self.refs -= 1


class FileDescriptorTable:
    """Fixed-size descriptor table; the lowest free slot is used first."""

    def __init__(self, size: int = NOFILE) -> None:
        if size <= 0:
            raise ValueError("table size must be positive")
        self._slots: list[OpenFile | None] = [None] * size

    def __len__(self) -> int:
        return sum(1 for f in self._slots if f is not None)

    def __iter__(self) -> Iterator[int]:
        """Iterate over the open descriptors in ascending order."""
        return (fd for fd, f in enumerate(self._slots) if f is not None)

    @property
    def size(self) -> int:
        """Number of slots in the table."""
        return len(self._slots)

    def _in_range(self, fd: int) -> bool:
        return 0 <= fd < len(self._slots)

    def get(self, fd: int) -> OpenFile:
        """The file behind descriptor ``fd``."""
        if not self._in_range(fd):
            raise BadDescriptor(f"descriptor {fd} out of range")
        file = self._slots[fd]
        if file is None:
            raise BadDescriptor(f"descriptor {fd} is not open")
        return file

    def allocate(self, file: OpenFile) -> int:
        """Install ``file`` in the lowest free slot and return its descriptor."""
        for fd, slot in enumerate(self._slots):
            if slot is None:
                self._slots[fd] = file
                file._acquire()
                return fd
        raise TableFull("no free file descriptor")

    def dup(self, fd: int) -> int:
        """Make a new descriptor referring to the same file as ``fd``."""
        return self.allocate(self.get(fd))

    def dup2(self, oldfd: int, newfd: int) -> int:
        """Make ``newfd`` refer to the file of ``oldfd``, closing it first if open.

        If ``newfd`` already refers to that same file nothing changes.
        """
        file = self.get(oldfd)
        if not self._in_range(newfd):
            raise BadDescriptor(f"descriptor {newfd} out of range")
        current = self._slots[newfd]
        if current is file:
            return newfd
        if current is not None:
            current._release()
        self._slots[newfd] = file
        file._acquire()
        return newfd

    def close(self, fd: int) -> None:
        """Release descriptor ``fd``."""
        file = self.get(fd)
        self._slots[fd] = None
        file._release()