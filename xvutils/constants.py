"""System-wide limits, flags, memory layout and trap numbers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

# Limits
NPROC = 64
KSTACKSIZE = 4096
NCPU = 8
NOFILE = 16
NFILE = 100
NINODE = 50
NDEV = 10
ROOTDEV = 1
MAXARG = 32
MAXOPBLOCKS = 10
LOGSIZE = MAXOPBLOCKS * 3
NBUF = MAXOPBLOCKS * 3
FSSIZE = 1000

# Open flags
O_RDONLY = 0x000
O_WRONLY = 0x001
O_RDWR = 0x002
O_CREATE = 0x200

# Memory layout
EXTMEM = 0x100000
PHYSTOP = 0xE000000
DEVSPACE = 0xFE000000
KERNBASE = 0x80000000
KERNLINK = KERNBASE + EXTMEM

_UINT_MASK = 0xFFFFFFFF

# Processor-defined traps
T_DIVIDE = 0
T_DEBUG = 1
T_NMI = 2
T_BRKPT = 3
T_OFLOW = 4
T_BOUND = 5
T_ILLOP = 6
T_DEVICE = 7
T_DBLFLT = 8
T_TSS = 10
T_SEGNP = 11
T_STACK = 12
T_GPFLT = 13
T_PGFLT = 14
T_FPERR = 16
T_ALIGN = 17
T_MCHK = 18
T_SIMDERR = 19

T_SYSCALL = 64
T_DEFAULT = 500
T_IRQ0 = 32

IRQ_TIMER = 0
IRQ_KBD = 1
IRQ_COM1 = 4
IRQ_IDE = 14
IRQ_ERROR = 19
IRQ_SPURIOUS = 31


class ProcPrio(IntEnum):
    """Scheduling priority of a process."""

    NORM_PRIO = 0
    HI_PRIO = 1


class FileType(IntEnum):
    """Kind of object an inode describes."""

    DIR = 1
    FILE = 2
    DEV = 3


@dataclass(frozen=True)
class Stat:
    """File status as reported by fstat."""

    type: FileType
    dev: int
    ino: int
    nlink: int
    size: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "type", FileType(self.type))


@dataclass
class RtcDate:
    """Wall-clock date and time read from the real-time clock."""

    second: int
    minute: int
    hour: int
    day: int
    month: int
    year: int


def v2p(address: int) -> int:
    """Translate a kernel virtual address to a physical address."""
    return (address - KERNBASE) & _UINT_MASK


def p2v(address: int) -> int:
    """Translate a physical address to a kernel virtual address."""
    return (address + KERNBASE) & _UINT_MASK