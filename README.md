# xvutils

Python models of the user programs and some kernel bookkeeping of a small
Unix-like teaching system. It provides a formatter, an allocator, a grep, a
shell parser, a file descriptor table and a lazily grown address space.

## Command line

The package installs one command, a minimal grep. Its patterns support only
the `^`, `.`, `*` and `$` operators:

```
xvutils-grep pattern [file ...]
```

With no files named, it reads standard input. Matching lines go to standard
output. A final line that has no trailing newline is never printed. If the
pattern is missing, the command prints a usage line on standard error. If a
file cannot be opened, it prints `grep: cannot open <file>` and stops.

## Library

- `xvutils.constants` holds the system limits (`NOFILE`, `MAXARG`, ...), the
  open flags (`O_RDONLY`, `O_WRONLY`, `O_RDWR`, `O_CREATE`), the trap and IRQ
  numbers, and the memory layout (`KERNBASE`, `PHYSTOP`, ...). It also
  defines:
  - the enums `ProcPrio` and `FileType`;
  - the dataclasses `Stat` and `RtcDate`;
  - `v2p()` and `p2v()`, which do 32-bit address translation.
- `xvutils.status` encodes and decodes exit statuses. `encode_exit(code)` and
  `encode_trap(trapno)` build a status. `wifexited()`, `wexitstatus()`,
  `wifsignaled()` and `wexittrap()` decode one.
- `xvutils.printf` has `sprintf(fmt, *args)` and `printf(stream, fmt, *args)`.
  They understand only `%d %x %p %s %c %%`:
  - `%x` and `%p` print upper-case hex.
  - `%s` of `None` prints `(null)`.
  - An unknown specifier is copied through unchanged.
  - Too few arguments raise `TypeError`.
- `xvutils.ulib` has two functions:
  - `atoi(text)` parses leading digits only and takes no sign.
  - `gets(stream, limit)` reads one line of at most `limit - 1` characters and
    keeps the terminator.
- `xvutils.umalloc` has `Heap(base_address=0, capacity=None)`, a first-fit
  allocator over a free list kept in address order.
  - `malloc()` returns addresses. `free()` coalesces neighbouring blocks.
  - `free_blocks()` lists the free blocks as `(address, size)` pairs.
  - The heap grows by at least 4096 units of 8 bytes at a time. When it cannot
    grow within `capacity`, it raises `OutOfMemory`.
  - Freeing an address that was not allocated raises `ValueError`.
- `xvutils.grep` has `match(pattern, text)`, `grep(pattern, stream, out)` and
  the command's `main(argv=None)`.
- `xvutils.textutils` has four helpers:
  - `cat(stream, out)`;
  - `wc(stream)`, which returns a `WordCount` of lines, words and chars;
  - `echo(args)`, which returns the text to print;
  - `fmtname(path)`, which gives the last path component blank-padded to 14
    characters.
- `xvutils.shell` has `tokenize(line)` and `parse_command(line)`. They build a
  tree of `ExecCmd`, `RedirCmd`, `PipeCmd`, `ListCmd` and `BackCmd` from words,
  `|`, `;`, `&`, `<`, `>`, `>>` and `( )`.
  - Bad input raises `ShellSyntaxError`.
  - So do ten or more arguments in one command.
- `xvutils.fdtable` has `FileDescriptorTable(size=16)`, which holds shared,
  reference-counted `OpenFile` objects.
  - Its methods are `get()`, `allocate()` (lowest free slot first), `dup()`,
    `dup2()` and `close()`.
  - An invalid descriptor raises `BadDescriptor`. A table with no free slot
    raises `TableFull`.
  - `dup2(fd, fd)` on the same file changes nothing. Otherwise `dup2()`
    silently closes an open target first.
- `xvutils.memory` has `AddressSpace(size=0, guard_page=None, max_pages=None)`.
  - `sbrk(n)` moves the break lazily and returns the old break. It raises
    `SbrkError` past `KERNBASE` or below zero. Shrinking frees the pages above
    the new break.
  - `handle_fault(address, err=0)` returns a `FaultKind`. It checks in this
    order: fault at the break, permission error bit, guard page, kernel
    address, out of pages. Only the last outcome, `ASSIGNED`, maps a zeroed
    page. Every other outcome sets `killed`.
  - `is_mapped()` reports whether an address has a page.
  - `copy()` duplicates the mapped pages below the break. The copy shares the
    page budget.
  - Bytes of mapped pages can be read and written with `space[address]`.

```python
from xvutils.grep import match
from xvutils.status import encode_exit, wexitstatus, wifexited
from xvutils.shell import parse_command
from xvutils.printf import sprintf

match("^a.c$", "abc")            # True
status = encode_exit(3)
wifexited(status), wexitstatus(status)   # (True, 3)
tree = parse_command("ls | wc")  # a PipeCmd
sprintf("%d/%d/%d", 1, 2, 2024)  # '1/2/2024'
```

## What it does not do

- There is no kernel, file system, process scheduler or disk image. The
  descriptor table and address space are standalone bookkeeping models.
- The shell only tokenizes and parses command lines. It does not run them,
  and there is no interactive shell.
- `cat`, `wc`, `echo` and `fmtname` are library functions only. `grep` is the
  only installed command.

## Tests

```
pip install -e ".[test]"
pytest
```