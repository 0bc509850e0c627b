# xvsix

A small toolkit for learning how a teaching operating system is put
together, usable from Python and from the command line.

It contains:

- **Machine constants and address arithmetic** for RISC-V Sv39 paging
  (`xvsix.riscv`: `pg_round_up`, `pg_round_down`, `pa_to_pte`,
  `pte_to_pa`, `pte_flags`, `px_shift`, `px`, `make_satp`, `PteFlag`),
  the physical memory layout of the `virt` board (`xvsix.memlayout`:
  `kstack`, `clint_mtimecmp`, the `plic_*` register helpers), and system
  parameters with the `OpenFlag` open-mode bits (`xvsix.params`).
- **ELF header reading and writing** (`xvsix.elf`): `ElfHeader`,
  `ProgramHeader` and `program_headers()`, raising `ElfFormatError` on a
  bad magic number or truncated data.
- **A minimal printf** (`xvsix.printf`): `format_string`, `fprintf` and
  `printf`, understanding `%d %l %x %p %s %c %%`; unknown conversions are
  printed as they are.
- **Unix-style utilities**: `grep` (with `^ . * $`), `wc`, `cat`, `echo`
  and `find`.
- **A shell command parser** (`xvsix.shell`): `parse_command()` and
  `Tokenizer`, producing a tree of `ExecCmd`, `RedirCmd`, `PipeCmd`,
  `ListCmd` and `BackCmd`.
- **A first-fit free-list allocator** over a simulated heap
  (`xvsix.umalloc.Allocator`).
- **The Park–Miller random number generator** (`xvsix.prng`: `do_rand`,
  `ParkMiller`).
- **Exercise material**: a tiny assertion library (`xvsix.rhtest`) and a
  capacity-doubling `ArrayList` (`xvsix.arraylist`) with a self-test.

## Installation

```
pip install .
```

Python 3.10 or newer is required; there are no runtime dependencies.

## Command line

Each utility is installed under an `xv-` prefix so it never shadows the
tools already on your system:

```
xv-echo hello world
xv-cat notes.txt
xv-grep '^def' module.py
xv-wc notes.txt
xv-find . README.md
xv-arraylist
```

`xv-grep`, `xv-wc` and `xv-cat` read standard input when no file is
given. `xv-find DIR NAME` prints every path under `DIR` whose last
component is `NAME`. `xv-arraylist` runs the `ArrayList` self-test,
printing one line per check, and exits with status 1 if a check fails.

## Library use

```python
from xvsix.grep import match
from xvsix.shell import parse_command
from xvsix.printf import format_string
from xvsix.riscv import pg_round_up, px
from xvsix.umalloc import Allocator
from xvsix.prng import ParkMiller

match("^a.*c$", "abbbc")             # True
tree = parse_command("ls | grep x > out; echo done &")
format_string("%d %s", 42, "items")  # "42 items"
pg_round_up(4097)                    # 8192
px(2, 0x40000000)                    # top-level page-table index

heap = Allocator(limit=1 << 20)
block = heap.malloc(100)
heap.free(block)

rng = ParkMiller(seed=1)
rng.next()
```

Shell syntax errors raise `ShellSyntaxError`; `Allocator.malloc` raises
`MemoryError` when the heap limit is reached; the assertion helpers in
`xvsix.rhtest` raise `RhAssertionError`; `ArrayList.get_at` raises
`IndexError` for a position out of range.

## What it does not do

- The shell module only parses command lines; it does not run commands,
  open redirection files or create pipes.
- There are no commands for creating directories, removing or linking
  files, signalling processes or sleeping; use your system's own tools.
- The allocator manages a simulated heap of numbered addresses, not real
  memory.

## Running the tests

```
pip install ".[test]"
pytest
```