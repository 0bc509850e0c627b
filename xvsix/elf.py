"""Reading and writing the ELF file and program headers."""

import enum
import struct
from dataclasses import dataclass
from typing import ClassVar

ELF_MAGIC = 0x464C457F  # "\x7FELF" in little endian

ELF_PROG_LOAD = 1

_EHDR = struct.Struct("<I12sHHIQQQIHHHHHH")
_PHDR = struct.Struct("<IIQQQQQQ")


class ElfFormatError(ValueError):
    """Raised when bytes do not hold a well-formed ELF structure."""


class ProgFlag(enum.IntFlag):
    """Permission bits of a program header."""

    EXEC = 1
    WRITE = 2
    READ = 4


@dataclass
class ElfHeader:
    """The ELF file header."""

    SIZE: ClassVar[int] = _EHDR.size

    magic: int = ELF_MAGIC
    elf: bytes = bytes(12)
    type: int = 0
    machine: int = 0
    version: int = 0
    entry: int = 0
    phoff: int = 0
    shoff: int = 0
    flags: int = 0
    ehsize: int = 0
    phentsize: int = 0
    phnum: int = 0
    shentsize: int = 0
    shnum: int = 0
    shstrndx: int = 0

    @classmethod
    def parse(cls, data):
        """Decode a header from the start of data."""
        if len(data) < cls.SIZE:
            raise ElfFormatError("truncated ELF header")
        header = cls(*_EHDR.unpack_from(data))
        if header.magic != ELF_MAGIC:
            raise ElfFormatError(f"bad ELF magic {header.magic:#x}")
        return header

    def pack(self):
        """Encode the header to bytes."""
        return _EHDR.pack(
            self.magic, self.elf, self.type, self.machine, self.version,
            self.entry, self.phoff, self.shoff, self.flags, self.ehsize,
            self.phentsize, self.phnum, self.shentsize, self.shnum,
            self.shstrndx,
        )


@dataclass
class ProgramHeader:
    """An ELF program (segment) header."""

    SIZE: ClassVar[int] = _PHDR.size

    type: int = 0
    flags: int = 0
    off: int = 0
    vaddr: int = 0
    paddr: int = 0
    filesz: int = 0
    memsz: int = 0
    align: int = 0

    @classmethod
    def parse(cls, data):
        """Decode a program header from the start of data."""
        if len(data) < cls.SIZE:
            raise ElfFormatError("truncated program header")
        return cls(*_PHDR.unpack_from(data))

    def pack(self):
        """Encode the program header to bytes."""
        return _PHDR.pack(
            self.type, self.flags, self.off, self.vaddr, self.paddr,
            self.filesz, self.memsz, self.align,
        )

    def is_loadable(self):
        """True if this segment is to be loaded into memory."""
        return self.type == ELF_PROG_LOAD


def program_headers(data):
    """Return the program headers of the ELF image in data."""
    header = ElfHeader.parse(data)
    headers = []
    for i in range(header.phnum):
        start = header.phoff + i * ProgramHeader.SIZE
        headers.append(ProgramHeader.parse(data[start:start + ProgramHeader.SIZE]))
    return headers