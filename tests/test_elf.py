import pytest

from xvsix.elf import (
    ELF_MAGIC,
    ElfFormatError,
    ElfHeader,
    ProgFlag,
    ProgramHeader,
    program_headers,
)


def _image(phs):
    header = ElfHeader(entry=0x1000, phoff=ElfHeader.SIZE, phnum=len(phs))
    return header.pack() + b"".join(ph.pack() for ph in phs)


def test_header_sizes():
    assert len(ElfHeader().pack()) == 64
    assert len(ProgramHeader().pack()) == 56
    assert ElfHeader.SIZE == 64
    assert ProgramHeader.SIZE == 56


def test_magic_bytes_on_the_wire():
    assert ElfHeader().pack()[:4] == b"\x7fELF"


def test_header_round_trip():
    header = ElfHeader(type=2, machine=243, version=1, entry=0x1000, phoff=64, phnum=2)
    parsed = ElfHeader.parse(header.pack())
    assert parsed == header
    assert parsed.magic == ELF_MAGIC


def test_bad_magic_rejected():
    data = ElfHeader(magic=0x12345678).pack()
    with pytest.raises(ElfFormatError):
        ElfHeader.parse(data)


def test_truncated_header_rejected():
    with pytest.raises(ElfFormatError):
        ElfHeader.parse(ElfHeader().pack()[:-1])


def test_program_header_round_trip():
    ph = ProgramHeader(type=1, flags=ProgFlag.READ | ProgFlag.EXEC, off=0x1000,
                       vaddr=0, filesz=200, memsz=300, align=0x1000)
    assert ProgramHeader.parse(ph.pack()) == ph


def test_is_loadable():
    assert ProgramHeader(type=1).is_loadable()
    assert not ProgramHeader(type=2).is_loadable()


def test_program_headers_lists_every_segment():
    phs = [ProgramHeader(type=1, vaddr=0), ProgramHeader(type=1, vaddr=0x2000, flags=ProgFlag.WRITE)]
    assert program_headers(_image(phs)) == phs


def test_program_headers_truncated_table():
    phs = [ProgramHeader(type=1)]
    data = ElfHeader(phoff=ElfHeader.SIZE, phnum=2).pack() + phs[0].pack()
    with pytest.raises(ElfFormatError):
        program_headers(data)


def test_prog_flags():
    ph = ProgramHeader(flags=ProgFlag.EXEC | ProgFlag.WRITE | ProgFlag.READ)
    assert ProgramHeader.parse(ph.pack()).flags == 7