"""Teaching operating-system toolkit: utilities, shell parser, allocator, ELF and RISC-V helpers."""

__version__ = "0.1.0"