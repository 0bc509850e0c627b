"""RISC-V Sv39 paging arithmetic and control-register bit definitions."""

import enum

_U64 = (1 << 64) - 1

# Machine Status Register, mstatus
MSTATUS_MPP_MASK = 3 << 11
MSTATUS_MPP_M = 3 << 11
MSTATUS_MPP_S = 1 << 11
MSTATUS_MPP_U = 0 << 11
MSTATUS_MIE = 1 << 3

# Supervisor Status Register, sstatus
SSTATUS_SPP = 1 << 8
SSTATUS_SPIE = 1 << 5
SSTATUS_UPIE = 1 << 4
SSTATUS_SIE = 1 << 1
SSTATUS_UIE = 1 << 0

# Supervisor Interrupt Enable
SIE_SEIE = 1 << 9
SIE_STIE = 1 << 5
SIE_SSIE = 1 << 1

# Machine-mode Interrupt Enable
MIE_MEIE = 1 << 11
MIE_MTIE = 1 << 7
MIE_MSIE = 1 << 3

SATP_SV39 = 8 << 60

PGSIZE = 4096  # bytes per page
PGSHIFT = 12  # bits of offset within a page

PXMASK = 0x1FF  # 9 bits

# One beyond the highest usable virtual address; one bit less than
# Sv39 allows, so addresses never need sign extension.
MAXVA = 1 << (9 + 9 + 9 + 12 - 1)


class PteFlag(enum.IntFlag):
    """Page-table entry permission bits."""

    V = 1 << 0  # valid
    R = 1 << 1
    W = 1 << 2
    X = 1 << 3
    U = 1 << 4  # user can access


def pg_round_up(sz):
    """Round a size up to the next page boundary."""
    return ((sz + PGSIZE - 1) & ~(PGSIZE - 1)) & _U64


def pg_round_down(a):
    """Round an address down to its page boundary."""
    return (a & ~(PGSIZE - 1)) & _U64


def pa_to_pte(pa):
    """Shift a physical address into the position it takes in a PTE."""
    return (((pa & _U64) >> 12) << 10) & _U64


def pte_to_pa(pte):
    """Extract the physical address held in a PTE."""
    return (((pte & _U64) >> 10) << 12) & _U64


def pte_flags(pte):
    """Return the low ten flag bits of a PTE."""
    return pte & 0x3FF


def px_shift(level):
    """Bit position of the page-table index for the given level."""
    return PGSHIFT + 9 * level


def px(level, va):
    """Extract the 9-bit page-table index for a level from a virtual address."""
    return ((va & _U64) >> px_shift(level)) & PXMASK


def make_satp(pagetable):
    """Build a satp value selecting Sv39 with the given root page table."""
    return SATP_SV39 | ((pagetable & _U64) >> 12)