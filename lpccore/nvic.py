"""Cortex-M0 Nested Vectored Interrupt Controller."""

from __future__ import annotations

from typing import Optional

from lpccore.scb import SystemControlBlock

NVIC_PRIO_BITS = 2

# Core exception numbers (negative) that have a configurable priority or are
# otherwise referred to by the core functions.
NON_MASKABLE_INT_IRQN = -14
HARD_FAULT_IRQN = -13
SVCALL_IRQN = -5
PENDSV_IRQN = -2
SYSTICK_IRQN = -1

_UINT_MASK = 0xFFFFFFFF
_IPR_WORDS = 8


def _bit(irq: int) -> int:
    return 1 << (irq & 0x1F)


def _bit_shift(irq: int) -> int:
    return (irq & 0x03) * 8


def _shp_index(irq: int) -> int:
    return (((irq & 0x0F) - 8) & _UINT_MASK) >> 2


def _ip_index(irq: int) -> int:
    return (irq & _UINT_MASK) >> 2


class Nvic:
    """Register state of the interrupt controller.

    ``enabled`` and ``pending`` are the 32-bit enable and pending masks;
    ``ipr`` holds the eight interrupt priority words.  Priorities of core
    exceptions live in the system control block's ``shp`` words.
    """

    def __init__(self, scb: Optional[SystemControlBlock] = None) -> None:
        self.scb = scb if scb is not None else SystemControlBlock()
        self.enabled = 0
        self.pending = 0
        self.ipr = [0] * _IPR_WORDS

    def enable_irq(self, irq: int) -> None:
        """Enable a device interrupt."""
        self.enabled |= _bit(irq)

    def disable_irq(self, irq: int) -> None:
        """Disable a device interrupt."""
        self.enabled &= ~_bit(irq) & _UINT_MASK

    def get_pending_irq(self, irq: int) -> int:
        """Return 1 if the interrupt is pending, otherwise 0."""
        return 1 if self.pending & _bit(irq) else 0

    def set_pending_irq(self, irq: int) -> None:
        """Mark an interrupt pending."""
        self.pending |= _bit(irq)

    def clear_pending_irq(self, irq: int) -> None:
        """Clear an interrupt's pending state."""
        self.pending &= ~_bit(irq) & _UINT_MASK

    def _words(self, irq: int) -> tuple[list[int], int]:
        if irq < 0:
            words, index = self.scb.shp, _shp_index(irq)
        else:
            words, index = self.ipr, _ip_index(irq)
        if index >= len(words):
            raise ValueError(f"interrupt {irq} has no configurable priority")
        return words, index

    def set_priority(self, irq: int, priority: int) -> None:
        """Set an interrupt's priority; only the top priority bits are kept."""
        words, index = self._words(irq)
        shift = _bit_shift(irq)
        field = ((priority << (8 - NVIC_PRIO_BITS)) & 0xFF) << shift
        words[index] = ((words[index] & ~(0xFF << shift)) | field) & _UINT_MASK

    def get_priority(self, irq: int) -> int:
        """Read an interrupt's priority.

        The word is shifted down to the interrupt's byte without masking, so
        priorities held in higher bytes of the same word appear above it.
        """
        words, index = self._words(irq)
        return (words[index] >> _bit_shift(irq)) >> (8 - NVIC_PRIO_BITS)