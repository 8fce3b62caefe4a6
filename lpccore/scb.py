"""Cortex-M0 System Control Block registers and field definitions."""

from __future__ import annotations

from dataclasses import dataclass

SCS_BASE = 0xE000E000
SYSTICK_BASE = SCS_BASE + 0x0010
NVIC_BASE = SCS_BASE + 0x0100
SCB_BASE = SCS_BASE + 0x0D00

CORTEX_M0_CPUID = 0x410CC200

SCB_CPUID_IMPLEMENTER_Pos = 24
SCB_CPUID_IMPLEMENTER_Msk = 0xFF << SCB_CPUID_IMPLEMENTER_Pos
SCB_CPUID_VARIANT_Pos = 20
SCB_CPUID_VARIANT_Msk = 0xF << SCB_CPUID_VARIANT_Pos
SCB_CPUID_ARCHITECTURE_Pos = 16
SCB_CPUID_ARCHITECTURE_Msk = 0xF << SCB_CPUID_ARCHITECTURE_Pos
SCB_CPUID_PARTNO_Pos = 4
SCB_CPUID_PARTNO_Msk = 0xFFF << SCB_CPUID_PARTNO_Pos
SCB_CPUID_REVISION_Pos = 0
SCB_CPUID_REVISION_Msk = 0xF << SCB_CPUID_REVISION_Pos

SCB_ICSR_NMIPENDSET_Pos = 31
SCB_ICSR_NMIPENDSET_Msk = 1 << SCB_ICSR_NMIPENDSET_Pos
SCB_ICSR_PENDSVSET_Pos = 28
SCB_ICSR_PENDSVSET_Msk = 1 << SCB_ICSR_PENDSVSET_Pos
SCB_ICSR_PENDSVCLR_Pos = 27
SCB_ICSR_PENDSVCLR_Msk = 1 << SCB_ICSR_PENDSVCLR_Pos
SCB_ICSR_PENDSTSET_Pos = 26
SCB_ICSR_PENDSTSET_Msk = 1 << SCB_ICSR_PENDSTSET_Pos
SCB_ICSR_PENDSTCLR_Pos = 25
SCB_ICSR_PENDSTCLR_Msk = 1 << SCB_ICSR_PENDSTCLR_Pos
SCB_ICSR_ISRPREEMPT_Pos = 23
SCB_ICSR_ISRPREEMPT_Msk = 1 << SCB_ICSR_ISRPREEMPT_Pos
SCB_ICSR_ISRPENDING_Pos = 22
SCB_ICSR_ISRPENDING_Msk = 1 << SCB_ICSR_ISRPENDING_Pos
SCB_ICSR_VECTPENDING_Pos = 12
SCB_ICSR_VECTPENDING_Msk = 0x1FF << SCB_ICSR_VECTPENDING_Pos
SCB_ICSR_VECTACTIVE_Pos = 0
SCB_ICSR_VECTACTIVE_Msk = 0x1FF << SCB_ICSR_VECTACTIVE_Pos

SCB_AIRCR_VECTKEY_Pos = 16
SCB_AIRCR_VECTKEY_Msk = 0xFFFF << SCB_AIRCR_VECTKEY_Pos
SCB_AIRCR_VECTKEYSTAT_Pos = 16
SCB_AIRCR_VECTKEYSTAT_Msk = 0xFFFF << SCB_AIRCR_VECTKEYSTAT_Pos
SCB_AIRCR_ENDIANESS_Pos = 15
SCB_AIRCR_ENDIANESS_Msk = 1 << SCB_AIRCR_ENDIANESS_Pos
SCB_AIRCR_SYSRESETREQ_Pos = 2
SCB_AIRCR_SYSRESETREQ_Msk = 1 << SCB_AIRCR_SYSRESETREQ_Pos
SCB_AIRCR_VECTCLRACTIVE_Pos = 1
SCB_AIRCR_VECTCLRACTIVE_Msk = 1 << SCB_AIRCR_VECTCLRACTIVE_Pos

SCB_SCR_SEVONPEND_Pos = 4
SCB_SCR_SEVONPEND_Msk = 1 << SCB_SCR_SEVONPEND_Pos
SCB_SCR_SLEEPDEEP_Pos = 2
SCB_SCR_SLEEPDEEP_Msk = 1 << SCB_SCR_SLEEPDEEP_Pos
SCB_SCR_SLEEPONEXIT_Pos = 1
SCB_SCR_SLEEPONEXIT_Msk = 1 << SCB_SCR_SLEEPONEXIT_Pos

SCB_CCR_STKALIGN_Pos = 9
SCB_CCR_STKALIGN_Msk = 1 << SCB_CCR_STKALIGN_Pos
SCB_CCR_UNALIGN_TRP_Pos = 3
SCB_CCR_UNALIGN_TRP_Msk = 1 << SCB_CCR_UNALIGN_TRP_Pos

AIRCR_VECTKEY = 0x5FA


@dataclass(frozen=True)
class CpuId:
    """Fields of the CPUID base register."""

    implementer: int
    variant: int
    architecture: int
    partno: int
    revision: int


def _field(value: int, mask: int, pos: int) -> int:
    return (value & mask) >> pos


def decode_cpuid(value: int) -> CpuId:
    """Split a CPUID register value into its fields."""
    return CpuId(
        implementer=_field(value, SCB_CPUID_IMPLEMENTER_Msk, SCB_CPUID_IMPLEMENTER_Pos),
        variant=_field(value, SCB_CPUID_VARIANT_Msk, SCB_CPUID_VARIANT_Pos),
        architecture=_field(value, SCB_CPUID_ARCHITECTURE_Msk, SCB_CPUID_ARCHITECTURE_Pos),
        partno=_field(value, SCB_CPUID_PARTNO_Msk, SCB_CPUID_PARTNO_Pos),
        revision=_field(value, SCB_CPUID_REVISION_Msk, SCB_CPUID_REVISION_Pos),
    )


class SystemControlBlock:
    """Register state of the System Control Block.

    ``shp`` holds the two system-handler priority words; word 0 is reserved.
    """

    def __init__(self) -> None:
        self.cpuid = CORTEX_M0_CPUID
        self.icsr = 0
        self.aircr = 0
        self.scr = 0
        self.ccr = 0
        self.shp = [0, 0]

    def system_reset(self) -> None:
        """Request a system reset by writing the keyed AIRCR value."""
        self.aircr = (AIRCR_VECTKEY << SCB_AIRCR_VECTKEY_Pos) | SCB_AIRCR_SYSRESETREQ_Msk