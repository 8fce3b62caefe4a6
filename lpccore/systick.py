"""Cortex-M0 system tick timer."""

from __future__ import annotations

from typing import Optional

from lpccore.nvic import NVIC_PRIO_BITS, SYSTICK_IRQN, Nvic

SysTick_CTRL_COUNTFLAG_Pos = 16
SysTick_CTRL_COUNTFLAG_Msk = 1 << SysTick_CTRL_COUNTFLAG_Pos
SysTick_CTRL_CLKSOURCE_Pos = 2
SysTick_CTRL_CLKSOURCE_Msk = 1 << SysTick_CTRL_CLKSOURCE_Pos
SysTick_CTRL_TICKINT_Pos = 1
SysTick_CTRL_TICKINT_Msk = 1 << SysTick_CTRL_TICKINT_Pos
SysTick_CTRL_ENABLE_Pos = 0
SysTick_CTRL_ENABLE_Msk = 1 << SysTick_CTRL_ENABLE_Pos

SysTick_LOAD_RELOAD_Pos = 0
SysTick_LOAD_RELOAD_Msk = 0xFFFFFF << SysTick_LOAD_RELOAD_Pos

SysTick_VAL_CURRENT_Pos = 0
SysTick_VAL_CURRENT_Msk = 0xFFFFFF << SysTick_VAL_CURRENT_Pos

SysTick_CALIB_NOREF_Pos = 31
SysTick_CALIB_NOREF_Msk = 1 << SysTick_CALIB_NOREF_Pos
SysTick_CALIB_SKEW_Pos = 30
SysTick_CALIB_SKEW_Msk = 1 << SysTick_CALIB_SKEW_Pos
SysTick_CALIB_TENMS_Pos = 0
SysTick_CALIB_TENMS_Msk = 0xFFFFFF << SysTick_VAL_CURRENT_Pos

_UINT_MASK = 0xFFFFFFFF


class SysTick:
    """Register state of the system tick timer."""

    def __init__(self, nvic: Optional[Nvic] = None) -> None:
        self.nvic = nvic if nvic is not None else Nvic()
        self.ctrl = 0
        self.load = 0
        self.val = 0
        self.calib = 0

    def config(self, ticks: int) -> None:
        """Start the timer interrupting every ``ticks`` clock cycles.

        The interrupt gets the lowest priority.  Raises ``ValueError`` when
        ``ticks`` does not fit the 24-bit reload register.
        """
        if ticks > SysTick_LOAD_RELOAD_Msk:
            raise ValueError("reload value impossible")
        self.load = ((ticks & SysTick_LOAD_RELOAD_Msk) - 1) & _UINT_MASK
        self.nvic.set_priority(SYSTICK_IRQN, (1 << NVIC_PRIO_BITS) - 1)
        self.val = 0
        self.ctrl = (SysTick_CTRL_CLKSOURCE_Msk
                     | SysTick_CTRL_TICKINT_Msk
                     | SysTick_CTRL_ENABLE_Msk)