import pytest

from lpccore.nvic import SYSTICK_IRQN, Nvic
from lpccore.systick import (
    SysTick,
    SysTick_CTRL_CLKSOURCE_Msk,
    SysTick_CTRL_ENABLE_Msk,
    SysTick_CTRL_TICKINT_Msk,
    SysTick_LOAD_RELOAD_Msk,
)


def test_config_sets_registers():
    timer = SysTick()
    timer.val = 1234
    timer.config(1000)
    assert timer.load == 999
    assert timer.val == 0
    assert timer.ctrl == (SysTick_CTRL_CLKSOURCE_Msk
                          | SysTick_CTRL_TICKINT_Msk
                          | SysTick_CTRL_ENABLE_Msk)


def test_config_gives_lowest_priority():
    nvic = Nvic()
    timer = SysTick(nvic)
    timer.config(48000)
    assert nvic.get_priority(SYSTICK_IRQN) == 3
    assert timer.nvic is nvic


def test_config_maximum_reload():
    timer = SysTick()
    timer.config(SysTick_LOAD_RELOAD_Msk)
    assert timer.load == SysTick_LOAD_RELOAD_Msk - 1


def test_config_rejects_too_many_ticks():
    timer = SysTick()
    with pytest.raises(ValueError):
        timer.config(SysTick_LOAD_RELOAD_Msk + 1)
    assert timer.ctrl == 0
    assert timer.load == 0
    assert timer.nvic.scb.shp == [0, 0]


def test_config_zero_ticks_wraps_reload():
    timer = SysTick()
    timer.config(0)
    assert timer.load == 0xFFFFFFFF


@pytest.mark.parametrize("ticks", [1, 2, 100, 12000])
def test_reload_is_ticks_minus_one(ticks):
    timer = SysTick()
    timer.config(ticks)
    assert timer.load + 1 == ticks