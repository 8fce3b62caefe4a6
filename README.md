# lpccore

`lpccore` models a few pieces of the runtime support layer of a small
Cortex-M0 microcontroller in plain Python. Use it to check formatting and
scanning behaviour, register arithmetic and interrupt-priority layouts on a
workstation.

## Modules

- `lpccore.conio`: a reduced `printf`/`scanf` pair.
  - `format_string(fmt, *args)` supports `%s %d %u %x %X %c %%`, with a
    decimal width, `0` for zero padding and `-` for left alignment. Integers
    are treated as 32-bit values; unknown conversions are dropped.
  - `cprintf(fmt, *args, out=None)` writes the formatted text to `out`
    (standard output by default) and returns the number of characters.
  - `scan_string(text, fmt)` understands `%d`, `%x`, `%b` (binary), `%n`
    (decimal, `0x` hexadecimal or `b` binary) and `%c`, and returns the
    converted values as a list, stopping at the first mismatch.
  - `parse_int(text)` reads an optional `-` and decimal digits;
    `strerror(errnum)` returns `"errno=<n>"`.
- `lpccore.msrand`: the Park–Miller "minimal standard" generator.
  `rand_r(state)` returns `(result, new_state)`, where the result is the new
  state integer-divided by the modulus; `rand()` and `srand(seed)` use a
  shared state that starts at 1.
- `lpccore.inet`: IPv4 `inet_ntop(af, packed, size=16)` and
  `inet_pton(af, text)`. Failures raise `OSError` with `EINVAL` or
  `EAFNOSUPPORT`.
- `lpccore.scb`: System Control Block register state
  (`SystemControlBlock`, with `system_reset()`), the SCB field masks and
  positions, and `decode_cpuid(value)` returning a `CpuId`.
- `lpccore.nvic`: `Nvic`, the interrupt controller's enable, pending and
  priority registers (`enable_irq`, `disable_irq`, `set_pending_irq`,
  `clear_pending_irq`, `get_pending_irq`, `set_priority`, `get_priority`).
  Core exceptions (negative numbers) keep their priority in the SCB's `shp`
  words.
- `lpccore.systick`: `SysTick` with `config(ticks)`, which loads the reload
  register, gives the tick interrupt the lowest priority and enables the
  timer; more than 24 bits of ticks raises `ValueError`.
- `lpccore.instr`: byte-reversal helpers `rev`, `rev16` and `revsh`.

## Install

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
from lpccore.conio import format_string, scan_string
from lpccore.inet import AF_INET, inet_ntop, inet_pton
from lpccore.instr import rev

format_string("%05d|%-4s|%X", 42, "ab", 255)   # '00042|ab  |FF'
scan_string("12 0xa0", "%d %n")                 # [12, 160]
rev(0x12345678)                                 # 0x78563412

packed = inet_pton(AF_INET, "192.168.1.10")     # b'\xc0\xa8\x01\n'
inet_ntop(AF_INET, packed)                      # '192.168.1.10'
```

Core peripherals:

```python
from lpccore.scb import decode_cpuid
from lpccore.systick import SysTick
from lpccore.nvic import SYSTICK_IRQN

decode_cpuid(0x410CC200).partno   # 0xC20

tick = SysTick()
tick.config(1000)
tick.load                                   # 999
tick.nvic.get_priority(SYSTICK_IRQN)        # 3
```

## What it does not do

The package holds only the pieces listed above. It has no device table or
file-descriptor layer, no system-call layer or heap, no semihosting driver
and no clock-frequency computation, and it provides no command-line tool.