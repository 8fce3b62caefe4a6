from lpccore.scb import (
    CORTEX_M0_CPUID,
    SCB_AIRCR_SYSRESETREQ_Msk,
    SCB_AIRCR_VECTKEY_Msk,
    SCB_AIRCR_VECTKEY_Pos,
    SCB_CPUID_ARCHITECTURE_Msk,
    SCB_CPUID_ARCHITECTURE_Pos,
    SCB_CPUID_IMPLEMENTER_Msk,
    SCB_CPUID_IMPLEMENTER_Pos,
    SCB_CPUID_PARTNO_Msk,
    SCB_CPUID_PARTNO_Pos,
    SCB_CPUID_REVISION_Msk,
    SCB_CPUID_VARIANT_Msk,
    SCB_CPUID_VARIANT_Pos,
    CpuId,
    SystemControlBlock,
    decode_cpuid,
)


def test_decode_all_ones_gives_full_fields():
    fields = decode_cpuid(0xFFFFFFFF)
    assert fields == CpuId(
        implementer=SCB_CPUID_IMPLEMENTER_Msk >> SCB_CPUID_IMPLEMENTER_Pos,
        variant=SCB_CPUID_VARIANT_Msk >> SCB_CPUID_VARIANT_Pos,
        architecture=SCB_CPUID_ARCHITECTURE_Msk >> SCB_CPUID_ARCHITECTURE_Pos,
        partno=SCB_CPUID_PARTNO_Msk >> SCB_CPUID_PARTNO_Pos,
        revision=SCB_CPUID_REVISION_Msk,
    )


def test_decode_zero():
    assert decode_cpuid(0) == CpuId(0, 0, 0, 0, 0)


def test_decode_single_field():
    fields = decode_cpuid(SCB_CPUID_PARTNO_Msk)
    assert fields.partno == SCB_CPUID_PARTNO_Msk >> SCB_CPUID_PARTNO_Pos
    assert fields.implementer == 0
    assert fields.revision == 0


def test_default_cpuid_is_cortex_m0():
    scb = SystemControlBlock()
    assert scb.cpuid == CORTEX_M0_CPUID
    assert decode_cpuid(scb.cpuid).architecture == 0xC


def test_initial_registers_clear():
    scb = SystemControlBlock()
    assert scb.shp == [0, 0]
    assert scb.aircr == 0


def test_system_reset_writes_key_and_request():
    scb = SystemControlBlock()
    scb.system_reset()
    assert (scb.aircr & SCB_AIRCR_VECTKEY_Msk) >> SCB_AIRCR_VECTKEY_Pos == 0x5FA
    assert scb.aircr & SCB_AIRCR_SYSRESETREQ_Msk == SCB_AIRCR_SYSRESETREQ_Msk