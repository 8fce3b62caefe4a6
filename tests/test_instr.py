import pytest

from lpccore.instr import rev, rev16, revsh

SAMPLES = [0, 1, 0x12345678, 0xDEADBEEF, 0xFFFFFFFF, 0x80000000, 0x00FF00FF, 0x0000FFFF]


def test_rev_worked_example():
    assert rev(0x12345678) == 0x78563412


def test_rev16_worked_example():
    assert rev16(0x12345678) == 0x34127856


def test_revsh_sign_extends():
    assert revsh(0x00000080) == -32768


@pytest.mark.parametrize("value", SAMPLES)
def test_rev_is_an_involution(value):
    assert rev(rev(value)) == value


@pytest.mark.parametrize("value", SAMPLES)
def test_rev16_is_an_involution(value):
    assert rev16(rev16(value)) == value


@pytest.mark.parametrize("value", SAMPLES)
def test_results_fit_in_32_bits(value):
    assert 0 <= rev(value) <= 0xFFFFFFFF
    assert 0 <= rev16(value) <= 0xFFFFFFFF


def test_rev_leaves_byte_palindrome_unchanged():
    assert rev(0x12343412) == 0x12343412


def test_rev16_leaves_equal_bytes_unchanged():
    assert rev16(0x11112222) == 0x11112222


@pytest.mark.parametrize("value", SAMPLES)
def test_revsh_matches_rev16_low_halfword(value):
    assert revsh(value) & 0xFFFF == rev16(value) & 0xFFFF


@pytest.mark.parametrize("value", SAMPLES)
def test_revsh_in_signed_16_bit_range(value):
    assert -0x8000 <= revsh(value) <= 0x7FFF


def test_revsh_ignores_high_halfword():
    assert revsh(0xABCD1234) == revsh(0x00001234)


def test_revsh_positive_when_low_byte_clear_of_sign():
    assert revsh(0x0000347F) > 0


def test_negative_input_treated_as_32_bit():
    assert rev(-1) == 0xFFFFFFFF
    assert rev16(-1) == 0xFFFFFFFF


def test_non_integer_rejected():
    with pytest.raises(TypeError):
        rev("1234")
    with pytest.raises(TypeError):
        rev16(1.5)