import pytest

from ffxradix.models import (InvalidRadix, InvalidSymbol, Overflow)
from ffxradix.utils.codec import (
    BASE62, alphabet, check_radix, string_to_int, int_to_string, bytes_to_int,
    int_to_bytes, fixed_length_bytes, add_mod, sub_mod
)


def test_alphabet_order():
    assert BASE62 == "0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"
    assert alphabet(2) == "01"
    assert alphabet(16) == "0123456789abcdef"
    assert alphabet(37) == "0123456789abcdefghijklmnopqrstuvwxyzA"


@pytest.mark.parametrize("radix", [0, 1, 63, 256])
def test_check_radix_rejects(radix):
    with pytest.raises(InvalidRadix):
        check_radix(radix)


def test_string_to_int():
    assert string_to_int("", 10) == 0
    assert string_to_int("0042", 10) == 42
    assert string_to_int("ff", 16) == 255
    assert string_to_int("zZ", 62) == 35 * 62 + 61
    assert string_to_int("10", 2) == 2


def test_string_to_int_is_case_sensitive():
    assert string_to_int("a", 37) == 10
    assert string_to_int("A", 37) == 36
    with pytest.raises(InvalidSymbol) as info:
        string_to_int("FF", 16)
    assert info.value.symbol == "F"
    assert info.value.radix == 16


def test_int_to_string():
    assert int_to_string(0, 10, 0) == ""
    assert int_to_string(0, 10, 4) == "0000"
    assert int_to_string(255, 16, 4) == "00ff"
    assert int_to_string(61, 62, 1) == "Z"
    assert int_to_string(string_to_int("Hello", 62), 62, 5) == "Hello"


def test_int_to_string_overflow():
    with pytest.raises(Overflow):
        int_to_string(100, 10, 2)
    with pytest.raises(Overflow):
        int_to_string(-1, 10, 2)


def test_bytes_int_conversion():
    assert bytes_to_int(b"") == 0
    assert bytes_to_int(b"\x01\x00") == 256
    assert int_to_bytes(0, 3) == b"\x00\x00\x00"
    assert int_to_bytes(258, 4) == b"\x00\x00\x01\x02"
    # keeps the low-order bytes
    assert int_to_bytes(0x010203, 2) == b"\x02\x03"


def test_fixed_length_bytes():
    assert fixed_length_bytes(b"ab", 4) == b"\x00\x00ab"
    assert fixed_length_bytes(b"abcdef", 4) == b"cdef"
    assert fixed_length_bytes(b"ab", 3, b"*") == b"*ab"
    assert fixed_length_bytes(b"ab", 0) == b""


def test_add_mod_wraps():
    assert add_mod("95", "07", 10) == "02"
    assert add_mod("0f", "01", 16) == "10"
    assert add_mod("", "", 10) == ""


def test_sub_mod_wraps():
    assert sub_mod("02", "07", 10) == "95"
    assert sub_mod("10", "01", 16) == "0f"
    assert sub_mod("5", "5", 10) == "0"


def test_add_then_sub_restores():
    for a, b in [("123456", "999999"), ("000000", "000001"), ("zzzz", "ZZZZ")]:
        radix = 62
        assert sub_mod(add_mod(a, b, radix), b, radix) == a
