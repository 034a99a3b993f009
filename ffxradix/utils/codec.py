import string

from ffxradix.models import (RADIX_MIN, RADIX_MAX, InvalidRadix, InvalidSymbol, Overflow)

# Digits, then lowercase, then uppercase. Radix r uses the first r symbols.
BASE62 = string.digits + string.ascii_lowercase + string.ascii_uppercase
_SYMBOL_VALUES = {symbol: value for value, symbol in enumerate(BASE62)}

# -----------------------------
# Radix Alphabet
# -----------------------------
def check_radix(radix: int) -> int:
    """Raise InvalidRadix unless radix is an int in [RADIX_MIN, RADIX_MAX]."""
    if isinstance(radix, bool) or not isinstance(radix, int) or not RADIX_MIN <= radix <= RADIX_MAX:
        raise InvalidRadix(f"Radix must be an integer between {RADIX_MIN} and {RADIX_MAX}, got {radix!r}")
    return radix

def alphabet(radix: int) -> str:
    return BASE62[:check_radix(radix)]

# -----------------------------
# String <-> Integer
# -----------------------------
def string_to_int(s: str, radix: int) -> int:
    """
    Interpret s as a big-endian base-radix numeral.

    Uses the explicit symbol table rather than int(s, radix), which accepts
    uppercase for radix <= 36 and stops at 36. The empty string is 0.

    Raises:
        InvalidSymbol: a character is not among the first `radix` symbols
    """
    value = 0
    for symbol in s:
        digit = _SYMBOL_VALUES.get(symbol)
        if digit is None or digit >= radix:
            raise InvalidSymbol(symbol, radix)
        value = value * radix + digit
    return value

def int_to_string(value: int, radix: int, length: int) -> str:
    """
    Render value in base radix, left-padded with the zero symbol to length.

    Raises:
        Overflow: value needs more than `length` symbols
    """
    if value < 0:
        raise Overflow(f"Cannot render negative value {value}")
    digits = []
    while value:
        value, digit = divmod(value, radix)
        digits.append(BASE62[digit])
    if len(digits) > length:
        raise Overflow(f"Value needs {len(digits)} symbols in radix {radix}, only {length} available")
    return "".join(reversed(digits)).rjust(length, BASE62[0])

# -----------------------------
# Bytes <-> Integer
# -----------------------------
def bytes_to_int(data: bytes) -> int:
    return int.from_bytes(data, 'big')

def int_to_bytes(value: int, length: int) -> bytes:
    """Big-endian encoding of value, zero-padded or cut to its low-order `length` bytes."""
    raw = value.to_bytes((value.bit_length() + 7) // 8, 'big')
    return fixed_length_bytes(raw, length)

def fixed_length_bytes(data: bytes, length: int, pad: bytes = b'\x00') -> bytes:
    """Left-pad data with pad to length bytes, or keep its trailing length bytes."""
    if length <= 0:
        return b''
    return data.rjust(length, pad)[-length:]

# -----------------------------
# Blockwise Modular Arithmetic
# -----------------------------
def add_mod(a: str, b: str, radix: int) -> str:
    """(NUM(a) + NUM(b)) mod radix^len(a), rendered at len(a) symbols."""
    modulus = radix ** len(a)
    total = (string_to_int(a, radix) + string_to_int(b, radix)) % modulus
    return int_to_string(total, radix, len(a))

def sub_mod(a: str, b: str, radix: int) -> str:
    """(NUM(a) - NUM(b)) mod radix^len(a), rendered at len(a) symbols."""
    modulus = radix ** len(a)
    x = string_to_int(a, radix)
    y = string_to_int(b, radix)
    # Keep the difference non-negative
    if x < y:
        x += modulus
    return int_to_string((x - y) % modulus, radix, len(a))
