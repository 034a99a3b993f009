import math
import logging
from functools import lru_cache

from ffxradix.models import (BLOCK_SIZE, ROUNDS)
from ffxradix.utils.codec import (
    string_to_int, int_to_string, bytes_to_int, int_to_bytes
)
from ffxradix.utils.cipher import (ecb_encrypt, cbc_mac)

logger = logging.getLogger(__name__)

# -----------------------------
# Static Header
# -----------------------------
@lru_cache(maxsize=256)
def static_header(n: int, tweak_len: int, radix: int) -> bytes:
    """
    Build the 16-byte header P that starts every PRF input.

    Layout: VERS=1 | method=2 (balanced Feistel) | addition=1 (blockwise) |
    radix on 3 bytes | rounds | split n//2 | n on 4 bytes | len(T) on 4 bytes.

    P depends on neither the key nor the round index, so its CBC-MAC block
    can be computed once and used as the IV of every round.
    """
    return (
        bytes([0x01, 0x02, 0x01])
        + int_to_bytes(radix, 3)
        + bytes([ROUNDS, (n // 2) % 256])
        + int_to_bytes(n, 4)
        + int_to_bytes(tweak_len, 4)
    )

def mac_iv(key: bytes, header: bytes) -> bytes:
    """AES_K(P), the chaining value after the header block."""
    return ecb_encrypt(key, header)

# -----------------------------
# Round Function
# -----------------------------
def half_block_bytes(n: int, radix: int) -> int:
    """b: bytes needed to hold NUM_radix of the longer half."""
    v = n - n // 2
    return math.ceil(math.ceil(v * math.log2(radix)) / 8)

def expand(key: bytes, y: bytes, length: int) -> bytes:
    """
    Stretch the 16-byte MAC to length bytes.

    Y || AES_K(Y xor [1]16) || AES_K(Y xor [2]16) || ..., cut to length.
    No extra block is encrypted while length <= 16.
    """
    stream = [y]
    j = 1
    while BLOCK_SIZE * j < length:
        counter = int_to_bytes(j, BLOCK_SIZE)
        stream.append(ecb_encrypt(key, bytes(a ^ b for a, b in zip(y, counter))))
        j += 1
    return b"".join(stream)[:length]

def round_function(key: bytes, tweak: bytes, n: int, i: int, half: str, iv: bytes, radix: int) -> str:
    """
    F_K(n, T, i, B): pseudorandom value added to the other half in round i.

    Builds Q = T || 0^pad || [i]1 || [NUM_radix(B)]b with Q padded to whole
    blocks, MACs it chained after the header, stretches the MAC to d + 4
    bytes and reduces it modulo radix^m, m being the length of the half it
    will be combined with.

    Args:
        key: AES key
        tweak: Raw tweak bytes
        n: Total message length
        i: Round index 0..ROUNDS-1
        half: Current right half B, radix symbols
        iv: mac_iv(key, static_header(...)) for this call
        radix: Message radix

    Returns:
        str: m radix symbols
    """
    b = half_block_bytes(n, radix)
    d = 4 * math.ceil(b / 4)

    pad = (-len(tweak) - b - 1) % BLOCK_SIZE
    q = (
        bytes(tweak)
        + bytes(pad)
        + bytes([i])
        + int_to_bytes(string_to_int(half, radix), b)
    )

    y = expand(key, cbc_mac(key, iv, q), d + 4)

    m = n - n // 2 if i % 2 else n // 2
    z = bytes_to_int(y) % (radix ** m)
    logger.debug("round %d: b=%d d=%d m=%d y=%s", i, b, d, m, y.hex())
    return int_to_string(z, radix, m)
