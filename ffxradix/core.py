import logging
from dataclasses import dataclass, field
from typing import Optional

from ffxradix.models import (ROUNDS, FFXParams, InvalidSymbol)
from ffxradix.utils.cipher import (validate_key)
from ffxradix.utils.codec import (alphabet, check_radix, add_mod, sub_mod)
from ffxradix.utils.feistel import (static_header, mac_iv, round_function)

logger = logging.getLogger(__name__)

# -----------------------------
# Encryption/Decryption
# -----------------------------

def _prepare(text: str, radix: int, key: bytes, tweak: bytes, cipher: Optional[str]) -> bytes:
    """
    Validate every input before the first AES call and return the MAC IV.

    Raises InvalidRadix, InvalidKeyLength, UnknownCipher or InvalidSymbol.
    """
    symbols = alphabet(check_radix(radix))
    variant = validate_key(key, cipher)
    for symbol in text:
        if symbol not in symbols:
            raise InvalidSymbol(symbol, radix)
    if not text:
        return b""
    header = static_header(len(text), len(tweak), radix)
    logger.debug("%s n=%d t=%d radix=%d P=%s", variant, len(text), len(tweak), radix, header.hex())
    return mac_iv(key, header)

def encrypt(plaintext: str, radix: int, key: bytes, tweak: bytes = b"", cipher: Optional[str] = None) -> str:
    """
    Encrypts a radix string with FFX[radix] (FFX-A2, 10 rounds).

    The message is split into A = X[:n//2] and B = X[n//2:]. Each round adds
    the round function of B to A blockwise modulo radix^|A| and swaps the
    halves. The output has the same length and alphabet as the input.

    Args:
        plaintext (str): Symbols of the radix alphabet (0-9a-zA-Z prefix)
        radix (int): Alphabet size, 2..62
        key (bytes): AES key, 16/24/32 bytes
        tweak (bytes): Public tweak, any length
        cipher (str, optional): "AES-128", "AES-192" or "AES-256"; the key
            must match it. Derived from the key length when omitted.

    Returns:
        str: Ciphertext of len(plaintext) symbols

    Cryptographic principles:
    - Balanced Feistel network: invertible whatever the round function is
    - Modular (blockwise) addition keeps every half inside its domain
    - Tweak diversifies the permutation without changing the key
    """
    tweak = bytes(tweak)
    iv = _prepare(plaintext, radix, key, tweak, cipher)
    n = len(plaintext)
    if n == 0:
        return ""

    a, b = plaintext[:n // 2], plaintext[n // 2:]
    for i in range(ROUNDS):
        c = add_mod(a, round_function(key, tweak, n, i, b, iv, radix), radix)
        a, b = b, c
    return a + b

def decrypt(ciphertext: str, radix: int, key: bytes, tweak: bytes = b"", cipher: Optional[str] = None) -> str:
    """
    Decrypts FFX[radix] ciphertext: the rounds of encrypt() in reverse order
    with blockwise subtraction in place of addition.

    Takes the same arguments as encrypt().
    """
    tweak = bytes(tweak)
    iv = _prepare(ciphertext, radix, key, tweak, cipher)
    n = len(ciphertext)
    if n == 0:
        return ""

    a, b = ciphertext[:n // 2], ciphertext[n // 2:]
    for i in reversed(range(ROUNDS)):
        c = b
        b = a
        a = sub_mod(c, round_function(key, tweak, n, i, b, iv, radix), radix)
    return a + b

# -----------------------------
# Bound Cipher
# -----------------------------
@dataclass(frozen=True)
class FFXCipher:
    """
    FFX cipher with its AES variant fixed at construction.

    Immutable and stateless between calls, so one instance can be shared
    across threads.
    """
    params: FFXParams = field(default_factory=FFXParams)

    @classmethod
    def for_cipher(cls, cipher: Optional[str]) -> "FFXCipher":
        return cls(FFXParams(cipher))

    def encrypt(self, plaintext: str, radix: int, key: bytes, tweak: bytes = b"") -> str:
        return encrypt(plaintext, radix, key, tweak, cipher=self.params.cipher)

    def decrypt(self, ciphertext: str, radix: int, key: bytes, tweak: bytes = b"") -> str:
        return decrypt(ciphertext, radix, key, tweak, cipher=self.params.cipher)
