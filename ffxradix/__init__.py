"""
FFXRadix - Format-Preserving Encryption with FFX[radix]

Encrypts strings over an alphabet of 2 to 62 symbols (0-9, a-z, A-Z) into
strings of the same length over the same alphabet, so that encrypted
digit strings or identifiers fit the columns that held the plaintext.

Key Cryptographic Principles:

Feistel Construction:

Balanced split of the message into two halves (FFX-A2)
10 rounds of blockwise (modular) addition of a round function
Decryption runs the same rounds in reverse with subtraction

Round Function:

AES CBC-MAC over a static header P and a per-round block Q
The MAC of P is precomputed once and used as IV for every round
AES-ECB key-stream expansion when a half-block is wider than 12 bytes

Arithmetic:

Arbitrary-precision integers over the chosen radix
Every intermediate value stays inside the radix alphabet and segment length

Interoperates with other FFX[radix] / FF1 implementations for radix <= 36
(NIST SP 800-38G sample vectors).
"""
from ffxradix.core import (
    encrypt, decrypt, FFXCipher
)

from ffxradix.models import (
    FFXParams, FFXError, InvalidKeyLength, InvalidRadix, InvalidSymbol,
    Overflow, CipherFailure, UnknownCipher, ROUNDS, CIPHERS
)

__all__ = [
    "encrypt", "decrypt", "FFXCipher", "FFXParams", "FFXError",
    "InvalidKeyLength", "InvalidRadix", "InvalidSymbol", "Overflow",
    "CipherFailure", "UnknownCipher", "ROUNDS", "CIPHERS",
]
