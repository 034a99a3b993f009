from dataclasses import dataclass
from typing import Optional

# -----------------------------
# CLI Colors
# -----------------------------
class bcolors:
    HEADER = '\033[95m'
    OKBLUE = '\033[94m'
    OKCYAN = '\033[96m'
    OKGREEN = '\033[92m'
    GREY = '\033[90m'
    WARNING = '\033[93m'
    FAIL = '\033[91m'
    ENDC = '\033[0m'
    BOLD = '\033[1m'
    UNDERLINE = '\033[4m'

# -----------------------------
# Core Constants
# -----------------------------
ROUNDS = 10  # Fixed Feistel round count, also encoded in the static header
BLOCK_SIZE = 16  # AES block size in bytes
RADIX_MIN = 2
RADIX_MAX = 62

# AES variant name -> key length in bytes
CIPHERS = {
    "AES-128": 16,
    "AES-192": 24,
    "AES-256": 32,
}

# -----------------------------
# Errors
# -----------------------------
class FFXError(ValueError):
    """Base class for every failure raised by the FFX engine."""


class InvalidKeyLength(FFXError):
    """Key is not 16, 24 or 32 bytes, or does not match the requested AES variant."""


class UnknownCipher(FFXError):
    """Cipher variant name is not one of CIPHERS."""


class InvalidRadix(FFXError):
    """Radix is outside [RADIX_MIN, RADIX_MAX]."""


class InvalidSymbol(FFXError):
    """A character of the message is not in the alphabet of the radix."""

    def __init__(self, symbol: str, radix: int):
        super().__init__(f"Symbol {symbol!r} is not in the radix {radix} alphabet")
        self.symbol = symbol
        self.radix = radix


class Overflow(FFXError):
    """A value does not fit in the requested number of symbols."""


class CipherFailure(FFXError):
    """The underlying AES call failed."""

# -----------------------------
# Core Parameters
# -----------------------------
@dataclass(frozen=True)
class FFXParams:
    """
    Parameters bound into an FFX cipher.

    Only the AES variant is configurable. The round count and the block
    size are fixed by the construction and live in ROUNDS / BLOCK_SIZE.
    A variant of None means "derive it from the key length".
    """
    cipher: Optional[str] = None  # "AES-128", "AES-192", "AES-256" or None

    def __post_init__(self):
        if self.cipher is not None and self.cipher not in CIPHERS:
            raise UnknownCipher(f"Unknown cipher {self.cipher!r}, expected one of {', '.join(CIPHERS)}")

    def key_length(self) -> Optional[int]:
        return CIPHERS[self.cipher] if self.cipher is not None else None
