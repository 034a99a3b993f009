from typing import Optional

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from ffxradix.models import (BLOCK_SIZE, CIPHERS, CipherFailure, FFXParams, InvalidKeyLength)

# -----------------------------
# Key Validation
# -----------------------------
def validate_key(key: bytes, cipher: Optional[str] = None) -> str:
    """
    Check the AES key and resolve the cipher variant it selects.

    Args:
        key: Raw AES key
        cipher: Optional variant name; when given the key must have its length

    Returns:
        str: Resolved variant name ("AES-128", "AES-192" or "AES-256")
    """
    if not isinstance(key, (bytes, bytearray)):
        raise InvalidKeyLength(f"Key must be bytes, got {type(key).__name__}")
    expected = FFXParams(cipher).key_length()
    if expected is not None:
        if len(key) != expected:
            raise InvalidKeyLength(f"{cipher} needs a key of {expected} bytes, got {len(key)}")
        return cipher
    for name, length in CIPHERS.items():
        if len(key) == length:
            return name
    raise InvalidKeyLength(f"Key must be 16, 24 or 32 bytes (128, 192 or 256 bits), got {len(key)}")

# -----------------------------
# Raw AES (no padding)
# -----------------------------
def _run(key: bytes, mode, data: bytes) -> bytes:
    if len(data) % BLOCK_SIZE != 0:
        raise CipherFailure(f"Data length {len(data)} is not a multiple of {BLOCK_SIZE}")
    try:
        encryptor = Cipher(algorithms.AES(bytes(key)), mode).encryptor()
        return encryptor.update(bytes(data)) + encryptor.finalize()
    except (ValueError, TypeError) as exc:
        raise CipherFailure(f"AES encryption failed: {exc}") from exc

def ecb_encrypt(key: bytes, data: bytes) -> bytes:
    """AES-ECB over one or more whole blocks."""
    return _run(key, modes.ECB(), data)

def cbc_encrypt(key: bytes, iv: bytes, data: bytes) -> bytes:
    """AES-CBC over whole blocks with an explicit IV."""
    if len(iv) != BLOCK_SIZE:
        raise CipherFailure(f"IV must be {BLOCK_SIZE} bytes, got {len(iv)}")
    return _run(key, modes.CBC(bytes(iv)), data)

def cbc_mac(key: bytes, iv: bytes, data: bytes) -> bytes:
    """
    CBC-MAC: the last ciphertext block of AES-CBC.

    With iv = AES_K(P) this equals the zero-IV CBC-MAC of P || data.
    """
    return cbc_encrypt(key, iv, data)[-BLOCK_SIZE:]
