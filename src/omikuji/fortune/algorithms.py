"""
Core Omikuji Algorithms

This module turns a (year, user) pair into the 256-bit digest every fortune
is read from, and exposes bit-addressable reads over that digest.

Algorithm Overview:
1. Build the seed string "{year}-{user}-{SALT}"
2. SHA-256 the UTF-8 bytes of the seed
3. Read fields as big-endian bit ranges, most-significant bit first
   within each byte

The digest is used for deterministic pseudo-randomness only. It is not a
security boundary.
"""

import hashlib

from omikuji import config
from omikuji.lib.log import get_logger, log

logger = get_logger(__name__)

MAX_READ_BITS = 64


def build_seed(year: int, user: str) -> str:
    """
    Build the seed string hashed for a (year, user) pair.

    Args:
        year: Target year (unsigned)
        user: User identifier, may be empty

    Returns:
        Seed string in the form "{year}-{user}-{SALT}"

    Raises:
        ValueError: If year is negative
    """
    if year < 0:
        raise ValueError(f"Year must be non-negative, got {year}")
    return f"{year}-{user}-{config.SALT}"


def derive(year: int, user: str) -> bytes:
    """
    Derive the 32-byte SHA-256 digest for a (year, user) pair.

    Examples:
        >>> len(derive(2026, "alice"))
        32
        >>> derive(2026, "alice") == derive(2026, "alice")
        True
    """
    seed = build_seed(year, user)
    digest = hashlib.sha256(seed.encode("utf-8")).digest()
    log(logger, "debug", "Derived digest", year=year, prefix=digest[:4].hex())
    return digest


def hex_string(digest: bytes) -> str:
    """Lowercase hex rendering of a digest (64 characters)."""
    check_digest(digest)
    return digest.hex()


def check_digest(digest: bytes) -> None:
    """Ensure digest is a 32-byte buffer."""
    if not isinstance(digest, (bytes, bytearray)):
        raise ValueError(f"Digest must be bytes, got {type(digest).__name__}")
    if len(digest) != config.DIGEST_SIZE:
        raise ValueError(
            f"Digest must be {config.DIGEST_SIZE} bytes, got {len(digest)}"
        )


def read_bits(digest: bytes, start_bit: int, num_bits: int) -> int:
    """
    Read num_bits consecutive bits starting at start_bit, MSB first.

    Bit 0 of the result is the last bit read. Bits that fall past the end
    of the digest are skipped: they neither contribute nor shift the result,
    so a read straddling bit 256 returns only its in-range prefix.

    Args:
        digest: 32-byte digest
        start_bit: Absolute bit offset into the digest
        num_bits: Number of bits to read (1..64)

    Returns:
        Unsigned integer assembled from the bits read

    Raises:
        ValueError: If start_bit is negative or num_bits is out of range
    """
    if start_bit < 0:
        raise ValueError(f"start_bit must be non-negative, got {start_bit}")
    if not 1 <= num_bits <= MAX_READ_BITS:
        raise ValueError(
            f"num_bits must be between 1 and {MAX_READ_BITS}, got {num_bits}"
        )

    result = 0
    for bit_index in range(start_bit, start_bit + num_bits):
        byte_index, bit_in_byte = divmod(bit_index, 8)
        # TODO: reject out-of-range reads once no caller relies on truncation
        if byte_index < len(digest):
            bit = (digest[byte_index] >> (7 - bit_in_byte)) & 1
            result = (result << 1) | bit
    return result
