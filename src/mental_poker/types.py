# Area: Shared
"""
mental_poker.types — Identifier and digest types
=================================================

Room identifiers and the fixed-size digests exchanged by the shuffle
and reveal protocol.

A CryptoHash is a lowercase hex SHA-256 digest (64 characters). Cards
never travel in clear: every card, partial shuffle entry and reveal
part is one of these commitments.
"""

import hashlib
import string

RoomId = int
CryptoHash = str

HASH_LENGTH = 64
_HEX_DIGITS = frozenset(string.hexdigits.lower())


def hash_bytes(data: bytes) -> CryptoHash:
    """Return the CryptoHash of raw bytes."""
    return hashlib.sha256(data).hexdigest()


def card_commitment(index: int) -> CryptoHash:
    """Commitment for card ``index`` of a fresh, unshuffled deck."""
    return hash_bytes(f"card:{index}".encode("utf-8"))


def is_crypto_hash(value: object) -> bool:
    """Check that ``value`` is a well-formed CryptoHash."""
    return (
        isinstance(value, str)
        and len(value) == HASH_LENGTH
        and set(value) <= _HEX_DIGITS
    )
