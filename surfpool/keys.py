"""Base58 public keys and keypair files."""

from __future__ import annotations

import json
from dataclasses import dataclass
from os import PathLike
from pathlib import Path

from nacl.signing import SigningKey

_ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
_INDEX = {char: position for position, char in enumerate(_ALPHABET)}

PUBKEY_BYTES = 32
MAX_BASE58_LEN = 44
KEYPAIR_BYTES = 64


def b58encode(data: bytes) -> str:
    """Encode bytes with the Bitcoin base58 alphabet."""
    number = int.from_bytes(data, "big")
    digits = []
    while number:
        number, remainder = divmod(number, 58)
        digits.append(_ALPHABET[remainder])
    leading_zeros = len(data) - len(data.lstrip(b"\0"))
    return "1" * leading_zeros + "".join(reversed(digits))


def b58decode(text: str) -> bytes:
    """Decode a base58 string; raise ``ValueError`` on characters outside the alphabet."""
    number = 0
    for char in text:
        try:
            number = number * 58 + _INDEX[char]
        except KeyError:
            raise ValueError(f"invalid base58 character {char!r}") from None
    body = number.to_bytes((number.bit_length() + 7) // 8, "big") if number else b""
    leading_ones = len(text) - len(text.lstrip("1"))
    return b"\0" * leading_ones + body


@dataclass(frozen=True)
class Pubkey:
    """A 32-byte public key, shown in base58."""

    raw: bytes

    def __post_init__(self) -> None:
        if len(self.raw) != PUBKEY_BYTES:
            raise ValueError("String is the wrong size")

    def __str__(self) -> str:
        return b58encode(self.raw)

    @classmethod
    def parse(cls, text: str) -> Pubkey:
        """Parse a base58 public key."""
        if len(text) > MAX_BASE58_LEN:
            raise ValueError("String is the wrong size")
        try:
            raw = b58decode(text)
        except ValueError:
            raise ValueError("Invalid Base58 string") from None
        if len(raw) != PUBKEY_BYTES:
            raise ValueError("String is the wrong size")
        return cls(raw)


def read_keypair_pubkey(path: str | PathLike[str]) -> Pubkey:
    """Read a JSON keypair file (64 byte values) and return its public key."""
    content = Path(path).read_text(encoding="utf-8")
    try:
        values = json.loads(content)
    except json.JSONDecodeError as exc:
        raise ValueError(f"keypair file is not valid JSON: {exc}") from None
    if not isinstance(values, list) or len(values) != KEYPAIR_BYTES:
        raise ValueError(f"keypair file must hold an array of {KEYPAIR_BYTES} bytes")
    if not all(isinstance(v, int) and not isinstance(v, bool) and 0 <= v <= 255 for v in values):
        raise ValueError("keypair file holds values that are not bytes")
    raw = bytes(values)
    seed, public = raw[:PUBKEY_BYTES], raw[PUBKEY_BYTES:]
    derived = SigningKey(seed).verify_key.encode()
    if derived != public:
        raise ValueError("keypair public key does not match its secret key")
    return Pubkey(public)