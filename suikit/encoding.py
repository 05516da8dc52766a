"""Byte strings that carry their own text form: hex, base64 and base58."""

from __future__ import annotations

import base64
import binascii
import json
from dataclasses import dataclass

_B58_ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
_B58_INDEX = {char: index for index, char in enumerate(_B58_ALPHABET)}


def b58encode(data: bytes) -> str:
    """Encode bytes with the bitcoin base58 alphabet."""
    data = bytes(data)
    stripped = data.lstrip(b"\0")
    leading_zeros = len(data) - len(stripped)
    number = int.from_bytes(stripped, "big")
    digits = []
    while number:
        number, remainder = divmod(number, 58)
        digits.append(_B58_ALPHABET[remainder])
    return "1" * leading_zeros + "".join(reversed(digits))


def b58decode(text: str) -> bytes:
    """Decode base58 text; text holding a character outside the alphabet gives b""."""
    number = 0
    for char in text:
        value = _B58_INDEX.get(char)
        if value is None:
            return b""
        number = number * 58 + value
    leading_ones = len(text) - len(text.lstrip("1"))
    body = number.to_bytes((number.bit_length() + 7) // 8, "big") if number else b""
    return b"\0" * leading_ones + body


def _load_json_string(data: str | bytes) -> str:
    value = json.loads(data)
    if not isinstance(value, str):
        raise ValueError(f"expected a JSON string, got {type(value).__name__}")
    return value


class HexData(bytes):
    """Bytes written as a 0x-prefixed hex string."""

    @classmethod
    def from_string(cls, text: str) -> HexData:
        if text.startswith(("0x", "0X")):
            text = text[2:]
        return cls(binascii.unhexlify(text))

    def __str__(self) -> str:
        return "0x" + self.hex()

    def short_string(self) -> str:
        return "0x" + self.hex().lstrip("0")

    def to_json(self) -> str:
        return json.dumps(str(self))

    @classmethod
    def from_json(cls, data: str | bytes) -> HexData:
        return cls.from_string(_load_json_string(data))


class Base64Data(bytes):
    """Bytes written as standard padded base64."""

    @classmethod
    def from_string(cls, text: str) -> Base64Data:
        return cls(base64.b64decode(text, validate=True))

    def __str__(self) -> str:
        return base64.b64encode(self).decode("ascii")

    def to_json(self) -> str:
        return json.dumps(str(self))

    @classmethod
    def from_json(cls, data: str | bytes) -> Base64Data:
        return cls.from_string(_load_json_string(data))

    def to_bcs(self) -> bytes:
        return bytes(self)


class Base58(bytes):
    """Bytes written in base58."""

    @classmethod
    def from_string(cls, text: str) -> Base58:
        return cls(b58decode(text))

    def __str__(self) -> str:
        return b58encode(self)

    def to_json(self) -> str:
        return json.dumps(str(self))

    @classmethod
    def from_json(cls, data: str | bytes) -> Base58:
        return cls.from_string(_load_json_string(data))


@dataclass(frozen=True)
class EmptyEnum:
    """An enum variant without payload; it serialises to nothing."""

    def to_bcs(self) -> bytes:
        return b""