"""Move addresses, identifiers and type tags."""

from __future__ import annotations

import binascii
import enum
import json
from dataclasses import dataclass, field
from typing import NewType, Optional

SUI_ADDRESS_LENGTH = 32

Identifier = NewType("Identifier", str)


class AccountAddress(bytes):
    """A 32-byte account address."""

    def __new__(cls, data: bytes = bytes(SUI_ADDRESS_LENGTH)) -> AccountAddress:
        if len(data) != SUI_ADDRESS_LENGTH:
            raise ValueError(
                f"an address is {SUI_ADDRESS_LENGTH} bytes, got {len(data)}"
            )
        return super().__new__(cls, data)

    @classmethod
    def from_hex(cls, text: str) -> AccountAddress:
        """Parse hex, with or without 0x; short values are left-padded with zeros."""
        if text.startswith(("0x", "0X")):
            text = text[2:]
        if len(text) % 2:
            text = "0" + text
        data = binascii.unhexlify(text)
        if len(data) > SUI_ADDRESS_LENGTH:
            raise ValueError("the len is invalid")
        return cls(data.rjust(SUI_ADDRESS_LENGTH, b"\0"))

    def __str__(self) -> str:
        return "0x" + self.hex()

    def short_string(self) -> str:
        return "0x" + self.hex().lstrip("0")

    def to_json(self) -> str:
        return json.dumps(str(self))

    @classmethod
    def from_json(cls, data: str | bytes) -> AccountAddress:
        value = json.loads(data)
        if not isinstance(value, str):
            raise ValueError(f"expected a JSON string, got {type(value).__name__}")
        return cls.from_hex(value)

    def to_bcs(self) -> bytes:
        return bytes(self)


@dataclass(frozen=True)
class StructTag:
    """A fully qualified Move struct type."""

    address: AccountAddress
    module: Identifier
    name: Identifier
    type_params: tuple[TypeTag, ...] = ()


@dataclass(frozen=True)
class TypeTag:
    """A Move type; ``kind`` gives the variant in its serialisation order."""

    class Kind(enum.IntEnum):
        BOOL = 0
        U8 = 1
        U64 = 2
        U128 = 3
        ADDRESS = 4
        SIGNER = 5
        VECTOR = 6
        STRUCT = 7
        U16 = 8
        U32 = 9
        U256 = 10

    kind: TypeTag.Kind
    vector: Optional[TypeTag] = field(default=None)
    struct: Optional[StructTag] = field(default=None)

    def __post_init__(self) -> None:
        kind = TypeTag.Kind(self.kind)
        object.__setattr__(self, "kind", kind)
        if (kind is TypeTag.Kind.VECTOR) != (self.vector is not None):
            raise ValueError("a vector type tag needs exactly an element type")
        if (kind is TypeTag.Kind.STRUCT) != (self.struct is not None):
            raise ValueError("a struct type tag needs exactly a struct tag")