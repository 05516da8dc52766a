"""Signing key pairs."""

from __future__ import annotations

from typing import Protocol, TypeVar, runtime_checkable

from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey
from cryptography.hazmat.primitives.serialization import Encoding, PublicFormat

T_co = TypeVar("T_co", covariant=True)


@runtime_checkable
class Signer(Protocol[T_co]):
    """Anything that signs a message."""

    def sign(self, message: bytes) -> T_co: ...


@runtime_checkable
class KeyPair(Protocol):
    """A key pair that signs bytes and exposes its raw keys."""

    @property
    def public_key(self) -> bytes: ...

    @property
    def private_key(self) -> bytes: ...

    def sign(self, message: bytes) -> bytes: ...


class Ed25519KeyPair:
    """An Ed25519 key pair; the private key is the 32-byte seed followed by the public key."""

    def __init__(self, key: Ed25519PrivateKey) -> None:
        self._key = key
        self._public = key.public_key().public_bytes(Encoding.Raw, PublicFormat.Raw)

    @classmethod
    def from_seed(cls, seed: bytes) -> Ed25519KeyPair:
        if len(seed) != 32:
            raise ValueError(f"an Ed25519 seed is 32 bytes, got {len(seed)}")
        return cls(Ed25519PrivateKey.from_private_bytes(bytes(seed)))

    @property
    def public_key(self) -> bytes:
        return self._public

    @property
    def private_key(self) -> bytes:
        return self.seed + self._public

    @property
    def seed(self) -> bytes:
        from cryptography.hazmat.primitives.serialization import (
            NoEncryption,
            PrivateFormat,
        )

        return self._key.private_bytes(Encoding.Raw, PrivateFormat.Raw, NoEncryption())

    def sign(self, message: bytes) -> bytes:
        return self._key.sign(bytes(message))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Ed25519KeyPair):
            return NotImplemented
        return self.private_key == other.private_key

    def __hash__(self) -> int:
        return hash(self._public)

    def __repr__(self) -> str:
        return f"Ed25519KeyPair(public_key={self._public.hex()})"