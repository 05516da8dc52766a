"""Accounts: a key pair and the address derived from it."""

from __future__ import annotations

import base64
import enum
import hashlib
from dataclasses import dataclass

from suikit.keys import Ed25519KeyPair

ADDRESS_LENGTH = 64


class SignatureScheme(enum.IntEnum):
    """Signature schemes, valued by their one-byte flag."""

    ED25519 = 0

    @property
    def flag(self) -> int:
        return int(self)


def derive_address(scheme: SignatureScheme, public_key: bytes) -> str:
    """Return the 0x-prefixed address for a public key under a scheme."""
    digest = hashlib.blake2b(
        bytes([SignatureScheme(scheme).flag]) + bytes(public_key), digest_size=32
    )
    return "0x" + digest.hexdigest()[:ADDRESS_LENGTH]


@dataclass(frozen=True)
class Account:
    """A key pair with its address."""

    key_pair: Ed25519KeyPair
    address: str
    scheme: SignatureScheme = SignatureScheme.ED25519

    @classmethod
    def from_seed(
        cls, seed: bytes, scheme: SignatureScheme = SignatureScheme.ED25519
    ) -> Account:
        scheme = SignatureScheme(scheme)
        key_pair = Ed25519KeyPair.from_seed(seed)
        return cls(key_pair, derive_address(scheme, key_pair.public_key), scheme)

    @classmethod
    def from_keystore(cls, keystore: str) -> Account:
        """Load an account from base64 of the scheme flag followed by the seed."""
        raw = base64.b64decode(keystore, validate=True)
        if not raw:
            raise ValueError("empty keystore")
        try:
            scheme = SignatureScheme(raw[0])
        except ValueError:
            raise ValueError(f"unknown signature scheme flag {raw[0]}") from None
        return cls.from_seed(raw[1:], scheme)

    def sign(self, data: bytes) -> bytes:
        if self.scheme is SignatureScheme.ED25519:
            return self.key_pair.sign(data)
        return b""