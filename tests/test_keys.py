import pytest
from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PublicKey

from suikit.keys import Ed25519KeyPair, KeyPair, Signer

SEED = bytes.fromhex("9d61b19deffd5a60ba844af492ec2cc44449c5697b326919703bac031cae7f60")
PUBLIC = bytes.fromhex("d75a980182b10ab7d54bfed3c964073a0ee172f3daa62325af021a68f707511a")
EMPTY_SIGNATURE = bytes.fromhex(
    "e5564300c360ac729086e2cc806e828a84877f1eb8e5d974d873e065224901555f"
    "b8821590a33bacc61e39701cf9b46bd25bf5f0595bbe24655141438e7a100b"
)


def test_public_key_from_seed():
    assert Ed25519KeyPair.from_seed(SEED).public_key == PUBLIC


def test_private_key_is_seed_then_public():
    pair = Ed25519KeyPair.from_seed(SEED)
    assert pair.private_key == SEED + PUBLIC
    assert len(pair.private_key) == 64


def test_sign_empty_message_known_value():
    signature = Ed25519KeyPair.from_seed(SEED).sign(b"")
    assert signature == EMPTY_SIGNATURE


def test_signature_verifies():
    pair = Ed25519KeyPair.from_seed(bytes(range(32)))
    message = b"Coming chat is very good jopfpzf"
    signature = pair.sign(message)
    Ed25519PublicKey.from_public_bytes(pair.public_key).verify(signature, message)
    with pytest.raises(InvalidSignature):
        Ed25519PublicKey.from_public_bytes(pair.public_key).verify(signature, b"other")


@pytest.mark.parametrize("length", [0, 31, 33, 64])
def test_bad_seed_length(length):
    with pytest.raises(ValueError):
        Ed25519KeyPair.from_seed(bytes(length))


def _sign_as_signer(signer: Signer, message: bytes) -> bytes:
    return signer.sign(message)


def test_satisfies_protocols():
    pair = Ed25519KeyPair.from_seed(SEED)
    assert isinstance(pair, KeyPair)
    assert isinstance(pair, Signer)
    assert _sign_as_signer(pair, b"") == EMPTY_SIGNATURE


def test_equality_by_key():
    assert Ed25519KeyPair.from_seed(SEED) == Ed25519KeyPair.from_seed(SEED)
    assert not Ed25519KeyPair.from_seed(SEED) == Ed25519KeyPair.from_seed(bytes(32))