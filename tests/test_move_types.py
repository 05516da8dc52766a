import pytest

from suikit.move_types import AccountAddress, Identifier, StructTag, TypeTag

FULL = "0x7e875ea78ee09f08d72e2676cf84e0f1c8ac61d94fa339cc8e37cace85bebc6e"


def test_full_address_round_trip():
    assert str(AccountAddress.from_hex(FULL)) == FULL


def test_short_address_is_left_padded():
    address = AccountAddress.from_hex("0x2")
    assert len(address) == 32
    assert address[-1] == 2
    assert address[:31] == bytes(31)
    assert address.short_string() == "0x2"


def test_odd_length_without_prefix():
    address = AccountAddress.from_hex("123456")
    assert address.short_string() == "0x123456"


def test_too_long_address():
    with pytest.raises(ValueError):
        AccountAddress.from_hex("0x" + "11" * 33)


def test_invalid_hex():
    with pytest.raises(ValueError):
        AccountAddress.from_hex("0xgg")


def test_wrong_length_constructor():
    with pytest.raises(ValueError):
        AccountAddress(b"\x01" * 31)


def test_json_round_trip():
    address = AccountAddress.from_hex(FULL)
    assert address.to_json() == f'"{FULL}"'
    assert AccountAddress.from_json(address.to_json()) == address


def test_from_json_requires_string():
    with pytest.raises(ValueError):
        AccountAddress.from_json("[1, 2]")


def test_bcs_is_raw_32_bytes():
    address = AccountAddress.from_hex(FULL)
    assert address.to_bcs() == bytes.fromhex(FULL[2:])


def test_vector_requires_element():
    with pytest.raises(ValueError):
        TypeTag(TypeTag.Kind.VECTOR)


def test_plain_kind_rejects_payload():
    with pytest.raises(ValueError):
        TypeTag(TypeTag.Kind.U64, vector=TypeTag(TypeTag.Kind.U8))


def test_struct_tag_with_params():
    coin = StructTag(
        AccountAddress.from_hex("0x2"),
        Identifier("sui"),
        Identifier("SUI"),
    )
    tag = TypeTag(TypeTag.Kind.STRUCT, struct=coin)
    nested = TypeTag(TypeTag.Kind.VECTOR, vector=tag)
    assert nested.vector.struct.name == "SUI"
    assert nested.kind == TypeTag.Kind.VECTOR
    assert TypeTag(7, struct=coin).kind is TypeTag.Kind.STRUCT