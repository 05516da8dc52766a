import pytest

from suikit.encoding import (
    Base58,
    Base64Data,
    EmptyEnum,
    HexData,
    b58decode,
    b58encode,
)


def test_serialization_hex_string_round_trip():
    hex_str = "0x12333aabcc"
    hexdata = HexData.from_string(hex_str)
    assert str(hexdata) == hex_str
    assert bytes(hexdata) == b"\x12\x33\x3a\xab\xcc"


def test_json_round_trip_hex_and_base64():
    hexdata = HexData.from_string("0x12333aabcc")
    data_json = hexdata.to_json()
    hexdata2 = HexData.from_json(data_json)
    assert bytes(hexdata) == bytes(hexdata2)

    base64data = Base64Data(hexdata)
    data_jsonb = base64data.to_json()
    base64data2 = Base64Data.from_json(data_jsonb)
    assert bytes(base64data) == bytes(base64data2)
    assert bytes(hexdata) == bytes(base64data2)


def test_hex_accepts_upper_prefix():
    assert HexData.from_string("0XAB") == b"\xab"


def test_hex_json_text():
    assert HexData.from_string("0x12333aabcc").to_json() == '"0x12333aabcc"'


@pytest.mark.parametrize("text", ["0xzz", "0x123", "12 34"])
def test_hex_invalid(text):
    with pytest.raises(ValueError):
        HexData.from_string(text)


def test_hex_from_json_requires_string():
    with pytest.raises(ValueError):
        HexData.from_json("123")


def test_hex_short_string():
    assert HexData.from_string("0x000a").short_string() == "0xa"


def test_base64_text():
    assert str(Base64Data(b"hello")) == "aGVsbG8="
    assert Base64Data.from_string("aGVsbG8=") == b"hello"


@pytest.mark.parametrize("text", ["!!!!", "abc"])
def test_base64_invalid(text):
    with pytest.raises(ValueError):
        Base64Data.from_string(text)


def test_base64_bcs_is_raw_bytes():
    assert Base64Data(b"\x01\x02").to_bcs() == b"\x01\x02"


def test_b58_known_value():
    assert b58encode(b"hello world") == "StV1DL6CwTryKyV"
    assert b58decode("StV1DL6CwTryKyV") == b"hello world"


def test_b58_leading_zeros():
    assert b58encode(b"\x00\x00\x01") == "112"
    assert b58decode("112") == b"\x00\x00\x01"


def test_b58_invalid_character_gives_empty():
    assert b58decode("0OIl") == b""
    assert Base58.from_string("0abc") == b""


def test_base58_json_round_trip():
    value = Base58(b"\x00\xff\x10digest")
    assert Base58.from_json(value.to_json()) == value


def test_empty_enum_bcs():
    assert EmptyEnum().to_bcs() == b""
    assert EmptyEnum() == EmptyEnum()