import struct

import pytest

from scale_codec.serialization import Deserializer, Serializer, UnexpectedEndError
from scale_codec.serialization.encoding.int import decode_int, encode_int


def _test_bounds_struct_pack(fmt: str, lower_bound: int, upper_bound: int) -> None:
    struct.pack(fmt, lower_bound)
    with pytest.raises(struct.error):
        struct.pack(fmt, lower_bound - 1)
    struct.pack(fmt, upper_bound)
    with pytest.raises(struct.error):
        struct.pack(fmt, upper_bound + 1)


@pytest.mark.parametrize('scale_type_name, fmt', [
    ('Int8ScaleType', '<b'),
    ('Uint8ScaleType', '<B'),
    ('Int16ScaleType', '<h'),
    ('Uint16ScaleType', '<H'),
    ('Int32ScaleType', '<i'),
    ('Uint32ScaleType', '<I'),
    ('Int64ScaleType', '<q'),
    ('Uint64ScaleType', '<Q'),
])
def test_bounds_match_struct(scale_type_name: str, fmt: str) -> None:
    from scale_codec import types
    scale_type = getattr(types, scale_type_name)
    lower_bound = scale_type._lower_bound_value()
    upper_bound = scale_type._upper_bound_value()
    _test_bounds_struct_pack(fmt, lower_bound, upper_bound)
    # same bytes as struct, which is little-endian two's complement with the '<' prefix
    for value in (lower_bound, 0, upper_bound):
        assert scale_type().to_bytes(value) == struct.pack(fmt, value)


def test_int128_bounds() -> None:
    from scale_codec.types import Int128ScaleType, Uint128ScaleType

    assert Int128ScaleType._lower_bound_value() == -2**127
    assert Int128ScaleType._upper_bound_value() == 2**127 - 1
    assert Uint128ScaleType._lower_bound_value() == 0
    assert Uint128ScaleType._upper_bound_value() == 2**128 - 1


@pytest.mark.parametrize('value, length, signed, hex_data', [
    (0, 1, False, '00'),
    (255, 1, False, 'ff'),
    (-128, 1, True, '80'),
    (-1, 2, True, 'ffff'),
    (2**31 - 1, 4, True, 'ffffff7f'),
    (-2**31, 4, True, '00000080'),
    (2**64 - 1, 8, False, 'ffffffffffffffff'),
    (-2**63, 8, True, '0000000000000080'),
    (2**128 - 1, 16, False, 'ff' * 16),
    (1, 16, True, '01' + '00' * 15),
])
def test_int_vectors(value: int, length: int, signed: bool, hex_data: str) -> None:
    se = Serializer.build_bytes_serializer()
    encode_int(se, value, length=length, signed=signed)
    assert bytes(se.finalize()).hex() == hex_data
    de = Deserializer.build_bytes_deserializer(bytes.fromhex(hex_data))
    assert decode_int(de, length=length, signed=signed) == value
    de.finalize()


@pytest.mark.parametrize('value, length, signed', [
    (256, 1, False),
    (-1, 1, False),
    (128, 1, True),
    (2**128, 16, False),
])
def test_int_out_of_range(value: int, length: int, signed: bool) -> None:
    se = Serializer.build_bytes_serializer()
    with pytest.raises(ValueError):
        encode_int(se, value, length=length, signed=signed)


def test_int_truncated() -> None:
    de = Deserializer.build_bytes_deserializer(b'\x01\x02\x03')
    with pytest.raises(UnexpectedEndError) as exc_info:
        decode_int(de, length=4, signed=False)
    assert exc_info.value.position == 0
