from collections import OrderedDict

import pytest

from scale_codec.decoder import ScaleDecoder
from scale_codec.encoder import ScaleEncoder
from scale_codec.serialization import (
    CollectionTooLargeError,
    DepthLimitExceededError,
    InvalidBoolError,
    OutputLimitExceededError,
    TrailingBytesError,
    UnexpectedEndError,
    VariantIndexOutOfRangeError,
)


def _u8(e: ScaleEncoder, v: int) -> None:
    e.encode_uint(v, bits=8)


def _str(e: ScaleEncoder, v: str) -> None:
    e.encode_str(v)


def test_encode_event_stream() -> None:
    enc = ScaleEncoder.build()
    enc.encode_uint(1, bits=16)
    enc.encode_sint(-1, bits=32)
    enc.encode_bool(False)
    enc.encode_compact(64)
    enc.encode_unit()
    enc.encode_option(None, _u8)
    enc.encode_option(7, _u8)
    enc.encode_char('a')
    assert enc.to_bytes().hex() == '0100' + 'ffffffff' + '00' + '0101' + '00' + '0107' + '61000000'


def test_decode_event_stream() -> None:
    dec = ScaleDecoder.build(bytes.fromhex('0100ffffffff00010100010761000000'))
    assert dec.decode_uint(bits=16) == 1
    assert dec.decode_sint(bits=32) == -1
    assert dec.decode_bool() is False
    assert dec.decode_compact() == 64
    assert dec.decode_unit() is None
    assert dec.decode_option(lambda d: d.decode_uint(bits=8)) is None
    assert dec.decode_option(lambda d: d.decode_uint(bits=8)) == 7
    assert dec.decode_char() == 'a'
    dec.finalize()


def test_unsupported_bit_width() -> None:
    enc = ScaleEncoder.build()
    with pytest.raises(ValueError):
        enc.encode_uint(1, bits=24)
    dec = ScaleDecoder.build(b'\x00\x00\x00')
    with pytest.raises(ValueError):
        dec.decode_sint(bits=24)


def test_variants() -> None:
    enc = ScaleEncoder.build()
    enc.encode_variant(1, 3)
    enc.encode_variant(0, 2, 'foo', _str)
    data = enc.to_bytes()
    assert data.hex() == '01' + '000c666f6f'
    dec = ScaleDecoder.build(data)
    assert dec.decode_unit_variant(3) == 1
    assert dec.decode_variant([lambda d: d.decode_str(), lambda d: d.decode_uint(bits=8)]) == (0, 'foo')
    dec.finalize()


def test_variant_index_out_of_range() -> None:
    enc = ScaleEncoder.build()
    with pytest.raises(VariantIndexOutOfRangeError):
        enc.encode_variant(2, 2)
    with pytest.raises(VariantIndexOutOfRangeError):
        enc.encode_variant(0, 257)
    dec = ScaleDecoder.build(b'\x02')
    with pytest.raises(VariantIndexOutOfRangeError):
        dec.decode_unit_variant(2)


def test_array_and_fixed_bytes() -> None:
    enc = ScaleEncoder.build()
    enc.encode_array([1, 2], _u8, length=2)
    enc.encode_fixed_bytes(b'\xaa\xbb', length=2)
    with pytest.raises(ValueError):
        enc.encode_fixed_bytes(b'\xaa', length=2)
    assert enc.to_bytes().hex() == '0102aabb'
    dec = ScaleDecoder.build(bytes.fromhex('0102aabb'))
    assert dec.decode_array(lambda d: d.decode_uint(bits=8), length=2) == (1, 2)
    assert dec.decode_fixed_bytes(length=2) == b'\xaa\xbb'
    dec.finalize()


def test_seq_bytes_map_tuple() -> None:
    enc = ScaleEncoder.build()
    enc.encode_seq([], _u8)
    enc.encode_bytes(b'\x01\x02')
    enc.encode_map({'b': 1, 'a': 2}, _str, _u8)
    enc.encode_tuple((3, 'x'), (_u8, _str))
    data = enc.to_bytes()
    assert data.hex() == '00' + '080102' + '08' + '046201' + '046102' + '03' + '0478'

    dec = ScaleDecoder.build(data)
    assert dec.decode_seq(lambda d: d.decode_uint(bits=8)) == []
    assert dec.decode_bytes() == b'\x01\x02'
    value = dec.decode_map(lambda d: d.decode_str(), lambda d: d.decode_uint(bits=8), OrderedDict)
    assert list(value.items()) == [('b', 1), ('a', 2)]
    assert dec.decode_tuple((lambda d: d.decode_uint(bits=8), lambda d: d.decode_str())) == (3, 'x')
    dec.finalize()


def test_nested_composites() -> None:
    enc = ScaleEncoder.build()
    enc.encode_seq([[1], [2, 3]], lambda e, v: e.encode_seq(v, _u8))
    data = enc.to_bytes()
    assert data.hex() == '08' + '0401' + '080203'
    dec = ScaleDecoder.build(data)
    assert dec.decode_seq(lambda d: d.decode_seq(lambda d2: d2.decode_uint(bits=8))) == [[1], [2, 3]]


def test_output_limit() -> None:
    enc = ScaleEncoder.build(max_bytes=3)
    enc.encode_str('ab')
    with pytest.raises(OutputLimitExceededError):
        enc.encode_bool(True)


def test_collection_limit_applies_to_str_and_bytes() -> None:
    for method in (ScaleDecoder.decode_str, ScaleDecoder.decode_bytes):
        dec = ScaleDecoder.build(b'\x0c' + b'abc', max_collection_length=2)
        with pytest.raises(CollectionTooLargeError):
            method(dec)


def test_decode_errors() -> None:
    with pytest.raises(InvalidBoolError):
        ScaleDecoder.build(b'\x02').decode_bool()
    with pytest.raises(UnexpectedEndError):
        ScaleDecoder.build(b'\x01\x00').decode_uint(bits=32)
    dec = ScaleDecoder.build(b'\x01\x00')
    dec.decode_bool()
    with pytest.raises(TrailingBytesError):
        dec.finalize()


def test_max_depth() -> None:
    enc = ScaleEncoder.build(max_depth=2)
    enc.encode_seq([[1]], lambda e, v: e.encode_seq(v, _u8))
    with pytest.raises(DepthLimitExceededError):
        enc.encode_option([1], lambda e, v: e.encode_seq(v, lambda e2, v2: e2.encode_option(v2, _u8)))

    dec = ScaleDecoder.build(bytes.fromhex('0101010107'), max_depth=3)
    with pytest.raises(DepthLimitExceededError) as exc_info:
        dec.decode_option(lambda d: d.decode_option(lambda d2: d2.decode_option(
            lambda d3: d3.decode_option(lambda d4: d4.decode_uint(bits=8)))))
    assert exc_info.value.position == 3

    # the depth is restored once a composite is done
    dec = ScaleDecoder.build(bytes.fromhex('0401' * 3), max_depth=1)
    for _ in range(3):
        assert dec.decode_seq(lambda d: d.decode_uint(bits=8)) == [1]
    dec.finalize()
