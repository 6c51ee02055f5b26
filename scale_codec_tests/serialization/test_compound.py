import pytest

from scale_codec.serialization import CollectionTooLargeError, Deserializer, Serializer, UnexpectedEndError
from scale_codec.serialization.compound_encoding.array import decode_array, encode_array
from scale_codec.serialization.compound_encoding.collection import (
    ZERO_SIZE_MAX_LENGTH,
    decode_collection,
    decode_length,
    encode_collection,
)
from scale_codec.serialization.compound_encoding.mapping import decode_mapping, encode_mapping
from scale_codec.serialization.compound_encoding.tuple import encode_tuple
from scale_codec.serialization.compound_encoding.variant import decode_variant, encode_variant
from scale_codec.serialization.encoding.bool import decode_bool, encode_bool
from scale_codec.serialization.encoding.utf8 import decode_utf8, encode_utf8


def test_collection_length_fidelity() -> None:
    for n in (0, 1, 63, 64, 300):
        se = Serializer.build_bytes_serializer()
        encode_collection(se, [True] * n, encode_bool)
        de = Deserializer.build_bytes_deserializer(bytes(se.finalize()))
        assert decode_collection(de, decode_bool, list) == [True] * n
        de.finalize()


def test_collection_max_length_checked_before_elements() -> None:
    # declares 300 elements but carries none, the length check must fire before any element is read
    de = Deserializer.build_bytes_deserializer(bytes.fromhex('b104'))
    with pytest.raises(CollectionTooLargeError):
        decode_collection(de, decode_bool, list, max_length=100)
    de = Deserializer.build_bytes_deserializer(bytes.fromhex('b104'))
    with pytest.raises(UnexpectedEndError):
        decode_collection(de, decode_bool, list)


def test_length_checked_against_remaining_input() -> None:
    # u64::MAX elements
    huge = bytes.fromhex('13ffffffffffffffff')
    de = Deserializer.build_bytes_deserializer(huge)
    with pytest.raises(UnexpectedEndError) as exc_info:
        decode_collection(de, decode_bool, list)
    assert exc_info.value.position == 0
    de = Deserializer.build_bytes_deserializer(huge)
    with pytest.raises(UnexpectedEndError):
        decode_mapping(de, decode_bool, decode_bool, dict)
    de = Deserializer.build_bytes_deserializer(huge)
    with pytest.raises(CollectionTooLargeError):
        decode_collection(de, lambda _: None, list, min_element_size=0)

    # 2 elements of at least 2 bytes each
    de = Deserializer.build_bytes_deserializer(bytes.fromhex('08010203'))
    with pytest.raises(UnexpectedEndError):
        decode_length(de, min_element_size=2)
    de = Deserializer.build_bytes_deserializer(bytes.fromhex('0801020304'))
    assert decode_length(de, min_element_size=2) == 2


def test_zero_size_length_cap() -> None:
    se = Serializer.build_bytes_serializer()
    encode_collection(se, [None] * ZERO_SIZE_MAX_LENGTH, lambda _se, _v: None)
    data = bytes(se.finalize())
    de = Deserializer.build_bytes_deserializer(data)
    assert decode_collection(de, lambda _: None, list, min_element_size=0) == [None] * ZERO_SIZE_MAX_LENGTH

    se = Serializer.build_bytes_serializer()
    encode_collection(se, [None] * (ZERO_SIZE_MAX_LENGTH + 1), lambda _se, _v: None)
    data = bytes(se.finalize())
    de = Deserializer.build_bytes_deserializer(data)
    with pytest.raises(CollectionTooLargeError):
        decode_collection(de, lambda _: None, list, min_element_size=0)
    # an explicit maximum replaces the cap
    de = Deserializer.build_bytes_deserializer(data)
    items = decode_collection(de, lambda _: None, list, max_length=ZERO_SIZE_MAX_LENGTH + 1, min_element_size=0)
    assert len(items) == ZERO_SIZE_MAX_LENGTH + 1


def test_array_has_no_prefix() -> None:
    se = Serializer.build_bytes_serializer()
    encode_array(se, [True, False], encode_bool, length=2)
    assert bytes(se.finalize()).hex() == '0100'
    de = Deserializer.build_bytes_deserializer(bytes.fromhex('0100'))
    assert decode_array(de, decode_bool, list, length=2) == [True, False]


def test_array_wrong_length() -> None:
    se = Serializer.build_bytes_serializer()
    with pytest.raises(ValueError):
        encode_array(se, [True], encode_bool, length=2)


def test_tuple_wrong_length() -> None:
    se = Serializer.build_bytes_serializer()
    with pytest.raises(ValueError):
        encode_tuple(se, (True, 'a'), (encode_bool,))


def test_mapping_keeps_iteration_order_and_duplicates_by_value() -> None:
    se = Serializer.build_bytes_serializer()
    encode_mapping(se, {'b': True, 'a': False}, encode_utf8, encode_bool)
    assert bytes(se.finalize()).hex() == '08046201046100'
    de = Deserializer.build_bytes_deserializer(bytes.fromhex('08046201046100'))
    assert list(decode_mapping(de, decode_utf8, decode_bool, dict).items()) == [('b', True), ('a', False)]


def test_variant_result_like() -> None:
    se = Serializer.build_bytes_serializer()
    encode_variant(se, 0, True, encode_bool, variant_count=2)
    encode_variant(se, 1, 'no', encode_utf8, variant_count=2)
    data = bytes(se.finalize())
    assert data.hex() == '0001' + '01086e6f'
    de = Deserializer.build_bytes_deserializer(data)
    assert decode_variant(de, (decode_bool, decode_utf8)) == (0, True)
    assert decode_variant(de, (decode_bool, decode_utf8)) == (1, 'no')
    de.finalize()
