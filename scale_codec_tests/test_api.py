from dataclasses import dataclass
from typing import Optional

import pytest

from scale_codec import (
    U8,
    U16,
    CollectionTooLargeError,
    DepthLimitExceededError,
    OutputLimitExceededError,
    ScaleSettings,
    TrailingBytesError,
    UnexpectedEndError,
    decode,
    decode_prefix,
    encode,
    make_scale_type,
)
from scale_codec.conf.get_settings import CONFIG_YAML_ENV_VAR


@dataclass
class Message:
    kind: U8
    body: bytes


@dataclass
class Node:
    child: Optional['Node']


def _chain(depth: int) -> Node:
    node = Node(None)
    for _ in range(depth - 1):
        node = Node(node)
    return node


def test_encode_decode() -> None:
    data = encode(Message(1, b'hi'), Message)
    assert data.hex() == '01086869'
    assert decode(data, Message) == Message(1, b'hi')


def test_accepts_a_built_scale_type() -> None:
    scale_type = make_scale_type(list[U16])
    assert encode([1], scale_type) == encode([1], list[U16])
    assert decode(bytes.fromhex('040100'), scale_type) == [1]


def test_decode_accepts_bytes_like() -> None:
    assert decode(bytearray(b'\x04\x01'), list[U8]) == [1]
    assert decode(memoryview(b'\x04\x01'), list[U8]) == [1]


def test_decode_is_strict() -> None:
    with pytest.raises(TrailingBytesError):
        decode(b'\x01\x02', U8)


def test_decode_allowing_trailing_bytes() -> None:
    settings = ScaleSettings(ALLOW_TRAILING_BYTES=True)
    assert decode(b'\x01\x02', U8, settings=settings) == 1


def test_decode_prefix() -> None:
    assert decode_prefix(b'\x01\x02', U8) == (1, 1)
    assert decode_prefix(bytes.fromhex('0c666f6f01'), str) == ('foo', 4)
    with pytest.raises(UnexpectedEndError):
        decode_prefix(b'\x0c', str)


def test_decode_prefix_consumes_values_in_sequence() -> None:
    data = encode('foo', str) + encode(Message(2, b''), Message)
    value, consumed = decode_prefix(data, str)
    assert value == 'foo'
    assert decode(data[consumed:], Message) == Message(2, b'')


def test_max_output_bytes() -> None:
    settings = ScaleSettings(MAX_OUTPUT_BYTES=4)
    assert encode(b'abc', bytes, settings=settings) == b'\x0cabc'
    with pytest.raises(OutputLimitExceededError):
        encode(b'abcd', bytes, settings=settings)


def test_max_collection_length() -> None:
    settings = ScaleSettings(MAX_COLLECTION_LENGTH=2)
    assert decode(bytes.fromhex('080102'), list[U8], settings=settings) == [1, 2]
    with pytest.raises(CollectionTooLargeError):
        decode(bytes.fromhex('0c010203'), list[U8], settings=settings)
    with pytest.raises(CollectionTooLargeError):
        decode_prefix(bytes.fromhex('0c666f6f'), str, settings=settings)


def test_global_settings_are_used(tmp_path, monkeypatch) -> None:
    filepath = tmp_path / 'scale.yml'
    filepath.write_text('ALLOW_TRAILING_BYTES: true\n')
    monkeypatch.setenv(CONFIG_YAML_ENV_VAR, str(filepath))
    assert decode(b'\x01\x02', U8) == 1


def test_invalid_value_type() -> None:
    with pytest.raises(TypeError):
        encode('1', U8)
    with pytest.raises(ValueError):
        encode(300, U8)


def test_shallow_recursive_value() -> None:
    data = encode(_chain(3), Node)
    assert data.hex() == '010100'
    assert decode(data, Node) == _chain(3)


def test_max_depth_on_decode() -> None:
    # every byte opens one more level
    with pytest.raises(DepthLimitExceededError):
        decode(b'\x01' * 400, Node)
    with pytest.raises(DepthLimitExceededError):
        decode(b'\x01' * 3, Node, settings=ScaleSettings(MAX_DEPTH=4))
    assert decode(b'\x01\x00', Node, settings=ScaleSettings(MAX_DEPTH=4)) == _chain(2)


def test_max_depth_on_encode() -> None:
    with pytest.raises(DepthLimitExceededError):
        encode(_chain(300), Node)
    with pytest.raises(DepthLimitExceededError):
        encode([[[1]]], list[list[list[U8]]], settings=ScaleSettings(MAX_DEPTH=2))
    assert encode([[1]], list[list[U8]], settings=ScaleSettings(MAX_DEPTH=2)) == bytes.fromhex('040401')


def test_recursion_limit_is_reported_as_depth_error() -> None:
    settings = ScaleSettings(MAX_DEPTH=10**9)
    with pytest.raises(DepthLimitExceededError):
        decode(b'\x01' * 20000, Node, settings=settings)
    with pytest.raises(DepthLimitExceededError):
        encode(_chain(20000), Node, settings=settings)
    with pytest.raises(DepthLimitExceededError):
        make_scale_type(Node).from_bytes(b'\x01' * 20000, max_depth=10**9)
    with pytest.raises(DepthLimitExceededError):
        make_scale_type(Node).to_bytes(_chain(20000), max_depth=10**9)


def test_declared_count_above_remaining_input() -> None:
    # u64::MAX elements of a zero-sized type, with nothing behind them
    with pytest.raises(CollectionTooLargeError):
        decode(bytes.fromhex('13ffffffffffffffff'), list[None])
    with pytest.raises(UnexpectedEndError) as exc_info:
        decode(bytes.fromhex('13ffffffffffffffff'), list[U16])
    assert exc_info.value.position == 0
    with pytest.raises(UnexpectedEndError):
        decode(bytes.fromhex('13ffffffffffffffff'), dict[U8, U8])
    with pytest.raises(CollectionTooLargeError):
        decode(bytes.fromhex('13ffffffffffffffff'), dict[None, None])
    with pytest.raises(UnexpectedEndError):
        decode(bytes.fromhex('fd03') + b'\x00' * 10, tuple[U8, ...])


def test_zero_sized_elements() -> None:
    data = encode([None] * 1000, list[None])
    assert data == bytes.fromhex('a10f')
    assert decode(data, list[None]) == [None] * 1000
    assert decode(bytes.fromhex('0c'), list[tuple[None, None]]) == [(None, None)] * 3
    assert decode(bytes.fromhex('04'), dict[None, None]) == {None: None}
    # the count is only bounded by the collection length setting
    settings = ScaleSettings(MAX_COLLECTION_LENGTH=2)
    with pytest.raises(CollectionTooLargeError):
        decode(bytes.fromhex('0c'), list[None], settings=settings)
