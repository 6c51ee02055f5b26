import pytest

from scale_codec.serialization import Deserializer, InvalidCompactIntError, Serializer, UnexpectedEndError
from scale_codec.serialization.encoding.compact import (
    MAX_COMPACT_VALUE,
    compact_size,
    decode_compact,
    encode_compact,
)


def _encode(n: int) -> bytes:
    se = Serializer.build_bytes_serializer()
    encode_compact(se, n)
    return bytes(se.finalize())


def _decode(data: bytes) -> int:
    de = Deserializer.build_bytes_deserializer(data)
    value = decode_compact(de)
    de.finalize()
    return value


BOUNDARY_VECTORS = [
    (0, '00'),
    (1, '04'),
    (42, 'a8'),
    (63, 'fc'),
    (64, '0101'),
    (69, '1501'),
    (16383, 'fdff'),
    (16384, '02000100'),
    (2**30 - 1, 'feffffff'),
    (2**30, '0300000040'),
    (2**32 - 1, '03ffffffff'),
    (2**32, '070000000001'),
    (2**64 - 1, '13ffffffffffffffff'),
    (2**128 - 1, '33' + 'ff' * 16),
    (MAX_COMPACT_VALUE, 'ff' + 'ff' * 67),
]


@pytest.mark.parametrize('n, hex_data', BOUNDARY_VECTORS)
def test_compact_vectors(n: int, hex_data: str) -> None:
    encoded = _encode(n)
    assert encoded.hex() == hex_data
    assert len(encoded) == compact_size(n)
    assert _decode(encoded) == n


def gen_mode_boundaries():
    test_cases = [(0, 1), (2**6 - 1, 1), (2**6, 2), (2**14 - 1, 2), (2**14, 4), (2**30 - 1, 4)]
    # big integer mode, one case for the smallest and largest value of each byte length
    for length in range(4, 68):
        test_cases.append((max(2**30, 2**(8 * (length - 1))), 1 + length))
        test_cases.append((2**(8 * length) - 1, 1 + length))
    return test_cases


@pytest.mark.parametrize('n, encoded_size', gen_mode_boundaries())
def test_compact_round_trip_with_size(n: int, encoded_size: int) -> None:
    encoded = _encode(n)
    assert len(encoded) == encoded_size
    assert _decode(encoded) == n


@pytest.mark.parametrize('n', [-1, MAX_COMPACT_VALUE + 1])
def test_compact_unrepresentable(n: int) -> None:
    with pytest.raises(ValueError):
        _encode(n)


@pytest.mark.parametrize('hex_data', [
    '0100',  # 0 in two-byte mode
    'fd00',  # 63 in two-byte mode
    '02000000',  # 0 in four-byte mode
    'feff0000',  # 16383 in four-byte mode
    '03ffffff3f',  # 2**30 - 1 in big integer mode
    '070000004000',  # 2**30 with a zero most significant byte
])
def test_compact_non_canonical(hex_data: str) -> None:
    with pytest.raises(InvalidCompactIntError) as exc_info:
        _decode(bytes.fromhex(hex_data))
    assert exc_info.value.position == 0


def test_compact_big_mode_overrun() -> None:
    # declares 4 + 63 = 67 bytes, only 2 follow
    with pytest.raises(InvalidCompactIntError):
        _decode(bytes.fromhex('ff0102'))


@pytest.mark.parametrize('hex_data', ['', '01', '020001'])
def test_compact_truncated(hex_data: str) -> None:
    with pytest.raises(UnexpectedEndError):
        _decode(bytes.fromhex(hex_data))
