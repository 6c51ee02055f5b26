"""Property-based tests using hypothesis."""

from dataclasses import dataclass
from typing import Optional

from hypothesis import given
from hypothesis import strategies as st

from scale_codec import I64, U8, U32, U128, Compact, UnexpectedEndError, decode, decode_prefix, encode
from scale_codec.serialization import InvalidCompactIntError, SerializationError
from scale_codec.serialization.encoding.compact import MAX_COMPACT_VALUE, compact_size


@dataclass
class Record:
    id: U32
    name: str
    score: Optional[I64]
    flags: list[bool]
    blob: bytes
    attrs: dict[str, U8]


records = st.builds(
    Record,
    id=st.integers(min_value=0, max_value=2**32 - 1),
    name=st.text(),
    score=st.none() | st.integers(min_value=-2**63, max_value=2**63 - 1),
    flags=st.lists(st.booleans()),
    blob=st.binary(),
    attrs=st.dictionaries(st.text(max_size=5), st.integers(min_value=0, max_value=255), max_size=5),
)


class TestCompactProperties:
    """Property-based tests for compact integers."""

    @given(value=st.integers(min_value=0, max_value=MAX_COMPACT_VALUE))
    def test_roundtrip(self, value: int) -> None:
        data = encode(value, Compact)
        assert len(data) == compact_size(value)
        assert decode(data, Compact) == value

    @given(value=st.integers(min_value=0, max_value=MAX_COMPACT_VALUE), data=st.data())
    def test_truncation(self, value: int, data: st.DataObject) -> None:
        encoded = encode(value, Compact)
        cut = data.draw(st.integers(min_value=0, max_value=len(encoded) - 1))
        try:
            decode(encoded[:cut], Compact)
        except (UnexpectedEndError, InvalidCompactIntError):
            pass
        else:
            raise AssertionError('truncated input was accepted')


class TestCodecProperties:
    """Property-based tests for the type driven codec."""

    @given(record=records)
    def test_roundtrip(self, record: Record) -> None:
        assert decode(encode(record, Record), Record) == record

    @given(record=records)
    def test_deterministic(self, record: Record) -> None:
        assert encode(record, Record) == encode(record, Record)

    @given(record=records, data=st.data())
    def test_truncation(self, record: Record, data: st.DataObject) -> None:
        encoded = encode(record, Record)
        cut = data.draw(st.integers(min_value=0, max_value=len(encoded) - 1))
        try:
            decode(encoded[:cut], Record)
        except (UnexpectedEndError, InvalidCompactIntError):
            pass
        else:
            raise AssertionError('truncated input was accepted')

    @given(record=records)
    def test_missing_last_byte(self, record: Record) -> None:
        encoded = encode(record, Record)
        try:
            decode(encoded[:-1], Record)
        except (UnexpectedEndError, InvalidCompactIntError):
            pass
        else:
            raise AssertionError('input missing its last byte was accepted')

    @given(values=st.lists(st.integers(min_value=0, max_value=2**128 - 1), max_size=300))
    def test_sequence_length_fidelity(self, values: list[int]) -> None:
        encoded = encode(values, list[U128])
        count, consumed = decode_prefix(encoded, Compact)
        assert count == len(values)
        assert len(encoded) == consumed + 16 * len(values)

    @given(data=st.binary(max_size=64))
    def test_arbitrary_input_never_crashes(self, data: bytes) -> None:
        try:
            decode(data, Record)
        except SerializationError:
            pass
