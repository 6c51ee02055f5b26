from collections import OrderedDict, deque
from enum import Enum
from typing import Optional

from scale_codec.primitives import H160, H256, H512, I8, I16, I32, I64, I128, U8, U16, U32, U64, U128, Char, Compact
from scale_codec.serialization import (
    CustomError,
    InvalidCharacterError,
    InvalidOptionBoolError,
    InvalidOptionError,
    TrailingBytesError,
    UnexpectedEndError,
    VariantIndexOutOfRangeError,
)
from scale_codec.types import (
    BoolScaleType,
    EnumScaleType,
    Int32ScaleType,
    OptionalScaleType,
    StrScaleType,
    Uint8ScaleType,
    make_scale_type,
)
from scale_codec_tests import unittest


class Color(Enum):
    RED = 10
    GREEN = 20
    BLUE = 30
    CRIMSON = 10  # alias of RED, not a member


class ScaleTypeTestCase(unittest.TestCase):
    def test_sized_ints(self):
        self.assertEncodesTo(U8, 255, 'ff')
        self.assertEncodesTo(U16, 0x0102, '0201')
        self.assertEncodesTo(U32, 1, '01000000')
        self.assertEncodesTo(U64, 2**64 - 1, 'ff' * 8)
        self.assertEncodesTo(U128, 1, '01' + '00' * 15)
        self.assertEncodesTo(I8, -128, '80')
        self.assertEncodesTo(I16, -1, 'ffff')
        self.assertEncodesTo(I32, -2**31, '00000080')
        self.assertEncodesTo(I64, 2**63 - 1, 'ff' * 7 + '7f')
        self.assertEncodesTo(I128, -2**127, '00' * 15 + '80')

    def test_sized_int_out_of_range(self):
        with self.assertRaises(ValueError):
            make_scale_type(U8).to_bytes(256)
        with self.assertRaises(ValueError):
            make_scale_type(U32).to_bytes(-1)
        with self.assertRaises(ValueError):
            make_scale_type(I8).to_bytes(128)

    def test_sized_int_rejects_other_types(self):
        with self.assertRaises(TypeError):
            make_scale_type(U8).to_bytes(True)
        with self.assertRaises(TypeError):
            make_scale_type(U32).to_bytes('1')

    def test_compact(self):
        self.assertEncodesTo(Compact, 0, '00')
        self.assertEncodesTo(Compact, 63, 'fc')
        self.assertEncodesTo(Compact, 64, '0101')
        self.assertEncodesTo(Compact, 2**30, '0300000040')
        with self.assertRaises(ValueError):
            make_scale_type(Compact).to_bytes(-1)

    def test_bool(self):
        self.assertEncodesTo(bool, False, '00')
        self.assertEncodesTo(bool, True, '01')
        with self.assertRaises(TypeError):
            BoolScaleType().to_bytes(1)

    def test_char(self):
        self.assertEncodesTo(Char, 'a', '61000000')
        self.assertEncodesTo(Char, '\U0010ffff', 'ffff1000')
        with self.assertRaises(InvalidCharacterError):
            make_scale_type(Char).from_bytes(bytes.fromhex('00d80000'))
        with self.assertRaises(ValueError):
            make_scale_type(Char).to_bytes('ab')

    def test_none(self):
        self.assertEncodesTo(None, None, '')

    def test_str(self):
        self.assertEncodesTo(str, '', '00')
        self.assertEncodesTo(str, 'foo', '0c666f6f')
        self.assertRoundTrip(str, 'áéíóúçãõ')
        with self.assertRaises(TypeError):
            StrScaleType().to_bytes(b'foo')
        with self.assertRaises(CustomError):
            StrScaleType().from_bytes(bytes.fromhex('04ff'))

    def test_bytes(self):
        self.assertEncodesTo(bytes, b'', '00')
        self.assertEncodesTo(bytes, b'\x01\x02', '080102')
        self.assertEqual(make_scale_type(bytearray).to_bytes(bytearray(b'\x01')).hex(), '0401')

    def test_fixed_size_bytes(self):
        self.assertEncodesTo(H160, b'\x11' * 20, '11' * 20)
        self.assertRoundTrip(H256, bytes(range(32)))
        self.assertRoundTrip(H512, bytes(range(64)))
        with self.assertRaises(ValueError):
            make_scale_type(H160).to_bytes(b'\x11' * 21)
        with self.assertRaises(UnexpectedEndError):
            make_scale_type(H256).from_bytes(b'\x00' * 31)

    def test_optional(self):
        self.assertEncodesTo(Optional[U32], None, '00')
        self.assertEncodesTo(U32 | None, 1, '0101000000')
        self.assertEncodesTo(Optional[str], '', '0100')
        self.assertEncodesTo(Optional[Optional[U8]], 5, '0105')
        with self.assertRaises(InvalidOptionError):
            make_scale_type(Optional[U8]).from_bytes(b'\x02\x00')

    def test_option_bool(self):
        scale_type = make_scale_type(Optional[bool])
        self.assertIsInstance(scale_type, OptionalScaleType)
        self.assertEncodesTo(scale_type, None, '00')
        self.assertEncodesTo(scale_type, False, '01')
        self.assertEncodesTo(scale_type, True, '02')
        with self.assertRaises(InvalidOptionBoolError):
            scale_type.from_bytes(b'\x03')
        with self.assertRaises(TypeError):
            scale_type.to_bytes(1)

    def test_optional_of_option_bool_is_not_flattened(self):
        # the outer optional is a regular tag, only the innermost `bool | None` is a single byte
        scale_type = OptionalScaleType(make_scale_type(bool | None))
        self.assertEncodesTo(scale_type, None, '00')
        self.assertEncodesTo(scale_type, True, '0102')

    def test_list(self):
        self.assertEncodesTo(list[U8], [], '00')
        self.assertEncodesTo(list[U8], [1, 2, 3], '0c010203')
        self.assertEncodesTo(list[list[U8]], [[1], []], '08040100')
        self.assertRoundTrip(list[U8], list(range(64)) * 2)

    def test_collections(self):
        self.assertEncodesTo(deque[U8], deque([1, 2]), '080102')
        self.assertEncodesTo(set[U8], {7}, '0407')
        self.assertEncodesTo(frozenset[str], frozenset(['a']), '040461')
        self.assertEncodesTo(tuple[U8, ...], (1, 2), '080102')

    def test_collection_rejects_str_value(self):
        with self.assertRaises(TypeError):
            make_scale_type(list[str]).to_bytes('abc')

    def test_same_encoding_for_all_sequences(self):
        data = make_scale_type(list[U16]).to_bytes([1, 2])
        self.assertEqual(make_scale_type(tuple[U16, ...]).from_bytes(data), (1, 2))
        self.assertEqual(make_scale_type(set[U16]).from_bytes(data), {1, 2})

    def test_fixed_tuple(self):
        self.assertEncodesTo(tuple[U8, str], (3, 'foo'), '030c666f6f')
        self.assertEncodesTo(tuple[()], (), '')
        self.assertEncodesTo(tuple[bool, tuple[U8, U8]], (True, (1, 2)), '010102')
        with self.assertRaises(TypeError):
            make_scale_type(tuple[U8, U8]).to_bytes((1,))

    def test_map(self):
        self.assertEncodesTo(dict[str, U8], {}, '00')
        self.assertEncodesTo(dict[str, U8], {'b': 2, 'a': 1}, '08046202046101')
        self.assertEncodesTo(OrderedDict[U8, bool], OrderedDict([(2, True), (1, False)]), '0802010100')
        self.assertEncodesTo(dict[U8, list[U8]], {1: [2]}, '04010402')

    def test_map_duplicate_keys_on_decode(self):
        # duplicate keys are not rejected, the last entry wins
        self.assertEqual(make_scale_type(dict[U8, U8]).from_bytes(bytes.fromhex('0801020103')), {1: 3})

    def test_enum(self):
        self.assertEncodesTo(Color, Color.RED, '00')
        self.assertEncodesTo(Color, Color.BLUE, '02')
        self.assertIs(make_scale_type(Color).from_bytes(b'\x00'), Color.CRIMSON)
        with self.assertRaises(VariantIndexOutOfRangeError):
            make_scale_type(Color).from_bytes(b'\x03')
        with self.assertRaises(TypeError):
            EnumScaleType(Color).to_bytes(10)

    def test_union(self):
        self.assertEncodesTo(str | bytes, 'foo', '000c666f6f')
        self.assertEncodesTo(str | bytes, b'foo', '010c666f6f')
        self.assertEncodesTo(list[U8] | str, [1], '000401')
        with self.assertRaises(TypeError):
            make_scale_type(str | bytes).to_bytes(1)
        with self.assertRaises(VariantIndexOutOfRangeError):
            make_scale_type(str | bytes).from_bytes(b'\x02')

    def test_union_member_order_matters(self):
        self.assertEqual(make_scale_type(bytes | str).to_bytes('').hex(), '0100')
        self.assertEqual(make_scale_type(str | bytes).to_bytes('').hex(), '0000')

    def test_optional_union(self):
        self.assertEncodesTo(str | bytes | None, None, '00')
        self.assertEncodesTo(str | bytes | None, b'\x01', '01010401')

    def test_trailing_bytes(self):
        with self.assertRaises(TrailingBytesError):
            Uint8ScaleType().from_bytes(b'\x01\x02')

    def test_truncated(self):
        with self.assertRaises(UnexpectedEndError):
            Int32ScaleType().from_bytes(b'\x01\x02\x03')
        with self.assertRaises(UnexpectedEndError):
            make_scale_type(list[U16]).from_bytes(bytes.fromhex('080100'))

    def test_check_value_is_deep(self):
        scale_type = make_scale_type(dict[str, list[U8]])
        scale_type.check_value({'a': [1, 2]})
        with self.assertRaises(ValueError):
            scale_type.check_value({'a': [1, 256]})
        with self.assertRaises(TypeError):
            scale_type.check_value({1: [1]})

    def test_hashability(self):
        self.assertTrue(make_scale_type(tuple[U8, str]).is_hashable())
        self.assertTrue(make_scale_type(frozenset[U8]).is_hashable())
        self.assertFalse(make_scale_type(list[U8]).is_hashable())
        self.assertFalse(make_scale_type(tuple[U8, list[U8]]).is_hashable())

    def test_max_bytes_and_max_collection_length(self):
        from scale_codec.serialization import CollectionTooLargeError, OutputLimitExceededError
        scale_type = make_scale_type(list[U8])
        with self.assertRaises(OutputLimitExceededError):
            scale_type.to_bytes([1, 2, 3], max_bytes=3)
        with self.assertRaises(CollectionTooLargeError):
            scale_type.from_bytes(bytes.fromhex('0c010203'), max_collection_length=2)
