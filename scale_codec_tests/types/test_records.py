from dataclasses import dataclass, field
from typing import NamedTuple, Optional

from scale_codec.primitives import I8, U8, U32
from scale_codec.serialization import UnexpectedEndError
from scale_codec.types import DataclassScaleType, make_scale_type
from scale_codec_tests import unittest


@dataclass
class Point:
    x: I8
    y: I8


@dataclass(frozen=True)
class Account:
    name: str
    balance: U32 = 0
    tags: list[str] = field(default_factory=list)


class Entry(NamedTuple):
    key: str
    value: Optional[U8]


@dataclass
class Node:
    value: U8
    next: Optional['Node'] = None


@dataclass
class Tree:
    label: str
    children: list['Tree']


@dataclass
class Holder:
    # forward reference to a class defined later in the module
    item: 'Later'


@dataclass
class Later:
    flag: bool


class RecordTestCase(unittest.TestCase):
    def test_dataclass_fields_in_declaration_order(self):
        self.assertEncodesTo(Point, Point(x=3, y=4), '0304')
        self.assertEncodesTo(Point, Point(x=-1, y=0), 'ff00')

    def test_dataclass_with_defaults(self):
        self.assertEncodesTo(Account, Account('a'), '0461' + '00000000' + '00')
        self.assertEncodesTo(Account, Account('a', 7, ['x']), '0461' + '07000000' + '040478')

    def test_frozen_dataclass_is_hashable(self):
        self.assertTrue(make_scale_type(Account).is_hashable())
        self.assertFalse(make_scale_type(Point).is_hashable())

    def test_namedtuple(self):
        self.assertEncodesTo(Entry, Entry('k', None), '046b00')
        self.assertEncodesTo(Entry, Entry('k', 9), '046b0109')
        self.assertTrue(make_scale_type(Entry).is_hashable())

    def test_namedtuple_and_tuple_share_encoding(self):
        data = make_scale_type(Entry).to_bytes(Entry('k', 9))
        self.assertEqual(make_scale_type(tuple[str, Optional[U8]]).from_bytes(data), ('k', 9))

    def test_self_reference(self):
        value = Node(1, Node(2, Node(3)))
        self.assertEncodesTo(Node, value, '01' + '01' + '02' + '01' + '03' + '00')

    def test_recursion_through_list(self):
        value = Tree('a', [Tree('b', []), Tree('c', [Tree('d', [])])])
        self.assertRoundTrip(Tree, value)

    def test_recursive_type_reuses_the_same_scale_type(self):
        scale_type = make_scale_type(Node)
        self.assertIsInstance(scale_type, DataclassScaleType)
        optional_node = scale_type.fields['next']
        self.assertIs(optional_node._value, scale_type)  # type: ignore[attr-defined]

    def test_forward_reference(self):
        self.assertEncodesTo(Holder, Holder(Later(True)), '01')

    def test_wrong_value_type(self):
        with self.assertRaises(TypeError):
            make_scale_type(Point).to_bytes((3, 4))
        with self.assertRaises(ValueError):
            make_scale_type(Point).to_bytes(Point(x=3, y=200))

    def test_truncated(self):
        with self.assertRaises(UnexpectedEndError):
            make_scale_type(Point).from_bytes(b'\x03')
