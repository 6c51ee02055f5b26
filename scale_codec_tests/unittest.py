from typing import Any, TypeVar
from unittest import TestCase as _TestCase

from scale_codec.conf.get_settings import _reset_settings_singleton
from scale_codec.types import ScaleType, make_scale_type

T = TypeVar('T')


class TestCase(_TestCase):
    def setUp(self) -> None:
        super().setUp()
        _reset_settings_singleton()

    def tearDown(self) -> None:
        _reset_settings_singleton()
        super().tearDown()

    def assertRoundTrip(self, type_: Any, value: T) -> bytes:
        """Encode `value` as `type_`, check that it decodes back to an equal value and return the encoding."""
        scale_type = type_ if isinstance(type_, ScaleType) else make_scale_type(type_)
        data = scale_type.to_bytes(value)
        self.assertEqual(scale_type.from_bytes(data), value)
        return data

    def assertEncodesTo(self, type_: Any, value: Any, hex_data: str) -> None:
        """Check the exact encoding of `value` and that it decodes back to an equal value."""
        data = self.assertRoundTrip(type_, value)
        self.assertEqual(data.hex(), hex_data)
