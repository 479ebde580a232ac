"""
Tests for the value decoder
"""

import struct

import pytest

from exifcodec.exceptions import SizeMismatchError, TextEncodingError
from exifcodec.types import ByteOrder, PrimitiveFormat, Rational
from exifcodec.value import Value, encode, extract, reorder

BE = ByteOrder.BIG_ENDIAN
LE = ByteOrder.LITTLE_ENDIAN


class TestExtract:
    """Decoding raw bytes into values"""

    def test_u16(self):
        assert extract(b'\x00\x01', PrimitiveFormat.U16, 1, BE) == Value(PrimitiveFormat.U16, [1])

    def test_u16_little_endian(self):
        value = extract(b'\x01\x00\x02\x00', PrimitiveFormat.U16, 2, LE)
        assert value.data == [1, 2]
        assert len(value) == 2
        assert value.first == 1

    def test_i8_and_undefined(self):
        assert extract(b'\xff\x01', PrimitiveFormat.I8, 2, BE).data == [-1, 1]
        assert extract(b'\xff\x01', PrimitiveFormat.UNDEFINED, 2, BE).data == [255, 1]
        assert extract(b'\xff\x01', PrimitiveFormat.U8, 2, BE).data == [255, 1]

    def test_rationals(self):
        raw = struct.pack('>IIII', 42, 100, 1, 3)
        value = extract(raw, PrimitiveFormat.URATIONAL, 2, BE)
        assert value.data == [Rational(42, 100), Rational(1, 3)]
        assert value.data[0] != Rational(21, 50)

    def test_signed_rational(self):
        raw = struct.pack('<ii', -3, 10)
        assert extract(raw, PrimitiveFormat.IRATIONAL, 1, LE).data == [Rational(-3, 10)]

    def test_signed_32(self):
        raw = struct.pack('>i', -123456)
        assert extract(raw, PrimitiveFormat.I32, 1, BE).data == [-123456]

    def test_zero_components(self):
        assert extract(b'', PrimitiveFormat.U32, 0, BE).data == []
        assert extract(b'', PrimitiveFormat.TEXT, 0, BE).data == ''

    def test_accepts_memoryview(self):
        view = memoryview(b'xx\x00\x05')[2:]
        assert extract(view, PrimitiveFormat.U16, 1, BE).data == [5]

    @pytest.mark.parametrize("fmt", list(PrimitiveFormat))
    @pytest.mark.parametrize("delta", ['empty', -1, 1, 'extra element'])
    def test_size_mismatch(self, fmt, delta):
        """Any byte length other than width * count is rejected"""
        expected = fmt.element_size * 3
        if delta == 'empty':
            length = 0
        elif delta == 'extra element':
            length = expected + fmt.element_size
        else:
            length = expected + delta
        raw = b'\x00' * length
        with pytest.raises(SizeMismatchError) as exc_info:
            extract(raw, fmt, 3, BE)
        assert exc_info.value.expected == expected
        assert exc_info.value.actual == length

    def test_too_few_bytes(self):
        with pytest.raises(SizeMismatchError):
            extract(b'\x00\x01\x02', PrimitiveFormat.U16, 2, BE)

    def test_negative_components(self):
        with pytest.raises(SizeMismatchError):
            extract(b'', PrimitiveFormat.U8, -1, BE)


class TestText:
    """Text values stop at the first NUL and must be UTF-8"""

    def test_truncated_at_nul(self):
        raw = b'ABC\x00garbage'
        value = extract(raw, PrimitiveFormat.TEXT, len(raw), BE)
        assert value == Value(PrimitiveFormat.TEXT, 'ABC')
        assert value.first == 'ABC'

    def test_without_nul(self):
        assert extract(b'Canon', PrimitiveFormat.TEXT, 5, BE).data == 'Canon'

    def test_utf8(self):
        raw = 'Café\x00'.encode('utf-8')
        assert extract(raw, PrimitiveFormat.TEXT, len(raw), BE).data == 'Café'

    def test_invalid_utf8(self):
        raw = b'Caf\xe9\x00'
        with pytest.raises(TextEncodingError) as exc_info:
            extract(raw, PrimitiveFormat.TEXT, len(raw), BE)
        assert exc_info.value.raw == b'Caf\xe9'


class TestEncode:
    def test_integers(self):
        assert encode(PrimitiveFormat.U16, [1, 2], LE) == b'\x01\x00\x02\x00'
        assert encode(PrimitiveFormat.I32, [-1], BE) == b'\xff\xff\xff\xff'

    def test_text(self):
        assert encode(PrimitiveFormat.TEXT, 'Hi', BE) == b'Hi\x00'
        assert encode(PrimitiveFormat.TEXT, list(b'R98\x00'), BE) == b'R98\x00'

    def test_rational(self):
        assert encode(PrimitiveFormat.URATIONAL, [Rational(72, 1)], BE) == struct.pack('>II', 72, 1)

    @pytest.mark.parametrize("order", list(ByteOrder))
    @pytest.mark.parametrize("fmt,data", [
        (PrimitiveFormat.U8, [0, 1, 0xFF]),
        (PrimitiveFormat.I8, [-0x80, 0, 0x7F]),
        (PrimitiveFormat.UNDEFINED, [0, 0x80, 0xFF]),
        (PrimitiveFormat.TEXT, 'Canon EOS'),
        (PrimitiveFormat.U16, [0, 300, 0xFFFF]),
        (PrimitiveFormat.I16, [-0x8000, -5, 0x7FFF]),
        (PrimitiveFormat.U32, [0, 70000, 0xFFFFFFFF]),
        (PrimitiveFormat.I32, [-0x80000000, -1, 0x7FFFFFFF]),
        (PrimitiveFormat.URATIONAL, [Rational(0, 1), Rational(0xFFFFFFFF, 0xFFFFFFFF), Rational(1, 0)]),
        (PrimitiveFormat.IRATIONAL, [Rational(-0x80000000, 1), Rational(0x7FFFFFFF, -1), Rational(0, 0)]),
    ])
    def test_decodes_back(self, fmt, data, order):
        raw = encode(fmt, data, order)
        count = len(raw) if fmt is PrimitiveFormat.TEXT else len(data)
        assert extract(raw, fmt, count, order) == Value(fmt, data)


class TestReorder:
    """Byte order conversion of raw entry bytes"""

    def test_shorts(self):
        assert reorder(b'\x01\x02\x03\x04', 3, BE, LE) == b'\x02\x01\x04\x03'

    def test_rational_halves(self):
        raw = struct.pack('>II', 1, 2)
        assert reorder(raw, 5, BE, LE) == struct.pack('<II', 1, 2)

    def test_double(self):
        raw = struct.pack('>d', 1.25)
        assert reorder(raw, 12, BE, LE) == struct.pack('<d', 1.25)

    def test_bytes_unchanged(self):
        assert reorder(b'abc', 2, BE, LE) == b'abc'
        assert reorder(b'abc', 7, BE, LE) == b'abc'

    def test_same_order(self):
        assert reorder(b'\x01\x02', 3, BE, BE) == b'\x01\x02'

    def test_ragged_length(self):
        with pytest.raises(SizeMismatchError):
            reorder(b'\x01\x02\x03', 3, BE, LE)
