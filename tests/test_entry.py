"""
Tests for entries
"""

import struct

import pytest

from exifcodec.data import Dataset
from exifcodec.exceptions import SizeMismatchError, TextEncodingError, UnrecognizedEnumError
from exifcodec.types import ByteOrder, IFD, PrimitiveFormat, Rational
from exifcodec.value import Value


def make_entry(raw, format_code, components, tag=0x0112, order=ByteOrder.BIG_ENDIAN):
    data = Dataset(raw, order)
    return data._add_entry(IFD.IMAGE, tag, format_code, components, 0, len(raw))


class TestEntryAccessors:
    """Fields of a loaded entry"""

    def test_orientation(self, sample_dataset):
        entry = sample_dataset.directory(IFD.IMAGE).get_entry(0x0112)
        assert entry.tag_code == 0x0112
        assert entry.format is PrimitiveFormat.U16
        assert entry.components == 1
        assert entry.component_count == 1
        assert entry.size == 2
        assert entry.element_size == 2
        assert bytes(entry.raw_data()) == b'\x00\x06'
        assert entry.directory.kind is IFD.IMAGE

    def test_raw_data_is_read_only_view(self, sample_dataset):
        entry = sample_dataset.directory(IFD.IMAGE).get_entry(0x010F)
        view = entry.raw_data()
        assert isinstance(view, memoryview)
        assert view.readonly
        assert bytes(view) == b'Canon\x00'

    def test_value_uses_dataset_byte_order(self, sample_dataset):
        entry = sample_dataset.directory(IFD.IMAGE).get_entry(0x0112)
        assert entry.value() == Value(PrimitiveFormat.U16, [6])
        assert entry.value(ByteOrder.LITTLE_ENDIAN) == Value(PrimitiveFormat.U16, [0x0600])

    def test_rational_value(self, sample_dataset):
        entry = sample_dataset.directory(IFD.EXIF).get_entry(0x829A)
        assert entry.value().data == [Rational(1, 160)]

    def test_value_not_cached(self):
        entry = make_entry(b'\x00\x02', 3, 1)
        assert entry.value() is not entry.value()


class TestEntryErrors:
    """Malformed entries surface typed errors"""

    def test_unknown_format(self):
        entry = make_entry(b'\x00\x00\x00\x01', 13, 1)
        with pytest.raises(UnrecognizedEnumError):
            entry.format
        with pytest.raises(UnrecognizedEnumError):
            entry.value()
        assert entry.element_size is None
        assert entry.text_value() == '4 bytes unknown data'

    def test_float_entry_rendered(self):
        entry = make_entry(struct.pack('>f', 2.5), 11, 1)
        with pytest.raises(UnrecognizedEnumError):
            entry.format
        assert entry.text_value() == '2.5'

    def test_size_mismatch(self):
        entry = make_entry(b'\x00\x01', 3, 2)
        with pytest.raises(SizeMismatchError):
            entry.value()
        assert entry.text_value() == '(Size mismatch: expected 4 bytes, got 2)'

    def test_invalid_text(self):
        """value() is strict, text_value() still renders something"""
        entry = make_entry(b'Caf\xe9\x00', 2, 5, tag=0x010F)
        with pytest.raises(TextEncodingError):
            entry.value()
        text = entry.text_value()
        assert isinstance(text, str)
        assert text.startswith('Caf')

    def test_window_outside_storage(self):
        data = Dataset(b'\x00\x01', ByteOrder.BIG_ENDIAN)
        with pytest.raises(ValueError):
            data._add_entry(IFD.IMAGE, 0x0112, 3, 2, 0, 4)
