"""
Tests for dataset normalization
"""

from builders import (
    ascii_entry,
    build_jpeg,
    build_tiff,
    load,
    long_entry,
    sample_tiff,
    short_entry,
)
from exifcodec.types import DataOption, IFD, PrimitiveFormat, Rational
from exifcodec.value import Value


class TestEntryFixes:
    """Per-entry repairs"""

    def test_integer_format_converted(self):
        data = load(build_tiff(ifd0=[long_entry(0x0112, 3)]))
        data.normalize()
        entry = data.find_entry(0x0112)
        assert entry.format is PrimitiveFormat.U16
        assert entry.value() == Value(PrimitiveFormat.U16, [3])

    def test_integer_that_does_not_fit_is_kept(self):
        data = load(build_tiff(ifd0=[long_entry(0x0112, 70000)]))
        data.normalize()
        assert data.find_entry(0x0112).format is PrimitiveFormat.U32

    def test_bytes_retyped_as_text(self):
        data = load(build_tiff(ifd0=[(0x010F, 1, 6, b'Canon\x00')]))
        data.normalize()
        entry = data.find_entry(0x010F)
        assert entry.format is PrimitiveFormat.TEXT
        assert entry.value().data == 'Canon'

    def test_text_terminated(self):
        data = load(build_tiff(ifd0=[(0x010F, 2, 5, b'Canon')]))
        data.normalize()
        entry = data.find_entry(0x010F)
        assert entry.components == 6
        assert bytes(entry.raw_data()) == b'Canon\x00'

    def test_component_count_truncated(self):
        data = load(build_tiff(ifd0=[short_entry(0x0112, 1, 2)]))
        data.normalize()
        entry = data.find_entry(0x0112)
        assert entry.components == 1
        assert entry.value().data == [1]

    def test_old_views_survive(self):
        data = load(build_tiff(ifd0=[(0x010F, 2, 5, b'Canon')]))
        view = data.find_entry(0x010F).raw_data()
        data.normalize()
        assert bytes(view) == b'Canon'


class TestDirectoryFixes:
    """Removal and addition of entries"""

    def test_not_allowed_removed(self):
        """Compression describes the primary image only when it is uncompressed"""
        data = load(build_jpeg(build_tiff(ifd0=[short_entry(0x0103, 6), short_entry(0x0112, 1)])))
        assert data.find_entry(0x0103, IFD.IMAGE) is not None
        data.normalize()
        assert data.find_entry(0x0103, IFD.IMAGE) is None
        assert data.find_entry(0x0112, IFD.IMAGE) is not None

    def test_required_added(self):
        data = load(build_jpeg(build_tiff(
            ifd0=[short_entry(0x0112, 1)],
            exif=[ascii_entry(0x9003, '2008:05:30 15:56:01')],
        )))
        data.normalize()
        exif = data.directory(IFD.EXIF)
        assert exif.get_entry(0x9000).value() == Value(PrimitiveFormat.UNDEFINED, list(b'0220'))
        assert exif.get_entry(0xA001).value().data == [1]
        assert exif.get_entry(0x9101).value().data == [1, 2, 3, 0]
        image = data.directory(IFD.IMAGE)
        assert image.get_entry(0x011A).value().data == [Rational(72, 1)]
        assert image.get_entry(0x0128).value().data == [2]

    def test_required_text_default(self):
        data = load(build_jpeg(build_tiff(interop=[(0x0002, 7, 4, b'0100')])))
        data.normalize()
        entry = data.find_entry(0x0001, IFD.INTEROPERABILITY)
        assert entry.value().data == 'R98'
        assert entry.components == 4

    def test_empty_directories_stay_empty(self):
        data = load(build_tiff(ifd0=[short_entry(0x0112, 1)]))
        data.normalize()
        assert len(data.directory(IFD.GPS)) == 0
        assert len(data.directory(IFD.EXIF)) == 0
        assert len(data.directory(IFD.THUMBNAIL)) == 0

    def test_unknown_tags_removed(self):
        data = load(build_tiff(ifd0=[short_entry(0x0112, 1), short_entry(0xBEEF, 5)]), options=DataOption(0))
        data.normalize()
        assert data.find_entry(0xBEEF) is not None
        data.set_option(DataOption.IGNORE_UNKNOWN_TAGS)
        data.normalize()
        assert data.find_entry(0xBEEF) is None


class TestOptions:
    def test_maker_note_left_alone(self):
        tiff = build_jpeg(build_tiff(exif=[(0x927C, 2, 6, b'ABCDEF')]))
        data = load(tiff)
        data.set_option(DataOption.DONT_CHANGE_MAKER_NOTE)
        data.normalize()
        assert data.find_entry(0x927C).components == 6

        data = load(tiff)
        data.normalize()
        assert data.find_entry(0x927C).components == 7

    def test_follow_specification_on_load(self):
        options = DataOption.IGNORE_UNKNOWN_TAGS | DataOption.FOLLOW_SPECIFICATION
        data = load(build_tiff(ifd0=[long_entry(0x0112, 3)]), options=options)
        assert data.find_entry(0x0112).format is PrimitiveFormat.U16

    def test_idempotent(self):
        data = load(build_jpeg(sample_tiff()))
        assert data.normalize() > 0
        assert data.normalize() == 0
