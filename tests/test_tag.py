"""
Tests for the tag dictionary
"""

import pytest

from exifcodec.exif_tags import EXIF_TAGS, POINTER_TAGS, get_tag_info
from exifcodec.tag import Tag
from exifcodec.types import DataEncoding, IFD, PrimitiveFormat, SupportLevel


class TestLookup:
    """Names and titles depend on the directory"""

    def test_orientation(self):
        tag = Tag(0x0112)
        assert tag.name(IFD.IMAGE) == 'Orientation'
        assert tag.title(IFD.IMAGE) == 'Orientation'
        assert tag.description(IFD.IMAGE)
        assert tag.name(IFD.GPS) is None

    def test_code_shared_between_directories(self):
        tag = Tag(0x0001)
        assert tag.name(IFD.GPS) == 'GPSLatitudeRef'
        assert tag.name(IFD.INTEROPERABILITY) == 'InteroperabilityIndex'

    def test_unknown_directory_searches_all(self):
        assert Tag(0x0001).name(IFD.UNKNOWN) == 'GPSLatitudeRef'
        assert Tag(0x9003).name(IFD.UNKNOWN) == 'DateTimeOriginal'

    def test_not_recorded_in_directory(self):
        """JPEGInterchangeFormat is only meaningful for the thumbnail"""
        tag = Tag(0x0201)
        assert not tag.is_known(IFD.IMAGE)
        assert tag.is_known(IFD.THUMBNAIL)

    def test_unknown_tag(self):
        tag = Tag(0xBEEF)
        assert not tag.is_known(IFD.IMAGE)
        assert tag.name(IFD.UNKNOWN) is None
        assert tag.support_level(IFD.IMAGE, DataEncoding.CHUNKY) is SupportLevel.UNKNOWN

    def test_equality(self):
        assert Tag(0x0112) == Tag(0x0112)
        assert Tag(0x0112) != Tag(0x0110)
        assert len({Tag(1), Tag(1), Tag(2)}) == 2
        assert repr(Tag(0x0112)) == 'Tag(0x0112)'


class TestSupportLevel:
    """Support levels per directory and data encoding"""

    @pytest.mark.parametrize("encoding,level", [
        (DataEncoding.CHUNKY, SupportLevel.REQUIRED),
        (DataEncoding.PLANAR, SupportLevel.REQUIRED),
        (DataEncoding.YCC, SupportLevel.REQUIRED),
        (DataEncoding.COMPRESSED, SupportLevel.NOT_ALLOWED),
        (DataEncoding.UNKNOWN, SupportLevel.UNKNOWN),
    ])
    def test_compression_in_image(self, encoding, level):
        assert Tag(0x0103).support_level(IFD.IMAGE, encoding) is level

    def test_uniform_level_with_unknown_encoding(self):
        assert Tag(0x011A).support_level(IFD.IMAGE, DataEncoding.UNKNOWN) is SupportLevel.REQUIRED
        assert Tag(0x0112).support_level(IFD.IMAGE, DataEncoding.UNKNOWN) is SupportLevel.OPTIONAL

    def test_exif_version_required(self):
        assert Tag(0x9000).support_level(IFD.EXIF, DataEncoding.COMPRESSED) is SupportLevel.REQUIRED

    def test_wrong_directory(self):
        assert Tag(0x9000).support_level(IFD.GPS, DataEncoding.CHUNKY) is SupportLevel.UNKNOWN


class TestDictionary:
    """Consistency of the static records"""

    def test_defaults_match_formats(self):
        for info in EXIF_TAGS:
            if info.default is None:
                continue
            assert info.formats, info.name
            if info.formats[0] is not PrimitiveFormat.TEXT and info.count is not None:
                assert len(info.default) == info.count, info.name

    def test_pointer_tags_named_in_parent_directory(self):
        assert set(POINTER_TAGS) == {0x8769, 0x8825, 0xA005}
        assert get_tag_info(0x8769, IFD.IMAGE).name == "ExifIfdPointer"
        assert get_tag_info(0xA005, IFD.EXIF).name == "InteroperabilityIfdPointer"

    def test_codes_unique_per_directory(self):
        seen = set()
        for info in EXIF_TAGS:
            for ifd in info.support:
                assert (info.code, ifd) not in seen, info.name
                seen.add((info.code, ifd))
